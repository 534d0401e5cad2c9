# --------------------------------------------------------------
# File: test_gate.py
# Description: Pruebas de la política de rutas y del desbloqueo con access key.
# --------------------------------------------------------------

import pytest

from core.config import SESSION_KEY_NAME
from core.gate import ABOUT, HOME, HOW_IT_WORKS, VAULT, AccessGate, GateState
from core.models import ApiResult


def test_unknown_until_started(session):
    gate = AccessGate(session)
    assert gate.state is GateState.UNKNOWN
    assert gate.start() is GateState.UNAUTHENTICATED


def test_restore_resolves_to_authenticated(session, kv_store):
    kv_store.set(SESSION_KEY_NAME, "abc123")
    gate = AccessGate(session)
    assert gate.start() is GateState.AUTHENTICATED
    assert session.access_key == "abc123"


def test_authenticated_never_renders_landing(session):
    """Con sesión activa, tanto `/` como `/vault` acaban en la vista del vault.

    Args:
        session (SessionStore): Sesión aislada de la prueba.

    Returns:
        None: Las aserciones revisan las decisiones de enrutado.
    """
    session.establish("abc123", existed=True)
    gate = AccessGate(session)

    home = gate.resolve(HOME)
    assert home.view is None and home.redirect == VAULT
    vault = gate.resolve(VAULT)
    assert vault.view == VAULT and vault.redirect is None


def test_unauthenticated_never_renders_vault(session):
    gate = AccessGate(session)

    vault = gate.resolve(VAULT)
    assert vault.view is None and vault.redirect == HOME
    assert gate.resolve(HOME).view == HOME


@pytest.mark.parametrize("logged_in", [True, False])
def test_public_pages_always_reachable(session, logged_in):
    if logged_in:
        session.establish("abc123", existed=True)
    gate = AccessGate(session)
    for path in (ABOUT, HOW_IT_WORKS):
        assert gate.resolve(path).view == path


def test_unknown_path_redirects_home(session):
    assert AccessGate(session).resolve("/nope").redirect == HOME


@pytest.mark.asyncio
async def test_unlock_rejects_blank_key_without_network(session, api):
    gate = AccessGate(session, api)
    outcome = await gate.unlock("   ")
    assert not outcome.success
    assert outcome.message == "Please enter a key"
    assert api.calls == []


@pytest.mark.asyncio
async def test_unlock_establishes_session(session, api, kv_store):
    api.responses["check_key"] = ApiResult(success=True, key_exists=True)
    gate = AccessGate(session, api)

    outcome = await gate.unlock("abc123")

    assert outcome.success
    assert api.calls_to("check_key") == [("abc123",)]
    assert gate.state is GateState.AUTHENTICATED
    assert session.key_existed is True
    assert kv_store.get(SESSION_KEY_NAME) == "abc123"
    assert gate.resolve(HOME).redirect == VAULT


@pytest.mark.asyncio
async def test_unlock_failure_surfaces_server_message(session, api):
    api.responses["check_key"] = ApiResult(success=False, message="Key is invalid")
    gate = AccessGate(session, api)

    outcome = await gate.unlock("abc123")

    assert outcome.message == "Key is invalid"
    assert not session.is_active


@pytest.mark.asyncio
async def test_unlock_failure_without_message(session, api):
    api.responses["check_key"] = ApiResult(success=False)
    outcome = await AccessGate(session, api).unlock("abc123")
    assert outcome.message == "An error occurred. Please try again."


def test_logout_returns_to_unauthenticated(session, kv_store):
    session.establish("abc123", existed=False)
    gate = AccessGate(session)
    gate.logout()
    assert gate.state is GateState.UNAUTHENTICATED
    assert gate.resolve(VAULT).redirect == HOME
    assert kv_store.get(SESSION_KEY_NAME) is None
