# --------------------------------------------------------------
# File: shell.py
# Description: Contexto de sesión compartido y marco de navegación de las páginas.
# --------------------------------------------------------------
"""Barra de navegación, pie de página y contexto por sesión de navegador."""

import asyncio
from typing import Any, Dict

import streamlit as st

from api.client import VaultApiClient
from app_streamlit.browser_storage import CookieKeyValueStore
from core.config import configure_logging
from core.gate import AccessGate
from core.session import SessionStore
from core.vault import VaultSynchronizer

HOME_PAGE = "Home.py"
VAULT_PAGE = "pages/1_Vault.py"
HOW_IT_WORKS_PAGE = "pages/2_How_It_Works.py"
ABOUT_PAGE = "pages/3_About.py"

PAGES_BY_ROUTE = {
    "/": HOME_PAGE,
    "/vault": VAULT_PAGE,
    "/how-it-works": HOW_IT_WORKS_PAGE,
    "/about": ABOUT_PAGE,
}


def run(coro):
    """Ejecuta una corrutina desde el hilo del script de Streamlit."""
    return asyncio.run(coro)


def get_context() -> Dict[str, Any]:
    """Devuelve el contexto de la sesión del navegador, creándolo la primera vez.

    Returns:
        Dict[str, Any]: ``session``, ``client``, ``gate`` y ``vault`` compartidos por
        todas las páginas.
    """
    ctx = st.session_state.get("vault_ctx")
    if ctx is None:
        configure_logging()
        session = SessionStore(CookieKeyValueStore())
        client = VaultApiClient()
        ctx = {
            "session": session,
            "client": client,
            "gate": AccessGate(session, client),
            "vault": VaultSynchronizer(session, client),
        }
        st.session_state["vault_ctx"] = ctx
    return ctx


def reset_vault(ctx: Dict[str, Any]) -> VaultSynchronizer:
    """Descarta la colección cargada; se usa al cambiar o cerrar la sesión."""
    ctx["vault"] = VaultSynchronizer(ctx["session"], ctx["client"])
    return ctx["vault"]


def enforce_route(ctx: Dict[str, Any], path: str) -> None:
    """Aplica el Access Gate a la página actual y redirige si corresponde."""
    decision = ctx["gate"].resolve(path)
    if decision.redirect:
        st.switch_page(PAGES_BY_ROUTE.get(decision.redirect, HOME_PAGE))


def render_navbar(ctx: Dict[str, Any]) -> None:
    """Pinta la navegación lateral y el botón de cierre de sesión."""
    session = ctx["session"]
    with st.sidebar:
        st.markdown("## 🔐 VaultDrop")
        st.page_link(HOME_PAGE, label="Home", icon="🏠")
        st.page_link(HOW_IT_WORKS_PAGE, label="How It Works", icon="❓")
        st.page_link(ABOUT_PAGE, label="About", icon="ℹ️")
        if session.is_active:
            st.page_link(VAULT_PAGE, label="Vault", icon="🗄️")
            st.divider()
            st.caption(f"Active Key: {session.masked_key()}")
            if st.button("Logout", key="btn_logout", use_container_width=True):
                ctx["gate"].logout()
                reset_vault(ctx)
                st.switch_page(HOME_PAGE)


def render_footer() -> None:
    st.divider()
    st.caption("VaultDrop · Secure file storage with key-based access.")


def page(path: str, title: str, icon: str = "🔐") -> Dict[str, Any]:
    """Configura la página, aplica el gate y pinta la navegación.

    Args:
        path (str): Ruta lógica de la página (``/``, ``/vault``...).
        title (str): Título de la pestaña del navegador.
        icon (str): Icono de la pestaña.

    Returns:
        Dict[str, Any]: Contexto de la sesión del navegador. ``ctx["entered"]`` es
        ``True`` cuando la ejecución viene de otra página y no de un rerun.
    """
    st.set_page_config(page_title=f"{title} · VaultDrop", page_icon=icon, layout="wide")
    ctx = get_context()
    enforce_route(ctx, path)
    ctx["entered"] = st.session_state.get("current_route") != path
    st.session_state["current_route"] = path
    render_navbar(ctx)
    ctx["session"].storage.flush()
    return ctx
