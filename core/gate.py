# --------------------------------------------------------------
# File: gate.py
# Description: Política de acceso a las vistas según el estado de la sesión.
# --------------------------------------------------------------
"""Access Gate: decide qué vista se muestra y cuándo redirigir."""

from __future__ import annotations

import logging
from enum import Enum
from typing import Optional

from pydantic import BaseModel

from core.models import ActionOutcome
from core.session import SessionStore

HOME = "/"
VAULT = "/vault"
ABOUT = "/about"
HOW_IT_WORKS = "/how-it-works"

PUBLIC_ROUTES = (ABOUT, HOW_IT_WORKS)

EMPTY_KEY_MESSAGE = "Please enter a key"
GENERIC_ERROR_MESSAGE = "An error occurred. Please try again."


class GateState(str, Enum):
    UNKNOWN = "unknown"
    UNAUTHENTICATED = "unauthenticated"
    AUTHENTICATED = "authenticated"


class RouteDecision(BaseModel):
    """Vista a renderizar para una ruta, o ruta a la que redirigir."""

    path: str
    view: Optional[str] = None
    redirect: Optional[str] = None


class AccessGate:
    """Máquina de estados de acceso alimentada solo por el Session Store.

    Args:
        session (SessionStore): Sesión compartida con el resto de componentes.
        client: Cliente de la API usado por ``unlock``.

    """

    def __init__(self, session: SessionStore, client=None) -> None:
        self.session = session
        self.client = client
        self._started = False

    @property
    def state(self) -> GateState:
        if not self._started:
            return GateState.UNKNOWN
        if self.session.is_active:
            return GateState.AUTHENTICATED
        return GateState.UNAUTHENTICATED

    def start(self) -> GateState:
        """Resuelve el estado inicial restaurando la sesión persistida."""

        if not self._started:
            self.session.restore()
            self._started = True
            logging.debug("Access gate iniciado en estado %s", self.state.value)
        return self.state

    def resolve(self, path: str) -> RouteDecision:
        """Aplica la política de rutas a ``path``.

        Args:
            path (str): Ruta solicitada, por ejemplo ``/vault``.

        Returns:
            RouteDecision: Vista a mostrar o redirección a aplicar.

        """

        state = self.start()
        if path in PUBLIC_ROUTES:
            return RouteDecision(path=path, view=path)
        if path == HOME:
            if state is GateState.AUTHENTICATED:
                return RouteDecision(path=path, redirect=VAULT)
            return RouteDecision(path=path, view=HOME)
        if path == VAULT:
            if state is GateState.AUTHENTICATED:
                return RouteDecision(path=path, view=VAULT)
            return RouteDecision(path=path, redirect=HOME)
        return RouteDecision(path=path, redirect=HOME)

    async def unlock(self, key: str) -> ActionOutcome:
        """Valida la key contra el servicio remoto y abre la sesión si es aceptada.

        Args:
            key (str): Key introducida en el formulario de la página principal.

        Returns:
            ActionOutcome: Éxito o mensaje de error para mostrar en el formulario.

        """

        if not key or not key.strip():
            return ActionOutcome(success=False, message=EMPTY_KEY_MESSAGE)

        response = await self.client.check_key(key)
        if not response.success:
            return ActionOutcome(success=False, message=response.message or GENERIC_ERROR_MESSAGE)

        self._started = True
        self.session.establish(key, response.key_exists or False)
        return ActionOutcome(success=True)

    def logout(self) -> None:
        self._started = True
        self.session.clear()
