# --------------------------------------------------------------
# File: browser_storage.py
# Description: Almacén clave-valor respaldado en cookies del navegador del visitante.
# --------------------------------------------------------------
"""Persistencia de la access key en el navegador de cada visitante.

Las lecturas usan las cookies que el navegador envía al abrir la sesión
(``st.context.cookies``). Las escrituras quedan pendientes hasta ``flush()``, que
las aplica con el ``CookieManager`` de ``extra-streamlit-components`` en la página
que finalmente se renderiza.
"""

from __future__ import annotations

import datetime
from typing import Callable, Dict, Mapping, Optional

import extra_streamlit_components as stx
import streamlit as st

from core.config import SESSION_COOKIE_DAYS
from core.storage import KeyValueStore

COOKIE_MANAGER_KEY = "vaultdrop_cookies"


def _request_cookies() -> Mapping[str, str]:
    return st.context.cookies


def _cookie_manager():
    return stx.CookieManager(key=COOKIE_MANAGER_KEY)


class CookieKeyValueStore(KeyValueStore):
    """Almacén de un solo navegador: cada visitante ve únicamente sus cookies.

    Args:
        cookies (Optional[Callable[[], Mapping[str, str]]]): Fuente de las cookies
            recibidas del navegador.
        manager_factory (Optional[Callable]): Crea el componente que escribe cookies.

    """

    def __init__(
        self,
        cookies: Optional[Callable[[], Mapping[str, str]]] = None,
        manager_factory: Optional[Callable] = None,
    ) -> None:
        super().__init__()
        self._cookies = cookies or _request_cookies
        self._manager_factory = manager_factory or _cookie_manager
        # None marca un borrado pendiente o ya aplicado en esta sesión.
        self.pending: Dict[str, Optional[str]] = {}

    def get(self, name: str) -> Optional[str]:
        if name in self.entries:
            return self.entries[name]
        value = self._cookies().get(name)
        return value or None

    def set(self, name: str, value: str) -> None:
        self.entries[name] = value
        self.pending[name] = value

    def remove(self, name: str) -> None:
        self.entries[name] = None
        self.pending[name] = None

    def flush(self) -> None:
        """Aplica en el navegador las escrituras pendientes."""

        if not self.pending:
            return
        manager = self._manager_factory()
        expires_at = datetime.datetime.now() + datetime.timedelta(days=SESSION_COOKIE_DAYS)
        for name, value in self.pending.items():
            if value is None:
                manager.delete(name, key=f"del_{name}")
            else:
                manager.set(name, value, expires_at=expires_at, key=f"set_{name}")
        self.pending.clear()
