# --------------------------------------------------------------
# File: session.py
# Description: Estado de sesión de la access key activa y su persistencia.
# --------------------------------------------------------------
"""Session Store: único lugar que sabe si hay una sesión y con qué key."""

from __future__ import annotations

import logging
from typing import Optional

from core.config import SESSION_KEY_NAME
from core.storage import KeyValueStore


class SessionStore:
    """Guarda la access key activa en memoria y en almacenamiento duradero.

    Args:
        storage (Optional[KeyValueStore]): Almacén duradero; por defecto uno en
            memoria propio de esta sesión.

    """

    def __init__(self, storage: Optional[KeyValueStore] = None) -> None:
        self.storage = storage if storage is not None else KeyValueStore()
        self.access_key: str = ""
        self.key_existed: bool = False

    @property
    def is_active(self) -> bool:
        return bool(self.access_key)

    def restore(self) -> bool:
        """Recupera la key persistida al arrancar, sin llamadas de red.

        Returns:
            bool: ``True`` si se restableció una sesión.

        """

        stored = self.storage.get(SESSION_KEY_NAME)
        if not stored:
            return False
        self.access_key = stored
        self.key_existed = True
        logging.debug("Sesión restaurada desde el almacén del cliente")
        return True

    def establish(self, key: str, existed: bool) -> None:
        """Activa la sesión para ``key`` tras ser aceptada por el servicio remoto."""

        self.access_key = key
        self.key_existed = bool(existed)
        self.storage.set(SESSION_KEY_NAME, key)

    def clear(self) -> None:
        """Cierra la sesión en memoria y en disco. Idempotente."""

        self.access_key = ""
        self.key_existed = False
        self.storage.remove(SESSION_KEY_NAME)

    def masked_key(self) -> str:
        """Versión abreviada de la key para mostrarla en la barra de navegación."""

        return f"{self.access_key[:3]}***" if self.access_key else ""
