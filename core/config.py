# --------------------------------------------------------------
# File: config.py
# Description: Parámetros de configuración leídos del entorno y de `.env`.
# --------------------------------------------------------------
"""Configuración de VaultDrop: URL del servicio remoto, rutas y logging."""

from __future__ import annotations

import logging
import os
from typing import Optional

from dotenv import load_dotenv

load_dotenv()

API_BASE_URL = os.getenv("VAULTDROP_API_URL", "http://localhost/projectvault/api").rstrip("/")

# Clave fija bajo la que se persiste la access key activa en el navegador.
SESSION_KEY_NAME = "vaultdrop_access_key"
SESSION_COOKIE_DAYS = int(os.getenv("VAULTDROP_SESSION_COOKIE_DAYS", "365"))

LOG_LEVEL = os.getenv("VAULTDROP_LOG_LEVEL", "WARNING").upper()


def _parse_timeout(raw: Optional[str]) -> Optional[float]:
    """Convierte el timeout configurado en segundos; vacío o inválido es ``None``."""

    if not raw:
        return None
    try:
        value = float(raw)
    except ValueError:
        logging.warning("VAULTDROP_REQUEST_TIMEOUT inválido: %r", raw)
        return None
    return value if value > 0 else None


REQUEST_TIMEOUT = _parse_timeout(os.getenv("VAULTDROP_REQUEST_TIMEOUT"))


def configure_logging(level: Optional[str] = None) -> None:
    """Inicializa el logging raíz con el nivel configurado.

    Args:
        level (Optional[str]): Nivel explícito; si se omite se usa ``LOG_LEVEL``.

    """

    logging.basicConfig(
        level=getattr(logging, (level or LOG_LEVEL).upper(), logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
