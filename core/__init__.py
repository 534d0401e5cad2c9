# --------------------------------------------------------------
# File: __init__.py
# Description: Exposición pública de la lógica de cliente del paquete core.
# --------------------------------------------------------------
"""Inicializa el paquete `core` y documenta sus módulos principales."""

__all__ = [
    "config",
    "formatting",
    "gate",
    "models",
    "session",
    "storage",
    "vault",
]
