# --------------------------------------------------------------
# File: __init__.py
# Description: Paquete del cliente HTTP del servicio remoto de VaultDrop.
# --------------------------------------------------------------
"""Inicializa el paquete `api`."""

__all__ = ["client"]
