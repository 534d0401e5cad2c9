# --------------------------------------------------------------
# File: storage.py
# Description: Almacén clave-valor del estado local del cliente.
# --------------------------------------------------------------
"""Interfaz clave-valor sobre la que se persiste la access key activa.

La implementación base vive en memoria y pertenece a un único contexto; la
interfaz Streamlit la sustituye por un almacén respaldado en cookies del navegador.
"""

from __future__ import annotations

from typing import Dict, Mapping, Optional

__all__ = ["KeyValueStore"]


class KeyValueStore:
    """Almacén clave-valor en memoria, propio de cada instancia.

    Args:
        entries (Optional[Mapping[str, str]]): Valores iniciales.

    """

    def __init__(self, entries: Optional[Mapping[str, str]] = None) -> None:
        self.entries: Dict[str, Optional[str]] = dict(entries or {})

    def get(self, name: str) -> Optional[str]:
        """Devuelve el valor guardado para ``name`` o ``None`` si no existe."""

        value = self.entries.get(name)
        return value if isinstance(value, str) else None

    def set(self, name: str, value: str) -> None:
        self.entries[name] = value

    def remove(self, name: str) -> None:
        """Elimina ``name`` del almacén; no falla si no existía."""

        self.entries.pop(name, None)

    def flush(self) -> None:
        """Envía las escrituras diferidas al soporte duradero; aquí no hay ninguna."""
