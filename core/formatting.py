# --------------------------------------------------------------
# File: formatting.py
# Description: Utilidades de presentación para tarjetas de archivos y notas.
# --------------------------------------------------------------
"""Textos e iconos derivados de los elementos del vault."""

from __future__ import annotations

from datetime import datetime
from typing import Sized

ICONS = {
    "image": "🖼️",
    "video": "🎬",
    "pdf": "📄",
    "text": "📝",
}
DEFAULT_ICON = "📁"


def format_created_at(value: str) -> str:
    """Formatea la fecha del servidor como ``Mar 5, 2024, 02:30 PM``.

    Args:
        value (str): Marca temporal ISO o ``YYYY-MM-DD HH:MM:SS``.

    Returns:
        str: Fecha legible, o el valor original si no se puede interpretar.

    """

    try:
        moment = datetime.fromisoformat(value.strip().replace("Z", "+00:00"))
    except (AttributeError, ValueError):
        return value
    return f"{moment:%b} {moment.day}, {moment:%Y, %I:%M %p}"


def file_type_label(file_type: str) -> str:
    return (file_type or "other").upper()


def file_type_icon(file_type: str) -> str:
    return ICONS.get(file_type, DEFAULT_ICON)


def selection_summary(blobs: Sized) -> str:
    count = len(blobs)
    return f"{count} {'file' if count == 1 else 'files'} selected"
