# --------------------------------------------------------------
# File: models.py
# Description: Modelos de datos intercambiados con el servicio remoto del vault.
# --------------------------------------------------------------
"""Modelos Pydantic que representan archivos, notas y respuestas de la API."""

from __future__ import annotations

from typing import List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

FILE_TYPES = ("image", "video", "pdf", "other")
NOTE_TYPE = "text"

ItemId = Union[int, str]


class VaultFile(BaseModel):
    """Archivo almacenado en el vault.

    Attributes:
        id (ItemId): Identificador único dentro del vault.
        file_type (str): Uno de ``image``, ``video``, ``pdf`` u ``other``.
        original_filename (str): Nombre con el que se subió el archivo.
        file_path (str): URL pública desde la que se sirve el archivo.
        created_at (str): Marca temporal devuelta por el servidor.
        server_type (str): Tipo tal cual lo envió el servidor; es el que se
            devuelve al borrar.

    """

    id: ItemId
    file_type: str = "other"
    original_filename: str = ""
    file_path: str = ""
    created_at: str = ""
    server_type: str = ""

    @model_validator(mode="before")
    @classmethod
    def _keep_server_type(cls, data: object) -> object:
        if isinstance(data, dict) and not data.get("server_type"):
            data = {**data, "server_type": str(data.get("file_type") or "")}
        return data

    @field_validator("file_type", mode="before")
    @classmethod
    def _normalize_type(cls, value: object) -> str:
        value = str(value or "").lower()
        return value if value in FILE_TYPES else "other"


class VaultNote(BaseModel):
    """Nota de texto almacenada en el vault."""

    id: ItemId
    content: str = ""
    created_at: str = ""
    file_type: Literal["text"] = NOTE_TYPE

    @field_validator("file_type", mode="before")
    @classmethod
    def _force_text(cls, value: object) -> str:
        return NOTE_TYPE


VaultItem = Union[VaultFile, VaultNote]


class UploadBlob(BaseModel):
    """Archivo pendiente de subir, tal como lo entrega el formulario.

    Attributes:
        filename (str): Nombre original del archivo.
        content (bytes): Contenido binario completo.
        content_type (str): Tipo MIME declarado por el navegador.

    """

    filename: str
    content: bytes
    content_type: str = "application/octet-stream"

    @classmethod
    def from_uploaded(cls, uploaded) -> "UploadBlob":
        """Construye el blob a partir de un ``UploadedFile`` de Streamlit."""

        return cls(
            filename=uploaded.name,
            content=uploaded.getvalue(),
            content_type=uploaded.type or "application/octet-stream",
        )


class ApiResult(BaseModel):
    """Resultado uniforme de cualquier llamada al servicio remoto.

    Attributes:
        success (bool): Indica si la operación se completó.
        message (Optional[str]): Motivo del fallo o mensaje informativo.
        key_exists (Optional[bool]): Solo en ``check_key``; si la key ya existía.
        files (List[VaultFile]): Solo en ``list_vault``; archivos del vault.
        notes (List[VaultNote]): Solo en ``list_vault``; notas del vault.

    """

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    success: bool = False
    message: Optional[str] = None
    key_exists: Optional[bool] = Field(default=None, alias="keyExists")
    files: List[VaultFile] = Field(default_factory=list)
    notes: List[VaultNote] = Field(default_factory=list)

    @field_validator("files", "notes", mode="before")
    @classmethod
    def _none_as_empty(cls, value: object) -> object:
        return [] if value is None else value


class ActionOutcome(BaseModel):
    """Desenlace de una acción de usuario que consume la capa de vistas."""

    success: bool
    message: str = ""
