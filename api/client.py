# --------------------------------------------------------------
# File: client.py
# Description: Cliente HTTP del servicio remoto que almacena archivos y notas.
# --------------------------------------------------------------
"""Traduce las cinco operaciones del vault en peticiones HTTP.

Todas las operaciones devuelven un :class:`ApiResult`; ningún error de transporte
sale de este módulo como excepción.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any, List, Optional, Sequence, Tuple

import requests
from pydantic import ValidationError

from core.config import API_BASE_URL, REQUEST_TIMEOUT
from core.models import ApiResult, ItemId, UploadBlob

NETWORK_ERROR_MESSAGE = "network error"

ENDPOINTS = dict(
    check_key="check_key.php",
    list_vault="get_files.php",
    upload="upload.php",
    delete_one="delete_file.php",
    delete_all="delete_all.php",
)


def network_error() -> ApiResult:
    return ApiResult(success=False, message=NETWORK_ERROR_MESSAGE)


class VaultApiClient:
    """Cliente del Remote Vault Service.

    Args:
        base_url (str): URL base de la API, sin barra final.
        timeout (Optional[float]): Segundos por petición; ``None`` espera sin límite.
        http (Optional[requests.Session]): Sesión HTTP reutilizable.

    """

    def __init__(
        self,
        base_url: str = API_BASE_URL,
        timeout: Optional[float] = REQUEST_TIMEOUT,
        http: Optional[requests.Session] = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.http = http if http is not None else requests.Session()

    def url_for(self, operation: str) -> str:
        return f"{self.base_url}/{ENDPOINTS[operation]}"

    def _send(self, method: str, operation: str, **kwargs: Any) -> ApiResult:
        url = self.url_for(operation)
        logging.debug(">>> %s %s", method, url)
        try:
            response = self.http.request(method, url, timeout=self.timeout, **kwargs)
        except requests.RequestException as e:
            logging.warning("Can't connect to vault service %s: %s", url, e)
            return network_error()

        try:
            payload = response.json()
        except ValueError:
            logging.warning(
                "Can't parse vault response with status code %s: %s", response.status_code, response.text
            )
            return network_error()

        # Un cuerpo con `success` es una respuesta de aplicación aunque el status no sea 2xx.
        if not isinstance(payload, dict) or "success" not in payload:
            logging.warning("Unexpected vault response with status code %s", response.status_code)
            return network_error()

        try:
            result = ApiResult.model_validate(payload)
        except ValidationError as e:
            logging.warning("Invalid vault payload from %s: %s", url, e)
            return network_error()

        logging.debug("<<< %s success=%s", operation, result.success)
        return result

    async def _call(self, method: str, operation: str, **kwargs: Any) -> ApiResult:
        return await asyncio.to_thread(self._send, method, operation, **kwargs)

    async def check_key(self, access_key: str) -> ApiResult:
        """Comprueba la key; el resultado incluye ``key_exists`` si el servidor lo envía."""

        return await self._call("POST", "check_key", json={"access_key": access_key})

    async def list_vault(self, access_key: str) -> ApiResult:
        """Obtiene el conjunto completo de archivos y notas de la key."""

        return await self._call("GET", "list_vault", params={"access_key": access_key})

    async def upload(
        self, access_key: str, blobs: Optional[Sequence[UploadBlob]] = None, note_text: str = ""
    ) -> ApiResult:
        """Sube archivos y/o una nota en una única petición multipart.

        Args:
            access_key (str): Key del vault de destino.
            blobs (Optional[Sequence[UploadBlob]]): Archivos a adjuntar como
                ``file_0``, ``file_1``...
            note_text (str): Texto de la nota; se omite el campo si está vacío.

        Returns:
            ApiResult: Resultado de la subida.

        """

        # Los campos de texto van como partes sin nombre de archivo para forzar multipart.
        parts: List[Tuple[str, tuple]] = [("access_key", (None, access_key))]
        if note_text:
            parts.append(("note_content", (None, note_text)))
        for index, blob in enumerate(blobs or []):
            parts.append((f"file_{index}", (blob.filename, blob.content, blob.content_type)))
        return await self._call("POST", "upload", files=parts)

    async def delete_one(self, item_id: ItemId, access_key: str, item_type: str = "file") -> ApiResult:
        """Borra un archivo o una nota; ``item_type == "text"`` selecciona las notas."""

        body = {"file_id": item_id, "access_key": access_key, "file_type": item_type}
        return await self._call("POST", "delete_one", json=body)

    async def delete_all(self, access_key: str) -> ApiResult:
        return await self._call("POST", "delete_all", json={"access_key": access_key})
