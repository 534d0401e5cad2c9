# --------------------------------------------------------------
# File: vault.py
# Description: Sincronización de archivos y notas de la key activa con el servidor.
# --------------------------------------------------------------
"""Vault Synchronizer: mantiene la colección local alineada con el servicio remoto.

Las subidas refrescan la colección completa desde el servidor; los borrados se
aplican localmente en cuanto el servidor los confirma. Ningún fallo se reintenta.
"""

from __future__ import annotations

import logging
from typing import List, Optional, Sequence

from core.models import NOTE_TYPE, ActionOutcome, ItemId, UploadBlob, VaultFile, VaultItem, VaultNote
from core.session import SessionStore

EMPTY_UPLOAD_MESSAGE = "Please add a file or enter some text before saving"
SAVE_SUCCESS_MESSAGE = "Successfully saved to your vault!"
LOAD_FAILED_MESSAGE = "Failed to load your vault"
SAVE_FAILED_MESSAGE = "Failed to save to your vault"
DELETE_FAILED_MESSAGE = "Failed to delete file"
CLEAR_FAILED_MESSAGE = "Failed to clear vault"

NEW_VAULT_HINT = "Start by adding files or notes to your new vault."
EXISTING_VAULT_HINT = "Add some files or notes to your vault."


class VaultSynchronizer:
    """Colección de archivos y notas conocida por el cliente para la key activa.

    Args:
        session (SessionStore): Sesión de la que se toma la access key.
        client: Cliente de la API con las operaciones del vault.

    """

    def __init__(self, session: SessionStore, client) -> None:
        self.session = session
        self.client = client
        self.files: List[VaultFile] = []
        self.notes: List[VaultNote] = []
        self.pending_files: List[UploadBlob] = []
        self.note_draft: str = ""
        self.error: str = ""
        self.loaded = False

    @property
    def items(self) -> List[VaultItem]:
        return [*self.files, *self.notes]

    @property
    def is_empty(self) -> bool:
        return not self.files and not self.notes

    def empty_state_message(self) -> str:
        return EXISTING_VAULT_HINT if self.session.key_existed else NEW_VAULT_HINT

    def _fail(self, message: str) -> ActionOutcome:
        self.error = message
        return ActionOutcome(success=False, message=message)

    async def refresh(self) -> ActionOutcome:
        """Reemplaza la colección con el contenido actual del servidor.

        Returns:
            ActionOutcome: En caso de fallo la colección queda intacta.

        """

        self.error = ""
        response = await self.client.list_vault(self.session.access_key)
        self.loaded = True
        if not response.success:
            return self._fail(response.message or LOAD_FAILED_MESSAGE)

        self.files = list(response.files)
        self.notes = list(response.notes)
        logging.debug("Vault refrescado: %d archivos, %d notas", len(self.files), len(self.notes))
        return ActionOutcome(success=True)

    async def save(
        self, blobs: Optional[Sequence[UploadBlob]] = None, note_text: Optional[str] = None
    ) -> ActionOutcome:
        """Sube archivos y/o una nota y, si el servidor acepta, refresca el vault.

        Args:
            blobs (Optional[Sequence[UploadBlob]]): Archivos seleccionados; por
                defecto la selección pendiente.
            note_text (Optional[str]): Texto de la nota; por defecto el borrador.

        Returns:
            ActionOutcome: Resultado de la subida. Los errores del refresco posterior
            quedan en ``error``.

        """

        blobs = list(self.pending_files if blobs is None else blobs)
        note_text = self.note_draft if note_text is None else note_text
        self.pending_files = blobs
        self.note_draft = note_text

        if not blobs and not note_text.strip():
            return self._fail(EMPTY_UPLOAD_MESSAGE)

        self.error = ""
        response = await self.client.upload(self.session.access_key, blobs, note_text)
        if not response.success:
            return self._fail(response.message or SAVE_FAILED_MESSAGE)

        self.pending_files = []
        self.note_draft = ""
        await self.refresh()
        return ActionOutcome(success=True, message=SAVE_SUCCESS_MESSAGE)

    async def remove_one(self, item_id: ItemId, item_type: str) -> ActionOutcome:
        """Borra un elemento y lo quita de la colección local sin refrescar.

        Args:
            item_id (ItemId): Identificador del archivo o nota.
            item_type (str): ``"text"`` para notas; cualquier otro valor es un archivo.

        Returns:
            ActionOutcome: Resultado del borrado.

        """

        response = await self.client.delete_one(item_id, self.session.access_key, item_type)
        if not response.success:
            return self._fail(response.message or DELETE_FAILED_MESSAGE)

        if item_type == NOTE_TYPE:
            self.notes = [note for note in self.notes if note.id != item_id]
        else:
            self.files = [item for item in self.files if item.id != item_id]
        return ActionOutcome(success=True)

    async def remove_all(self) -> ActionOutcome:
        """Vacía el vault; la confirmación del usuario se pide antes de llamar."""

        response = await self.client.delete_all(self.session.access_key)
        if not response.success:
            return self._fail(response.message or CLEAR_FAILED_MESSAGE)

        self.files = []
        self.notes = []
        return ActionOutcome(success=True)
