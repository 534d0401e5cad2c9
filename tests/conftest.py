# --------------------------------------------------------------
# File: conftest.py
# Description: Fixtures compartidas: almacenamiento aislado y dobles de la API.
# --------------------------------------------------------------

from typing import Any, Dict, List, Tuple

import pytest

from core.models import ApiResult
from core.session import SessionStore
from core.storage import KeyValueStore


class FakeApiClient:
    """Doble del cliente de la API que registra llamadas y devuelve respuestas fijadas."""

    def __init__(self) -> None:
        self.calls: List[Tuple[str, tuple]] = []
        self.responses: Dict[str, ApiResult] = {}

    def _reply(self, name: str, *args: Any) -> ApiResult:
        self.calls.append((name, args))
        return self.responses.get(name, ApiResult(success=True))

    def calls_to(self, name: str) -> List[tuple]:
        return [args for called, args in self.calls if called == name]

    async def check_key(self, access_key):
        return self._reply("check_key", access_key)

    async def list_vault(self, access_key):
        return self._reply("list_vault", access_key)

    async def upload(self, access_key, blobs=None, note_text=""):
        return self._reply("upload", access_key, list(blobs or []), note_text)

    async def delete_one(self, item_id, access_key, item_type="file"):
        return self._reply("delete_one", item_id, access_key, item_type)

    async def delete_all(self, access_key):
        return self._reply("delete_all", access_key)


@pytest.fixture
def kv_store() -> KeyValueStore:
    """Almacén del cliente aislado para cada prueba.

    Returns:
        KeyValueStore: Almacén vacío en memoria.
    """
    return KeyValueStore()


@pytest.fixture
def session(kv_store) -> SessionStore:
    return SessionStore(kv_store)


@pytest.fixture
def api() -> FakeApiClient:
    return FakeApiClient()
