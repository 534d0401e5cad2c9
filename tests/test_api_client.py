# --------------------------------------------------------------
# File: test_api_client.py
# Description: Pruebas del mapeo HTTP del cliente del servicio remoto.
# --------------------------------------------------------------

import pytest
import requests

from api.client import NETWORK_ERROR_MESSAGE, VaultApiClient
from core.models import UploadBlob

BASE = "http://vault.test/api"


class FakeResponse:
    def __init__(self, payload=None, status_code=200, text=None):
        self.payload = payload
        self.status_code = status_code
        self.text = text if text is not None else str(payload)

    def json(self):
        if self.payload is None:
            raise ValueError("no json")
        return self.payload


class FakeHttp:
    """Sesión HTTP falsa que registra cada petición."""

    def __init__(self, response=None, error=None):
        self.response = response or FakeResponse({"success": True})
        self.error = error
        self.requests = []

    def request(self, method, url, **kwargs):
        self.requests.append((method, url, kwargs))
        if self.error is not None:
            raise self.error
        return self.response


def _client(http):
    return VaultApiClient(base_url=BASE + "/", timeout=5, http=http)


@pytest.mark.asyncio
async def test_check_key_posts_json():
    http = FakeHttp(FakeResponse({"success": True, "keyExists": True}))

    result = await _client(http).check_key("abc123")

    assert result.success and result.key_exists is True
    method, url, kwargs = http.requests[0]
    assert (method, url) == ("POST", f"{BASE}/check_key.php")
    assert kwargs["json"] == {"access_key": "abc123"}
    assert kwargs["timeout"] == 5


@pytest.mark.asyncio
async def test_list_vault_parses_items():
    """Comprueba que archivos y notas del servidor se conviertan en modelos.

    Returns:
        None: Las aserciones revisan petición y modelos resultantes.
    """
    payload = {
        "success": True,
        "files": [
            {
                "id": "7",
                "file_type": "pdf",
                "original_filename": "cv.pdf",
                "file_path": "http://x/cv.pdf",
                "created_at": "2024-03-05 14:30:00",
            },
            {"id": 8, "file_type": "zip", "original_filename": "a.zip", "file_path": "u", "created_at": ""},
        ],
        "notes": [{"id": 9, "content": "hola", "created_at": "2024-03-05 14:30:00"}],
    }
    http = FakeHttp(FakeResponse(payload))

    result = await _client(http).list_vault("a b&c")

    method, url, kwargs = http.requests[0]
    assert (method, url) == ("GET", f"{BASE}/get_files.php")
    assert kwargs["params"] == {"access_key": "a b&c"}
    assert [f.file_type for f in result.files] == ["pdf", "other"]
    assert result.notes[0].content == "hola"
    assert result.notes[0].file_type == "text"


@pytest.mark.asyncio
async def test_upload_single_blob_without_note():
    http = FakeHttp()
    blob = UploadBlob(filename="a.png", content=b"\x89PNG", content_type="image/png")

    await _client(http).upload("abc123", [blob], "")

    method, url, kwargs = http.requests[0]
    assert (method, url) == ("POST", f"{BASE}/upload.php")
    names = [name for name, _ in kwargs["files"]]
    assert names == ["access_key", "file_0"]
    assert dict(kwargs["files"])["file_0"] == ("a.png", b"\x89PNG", "image/png")


@pytest.mark.asyncio
async def test_upload_note_and_indexed_files():
    http = FakeHttp()
    blobs = [UploadBlob(filename=f"{i}.txt", content=b"x") for i in range(3)]

    await _client(http).upload("abc123", blobs, "nota")

    parts = http.requests[0][2]["files"]
    assert [name for name, _ in parts] == ["access_key", "note_content", "file_0", "file_1", "file_2"]
    assert dict(parts)["note_content"] == (None, "nota")


@pytest.mark.asyncio
async def test_delete_one_and_delete_all_bodies():
    http = FakeHttp()
    client = _client(http)

    await client.delete_one(3, "abc123", "text")
    await client.delete_one(4, "abc123")
    await client.delete_all("abc123")

    bodies = [(url.rsplit("/", 1)[1], kwargs["json"]) for _, url, kwargs in http.requests]
    assert bodies == [
        ("delete_file.php", {"file_id": 3, "access_key": "abc123", "file_type": "text"}),
        ("delete_file.php", {"file_id": 4, "access_key": "abc123", "file_type": "file"}),
        ("delete_all.php", {"access_key": "abc123"}),
    ]


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "http",
    [
        FakeHttp(error=requests.ConnectionError("down")),
        FakeHttp(error=requests.Timeout("slow")),
        FakeHttp(FakeResponse(None, status_code=500, text="<html>")),
        FakeHttp(FakeResponse(["unexpected"], status_code=502)),
        FakeHttp(FakeResponse({"success": True, "files": "nope"})),
    ],
)
async def test_transport_failures_become_network_error(http):
    """Cualquier fallo de transporte se normaliza sin lanzar excepciones."""
    result = await _client(http).list_vault("abc123")
    assert result.success is False
    assert result.message == NETWORK_ERROR_MESSAGE


@pytest.mark.asyncio
async def test_application_rejection_passes_message_verbatim():
    http = FakeHttp(FakeResponse({"success": False, "message": "vault not found"}, status_code=404))
    result = await _client(http).list_vault("abc123")
    assert result.success is False
    assert result.message == "vault not found"
    assert result.files == [] and result.notes == []
