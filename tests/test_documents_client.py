import asyncio

import httpx
import pytest

from docquery.clients.documents.gdata.DocumentsClientGData import DocumentsClientGData
from docquery.helper.HelperConfig import HelperConfig
from docquery.query.DocumentsQuery import DocumentsQuery


class RecordingTransport(httpx.MockTransport):
    """Answers every request with a fixed response and keeps the requests it saw."""

    def __init__(self, status_code: int = 200, body: bytes = b"<feed/>"):
        self.requests: list[httpx.Request] = []
        super().__init__(self._handle)
        self._status_code = status_code
        self._body = body

    def _handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return httpx.Response(self._status_code, content=self._body)


def _fetch(client: DocumentsClientGData, query: DocumentsQuery) -> httpx.Response:
    async def run() -> httpx.Response:
        await client.boot()
        try:
            return await client.do_fetch_feed(query)
        finally:
            await client.close()

    return asyncio.run(run())


def test_defaults(helper_config: HelperConfig):
    client = DocumentsClientGData(helper_config=helper_config)
    assert client._get_config_key_name("feed_path") == "DOCUMENTS_GDATA_FEED_PATH"
    assert client.get_feed_uri(DocumentsQuery()) == (
        "https://docs.google.com/feeds/documents/private/full?showdeleted=false&showfolders=false"
    )


def test_config_from_environment(helper_config: HelperConfig, monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("DOCUMENTS_GDATA_BASE_URL", "http://localhost:8080/")
    monkeypatch.setenv("DOCUMENTS_GDATA_FEED_PATH", "/feeds/default/private/full")
    query = DocumentsQuery()
    query.set_folder_id("abc")

    client = DocumentsClientGData(helper_config=helper_config)

    assert client.get_feed_uri(query) == (
        "http://localhost:8080/feeds/default/private/full/folder%3Aabc?showdeleted=false&showfolders=false"
    )


def test_unsupported_setting_type_is_rejected(helper_config: HelperConfig):
    client = DocumentsClientGData(helper_config=helper_config)
    with pytest.raises(ValueError, match="DOCUMENTS_GDATA_BASE_URL"):
        client.get_config_val("BASE_URL", default=[], val_type="list")


def test_invalid_timeout_is_rejected(helper_config: HelperConfig, monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("DOCUMENTS_TIMEOUT", "soon")
    with pytest.raises(ValueError):
        DocumentsClientGData(helper_config=helper_config)


def test_fetch_feed_requests_composed_uri(helper_config: HelperConfig, monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("DOCUMENTS_GDATA_AUTH_TOKEN", "secret")
    transport = RecordingTransport()
    client = DocumentsClientGData(helper_config=helper_config, transport=transport)
    query = DocumentsQuery()
    query.set_folder_id("abc")
    query.add_reader("a@x.com")
    query.add_reader("b@y.com")

    response = _fetch(client, query)

    assert response.status_code == 200
    assert len(transport.requests) == 1
    request = transport.requests[0]
    assert request.method == "GET"
    assert request.url.host == "docs.google.com"
    assert "/folder%3Aabc" in str(request.url)
    assert "reader=a%40x.com;b%40y.com" in str(request.url)
    assert request.headers["Authorization"] == "GoogleLogin auth=secret"


def test_fetch_without_token_sends_no_auth_header(helper_config: HelperConfig):
    transport = RecordingTransport()
    client = DocumentsClientGData(helper_config=helper_config, transport=transport)

    _fetch(client, DocumentsQuery())

    assert "Authorization" not in transport.requests[0].headers


def test_fetch_raises_on_error_status(helper_config: HelperConfig):
    client = DocumentsClientGData(helper_config=helper_config, transport=RecordingTransport(status_code=403))
    with pytest.raises(httpx.HTTPStatusError):
        _fetch(client, DocumentsQuery())


def test_request_before_boot_fails(helper_config: HelperConfig):
    client = DocumentsClientGData(helper_config=helper_config)
    with pytest.raises(RuntimeError):
        asyncio.run(client.do_fetch_feed(DocumentsQuery()))


def test_healthcheck_hits_feed(helper_config: HelperConfig):
    transport = RecordingTransport()
    client = DocumentsClientGData(helper_config=helper_config, transport=transport)

    async def run() -> httpx.Response:
        await client.boot()
        try:
            return await client.do_healthcheck()
        finally:
            await client.close()

    assert asyncio.run(run()).status_code == 200
    assert transport.requests[0].url.path == "/feeds/documents/private/full"
