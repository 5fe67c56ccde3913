"""Remote API client request/envelope tests."""

import httpx
import pytest

from api.base_client import RemoteAPIClient, ENTRY_ENDPOINT
from api.errors import RemoteCallError, TransportError
from models.envelope import Envelope


@pytest.mark.asyncio
async def test_get_sends_query_parameters_with_sid(remote_client, nas):
    envelope = await remote_client.call(
        ENTRY_ENDPOINT, "SYNO.FileStation.Delete", 2, "delete",
        params={"path": "/docs/old", "recursive": True, "unused": None},
        sid="abc",
    )

    assert envelope.success
    call = nas.calls[0]
    assert call["_http_method"] == "GET"
    assert call["_endpoint"] == "/webapi/entry.cgi"
    assert call["api"] == "SYNO.FileStation.Delete"
    assert call["version"] == "2"
    assert call["method"] == "delete"
    assert call["recursive"] == "true"
    assert call["_sid"] == "abc"
    assert "unused" not in call


@pytest.mark.asyncio
async def test_failed_envelope_is_returned_not_raised(remote_client, nas):
    nas.on("SYNO.FileStation.List", "list", {
        "success": False,
        "error": {"code": 408, "errors": [{"code": 408, "path": "/nope"}]},
    })

    envelope = await remote_client.call(ENTRY_ENDPOINT, "SYNO.FileStation.List", 2, "list")

    assert not envelope.success
    assert envelope.error_code == 408
    assert envelope.error_description == "No such file or directory (/nope)"
    with pytest.raises(RemoteCallError, match="error 408"):
        envelope.raise_for_error("Failed to list")


@pytest.mark.asyncio
async def test_non_json_body_is_a_transport_error(remote_client, nas):
    nas.on("SYNO.FileStation.Info", "get", httpx.Response(200, text="<html>login</html>"))

    with pytest.raises(TransportError, match="not JSON"):
        await remote_client.call(ENTRY_ENDPOINT, "SYNO.FileStation.Info", 2, "get")


@pytest.mark.asyncio
async def test_http_error_status_is_a_transport_error(remote_client, nas):
    nas.on("SYNO.FileStation.Info", "get", httpx.Response(503, text="unavailable"))

    with pytest.raises(TransportError, match="HTTP 503"):
        await remote_client.call(ENTRY_ENDPOINT, "SYNO.FileStation.Info", 2, "get")


@pytest.mark.asyncio
async def test_connection_failure_is_a_transport_error(api_config):
    def timeout(request):
        raise httpx.ConnectTimeout("timed out", request=request)

    client = RemoteAPIClient(api_config, transport=httpx.MockTransport(timeout))

    with pytest.raises(TransportError, match="timed out"):
        await client.call(ENTRY_ENDPOINT, "SYNO.FileStation.Info", 2, "get")


@pytest.mark.asyncio
async def test_multipart_post_carries_form_fields_and_file(remote_client, nas):
    await remote_client.call(
        ENTRY_ENDPOINT, "SYNO.FileStation.Upload", 2, "upload",
        params={"path": "/docs", "overwrite": True},
        sid="abc",
        files={"filedata": ("notes.txt", b"hello", "application/octet-stream")},
        http_method="POST",
    )

    call = nas.calls[0]
    assert call["_http_method"] == "POST"
    assert call["api"] == "SYNO.FileStation.Upload"
    assert call["path"] == "/docs"
    assert call["overwrite"] == "true"
    assert call["_sid"] == "abc"
    assert call["filedata"] == "hello"
    assert call["filedata.filename"] == "notes.txt"


@pytest.mark.asyncio
async def test_download_returns_text_or_error_envelope(remote_client, nas):
    nas.on("SYNO.FileStation.Download", "download",
           httpx.Response(200, text="file body", headers={"content-type": "text/plain"}),
           {"success": False, "error": {"code": 408}})

    body = await remote_client.download("SYNO.FileStation.Download", 2, "download", {"path": "/a"})
    error = await remote_client.download("SYNO.FileStation.Download", 2, "download", {"path": "/b"})

    assert body == "file body"
    assert isinstance(error, Envelope)
    assert error.error_code == 408


@pytest.mark.asyncio
async def test_download_detects_envelope_sent_as_plain_text(remote_client, nas):
    nas.on("SYNO.FileStation.Download", "download",
           httpx.Response(200, text='{"success": false, "error": {"code": 119}}',
                          headers={"content-type": "text/plain"}))

    result = await remote_client.download("SYNO.FileStation.Download", 2, "download", {"path": "/a"})

    assert isinstance(result, Envelope)
    assert result.is_session_expired


@pytest.mark.asyncio
async def test_download_keeps_plain_json_files_as_text(remote_client, nas):
    nas.on("SYNO.FileStation.Download", "download",
           httpx.Response(200, text='{"name": "config"}', headers={"content-type": "text/plain"}))

    result = await remote_client.download("SYNO.FileStation.Download", 2, "download", {"path": "/c.json"})

    assert result == '{"name": "config"}'
