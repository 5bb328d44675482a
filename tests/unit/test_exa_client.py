"""Unit tests for ExaClient: headers, paths, error mapping."""
import asyncio

import httpx
import pytest

from core.config import ExaSettings
from core.errors import ExaAPIError
from core.exa_client import API_KEY_HEADER, ExaClient, StaticApiKeySource, new_exa_client
from core.optional import Present
from core.remote import AnswerRequest, FindSimilarRequest, GetContentsRequest, SearchRequest


async def _call(transport, method, request):
    async with transport.client() as client:
        return await getattr(client, method)(request)


@pytest.mark.parametrize("method, request_obj, path", [
    ("search", SearchRequest(query="q"), "/search"),
    ("find_similar", FindSimilarRequest(url="https://a.io"), "/findSimilar"),
    ("get_contents", GetContentsRequest(urls=["https://a.io"]), "/contents"),
    ("answer", AnswerRequest(query="q"), "/answer"),
])
def test_each_operation_posts_to_its_path(recording_transport, method, request_obj, path):
    transport = recording_transport({})
    asyncio.run(_call(transport, method, request_obj))
    assert transport.last_request.method == "POST"
    assert transport.last_request.url == httpx.URL(f"https://api.exa.ai{path}")
    assert transport.last_request.headers[API_KEY_HEADER] == "test-key"


def test_key_source_is_asked_per_operation(recording_transport):
    class PerOperationKeys:
        def __init__(self):
            self.seen = []

        def api_key(self, operation):
            self.seen.append(operation)
            return f"key-{operation}"

    keys = PerOperationKeys()
    transport = recording_transport({})

    async def run():
        async with ExaClient("https://api.exa.ai", keys, transport=httpx.MockTransport(transport)) as client:
            await client.search(SearchRequest(query="q"))
            await client.answer(AnswerRequest(query="q"))

    asyncio.run(run())
    assert keys.seen == ["search", "answer"]
    assert [r.headers[API_KEY_HEADER] for r in transport.requests] == ["key-search", "key-answer"]


def test_payload_matches_request(recording_transport):
    transport = recording_transport({"answer": "a"})
    response = asyncio.run(_call(transport, "answer", AnswerRequest(query="why", text=Present(True))))
    assert transport.last_payload == {"query": "why", "text": True}
    assert response.answer == Present("a")


def test_http_error_status_raises(recording_transport):
    transport = recording_transport({"error": "invalid api key"}, status=401)
    with pytest.raises(ExaAPIError) as excinfo:
        asyncio.run(_call(transport, "search", SearchRequest(query="q")))
    assert excinfo.value.status_code == 401
    assert excinfo.value.operation == "search"
    assert "HTTP 401" in str(excinfo.value)
    assert "invalid api key" in str(excinfo.value)


def test_invalid_json_raises(recording_transport):
    transport = recording_transport("<html>oops</html>")
    with pytest.raises(ExaAPIError, match="invalid JSON"):
        asyncio.run(_call(transport, "search", SearchRequest(query="q")))


def test_schema_mismatch_raises(recording_transport):
    transport = recording_transport({"results": "not a list"})
    with pytest.raises(ExaAPIError, match="decode response"):
        asyncio.run(_call(transport, "search", SearchRequest(query="q")))


def test_transport_error_raises():
    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    async def run():
        async with ExaClient("https://api.exa.ai", StaticApiKeySource("k"),
                             transport=httpx.MockTransport(handler)) as client:
            await client.search(SearchRequest(query="q"))

    with pytest.raises(ExaAPIError, match="request failed: connection refused"):
        asyncio.run(run())


def test_cancellation_propagates():
    started = asyncio.Event()

    async def handler(request):
        started.set()
        await asyncio.sleep(10)
        return httpx.Response(200, json={})

    async def run():
        client = ExaClient("https://api.exa.ai", StaticApiKeySource("k"),
                           transport=httpx.MockTransport(handler))
        async with client:
            task = asyncio.create_task(client.search(SearchRequest(query="q")))
            await started.wait()
            task.cancel()
            with pytest.raises(asyncio.CancelledError):
                await task

    asyncio.run(run())


def test_new_exa_client_uses_settings():
    client = new_exa_client(ExaSettings(api_key="abc", base_url="http://localhost:9000/", timeout=3.0))
    assert str(client._http.base_url).startswith("http://localhost:9000")
    assert client._security.api_key("search") == "abc"
    assert client._http.timeout == httpx.Timeout(3.0)
    asyncio.run(client.aclose())


def test_empty_base_url_rejected():
    with pytest.raises(ValueError):
        ExaClient("", StaticApiKeySource("k"))


def test_key_not_in_repr():
    assert "secret" not in repr(StaticApiKeySource("secret"))
