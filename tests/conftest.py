"""Pytest config: PYTHONPATH, env, and shared Exa client doubles."""
import json
import os
import sys
from pathlib import Path

import httpx
import pytest

root = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(root))
os.environ.setdefault("EXA_API_KEY", "test-key")

from core.exa_client import ExaClient, StaticApiKeySource  # noqa: E402


class RecordingTransport:
    """httpx handler that records requests and replies with a fixed body."""

    def __init__(self, body=None, status=200):
        self.body = {} if body is None else body
        self.status = status
        self.requests = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if isinstance(self.body, (dict, list)):
            return httpx.Response(self.status, json=self.body)
        return httpx.Response(self.status, text=self.body)

    @property
    def last_request(self) -> httpx.Request:
        return self.requests[-1]

    @property
    def last_payload(self) -> dict:
        return json.loads(self.last_request.content)

    def client(self) -> ExaClient:
        return ExaClient(
            "https://api.exa.ai",
            StaticApiKeySource("test-key"),
            transport=httpx.MockTransport(self),
        )


class FailingClient:
    """Client double whose every remote call raises ``exc``."""

    def __init__(self, exc: Exception):
        self.exc = exc
        self.closed = False

    async def __aenter__(self):
        return self

    async def __aexit__(self, *exc_info):
        self.closed = True

    async def _fail(self, request):
        raise self.exc

    search = find_similar = get_contents = answer = _fail


@pytest.fixture
def recording_transport():
    return RecordingTransport


@pytest.fixture
def failing_client():
    return FailingClient
