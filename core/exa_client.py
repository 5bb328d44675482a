# =============================================================================
# core/exa_client.py - Async HTTP client for the Exa API
# =============================================================================
#
# WHAT THIS FILE DOES:
#   Sends the wire types from core/remote.py to the Exa API and decodes the
#   replies.  One method per remote operation; each method is exactly one
#   POST with no retry.
#
# CREDENTIALS:
#   The client does not read the environment itself.  It asks an ApiKeySource
#   for a key on every call and sends it as the x-api-key header, so tests
#   (and hosts with their own secret stores) can plug in any source.
#
# FAILURES:
#   Transport errors, non-2xx statuses and bodies that are not the expected
#   JSON shape all raise ExaAPIError.  asyncio cancellation is not caught:
#   it propagates out of the awaited request, and closing the client releases
#   the connection.
# =============================================================================

import logging
from typing import Any, Optional, Protocol

import httpx

from core.config import ExaSettings
from core.errors import ExaAPIError
from core.optional import value_or
from core.remote import (
    AnswerRequest,
    AnswerResponse,
    FindSimilarRequest,
    FindSimilarResponse,
    GetContentsRequest,
    GetContentsResponse,
    SearchRequest,
    SearchResponse,
)

logger = logging.getLogger(__name__)

API_KEY_HEADER = "x-api-key"


class ApiKeySource(Protocol):
    def api_key(self, operation: str) -> str:
        """Return the API key to send with ``operation`` ("search", ...)."""
        ...


class StaticApiKeySource:
    """Supplies the same key for every operation."""

    def __init__(self, key: str) -> None:
        self._key = key

    def api_key(self, operation: str) -> str:
        return self._key

    def __repr__(self) -> str:
        return "StaticApiKeySource(key=***)"


class ExaClient:
    """Exa API client.  Use as ``async with ExaClient(...) as client``."""

    def __init__(
        self,
        base_url: str,
        security: ApiKeySource,
        *,
        timeout: float = 30.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        if not base_url:
            raise ValueError("base_url is required")
        self._security = security
        self._http = httpx.AsyncClient(
            base_url=base_url.rstrip("/"),
            timeout=timeout,
            transport=transport,
            headers={"Accept": "application/json"},
        )

    async def __aenter__(self) -> "ExaClient":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._http.aclose()

    async def search(self, request: SearchRequest) -> SearchResponse:
        data = await self._post("search", "/search", request.to_payload())
        return self._decode("search", SearchResponse, data)

    async def find_similar(self, request: FindSimilarRequest) -> FindSimilarResponse:
        data = await self._post("findSimilar", "/findSimilar", request.to_payload())
        return self._decode("findSimilar", FindSimilarResponse, data)

    async def get_contents(self, request: GetContentsRequest) -> GetContentsResponse:
        data = await self._post("getContents", "/contents", request.to_payload())
        return self._decode("getContents", GetContentsResponse, data)

    async def answer(self, request: AnswerRequest) -> AnswerResponse:
        data = await self._post("answer", "/answer", request.to_payload())
        return self._decode("answer", AnswerResponse, data)

    async def _post(self, operation: str, path: str, payload: dict[str, Any]) -> Any:
        headers = {API_KEY_HEADER: self._security.api_key(operation)}
        logger.debug("exa %s request: %s", operation, sorted(payload))

        try:
            response = await self._http.post(path, json=payload, headers=headers)
        except httpx.HTTPError as exc:
            logger.warning("exa %s request failed: %s", operation, exc)
            message = str(exc).strip() or type(exc).__name__
            raise ExaAPIError(operation, f"request failed: {message}") from exc

        if response.is_error:
            body = response.text.strip()[:500]
            logger.warning("exa %s returned HTTP %d", operation, response.status_code)
            raise ExaAPIError(
                operation,
                f"HTTP {response.status_code}: {body}" if body else f"HTTP {response.status_code}",
                status_code=response.status_code,
            )

        try:
            return response.json()
        except ValueError as exc:
            raise ExaAPIError(
                operation,
                f"invalid JSON response: {exc}",
                status_code=response.status_code,
            ) from exc

    def _decode(self, operation: str, response_type: Any, data: Any) -> Any:
        try:
            decoded = response_type.from_payload(data)
        except (TypeError, ValueError) as exc:
            raise ExaAPIError(operation, f"decode response: {exc}") from exc
        logger.debug("exa %s ok, requestId=%s", operation, value_or(decoded.request_id, "-"))
        return decoded


def new_exa_client(settings: Optional[ExaSettings] = None) -> ExaClient:
    """Build a client from ``settings`` (default: the current environment).

    The API key is read once here; an empty key is sent as-is and rejected
    by the remote side.
    """
    settings = settings or ExaSettings.from_env()
    return ExaClient(
        settings.base_url,
        StaticApiKeySource(settings.api_key),
        timeout=settings.timeout,
    )
