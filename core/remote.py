# =============================================================================
# core/remote.py - Wire types for the Exa HTTP API
# =============================================================================
#
# WHAT THIS FILE DOES:
#   Defines the request and response shapes of the four remote operations:
#
#     POST /search        SearchRequest       -> SearchResponse
#     POST /findSimilar   FindSimilarRequest  -> FindSimilarResponse
#     POST /contents      GetContentsRequest  -> GetContentsResponse
#     POST /answer        AnswerRequest       -> AnswerResponse
#
# REQUESTS:
#   Every optional field defaults to UNSET and is dropped by to_payload().
#   Field names on the wire come from the "wire" metadata (camelCase).
#
# RESPONSES:
#   from_payload() reads optional fields with from_key(), so a key the API did
#   not return stays UNSET.  List fields (results, citations, highlights) are
#   plain lists.  A body with the wrong shape raises TypeError.
# =============================================================================

from dataclasses import dataclass, field, fields, is_dataclass
from typing import Any, Union

from core.optional import UNSET, Opt, Present, from_key


def _wire(name: str, **kwargs: Any) -> Any:
    """An optional request field serialized under ``name``."""
    kwargs.setdefault("default", UNSET)
    return field(metadata={"wire": name}, **kwargs)


def _encode(value: Any) -> Any:
    if is_dataclass(value):
        return to_payload(value)
    if isinstance(value, (list, tuple)):
        return [_encode(v) for v in value]
    return value


def to_payload(request: Any) -> dict[str, Any]:
    """Serialize a request dataclass, omitting every UNSET field."""
    payload: dict[str, Any] = {}
    for f in fields(request):
        value = getattr(request, f.name)
        if value is UNSET:
            continue
        if isinstance(value, Present):
            value = value.value
        payload[f.metadata.get("wire", f.name)] = _encode(value)
    return payload


# -----------------------------------------------------------------------------
# Requests
# -----------------------------------------------------------------------------
@dataclass
class ContentsRequest:
    """Content retrieval options nested in /search and /findSimilar."""

    text: Opt[bool] = _wire("text")


@dataclass
class TextOptions:
    max_characters: Opt[int] = _wire("maxCharacters")


@dataclass
class SummaryOptions:
    query: Opt[str] = _wire("query")


@dataclass
class SearchRequest:
    query: str
    type: Opt[str] = _wire("type")
    category: Opt[str] = _wire("category")
    num_results: Opt[int] = _wire("numResults")
    include_domains: Opt[list[str]] = _wire("includeDomains")
    exclude_domains: Opt[list[str]] = _wire("excludeDomains")
    include_text: Opt[list[str]] = _wire("includeText")
    exclude_text: Opt[list[str]] = _wire("excludeText")
    contents: Opt[ContentsRequest] = _wire("contents")

    def to_payload(self) -> dict[str, Any]:
        return to_payload(self)


@dataclass
class FindSimilarRequest:
    url: str
    num_results: Opt[int] = _wire("numResults")
    include_domains: Opt[list[str]] = _wire("includeDomains")
    exclude_domains: Opt[list[str]] = _wire("excludeDomains")
    contents: Opt[ContentsRequest] = _wire("contents")

    def to_payload(self) -> dict[str, Any]:
        return to_payload(self)


@dataclass
class GetContentsRequest:
    urls: list[str]
    # Either a plain flag or TextOptions with a character limit.
    text: Opt[Union[bool, TextOptions]] = _wire("text")
    livecrawl: Opt[str] = _wire("livecrawl")
    summary: Opt[SummaryOptions] = _wire("summary")

    def to_payload(self) -> dict[str, Any]:
        return to_payload(self)


@dataclass
class AnswerRequest:
    query: str
    text: Opt[bool] = _wire("text")

    def to_payload(self) -> dict[str, Any]:
        return to_payload(self)


# -----------------------------------------------------------------------------
# Response decoding helpers
# -----------------------------------------------------------------------------
def _str(value: Any) -> str:
    if not isinstance(value, str):
        raise TypeError(f"expected string, got {type(value).__name__}")
    return value


def _float(value: Any) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise TypeError(f"expected number, got {type(value).__name__}")
    return float(value)


def _object(value: Any, what: str) -> dict[str, Any]:
    if not isinstance(value, dict):
        raise TypeError(f"{what}: expected object, got {type(value).__name__}")
    return value


def _list(data: dict[str, Any], key: str) -> list[Any]:
    value = data.get(key)
    if value is None:
        return []
    if not isinstance(value, list):
        raise TypeError(f"{key}: expected array, got {type(value).__name__}")
    return value


# -----------------------------------------------------------------------------
# Responses
# -----------------------------------------------------------------------------
@dataclass
class ResultItem:
    """One result of /search, /findSimilar or /contents."""

    id: Opt[str] = UNSET
    title: Opt[str] = UNSET
    url: Opt[str] = UNSET
    published_date: Opt[str] = UNSET
    author: Opt[str] = UNSET
    score: Opt[float] = UNSET
    text: Opt[str] = UNSET
    summary: Opt[str] = UNSET
    highlights: list[str] = field(default_factory=list)

    @classmethod
    def from_payload(cls, data: Any) -> "ResultItem":
        data = _object(data, "result")
        return cls(
            id=from_key(data, "id", _str),
            title=from_key(data, "title", _str),
            url=from_key(data, "url", _str),
            published_date=from_key(data, "publishedDate", _str),
            author=from_key(data, "author", _str),
            score=from_key(data, "score", _float),
            text=from_key(data, "text", _str),
            summary=from_key(data, "summary", _str),
            highlights=[_str(h) for h in _list(data, "highlights")],
        )


@dataclass
class SearchResponse:
    results: list[ResultItem] = field(default_factory=list)
    context: Opt[str] = UNSET
    request_id: Opt[str] = UNSET

    @classmethod
    def from_payload(cls, data: Any):
        data = _object(data, "response")
        return cls(
            results=[ResultItem.from_payload(r) for r in _list(data, "results")],
            context=from_key(data, "context", _str),
            request_id=from_key(data, "requestId", _str),
        )


class FindSimilarResponse(SearchResponse):
    pass


class GetContentsResponse(SearchResponse):
    pass


@dataclass
class CitationItem:
    id: Opt[str] = UNSET
    title: Opt[str] = UNSET
    url: Opt[str] = UNSET
    published_date: Opt[str] = UNSET
    author: Opt[str] = UNSET
    text: Opt[str] = UNSET

    @classmethod
    def from_payload(cls, data: Any) -> "CitationItem":
        data = _object(data, "citation")
        return cls(
            id=from_key(data, "id", _str),
            title=from_key(data, "title", _str),
            url=from_key(data, "url", _str),
            published_date=from_key(data, "publishedDate", _str),
            author=from_key(data, "author", _str),
            text=from_key(data, "text", _str),
        )


@dataclass
class AnswerResponse:
    answer: Opt[str] = UNSET
    citations: list[CitationItem] = field(default_factory=list)
    request_id: Opt[str] = UNSET

    @classmethod
    def from_payload(cls, data: Any) -> "AnswerResponse":
        data = _object(data, "response")
        return cls(
            answer=from_key(data, "answer", _str),
            citations=[CitationItem.from_payload(c) for c in _list(data, "citations")],
            request_id=from_key(data, "requestId", _str),
        )
