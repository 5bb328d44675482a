# =============================================================================
# core/models.py - Tool arguments and tool outputs
# =============================================================================
#
# ARGUMENTS:
#   One dataclass per tool, in caller terms.  Optional fields default to
#   None; the adapters decide what reaches the wire (see core/optional.py).
#
# OUTPUTS:
#   Flat, caller-facing records.  A field the API did not return holds its
#   type's zero value ("" / 0.0 / []), never a sentinel.  Each output renders
#   to a dict with camelCase keys (to_dict), to indented JSON (to_json), and
#   parses back (from_dict / from_json).
#
#   JSON shape:
#     - optional strings and the score are left out when empty / zero
#     - results, citations and highlights are always present as lists
# =============================================================================

import json
import typing
from dataclasses import dataclass, field, fields
from typing import Any, Literal, Optional

SearchType = Literal["neural", "fast", "auto", "deep"]
LivecrawlMode = Literal["never", "fallback", "always", "preferred"]


# -----------------------------------------------------------------------------
# Tool arguments
# -----------------------------------------------------------------------------
@dataclass
class SearchArgs:
    query: str
    type: Optional[str] = None
    category: Optional[str] = None
    num_results: Optional[int] = None
    include_domains: Optional[list[str]] = None
    exclude_domains: Optional[list[str]] = None
    # The API accepts at most one phrase of up to five words here; that limit
    # is enforced remotely.
    include_text: Optional[list[str]] = None
    exclude_text: Optional[list[str]] = None
    get_contents: bool = False


@dataclass
class FindSimilarArgs:
    url: str
    num_results: Optional[int] = None
    include_domains: Optional[list[str]] = None
    exclude_domains: Optional[list[str]] = None
    get_contents: bool = False


@dataclass
class GetContentsArgs:
    urls: list[str]
    livecrawl: Optional[str] = None
    max_text_chars: Optional[int] = None
    include_summary: bool = False
    summary_query: Optional[str] = None


@dataclass
class AnswerArgs:
    query: str
    include_text: bool = False


# -----------------------------------------------------------------------------
# JSON rendering shared by the output records
# -----------------------------------------------------------------------------
def _json(name: str, *, omitempty: bool = False, **kwargs: Any) -> Any:
    return field(metadata={"json": name, "omitempty": omitempty}, **kwargs)


def _load(tp: Any, value: Any) -> Any:
    if typing.get_origin(tp) is list:
        (item_type,) = typing.get_args(tp)
        return [_load(item_type, v) for v in value]
    if isinstance(tp, type) and issubclass(tp, JsonRecord):
        return tp.from_dict(value)
    if tp is float:
        return float(value)
    return value


class JsonRecord:
    """Mixin for output dataclasses declared with _json() fields."""

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {}
        for f in fields(self):
            value = getattr(self, f.name)
            if f.metadata.get("omitempty") and not value:
                continue
            if isinstance(value, list):
                value = [v.to_dict() if isinstance(v, JsonRecord) else v for v in value]
            out[f.metadata.get("json", f.name)] = value
        return out

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), indent=2, ensure_ascii=False)

    @classmethod
    def from_dict(cls, data: dict[str, Any]):
        hints = typing.get_type_hints(cls)
        kwargs = {}
        for f in fields(cls):
            key = f.metadata.get("json", f.name)
            if key in data:
                kwargs[f.name] = _load(hints[f.name], data[key])
        return cls(**kwargs)

    @classmethod
    def from_json(cls, text: str):
        return cls.from_dict(json.loads(text))


# -----------------------------------------------------------------------------
# Tool outputs
# -----------------------------------------------------------------------------
@dataclass
class SearchResult(JsonRecord):
    title: str = _json("title", default="")
    url: str = _json("url", default="")
    published_date: str = _json("publishedDate", omitempty=True, default="")
    author: str = _json("author", omitempty=True, default="")
    score: float = _json("score", omitempty=True, default=0.0)
    text: str = _json("text", omitempty=True, default="")
    summary: str = _json("summary", omitempty=True, default="")


@dataclass
class SearchOutput(JsonRecord):
    results: list[SearchResult] = _json("results", default_factory=list)
    context: str = _json("context", omitempty=True, default="")


@dataclass
class FindSimilarOutput(JsonRecord):
    results: list[SearchResult] = _json("results", default_factory=list)
    context: str = _json("context", omitempty=True, default="")


@dataclass
class ContentResult(JsonRecord):
    title: str = _json("title", default="")
    url: str = _json("url", default="")
    text: str = _json("text", omitempty=True, default="")
    summary: str = _json("summary", omitempty=True, default="")
    author: str = _json("author", omitempty=True, default="")
    published_date: str = _json("publishedDate", omitempty=True, default="")
    highlights: list[str] = _json("highlights", default_factory=list)


@dataclass
class GetContentsOutput(JsonRecord):
    results: list[ContentResult] = _json("results", default_factory=list)
    context: str = _json("context", omitempty=True, default="")


@dataclass
class Citation(JsonRecord):
    title: str = _json("title", default="")
    url: str = _json("url", default="")
    published_date: str = _json("publishedDate", omitempty=True, default="")
    author: str = _json("author", omitempty=True, default="")
    text: str = _json("text", omitempty=True, default="")


@dataclass
class AnswerOutput(JsonRecord):
    answer: str = _json("answer", default="")
    citations: list[Citation] = _json("citations", default_factory=list)
