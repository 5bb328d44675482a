# =============================================================================
# core/get_contents.py - GetContents adapter
# =============================================================================
#
# Two rules differ from the other adapters:
#
#   text        Always sent.  {maxCharacters: N} when a positive limit was
#               given, otherwise the plain flag true (full text).
#   highlights  Copied through as a list on every result, set or not.
#
# livecrawl is only sent when the caller picked a mode; the API then falls
# back to "fallback".  summaryQuery is ignored unless includeSummary is true.
# =============================================================================

from typing import Union

from core.errors import AdapterError
from core.exa_client import new_exa_client
from core.models import ContentResult, GetContentsArgs, GetContentsOutput
from core.optional import Present, set_if, value_or
from core.remote import (
    GetContentsRequest,
    GetContentsResponse,
    ResultItem,
    SummaryOptions,
    TextOptions,
)
from core.search import ClientFactory


def _text_option(max_text_chars) -> Union[bool, TextOptions]:
    if max_text_chars is not None and max_text_chars > 0:
        return TextOptions(max_characters=Present(max_text_chars))
    return True


def build_get_contents_request(args: GetContentsArgs) -> GetContentsRequest:
    summary = SummaryOptions(query=set_if(bool(args.summary_query), args.summary_query))
    return GetContentsRequest(
        urls=list(args.urls),
        text=Present(_text_option(args.max_text_chars)),
        livecrawl=set_if(bool(args.livecrawl), args.livecrawl),
        summary=set_if(args.include_summary, summary),
    )


def to_content_result(item: ResultItem) -> ContentResult:
    return ContentResult(
        title=value_or(item.title, ""),
        url=value_or(item.url, ""),
        text=value_or(item.text, ""),
        summary=value_or(item.summary, ""),
        author=value_or(item.author, ""),
        published_date=value_or(item.published_date, ""),
        highlights=list(item.highlights),
    )


def flatten_get_contents_response(response: GetContentsResponse) -> GetContentsOutput:
    return GetContentsOutput(
        results=[to_content_result(r) for r in response.results],
        context=value_or(response.context, ""),
    )


async def get_contents(
    args: GetContentsArgs,
    client_factory: ClientFactory = new_exa_client,
) -> GetContentsOutput:
    """Fetch page contents for ``args.urls``.  Raises AdapterError on failure."""
    try:
        client = client_factory()
    except Exception as exc:
        raise AdapterError("create client", exc) from exc

    request = build_get_contents_request(args)
    async with client:
        try:
            response = await client.get_contents(request)
        except Exception as exc:
            raise AdapterError("get contents", exc) from exc

    return flatten_get_contents_response(response)
