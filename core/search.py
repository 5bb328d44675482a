# =============================================================================
# core/search.py - Search adapter
# =============================================================================
#
#   SearchArgs --build_search_request--> SearchRequest
#              --ExaClient.search------> SearchResponse
#              --flatten_search_response--> SearchOutput
#
# Only arguments the caller actually supplied reach the wire: a positive
# result count, a non-empty string or list, a true flag.
# =============================================================================

from typing import Callable

from core.errors import AdapterError
from core.exa_client import ExaClient, new_exa_client
from core.models import SearchArgs, SearchOutput, SearchResult
from core.optional import Present, set_if, value_or
from core.remote import ContentsRequest, ResultItem, SearchRequest, SearchResponse

ClientFactory = Callable[[], ExaClient]


def contents_request(get_contents: bool):
    """``contents: {text: true}`` when page contents were asked for."""
    return set_if(get_contents, ContentsRequest(text=Present(True)))


def to_search_result(item: ResultItem) -> SearchResult:
    """Flatten one remote result; unset fields keep their zero value."""
    return SearchResult(
        title=value_or(item.title, ""),
        url=value_or(item.url, ""),
        published_date=value_or(item.published_date, ""),
        author=value_or(item.author, ""),
        score=value_or(item.score, 0.0),
        text=value_or(item.text, ""),
        summary=value_or(item.summary, ""),
    )


def build_search_request(args: SearchArgs) -> SearchRequest:
    return SearchRequest(
        query=args.query,
        type=set_if(bool(args.type), args.type),
        category=set_if(bool(args.category), args.category),
        num_results=set_if(args.num_results is not None and args.num_results > 0, args.num_results),
        include_domains=set_if(bool(args.include_domains), args.include_domains),
        exclude_domains=set_if(bool(args.exclude_domains), args.exclude_domains),
        include_text=set_if(bool(args.include_text), args.include_text),
        exclude_text=set_if(bool(args.exclude_text), args.exclude_text),
        contents=contents_request(args.get_contents),
    )


def flatten_search_response(response: SearchResponse) -> SearchOutput:
    return SearchOutput(
        results=[to_search_result(r) for r in response.results],
        context=value_or(response.context, ""),
    )


async def search(args: SearchArgs, client_factory: ClientFactory = new_exa_client) -> SearchOutput:
    """Run one Exa search.  Raises AdapterError on any failure."""
    try:
        client = client_factory()
    except Exception as exc:
        raise AdapterError("create client", exc) from exc

    request = build_search_request(args)
    async with client:
        try:
            response = await client.search(request)
        except Exception as exc:
            raise AdapterError("search", exc) from exc

    return flatten_search_response(response)
