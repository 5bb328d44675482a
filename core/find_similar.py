# =============================================================================
# core/find_similar.py - FindSimilar adapter
# =============================================================================
# Same result shape as search; the seed is a URL instead of a query.
# =============================================================================

from core.errors import AdapterError
from core.exa_client import new_exa_client
from core.models import FindSimilarArgs, FindSimilarOutput
from core.optional import set_if, value_or
from core.remote import FindSimilarRequest, FindSimilarResponse
from core.search import ClientFactory, contents_request, to_search_result


def build_find_similar_request(args: FindSimilarArgs) -> FindSimilarRequest:
    return FindSimilarRequest(
        url=args.url,
        num_results=set_if(args.num_results is not None and args.num_results > 0, args.num_results),
        include_domains=set_if(bool(args.include_domains), args.include_domains),
        exclude_domains=set_if(bool(args.exclude_domains), args.exclude_domains),
        contents=contents_request(args.get_contents),
    )


def flatten_find_similar_response(response: FindSimilarResponse) -> FindSimilarOutput:
    return FindSimilarOutput(
        results=[to_search_result(r) for r in response.results],
        context=value_or(response.context, ""),
    )


async def find_similar(
    args: FindSimilarArgs,
    client_factory: ClientFactory = new_exa_client,
) -> FindSimilarOutput:
    """Find pages similar to ``args.url``.  Raises AdapterError on failure."""
    try:
        client = client_factory()
    except Exception as exc:
        raise AdapterError("create client", exc) from exc

    request = build_find_similar_request(args)
    async with client:
        try:
            response = await client.find_similar(request)
        except Exception as exc:
            raise AdapterError("find similar", exc) from exc

    return flatten_find_similar_response(response)
