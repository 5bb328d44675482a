# =============================================================================
# core/answer.py - Answer adapter
# =============================================================================

from core.errors import AdapterError
from core.exa_client import new_exa_client
from core.models import AnswerArgs, AnswerOutput, Citation
from core.optional import set_if, value_or
from core.remote import AnswerRequest, AnswerResponse, CitationItem
from core.search import ClientFactory


def build_answer_request(args: AnswerArgs) -> AnswerRequest:
    return AnswerRequest(query=args.query, text=set_if(args.include_text, True))


def to_citation(item: CitationItem) -> Citation:
    return Citation(
        title=value_or(item.title, ""),
        url=value_or(item.url, ""),
        published_date=value_or(item.published_date, ""),
        author=value_or(item.author, ""),
        text=value_or(item.text, ""),
    )


def flatten_answer_response(response: AnswerResponse) -> AnswerOutput:
    return AnswerOutput(
        answer=value_or(response.answer, ""),
        citations=[to_citation(c) for c in response.citations],
    )


async def answer(args: AnswerArgs, client_factory: ClientFactory = new_exa_client) -> AnswerOutput:
    """Ask Exa to answer ``args.query``.  Raises AdapterError on failure."""
    try:
        client = client_factory()
    except Exception as exc:
        raise AdapterError("create client", exc) from exc

    request = build_answer_request(args)
    async with client:
        try:
            response = await client.answer(request)
        except Exception as exc:
            raise AdapterError("answer", exc) from exc

    return flatten_answer_response(response)
