"""Unit tests for the answer adapter."""
import asyncio

import pytest

from core.answer import answer, build_answer_request
from core.errors import AdapterError, ExaAPIError
from core.models import AnswerArgs, AnswerOutput, Citation
from core.optional import UNSET, Present


def test_text_flag_only_sent_when_requested():
    assert build_answer_request(AnswerArgs(query="q")).text is UNSET
    assert build_answer_request(AnswerArgs(query="q")).to_payload() == {"query": "q"}
    assert build_answer_request(AnswerArgs(query="q", include_text=True)).text == Present(True)


def test_citations_without_text(recording_transport):
    transport = recording_transport({
        "answer": "Paris",
        "citations": [
            {"id": "c1", "title": "France", "url": "https://fr.io", "author": "Marie",
             "publishedDate": "2022-02-02"},
        ],
    })
    output = asyncio.run(answer(AnswerArgs(query="capital of France?", include_text=False),
                                client_factory=transport.client))

    assert transport.last_payload == {"query": "capital of France?"}
    assert output == AnswerOutput(
        answer="Paris",
        citations=[Citation(title="France", url="https://fr.io", published_date="2022-02-02",
                            author="Marie", text="")],
    )
    assert "text" not in output.to_dict()["citations"][0]


def test_citations_with_text(recording_transport):
    transport = recording_transport({
        "answer": "Paris",
        "citations": [{"title": "France", "url": "https://fr.io", "text": "Paris is the capital."}],
    })
    output = asyncio.run(answer(AnswerArgs(query="q", include_text=True), client_factory=transport.client))
    assert transport.last_payload == {"query": "q", "text": True}
    assert output.citations[0].text == "Paris is the capital."


def test_missing_answer_is_empty_string(recording_transport):
    transport = recording_transport({})
    output = asyncio.run(answer(AnswerArgs(query="q"), client_factory=transport.client))
    assert output == AnswerOutput(answer="", citations=[])


def test_remote_failure_is_wrapped(failing_client):
    client = failing_client(ExaAPIError("answer", "HTTP 429: slow down", status_code=429))
    with pytest.raises(AdapterError, match="^answer: HTTP 429: slow down$"):
        asyncio.run(answer(AnswerArgs(query="q"), client_factory=lambda: client))
