"""Unit tests for the research agent wiring (ADK classes mocked)."""
from unittest.mock import MagicMock, patch

from agent.prompt import TOOL_NAMES, get_research_prompt
from agent.research_agent import DEFAULT_MODEL, create_agent


def test_prompt_mentions_every_tool():
    prompt = get_research_prompt()
    for name in TOOL_NAMES:
        assert name in prompt


@patch("agent.research_agent.Agent")
@patch("agent.research_agent.LiteLlm")
@patch("agent.research_agent.MCPToolset")
@patch("agent.research_agent.StdioServerParameters")
def test_create_agent_launches_server_module(mock_params, mock_toolset, mock_llm, mock_agent, monkeypatch):
    monkeypatch.delenv("RESEARCH_AGENT_MODEL", raising=False)
    monkeypatch.setenv("EXA_API_KEY", "k-123")
    monkeypatch.delenv("EXA_BASE_URL", raising=False)
    monkeypatch.delenv("EXA_TIMEOUT", raising=False)

    create_agent()

    params = mock_params.call_args.kwargs
    assert params["args"][-2:] == ["-m", "tools.mcp_server"]
    assert params["env"] == {"EXA_API_KEY": "k-123"}
    mock_toolset.assert_called_once_with(connection_params=mock_params.return_value)
    mock_llm.assert_called_once_with(model=DEFAULT_MODEL)
    assert mock_agent.call_args.kwargs["tools"] == [mock_toolset.return_value]


@patch("agent.research_agent.Agent", MagicMock())
@patch("agent.research_agent.LiteLlm")
@patch("agent.research_agent.MCPToolset", MagicMock())
@patch("agent.research_agent.StdioServerParameters", MagicMock())
def test_model_override(mock_llm, monkeypatch):
    monkeypatch.setenv("RESEARCH_AGENT_MODEL", "openrouter/anthropic/claude-3.5-sonnet")
    create_agent()
    mock_llm.assert_called_once_with(model="openrouter/anthropic/claude-3.5-sonnet")
