# =============================================================================
# agent/research_agent.py - Google ADK agent wired to the Exa tool server
# =============================================================================
#
#   ADK Agent (LiteLlm model)
#        │  MCP over stdio
#        ▼
#   tools/mcp_server.py  ──▶  core/ adapters  ──▶  Exa API
#
# ADK launches the server as a subprocess with "uv run python -m
# tools.mcp_server" from the project root, so the subprocess uses the
# project's virtual environment and can import core/.
#
# The MCP stdio client only forwards a small set of environment variables
# (PATH, HOME, ...) to the subprocess; EXA_* settings are passed explicitly.
# The server also loads .env from the project root on start.
#
# MODEL:
#   RESEARCH_AGENT_MODEL selects the LiteLlm model string, default
#   "openrouter/openai/gpt-4o" (LiteLlm reads OPENROUTER_API_KEY itself).
# =============================================================================

import os

from google.adk.agents import Agent
from google.adk.models.lite_llm import LiteLlm
from google.adk.tools.mcp_tool import MCPToolset
from mcp import StdioServerParameters

from agent.prompt import get_research_prompt

DEFAULT_MODEL = "openrouter/openai/gpt-4o"
_FORWARDED_ENV = ("EXA_API_KEY", "EXA_BASE_URL", "EXA_TIMEOUT")


def _server_env() -> dict[str, str]:
    return {name: os.environ[name] for name in _FORWARDED_ENV if os.environ.get(name)}


def create_agent() -> Agent:
    """Create the research assistant agent.

    Returns:
        A configured Google ADK Agent whose only tools are the Exa MCP tools.
    """
    project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))

    mcp_tools = MCPToolset(
        connection_params=StdioServerParameters(
            command="uv",
            args=["run", "python", "-m", "tools.mcp_server"],
            cwd=project_root,
            env=_server_env(),
        ),
    )

    model_name = os.environ.get("RESEARCH_AGENT_MODEL", "").strip() or DEFAULT_MODEL

    return Agent(
        name="exa_research_assistant",
        model=LiteLlm(model=model_name),
        instruction=get_research_prompt(),
        tools=[mcp_tools],
    )
