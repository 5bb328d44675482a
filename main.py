# =============================================================================
# main.py - Entry point for the Exa research assistant
# =============================================================================
#
# HOW TO RUN:
#   uv run python main.py
#
# WHAT HAPPENS:
#   1. Loads .env (EXA_API_KEY, OPENROUTER_API_KEY, ...)
#   2. Creates the ADK agent (agent/research_agent.py), which starts the Exa
#      MCP server as a subprocess
#   3. Reads questions from the console and streams the agent's events,
#      printing each tool call as it happens and the final answer
#
# To serve the tools to another MCP host instead, run the server directly:
#   uv run python -m tools.mcp_server
# =============================================================================

import asyncio

from dotenv import load_dotenv

# LiteLlm reads its provider key from the environment when the agent is built.
load_dotenv()

from google.adk.runners import Runner
from google.adk.sessions import InMemorySessionService
from google.genai import types

from agent.research_agent import create_agent

APP_NAME = "exa_research"
USER_ID = "console_user"


def _event_text(event) -> tuple[str, list[str]]:
    """Split an ADK event into (last text part, names of tools it calls)."""
    text = ""
    tool_calls: list[str] = []
    if event.content and event.content.parts:
        for part in event.content.parts:
            if getattr(part, "text", None):
                text = part.text
            if getattr(part, "function_call", None):
                tool_calls.append(part.function_call.name)
    return text, tool_calls


async def run_agent():
    """Run the research assistant interactively until the user quits."""
    print("=" * 70)
    print("  EXA RESEARCH ASSISTANT")
    print("  Google ADK + LiteLlm + FastMCP (Exa search, similar, contents, answer)")
    print("=" * 70)
    print("\nInitializing agent...")
    agent = create_agent()

    session_service = InMemorySessionService()
    runner = Runner(
        agent=agent,
        app_name=APP_NAME,
        session_service=session_service,
    )
    session = await session_service.create_session(app_name=APP_NAME, user_id=USER_ID)

    print("Agent ready.  Ask a question (type 'quit' to exit).")
    print("-" * 70)

    while True:
        try:
            user_input = input("\nYou: ").strip()
        except (EOFError, KeyboardInterrupt):
            print("\n\nGoodbye!")
            break

        if user_input.lower() in ("quit", "exit", "q"):
            print("\nGoodbye!")
            break

        if not user_input:
            continue

        user_message = types.Content(role="user", parts=[types.Part(text=user_input)])

        print("\nResearching...\n")
        final_response = ""

        async for event in runner.run_async(
            user_id=USER_ID,
            session_id=session.id,
            new_message=user_message,
        ):
            text, tool_calls = _event_text(event)
            for tool_name in tool_calls:
                print(f"  calling tool: {tool_name}")
            if text:
                final_response = text

        print("-" * 70)
        if final_response:
            print(f"\nAssistant:\n\n{final_response}")
        else:
            print("\nNo response generated. The agent may have encountered an error.")

        print("\n" + "=" * 70)


if __name__ == "__main__":
    asyncio.run(run_agent())
