# =============================================================================
# tools/mcp_server.py - FastMCP Tool Server (all Exa tools in one place)
# =============================================================================
#
# WHAT THIS FILE DOES:
#   Registers the four Exa tools with a FastMCP server.  Each tool is a thin
#   wrapper around a core/ adapter: it turns the MCP arguments into the
#   adapter's argument dataclass, awaits the adapter, and returns both the
#   structured output and its JSON text rendering.
#
# THE TOOLS:
#   search         Web search (neural / fast / auto / deep)
#   find_similar   Pages similar to a seed URL
#   get_contents   Clean text, summaries and metadata for given URLs
#   answer         A generated answer with citations
#
# ARGUMENT NAMES:
#   Parameters use the camelCase names of the tool schema (numResults,
#   includeDomains, ...) because FastMCP derives the input schema from the
#   function signature.
#
# ERRORS:
#   An AdapterError becomes a ToolError, so the host receives an error result
#   carrying the stage-prefixed message ("search: HTTP 401: ...") and never a
#   partial payload.
#
# RUNNING THIS SERVER:
#   python -m tools.mcp_server        (stdio transport)
#   exa-mcp-server                    (console script, same thing)
# =============================================================================

import json
import logging
import sys
from typing import Annotated, Optional

from dotenv import load_dotenv
from fastmcp import FastMCP
from fastmcp.exceptions import ToolError
from fastmcp.tools.tool import ToolResult
from mcp.types import TextContent, ToolAnnotations
from pydantic import Field

from core import __version__
from core.answer import answer as run_answer
from core.errors import AdapterError
from core.find_similar import find_similar as run_find_similar
from core.get_contents import get_contents as run_get_contents
from core.models import (
    AnswerArgs,
    FindSimilarArgs,
    GetContentsArgs,
    LivecrawlMode,
    SearchArgs,
    SearchType,
)
from core.search import search as run_search

# =============================================================================
# Logging Setup
# =============================================================================
# STDOUT is the MCP stdio transport, so all logging goes to STDERR.
#   CYAN    incoming tool calls
#   YELLOW  status lines
#   GREEN   response JSON
# =============================================================================

_CYAN = "\033[36m"
_GREEN = "\033[32m"
_YELLOW = "\033[33m"
_RED = "\033[31m"
_RESET = "\033[0m"

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [MCP] %(message)s",
    datefmt="%H:%M:%S",
    stream=sys.stderr,
)
logger = logging.getLogger(__name__)


def _log_request(tool_name: str, **params) -> None:
    """Log an incoming tool call with the parameters the caller supplied."""
    param_str = ", ".join(f"{k}={v!r}" for k, v in params.items() if v is not None)
    logger.info(f"{_CYAN}{tool_name} called with: {param_str}{_RESET}")


def _log_status(message: str) -> None:
    logger.info(f"{_YELLOW}  → {message}{_RESET}")


def _log_error(tool_name: str, exc: Exception) -> None:
    logger.error(f"{_RED}  ✗ {tool_name} failed: {exc}{_RESET}")


def _respond(tool_name: str, output) -> ToolResult:
    """Log the output as compact JSON and wrap it as structured + text content."""
    data = output.to_dict()
    logger.info(f"{_GREEN}  ← {tool_name} response: {json.dumps(data, separators=(',', ':'))}{_RESET}")
    return ToolResult(
        content=[TextContent(type="text", text=output.to_json())],
        structured_content=data,
    )


# =============================================================================
# Create the FastMCP server instance
# =============================================================================
mcp = FastMCP("exa-mcp-server", version=__version__)


# =============================================================================
# TOOL 1: search
# =============================================================================
@mcp.tool(
    name="search",
    annotations=ToolAnnotations(title="Exa Search", readOnlyHint=True, openWorldHint=True),
)
async def search_tool(
    query: Annotated[str, Field(description="The query string for the search")],
    type: Annotated[
        Optional[SearchType],
        Field(
            description="Search type: neural (embeddings-based), fast (streamlined), "
            "auto (default - intelligently combines methods), "
            "deep (comprehensive with query expansion)"
        ),
    ] = None,
    category: Annotated[Optional[str], Field(description="A data category to focus on")] = None,
    numResults: Annotated[
        Optional[int], Field(description="Number of results to return (default 10)")
    ] = None,
    includeDomains: Annotated[
        Optional[list[str]], Field(description="List of domains to include in the search")
    ] = None,
    excludeDomains: Annotated[
        Optional[list[str]], Field(description="List of domains to exclude from search results")
    ] = None,
    includeText: Annotated[
        Optional[list[str]],
        Field(description="Strings that must be present in webpage text (max 1 string, up to 5 words)"),
    ] = None,
    excludeText: Annotated[
        Optional[list[str]], Field(description="Strings that must not be present in webpage text")
    ] = None,
    getContents: Annotated[
        bool, Field(description="If true, return page contents along with search results")
    ] = False,
) -> ToolResult:
    """Perform a web search using Exa's AI-powered search engine. Returns relevant results with optional page contents. Supports neural (semantic), fast, auto, and deep search types."""
    _log_request(
        "search", query=query, type=type, category=category, numResults=numResults,
        includeDomains=includeDomains, excludeDomains=excludeDomains,
        includeText=includeText, excludeText=excludeText, getContents=getContents,
    )

    args = SearchArgs(
        query=query,
        type=type,
        category=category,
        num_results=numResults,
        include_domains=includeDomains,
        exclude_domains=excludeDomains,
        include_text=includeText,
        exclude_text=excludeText,
        get_contents=getContents,
    )
    try:
        output = await run_search(args)
    except AdapterError as exc:
        _log_error("search", exc)
        raise ToolError(str(exc)) from exc

    _log_status(f"Got {len(output.results)} results")
    return _respond("search", output)


# =============================================================================
# TOOL 2: find_similar
# =============================================================================
@mcp.tool(
    name="find_similar",
    annotations=ToolAnnotations(title="Exa Find Similar", readOnlyHint=True, openWorldHint=True),
)
async def find_similar_tool(
    url: Annotated[str, Field(description="The URL for which to find similar links")],
    numResults: Annotated[
        Optional[int], Field(description="Number of results to return (default 10)")
    ] = None,
    includeDomains: Annotated[
        Optional[list[str]], Field(description="List of domains to include")
    ] = None,
    excludeDomains: Annotated[
        Optional[list[str]], Field(description="List of domains to exclude")
    ] = None,
    getContents: Annotated[bool, Field(description="If true, return page contents")] = False,
) -> ToolResult:
    """Find web pages similar to a given URL. Useful for discovering related content, competitor analysis, or finding more resources on a topic."""
    _log_request(
        "find_similar", url=url, numResults=numResults, includeDomains=includeDomains,
        excludeDomains=excludeDomains, getContents=getContents,
    )

    args = FindSimilarArgs(
        url=url,
        num_results=numResults,
        include_domains=includeDomains,
        exclude_domains=excludeDomains,
        get_contents=getContents,
    )
    try:
        output = await run_find_similar(args)
    except AdapterError as exc:
        _log_error("find_similar", exc)
        raise ToolError(str(exc)) from exc

    _log_status(f"Got {len(output.results)} similar pages")
    return _respond("find_similar", output)


# =============================================================================
# TOOL 3: get_contents
# =============================================================================
@mcp.tool(
    name="get_contents",
    annotations=ToolAnnotations(title="Exa Get Contents", readOnlyHint=True, openWorldHint=True),
)
async def get_contents_tool(
    urls: Annotated[list[str], Field(description="Array of URLs to fetch content from")],
    livecrawl: Annotated[
        Optional[LivecrawlMode],
        Field(description="Livecrawl mode: never, fallback (default), always, or preferred"),
    ] = None,
    maxTextChars: Annotated[
        Optional[int], Field(description="Maximum characters for text content")
    ] = None,
    includeSummary: Annotated[
        bool, Field(description="If true, include AI-generated summary")
    ] = False,
    summaryQuery: Annotated[
        Optional[str], Field(description="Custom query for summary generation")
    ] = None,
) -> ToolResult:
    """Fetch and extract content from specific URLs. Returns clean text, optional summaries, and metadata. Supports live crawling for fresh content."""
    _log_request(
        "get_contents", urls=urls, livecrawl=livecrawl, maxTextChars=maxTextChars,
        includeSummary=includeSummary, summaryQuery=summaryQuery,
    )

    args = GetContentsArgs(
        urls=urls,
        livecrawl=livecrawl,
        max_text_chars=maxTextChars,
        include_summary=includeSummary,
        summary_query=summaryQuery,
    )
    try:
        output = await run_get_contents(args)
    except AdapterError as exc:
        _log_error("get_contents", exc)
        raise ToolError(str(exc)) from exc

    _log_status(f"Fetched {len(output.results)} of {len(urls)} URLs")
    return _respond("get_contents", output)


# =============================================================================
# TOOL 4: answer
# =============================================================================
@mcp.tool(
    name="answer",
    annotations=ToolAnnotations(title="Exa Answer", readOnlyHint=True, openWorldHint=True),
)
async def answer_tool(
    query: Annotated[str, Field(description="The question or query to answer")],
    includeText: Annotated[
        bool, Field(description="If true, include full text content from sources")
    ] = False,
) -> ToolResult:
    """Get an AI-generated answer to a question based on web search results. Returns a concise answer with citations to source documents."""
    _log_request("answer", query=query, includeText=includeText)

    try:
        output = await run_answer(AnswerArgs(query=query, include_text=includeText))
    except AdapterError as exc:
        _log_error("answer", exc)
        raise ToolError(str(exc)) from exc

    _log_status(f"Answer with {len(output.citations)} citations")
    return _respond("answer", output)


# =============================================================================
# Server entry point
# =============================================================================
def main() -> None:
    """Load .env and serve the tools over stdio."""
    load_dotenv()
    mcp.run()


if __name__ == "__main__":
    main()
