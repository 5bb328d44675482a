# =============================================================================
# core/__init__.py
# =============================================================================
# Pure adapter logic for the Exa tools: tri-state request/response types,
# the HTTP client, and one adapter module per tool.
#
# Nothing in this package imports FastMCP or Google ADK.  The tools/ layer
# registers these adapters with the MCP server; the agent/ layer only talks
# to that server.
# =============================================================================

__version__ = "0.1.0"
