# =============================================================================
# tools/__init__.py
# =============================================================================
# FastMCP registration of the Exa tools (see mcp_server.py).
#
# Each tool here only translates MCP arguments into a core/ argument
# dataclass, awaits the matching adapter, and returns the structured output
# together with its JSON text.  Request building, response flattening and
# the HTTP client all live in core/.
# =============================================================================
