# =============================================================================
# agent/__init__.py
# =============================================================================
# An example host for the Exa tool server: a Google ADK research assistant
# that starts tools/mcp_server.py as an MCP stdio subprocess and answers
# questions with the search, find_similar, get_contents and answer tools.
#
# The agent has no Exa logic of its own.  Everything it knows about the web
# comes back through the MCP tools.
# =============================================================================
