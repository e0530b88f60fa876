# =============================================================================
# tools/__init__.py
# =============================================================================
# This package is the MCP side of the project:
#   - mcp_server.py   FastMCP tool registrations and the server entry point
#   - config.py       settings read from the environment / .env
#   - diagnostics.py  stderr logging with [MAIN] / [TOOL] / [ERROR] tags
#
# WHAT TOOLS DO NOT DO:
#   - They do NOT validate or compute anything themselves (that's core/)
#   - They do NOT write to stdout (stdout belongs to the MCP transport)
# =============================================================================
