# =============================================================================
# core/__init__.py
# =============================================================================
# This package contains ALL of the utility logic: the Roman numeral codec,
# text counting and slugs, currency formatting, temperature conversion, and
# the dispatch contract that wraps them in Success/Failure results.
#
# CRITICAL ARCHITECTURAL RULE:
#   Nothing in this package imports FastMCP, MCP types or dotenv.  Every
#   module here is pure Python and can be imported in a bare REPL.
#   tools/ depends on core/; core/ depends on nothing outside the stdlib.
# =============================================================================
