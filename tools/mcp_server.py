# =============================================================================
# tools/mcp_server.py  —  FastMCP Tool Server (ALL tools in one place)
# =============================================================================
#
# WHAT THIS FILE DOES:
#   Registers the five utility tools with FastMCP.  Each tool is a thin
#   wrapper around a core/dispatch.py handler: it logs the call, hands the
#   arguments to the handler, and maps the handler's Success/Failure onto
#   an MCP tool result.
#
# HOW IT WORKS (the flow):
#   1. A client sends tools/call with a name and an argument object
#   2. FastMCP validates the arguments against the type hints below
#      (wrong JSON types are rejected before our code runs)
#   3. The decorated function calls the core handler
#   4. Success → text content + structured content (same data, typed)
#      Failure → ToolError, which FastMCP returns with isError=true and the
#                message as the only text content
#
# ERROR TIERS:
#   User-input problems never escape core/ as exceptions; they arrive here
#   as Failure and are re-raised as ToolError only to set the MCP error
#   flag.  Anything else that goes wrong is an internal fault; FastMCP
#   reports it for that call and keeps serving.
#
# RUNNING THIS SERVER:
#     a) Standalone:        python -m tools.mcp_server
#     b) Installed script:  utility-mcp-server
#     c) From the console:  python main.py (spawns this over stdio)
# =============================================================================

from typing import Annotated

from dotenv import load_dotenv
from fastmcp import FastMCP
from fastmcp.exceptions import ToolError
from fastmcp.tools.tool import ToolResult
from mcp.types import TextContent
from pydantic import Field

from core import dispatch
from core.currency import supported_currencies
from core.models import Failure, Success
from core.roman import MAX_VALUE, MIN_VALUE
from core.temperature import TemperatureUnit
from tools.config import load_settings
from tools.diagnostics import (
    configure_logging,
    log_error,
    log_main,
    log_request,
    log_response,
    log_status,
)

# =============================================================================
# Settings & logging
# =============================================================================
# .env is loaded before the settings are read so a local file can override
# the server name, transport or log level without touching the shell.
load_dotenv()
settings = load_settings()
configure_logging(settings.log_level, settings.log_color)

_UNITS = ", ".join(unit.value for unit in TemperatureUnit)
_CURRENCIES = ", ".join(supported_currencies())


def _respond(tool_name: str, result: Success | Failure) -> ToolResult:
    """Translate a core result into what FastMCP sends back to the client."""
    if isinstance(result, Failure):
        log_error(tool_name, result.message)
        raise ToolError(result.message)

    log_response(tool_name, result.payload)
    return ToolResult(
        content=[TextContent(type="text", text=result.text)],
        structured_content=dict(result.payload),
    )


# =============================================================================
# Create the FastMCP server instance
# =============================================================================
mcp = FastMCP(settings.server_name, version=settings.server_version)


# =============================================================================
# TOOL 1: word_count
# =============================================================================
@mcp.tool()
def word_count(
    text: Annotated[str, Field(description="The text to analyze")],
) -> ToolResult:
    """Analyze text and count words, characters, and lines.

    Returns:
        words, characters, characters_no_whitespace (spaces and newlines
        removed) and lines.  Empty text has 0 lines.
    """
    log_request("word_count", text_length=len(text))
    return _respond("word_count", dispatch.word_count(text))


# =============================================================================
# TOOL 2: format_currency
# =============================================================================
@mcp.tool()
def format_currency(
    amount: Annotated[float, Field(description="The numeric amount to format")],
    currency: Annotated[str, Field(description=f"Currency code ({_CURRENCIES})")],
) -> ToolResult:
    """Format a number as currency with proper symbol and decimal places.

    JPY is rendered without decimals, the others with two.  No thousands
    separators.  Returns {"formatted": "$1234.56"}.
    """
    log_request("format_currency", amount=amount, currency=currency)
    return _respond("format_currency", dispatch.format_currency(amount, currency))


# =============================================================================
# TOOL 3: slugify
# =============================================================================
@mcp.tool()
def slugify(
    text: Annotated[str, Field(description="The text to convert to a URL-friendly slug")],
) -> ToolResult:
    """Convert text to a URL-friendly slug (lowercase, hyphens, no special characters)."""
    log_request("slugify", text=text)
    return _respond("slugify", dispatch.slugify(text))


# =============================================================================
# TOOL 4: roman_numeral
# =============================================================================
# Two optional arguments, exactly one of which must be given.  The
# "both"/"neither" checks happen in core/dispatch.py so the messages are the
# same no matter which transport delivered the call.
# =============================================================================
@mcp.tool()
def roman_numeral(
    number: Annotated[
        int | None,
        Field(description=f"Decimal number to convert to Roman ({MIN_VALUE}-{MAX_VALUE})"),
    ] = None,
    roman: Annotated[
        str | None,
        Field(description="Roman numeral to convert to decimal"),
    ] = None,
) -> ToolResult:
    """Convert between decimal numbers (1-3999) and Roman numerals.

    Pass either `number` (returns {"roman": ...}) or `roman` (returns
    {"decimal": ..., "canonical": ...}), never both.  Lower-case numerals are
    accepted; `canonical` is false for forms like "IIII".
    """
    log_request("roman_numeral", number=number, roman=roman)
    result = dispatch.roman_numeral(number=number, roman=roman)
    if isinstance(result, Success):
        if "roman" in result.payload:
            log_status(f"Converted {number} to {result.payload['roman']}")
        else:
            log_status(f"Converted {roman} to {result.payload['decimal']}")
    return _respond("roman_numeral", result)


# =============================================================================
# TOOL 5: temperature_convert
# =============================================================================
@mcp.tool()
def temperature_convert(
    value: Annotated[float, Field(description="The temperature value to convert")],
    from_unit: Annotated[str, Field(description=f"Source temperature unit ({_UNITS})")],
    to_unit: Annotated[str, Field(description=f"Target temperature unit ({_UNITS})")],
) -> ToolResult:
    """Convert temperatures between Celsius, Fahrenheit, and Kelvin.

    Returns {"result": <float>}; the text rendering has two decimals.
    Converting to the same unit returns the value unchanged.
    """
    log_request("temperature_convert", value=value, from_unit=from_unit, to_unit=to_unit)
    return _respond(
        "temperature_convert",
        dispatch.temperature_convert(value, from_unit, to_unit),
    )


log_main(f"Registered tools: {', '.join(dispatch.TOOL_HANDLERS)}")


# =============================================================================
# Server entry point
# =============================================================================
def run() -> None:
    log_main(f"Starting {settings.server_name} {settings.server_version} on {settings.transport}")
    mcp.run(transport=settings.transport)
    log_main("Server stopped")


if __name__ == "__main__":
    run()
