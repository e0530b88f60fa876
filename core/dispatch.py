# =============================================================================
# core/dispatch.py  —  Tool Dispatch Contract
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Wraps each pure utility in a handler with the same contract:
#     1. validate the arguments (presence, exclusivity, range, domain)
#     2. call the utility only with validated input
#     3. return a Success (text + payload) or a Failure (message)
#
#   Handlers never raise for bad-but-well-typed input.  Every UtilityError is
#   turned into a Failure here.  Any other exception is an
#   internal fault and is left to propagate to the transport layer.
#
# WHY THIS LIVES IN core/:
#   Nothing here knows about MCP.  tools/mcp_server.py maps Success/Failure
#   onto protocol results; this module can be exercised from a REPL or a
#   plain unit test with no server running.
# =============================================================================

import inspect
from typing import Callable, Optional

from core.currency import format_currency as _format_currency
from core.errors import NumeralInputError, UtilityError
from core.models import (
    BothNumeralInputs,
    Failure,
    NoNumeralInput,
    NumberInput,
    NumeralInput,
    RomanInput,
    Success,
    ToolRequest,
    ToolResult,
)
from core.roman import from_roman, is_canonical, to_roman
from core.temperature import convert_temperature
from core.text import count_text, slugify as _slugify


# -----------------------------------------------------------------------------
# Numeral input resolution
# -----------------------------------------------------------------------------
def resolve_numeral_input(number: Optional[int] = None, roman: Optional[str] = None) -> NumeralInput:
    """Collapse the two optional numeral arguments into one of four cases."""
    if number is not None and roman is not None:
        return BothNumeralInputs(number=number, roman=roman)
    if number is not None:
        return NumberInput(number)
    if roman is not None:
        return RomanInput(roman)
    return NoNumeralInput()


def _require_single_numeral(numeral_input: NumeralInput) -> None:
    if isinstance(numeral_input, BothNumeralInputs):
        raise NumeralInputError("Please provide either 'number' or 'roman', not both")
    if isinstance(numeral_input, NoNumeralInput):
        raise NumeralInputError("Please provide either 'number' or 'roman'")


# -----------------------------------------------------------------------------
# Handlers
# -----------------------------------------------------------------------------
def word_count(text: str) -> ToolResult:
    stats = count_text(text)
    rendered = (
        f"Words: {stats.words}\n"
        f"Characters: {stats.characters}\n"
        f"Characters (no whitespace): {stats.characters_no_whitespace}\n"
        f"Lines: {stats.lines}"
    )
    return Success(
        text=rendered,
        payload={
            "words": stats.words,
            "characters": stats.characters,
            "characters_no_whitespace": stats.characters_no_whitespace,
            "lines": stats.lines,
        },
    )


def format_currency(amount: float, currency: str) -> ToolResult:
    try:
        formatted = _format_currency(amount, currency)
    except UtilityError as e:
        return Failure(str(e))
    return Success(text=formatted, payload={"formatted": formatted})


def slugify(text: str) -> ToolResult:
    slug = _slugify(text)
    return Success(text=slug, payload={"slug": slug})


def roman_numeral(number: Optional[int] = None, roman: Optional[str] = None) -> ToolResult:
    """Convert in whichever direction the supplied argument implies.

    number → {"roman": ...}; roman → {"decimal": ..., "canonical": ...}.
    """
    numeral_input = resolve_numeral_input(number, roman)
    try:
        _require_single_numeral(numeral_input)

        if isinstance(numeral_input, NumberInput):
            numeral = to_roman(numeral_input.value)
            return Success(text=numeral, payload={"roman": numeral})

        decimal = from_roman(numeral_input.value)
    except UtilityError as e:
        return Failure(str(e))

    return Success(
        text=str(decimal),
        payload={"decimal": decimal, "canonical": is_canonical(numeral_input.value)},
    )


def temperature_convert(value: float, from_unit: str, to_unit: str) -> ToolResult:
    try:
        result = convert_temperature(value, from_unit, to_unit)
    except UtilityError as e:
        return Failure(str(e))
    return Success(text=f"{result:.2f}", payload={"result": result})


# -----------------------------------------------------------------------------
# Registry & dispatch
# -----------------------------------------------------------------------------
TOOL_HANDLERS: dict[str, Callable[..., ToolResult]] = {
    "word_count": word_count,
    "format_currency": format_currency,
    "slugify": slugify,
    "roman_numeral": roman_numeral,
    "temperature_convert": temperature_convert,
}


def dispatch(request: ToolRequest) -> ToolResult:
    """Route a ToolRequest to its handler.

    An unknown tool name or an argument bag that doesn't fit the handler's
    parameters (missing required argument, unexpected name) is reported as a
    Failure.  Type checking of argument values is the transport's job.
    """
    handler = TOOL_HANDLERS.get(request.name)
    if handler is None:
        return Failure(f"Unknown tool: {request.name}")

    try:
        bound = inspect.signature(handler).bind(**request.arguments)
    except TypeError as e:
        return Failure(f"Invalid arguments for {request.name}: {e}")

    return handler(*bound.args, **bound.kwargs)
