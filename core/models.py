# =============================================================================
# core/models.py  —  Data Models (the "nouns" of the system)
# =============================================================================
#
# These dataclasses define the shape of every value that flows between the
# MCP layer (tools/) and the pure utilities (core/).  All of them are frozen:
# nothing here outlives a single tool call, and nothing is shared mutably
# between concurrent calls.
#
# TWO UNIONS DO THE HEAVY LIFTING:
#   - NumeralInput  →  Number | Roman | Neither | Both
#     The roman_numeral tool takes two optional arguments of which exactly
#     one must be present.  Resolving them ONCE into one of four variants
#     lets the dispatcher match on the case instead of re-checking
#     "is number None? is roman None?" in several places.
#
#   - ToolResult    →  Success | Failure
#     A Success always carries text AND payload; a Failure only carries a
#     message.  "Payload absent iff error" is therefore a property of the
#     types, not a convention callers have to remember.
# =============================================================================

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Mapping, Union


# -----------------------------------------------------------------------------
# ToolRequest — one named invocation with its argument bag
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class ToolRequest:
    """A tool name plus the arguments the caller supplied for it."""

    name: str
    arguments: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self):
        # Freeze the bag so handlers can't mutate what the caller sent.
        object.__setattr__(self, "arguments", MappingProxyType(dict(self.arguments)))


# -----------------------------------------------------------------------------
# ToolResult — the uniform success/error envelope
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class Success:
    """A computed result: human-readable text plus the same data as typed fields."""

    text: str
    payload: Mapping[str, Any]

    @property
    def is_error(self) -> bool:
        return False


@dataclass(frozen=True)
class Failure:
    """A user-input error.  The message is shown to the caller verbatim."""

    message: str

    @property
    def is_error(self) -> bool:
        return True


ToolResult = Union[Success, Failure]


# -----------------------------------------------------------------------------
# NumeralInput — the four ways "number" and "roman" can arrive
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class NumberInput:
    value: int


@dataclass(frozen=True)
class RomanInput:
    value: str


@dataclass(frozen=True)
class NoNumeralInput:
    pass


@dataclass(frozen=True)
class BothNumeralInputs:
    number: int
    roman: str


NumeralInput = Union[NumberInput, RomanInput, NoNumeralInput, BothNumeralInputs]


# -----------------------------------------------------------------------------
# TextStats — the output of word_count
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class TextStats:
    words: int
    characters: int
    characters_no_whitespace: int  # only spaces and newlines are removed
    lines: int


# -----------------------------------------------------------------------------
# CurrencySpec — one row of the static currency table
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class CurrencySpec:
    code: str       # ISO 4217 code, e.g. "USD"
    symbol: str     # Prefix used when rendering, e.g. "$"
    decimals: int   # 0 or 2
