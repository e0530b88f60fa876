# =============================================================================
# core/roman.py  —  Roman Numeral Codec
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Converts between integers in [1, 3999] and Roman numerals written in
#   subtractive notation (4 → "IV", 9 → "IX", 1994 → "MCMXCIV").
#
# ENCODING (int → numeral):
#   Greedy over a 13-row table that lists the seven base symbols AND the six
#   subtractive pairs in strictly descending value.  For each row, emit the
#   symbol as many times as its value still fits, then move on.  Because
#   every gap between adjacent power-of-ten tiers is covered by a
#   subtractive row, the output is always the canonical (shortest) form and
#   never repeats I, X, C or M more than three times.
#
# DECODING (numeral → int):
#   Scan RIGHT TO LEFT, remembering the value of the symbol just processed.
#   A symbol smaller than the one to its right is a subtractive prefix, so
#   it is subtracted; anything else is added.  No two-character lookahead
#   is needed.
#
# RELAXED DECODING:
#   decode only rejects characters outside I,V,X,L,C,D,M.  It does not
#   check that the numeral is canonical: "IIII" decodes to 4 and "VX" to 5.
#   Encoding is always canonical, decoding is tolerant.  is_canonical() is
#   provided for callers that want to tell the two apart.
# =============================================================================

from types import MappingProxyType

from core.errors import EmptyNumeralError, InvalidNumeralCharacterError, NumeralRangeError


MIN_VALUE = 1
MAX_VALUE = 3999

# (value, symbol), strictly descending.  Order matters for the greedy loop.
ROMAN_TABLE: tuple[tuple[int, str], ...] = (
    (1000, "M"),
    (900, "CM"),
    (500, "D"),
    (400, "CD"),
    (100, "C"),
    (90, "XC"),
    (50, "L"),
    (40, "XL"),
    (10, "X"),
    (9, "IX"),
    (5, "V"),
    (4, "IV"),
    (1, "I"),
)

SYMBOL_VALUES = MappingProxyType({
    "I": 1,
    "V": 5,
    "X": 10,
    "L": 50,
    "C": 100,
    "D": 500,
    "M": 1000,
})


def to_roman(number: int) -> str:
    """Encode an integer as a canonical Roman numeral.

    Args:
        number: An integer between MIN_VALUE and MAX_VALUE inclusive.

    Returns:
        The numeral in upper case, e.g. to_roman(2024) == "MMXXIV".

    Raises:
        NumeralRangeError: If number is outside [1, 3999].
    """
    if number < MIN_VALUE or number > MAX_VALUE:
        raise NumeralRangeError(number, MIN_VALUE, MAX_VALUE)

    parts = []
    remaining = number
    for value, symbol in ROMAN_TABLE:
        while remaining >= value:
            parts.append(symbol)
            remaining -= value
    return "".join(parts)


def from_roman(numeral: str) -> int:
    """Decode a Roman numeral (any case) to an integer.

    Non-canonical numerals are accepted; see the module header.

    Raises:
        EmptyNumeralError: If numeral is the empty string.
        InvalidNumeralCharacterError: For the first (rightmost) character
            that is not a Roman symbol.
    """
    if not numeral:
        raise EmptyNumeralError()

    total = 0
    previous = 0
    for character in reversed(numeral.upper()):
        value = SYMBOL_VALUES.get(character)
        if value is None:
            raise InvalidNumeralCharacterError(character)
        if value < previous:
            total -= value
        else:
            total += value
        previous = value
    return total


def is_canonical(numeral: str) -> bool:
    """True when numeral is exactly what to_roman would produce for its value."""
    try:
        value = from_roman(numeral)
        return to_roman(value) == numeral.upper()
    except (EmptyNumeralError, InvalidNumeralCharacterError, NumeralRangeError):
        return False
