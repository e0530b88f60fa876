# =============================================================================
# core/errors.py  —  User-Input Error Hierarchy
# =============================================================================
#
# Every condition a caller can trigger with well-typed but unacceptable input
# (a number outside 1–3999, an unknown currency, a typo in a unit name) is
# raised as one of these classes.  The message is the exact text the caller
# sees, so it must name the offending value or the valid range.
#
# core/dispatch.py turns them into Failure results.  Anything that is NOT a
# UtilityError is an internal fault and is left to propagate.
# =============================================================================


class UtilityError(ValueError):
    """Base class for all user-input errors raised by the core utilities."""


# -----------------------------------------------------------------------------
# Numeral codec
# -----------------------------------------------------------------------------
class NumeralRangeError(UtilityError):
    """Raised when a number cannot be written as a classical Roman numeral."""

    def __init__(self, number: int, minimum: int, maximum: int):
        self.number = number
        super().__init__(f"Number must be between {minimum} and {maximum}")


class EmptyNumeralError(UtilityError):
    def __init__(self):
        super().__init__("Roman numeral must not be empty")


class InvalidNumeralCharacterError(UtilityError):
    """Raised for the first character (scanning right to left) outside I,V,X,L,C,D,M."""

    def __init__(self, character: str):
        self.character = character
        super().__init__(f"invalid Roman numeral character: {character}")


# -----------------------------------------------------------------------------
# Formatting / conversion
# -----------------------------------------------------------------------------
class UnsupportedCurrencyError(UtilityError):
    def __init__(self, code: str):
        self.code = code
        super().__init__(f"Unsupported currency: {code}")


class UnknownUnitError(UtilityError):
    def __init__(self, unit: str):
        self.unit = unit
        super().__init__(f"unknown unit: {unit}")


class TemperatureConversionError(UtilityError):
    def __init__(self):
        super().__init__("Temperature conversion resulted in invalid value")


# -----------------------------------------------------------------------------
# Dispatch
# -----------------------------------------------------------------------------
class NumeralInputError(UtilityError):
    """Raised when 'number' and 'roman' are not supplied exactly once."""
