# =============================================================================
# core/currency.py  —  Currency Formatting
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Renders an amount with its currency symbol and a fixed number of decimal
#   places.  No thousands separators, no locale rules: 1234.56 USD is
#   "$1234.56", and a negative amount keeps its sign after the symbol
#   ("$-5.00").
#
# THE TABLE:
#   Four currencies, built once at import and exposed read-only.  Codes are
#   matched exactly, so "usd" is unsupported just like "CHF".
#
# ROUNDING:
#   Python's fixed-point formatting ("{:.0f}" / "{:.2f}") rounds the exact
#   binary value of the float to the nearest representable result, with
#   exact ties going to the even digit.  So for JPY:
#       1234.56 → "¥1235"     2.5 → "¥2"     3.5 → "¥4"
#   and for two-place currencies 0.125 → "0.12" (an exact binary tie) while
#   1.005 → "1.00" (1.005 is stored slightly below the tie).
# =============================================================================

from types import MappingProxyType

from core.errors import UnsupportedCurrencyError
from core.models import CurrencySpec


CURRENCIES = MappingProxyType({
    spec.code: spec
    for spec in (
        CurrencySpec(code="USD", symbol="$", decimals=2),
        CurrencySpec(code="EUR", symbol="€", decimals=2),
        CurrencySpec(code="GBP", symbol="£", decimals=2),
        CurrencySpec(code="JPY", symbol="¥", decimals=0),
    )
})


def supported_currencies() -> list[str]:
    return list(CURRENCIES.keys())


def get_currency(code: str) -> CurrencySpec:
    """Look up a currency by its code.

    Raises:
        UnsupportedCurrencyError: If the code is not in CURRENCIES.
    """
    spec = CURRENCIES.get(code)
    if spec is None:
        raise UnsupportedCurrencyError(code)
    return spec


def format_currency(amount: float, code: str) -> str:
    """Format amount in the given currency, e.g. format_currency(9.5, "EUR") == "€9.50"."""
    spec = get_currency(code)
    return f"{spec.symbol}{amount:.{spec.decimals}f}"
