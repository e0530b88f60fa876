# =============================================================================
# core/temperature.py  —  Temperature Conversion
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Converts between celsius, fahrenheit and kelvin.
#
# THE PIVOT:
#   Instead of six pairwise formulas, every conversion goes
#       source unit  →  celsius  →  target unit
#   so each unit only needs a to_celsius and a from_celsius formula.
#
# IDENTITY SHORT-CIRCUIT:
#   When both units are the same, the input value is returned untouched.
#   A round trip through celsius could otherwise change the last bits of a float.
#   The finiteness check still applies, so inf or NaN is never echoed back.
#
# VALIDATION ORDER:
#   Both unit names are parsed first, so convert(1, "foo", "foo") is an
#   unknown-unit error rather than an echo.  Unit names are matched after
#   stripping and lower-casing ("Kelvin" is kelvin).
# =============================================================================

import math
from enum import Enum

from core.errors import TemperatureConversionError, UnknownUnitError


class TemperatureUnit(str, Enum):
    CELSIUS = "celsius"
    FAHRENHEIT = "fahrenheit"
    KELVIN = "kelvin"


KELVIN_OFFSET = 273.15


def parse_unit(name: str) -> TemperatureUnit:
    """Resolve a unit name to a TemperatureUnit.

    Raises:
        UnknownUnitError: If the name is not celsius, fahrenheit or kelvin.
            The error names the unit exactly as the caller wrote it.
    """
    try:
        return TemperatureUnit(name.strip().lower())
    except ValueError:
        raise UnknownUnitError(name) from None


def to_celsius(value: float, unit: TemperatureUnit) -> float:
    if unit is TemperatureUnit.CELSIUS:
        return value
    if unit is TemperatureUnit.FAHRENHEIT:
        return (value - 32) * 5 / 9
    return value - KELVIN_OFFSET


def from_celsius(value: float, unit: TemperatureUnit) -> float:
    if unit is TemperatureUnit.CELSIUS:
        return value
    if unit is TemperatureUnit.FAHRENHEIT:
        return value * 9 / 5 + 32
    return value + KELVIN_OFFSET


def convert_temperature(value: float, from_unit: str, to_unit: str) -> float:
    """Convert value from one temperature unit to another.

    Args:
        value: The temperature expressed in from_unit.
        from_unit: "celsius", "fahrenheit" or "kelvin".
        to_unit: "celsius", "fahrenheit" or "kelvin".

    Returns:
        The converted temperature.  When the units match, value itself.

    Raises:
        UnknownUnitError: For an unrecognised unit name.
        TemperatureConversionError: If the result is NaN or infinite
            (e.g. a NaN or inf input value, even when the units match).
    """
    source = parse_unit(from_unit)
    target = parse_unit(to_unit)

    if source is target:
        result = value
    else:
        result = from_celsius(to_celsius(value, source), target)
    if not math.isfinite(result):
        raise TemperatureConversionError()
    return result
