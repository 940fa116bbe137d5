"""Celsius/Fahrenheit converter.

The selector names the *output* unit: ``"F"`` treats the temperature as
Celsius and reports Fahrenheit, ``"C"`` treats it as Fahrenheit and reports
Celsius.  Selectors are case-sensitive; anything else is reported as an
invalid input without computing.
"""

from __future__ import annotations

from typing import Callable

from fibtemp._internal.numbers import format_number
from fibtemp._internal.units import celsius_to_fahrenheit, fahrenheit_to_celsius
from fibtemp.models.results import ConversionResult

INVALID_INPUT_MESSAGE = "That is not a valid input"

# selector -> (source unit, formula)
_CONVERSIONS: dict[str, tuple[str, Callable[[float], float]]] = {
    "F": ("C", celsius_to_fahrenheit),
    "C": ("F", fahrenheit_to_celsius),
}


def convert(selector: str, temperature: float) -> ConversionResult:
    """Convert *temperature* into the unit named by *selector*."""
    unit = selector.strip()
    entry = _CONVERSIONS.get(unit)
    if entry is None:
        return ConversionResult(selector=unit, temperature=temperature, valid=False)
    source_unit, formula = entry
    return ConversionResult(
        selector=unit,
        temperature=temperature,
        source_unit=source_unit,
        target_unit=unit,
        result=formula(temperature),
    )


def format_conversion_message(result: ConversionResult, precision: int | None = None) -> str:
    """Render *result* as ``"{temp} C is {result} in F"`` or the invalid-input line."""
    if not result.valid or result.result is None:
        return INVALID_INPUT_MESSAGE
    temp = format_number(result.temperature)
    converted = format_number(result.result, precision)
    return f"{temp} {result.source_unit} is {converted} in {result.target_unit}"
