"""Parsing and rendering of the numbers read from and written to the console."""

from __future__ import annotations

import math
import re
from decimal import Decimal

from fibtemp.errors import NumericOverflowError, ParseError

DEFAULT_BITS = 32

_UNSIGNED_RE = re.compile(r"\+?[0-9]+")
_FLOAT_RE = re.compile(
    r"[+-]?(?:inf|infinity|nan|(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:e[+-]?[0-9]+)?)",
    re.IGNORECASE,
)


def unsigned_max(bits: int) -> int:
    """Return the largest value representable in an unsigned *bits*-wide integer."""
    return (1 << bits) - 1


def parse_position(text: str, *, bits: int = DEFAULT_BITS) -> int:
    """Parse *text* as an unsigned integer of the given width.

    Surrounding whitespace is ignored. Only an optional ``+`` followed by
    ASCII digits is accepted; a leading ``-`` is rejected even for zero.
    """
    stripped = text.strip()
    if not _UNSIGNED_RE.fullmatch(stripped):
        raise ParseError(f"{stripped!r} is not a non-negative integer", text=text)
    value = int(stripped)
    if value > unsigned_max(bits):
        raise NumericOverflowError(
            f"{stripped} is too large for a {bits}-bit unsigned integer", bits=bits
        )
    return value


def parse_temperature(text: str) -> float:
    """Parse *text* as a floating-point temperature.

    Decimal and exponent notation are accepted, as are ``inf``, ``infinity``
    and ``nan`` in any case. Underscore digit separators are not.
    """
    stripped = text.strip()
    if not _FLOAT_RE.fullmatch(stripped):
        raise ParseError(f"{stripped!r} is not a number", text=text)
    return float(stripped)


def format_number(value: float, precision: int | None = None) -> str:
    """Render *value* the way the console programs print floating-point numbers.

    Integral values have no fractional part (``32``, ``-40``), other values use
    the shortest round-trip digits without an exponent (``0.0000001``).
    """
    if precision is not None:
        value = round(value, precision)
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    text = format(Decimal(repr(value)), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text
