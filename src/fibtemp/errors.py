"""Exception hierarchy for fibtemp."""

from __future__ import annotations


class FibtempError(Exception):
    """Base class for all fibtemp failures."""


class InputReadError(FibtempError):
    """Standard input was closed or could not be read."""


class ParseError(FibtempError):
    """Text did not represent the expected numeric type."""

    def __init__(self, message: str, *, text: str | None = None) -> None:
        super().__init__(message)
        self.text = text


class NumericOverflowError(FibtempError):
    """An input or computed value does not fit the unsigned integer width."""

    def __init__(self, message: str, *, bits: int) -> None:
        super().__init__(message)
        self.bits = bits
