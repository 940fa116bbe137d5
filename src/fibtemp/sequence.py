"""Fibonacci position evaluator.

The evaluator walks a three-slot accumulator window (``two_back``,
``one_back``, ``current``) starting from ``(0, 1, 0)``.  Each step sets
``current = one_back + two_back`` and slides the window one position.

Two modes are supported:

``compat`` (default)
    Matches the classic console exercise this tool reproduces: ``n == 0``
    prints *position 1* with value ``0``, otherwise the window is advanced
    ``max(0, n - 2)`` times.  That yields ``0`` for ``n = 1`` and ``n = 2``
    and ``F(n - 1)`` for ``n >= 3``.  The off-by-one and the position
    mismatch at ``n == 0`` are known defects kept for output compatibility.

``standard``
    Reports the mathematical ``F(n)`` by advancing the window
    ``max(0, n - 1)`` times.

Values are bounded by an unsigned integer width (32 bits by default); a value
that would exceed it raises :class:`~fibtemp.errors.NumericOverflowError`
instead of wrapping.
"""

from __future__ import annotations

import logging

from fibtemp._internal.numbers import DEFAULT_BITS, unsigned_max
from fibtemp.errors import NumericOverflowError, ParseError
from fibtemp.models.results import SequenceResult

logger = logging.getLogger(__name__)

# Position printed for n == 0 in compat mode.
_ZERO_REPORTED_POSITION = 1


def evaluate_position(
    n: int,
    *,
    bits: int = DEFAULT_BITS,
    standard: bool = False,
) -> SequenceResult:
    """Return the sequence value at position *n*."""
    if n < 0:
        raise ParseError(f"{n} is not a non-negative integer", text=str(n))
    limit = unsigned_max(bits)
    if n > limit:
        raise NumericOverflowError(
            f"position {n} is too large for a {bits}-bit unsigned integer", bits=bits
        )

    mode = "standard" if standard else "compat"
    if n == 0:
        reported = 0 if standard else _ZERO_REPORTED_POSITION
        return SequenceResult(
            position=0, reported_position=reported, value=0, iterations=0, mode=mode
        )

    if standard:
        iterations = max(0, n - 1)
        # F(1) is the initial one_back slot; current only takes it over via the loop.
        current = 1 if n == 1 else 0
    else:
        iterations = max(0, n - 2)
        current = 0
    logger.debug("Evaluating position %d (%s mode): %d iterations", n, mode, iterations)

    two_back, one_back = 0, 1
    for step in range(iterations):
        current = one_back + two_back
        if current > limit:
            logger.debug(
                "Overflow after %d of %d iterations at position %d", step + 1, iterations, n
            )
            raise NumericOverflowError(
                f"the fibonacci number at position {n} does not fit"
                f" in a {bits}-bit unsigned integer",
                bits=bits,
            )
        two_back, one_back = one_back, current

    return SequenceResult(
        position=n,
        reported_position=n,
        value=current,
        iterations=iterations,
        mode=mode,
    )


def format_sequence_message(result: SequenceResult) -> str:
    return f"The fibonacci number at position {result.reported_position} is {result.value}"
