"""Console input acquisition."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Callable, TypeVar

from fibtemp.errors import InputReadError, ParseError

if TYPE_CHECKING:
    from fibtemp.output.formatter import OutputFormatter

logger = logging.getLogger(__name__)

T = TypeVar("T")


def read_line(formatter: OutputFormatter, prompt: str) -> str:
    """Show *prompt* and block until one line of input arrives.

    Raises :class:`InputReadError` when standard input is closed.
    """
    formatter.prompt(prompt)
    try:
        return input()
    except EOFError:
        raise InputReadError("Failed to read line: end of input") from None
    except OSError as exc:
        raise InputReadError(f"Failed to read line: {exc}") from exc


def prompt_value(
    formatter: OutputFormatter,
    prompt: str,
    parse: Callable[[str], T],
    *,
    retry: bool = False,
) -> T:
    """Read a line and convert it with *parse*.

    Single-shot by default: a :class:`ParseError` propagates to the caller.
    With *retry*, parse failures are reported and the prompt is shown again
    until a value parses or input ends.
    """
    while True:
        text = read_line(formatter, prompt)
        try:
            return parse(text)
        except ParseError as exc:
            if not retry:
                raise
            logger.warning("Rejected input %r: %s", text, exc)
            formatter.rich.error(str(exc))
