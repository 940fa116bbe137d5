from __future__ import annotations

from typing import TYPE_CHECKING

from rich.markup import escape

from fibtemp.converter import format_conversion_message
from fibtemp.sequence import format_sequence_message

if TYPE_CHECKING:
    from rich.console import Console

    from fibtemp.models.results import ConversionResult, SequenceResult


class RichOutput:
    """Rich-based terminal output helpers for *fibtemp*.

    Normal output goes to *console*; diagnostics go to *err_console*
    (defaulting to *console* when not given).
    """

    def __init__(self, console: Console, err_console: Console | None = None) -> None:
        self._con = console
        self._err = err_console or console

    # ------------------------------------------------------------------
    # Results
    # ------------------------------------------------------------------

    def sequence_result(self, result: SequenceResult) -> None:
        """Print the evaluator's one-line answer."""
        self.info(format_sequence_message(result))

    def conversion_result(self, result: ConversionResult, precision: int | None = None) -> None:
        """Print the converter's one-line answer (or the invalid-input line)."""
        self.info(format_conversion_message(result, precision))

    # ------------------------------------------------------------------
    # Plain lines
    # ------------------------------------------------------------------

    def prompt(self, message: str) -> None:
        """Print a prompt line ahead of reading input."""
        self._con.print(message, markup=False, emoji=False, highlight=False, soft_wrap=True)

    def error(self, message: str) -> None:
        """Print a bold red error line."""
        self._err.print(
            f"[bold red]Error:[/bold red] {escape(message)}",
            emoji=False,
            highlight=False,
            soft_wrap=True,
        )

    def info(self, message: str) -> None:
        """Print an informational message (plain)."""
        self._con.print(message, markup=False, emoji=False, highlight=False, soft_wrap=True)
