from __future__ import annotations

from typing import Any

from pydantic import BaseModel
from rich.console import Console

from fibtemp.output.json_output import format_json_error, format_json_response
from fibtemp.output.rich_output import RichOutput

FORMATS = ("rich", "json", "quiet")


class OutputFormatter:
    """Unified output formatter for the console programs.

    * ``"rich"`` (the default) prints plain console lines to stdout, which is
      the programs' normal contract whether or not stdout is a TTY.
    * ``"json"`` prints JSON envelopes to stdout; prompts and diagnostics go
      to stderr so stdout stays machine-readable.
    * ``"quiet"`` routes everything to stderr so that stdout stays empty.
    """

    def __init__(self, *, force_format: str | None = None) -> None:
        self._format = force_format or "rich"
        if self._format not in FORMATS:
            raise ValueError(f"Unknown output format: {self._format!r}")

        # Build the Rich consoles — only "rich" writes to stdout.
        err_console = Console(stderr=True, emoji=False)
        if self._format == "rich":
            self._console = Console(emoji=False)
        else:
            self._console = err_console

        self._rich = RichOutput(self._console, err_console)

    # ------------------------------------------------------------------
    # Public helpers
    # ------------------------------------------------------------------

    @property
    def format(self) -> str:  # noqa: A003
        """Return the active output format (``"rich"``, ``"json"``, or ``"quiet"``)."""
        return self._format

    @property
    def rich(self) -> RichOutput:
        """Return the underlying :class:`RichOutput` instance."""
        return self._rich

    def prompt(self, message: str) -> None:
        """Show an input prompt (stdout in rich mode, stderr otherwise)."""
        self._rich.prompt(message)

    def output(
        self,
        data: BaseModel | dict[str, Any],
        *,
        command: str,
        message: str | None = None,
    ) -> None:
        """Emit *data* using the current format.

        * **json** — prints :func:`format_json_response` to stdout, including
          *message* when given.
        * **rich** / **quiet** — prints *message* (or ``str(data)``) via
          :meth:`RichOutput.info`.
        """
        if self._format == "json":
            print(format_json_response(data=data, command=command, message=message))  # noqa: T201
        else:
            self._rich.info(message if message is not None else str(data))

    def output_error(self, *, code: str, message: str, command: str, **extra: Any) -> None:
        """Emit an error using the current format.

        * **json** — prints :func:`format_json_error` to stdout.
        * **rich** / **quiet** — prints via :meth:`RichOutput.error` to stderr.
        """
        if self._format == "json":
            print(  # noqa: T201
                format_json_error(code=code, message=message, command=command, **extra)
            )
        else:
            self._rich.error(message)
