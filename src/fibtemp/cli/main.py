"""CLI entry-point: Click command group and dispatch."""

from __future__ import annotations

import dataclasses
import sys
from typing import Any

import click
from pydantic import ValidationError

from fibtemp import __version__
from fibtemp._internal.log import configure_logging
from fibtemp.errors import FibtempError, InputReadError, NumericOverflowError, ParseError
from fibtemp.models.config import AppSettings
from fibtemp.output.formatter import FORMATS, OutputFormatter

# ---------------------------------------------------------------------------
# Application context (stored in ctx.obj)
# ---------------------------------------------------------------------------


@dataclasses.dataclass
class AppContext:
    """Shared state passed to every Click command via ``@click.pass_obj``."""

    output_format: str | None
    quiet: bool
    verbose: bool
    command_name: str = "unknown"
    _settings: AppSettings | None = dataclasses.field(default=None, repr=False)
    _formatter: OutputFormatter | None = dataclasses.field(default=None, repr=False)

    @property
    def settings(self) -> AppSettings:
        if self._settings is None:
            self._settings = AppSettings()
        return self._settings

    @property
    def formatter(self) -> OutputFormatter:
        if self._formatter is None:
            force = "quiet" if self.quiet else (self.output_format or self.settings.output_format)
            self._formatter = OutputFormatter(force_format=force)
        return self._formatter


# ---------------------------------------------------------------------------
# Root Click group
# ---------------------------------------------------------------------------


@click.group()
@click.version_option(__version__, prog_name="fibtemp")
@click.option(
    "--format",
    "output_format",
    type=click.Choice(list(FORMATS)),
    default=None,
    help="Output format (default: rich)",
)
@click.option("--quiet", is_flag=True, default=False, help="Suppress normal output")
@click.option("--verbose", is_flag=True, default=False, help="Enable verbose logging")
@click.pass_context
def cli(
    ctx: click.Context,
    output_format: str | None,
    quiet: bool,
    verbose: bool,
) -> None:
    """Fibonacci position evaluator and Celsius/Fahrenheit converter."""
    configure_logging(verbose)
    # main() passes a dict so it can still reach AppContext after an error
    # has unwound the Click context stack.
    holder = ctx.ensure_object(dict)
    ctx.obj = holder["app"] = AppContext(
        output_format=output_format,
        quiet=quiet,
        verbose=verbose,
    )


# ---------------------------------------------------------------------------
# Register subcommands (lazy imports keep startup fast)
# ---------------------------------------------------------------------------


def _register_commands() -> None:
    """Import and attach all subcommands to the root CLI."""
    from fibtemp.cli.fib import fib_cmd
    from fibtemp.cli.temp import temp_cmd

    cli.add_command(fib_cmd)
    cli.add_command(temp_cmd)


_register_commands()


# ---------------------------------------------------------------------------
# Entry points
# ---------------------------------------------------------------------------


def main(argv: list[str] | None = None) -> None:
    """Parse arguments and dispatch to the appropriate command handler."""
    holder: dict[str, Any] = {}
    try:
        cli(args=argv, prog_name="fibtemp", obj=holder, standalone_mode=False)
    except click.exceptions.Exit as exc:
        raise SystemExit(exc.exit_code) from None
    except click.exceptions.Abort as exc:
        # Click turns Ctrl-C into Abort; keep the conventional interrupt status.
        interrupted = isinstance(exc.__cause__ or exc.__context__, KeyboardInterrupt)
        raise SystemExit(130 if interrupted else 1) from None
    except click.exceptions.ClickException as exc:
        exc.show()
        raise SystemExit(exc.exit_code) from None
    except SystemExit:
        raise
    except Exception as exc:
        app_ctx: AppContext | None = holder.get("app")
        formatter = _safe_formatter(app_ctx)
        cmd_name = app_ctx.command_name if app_ctx else "unknown"

        if _handle_known_error(exc, formatter, cmd_name):
            raise SystemExit(1) from exc

        formatter.output_error(
            code=type(exc).__name__,
            message=str(exc),
            command=cmd_name,
        )
        raise SystemExit(1) from exc


def fib_main(argv: list[str] | None = None) -> None:
    """Run ``fibtemp fib`` as the standalone ``fibonacci`` program."""
    main(["fib", *(sys.argv[1:] if argv is None else argv)])


def temp_main(argv: list[str] | None = None) -> None:
    """Run ``fibtemp temp`` as the standalone ``temp-converter`` program."""
    main(["temp", *(sys.argv[1:] if argv is None else argv)])


# ---------------------------------------------------------------------------
# Helpers for error handling
# ---------------------------------------------------------------------------


def _safe_formatter(app_ctx: AppContext | None) -> OutputFormatter:
    """Return the command's formatter, or a default one if settings are unusable."""
    if app_ctx is None:
        return OutputFormatter()
    try:
        return app_ctx.formatter
    except ValidationError:
        return OutputFormatter(force_format="quiet" if app_ctx.quiet else app_ctx.output_format)


def _handle_known_error(
    exc: Exception,
    formatter: OutputFormatter,
    cmd_name: str,
) -> bool:
    """Render fibtemp's own failures with a stable error code.

    Returns ``True`` if the error was handled and the caller should exit.
    """
    if not isinstance(exc, FibtempError):
        return False

    extra: dict[str, Any] = {}
    if isinstance(exc, InputReadError):
        code = "input_unavailable"
    elif isinstance(exc, ParseError):
        code = "parse_error"
        if exc.text is not None:
            extra["input"] = exc.text.strip()
    elif isinstance(exc, NumericOverflowError):
        code = "overflow"
        extra["bits"] = exc.bits
    else:
        code = "error"

    formatter.output_error(code=code, message=str(exc), command=cmd_name, **extra)
    return True
