"""CLI command for the Fibonacci position evaluator."""

from __future__ import annotations

import functools
from typing import TYPE_CHECKING

import click

from fibtemp._internal.numbers import parse_position
from fibtemp._internal.prompt import prompt_value
from fibtemp.cli._options import global_options
from fibtemp.sequence import evaluate_position, format_sequence_message

if TYPE_CHECKING:
    from fibtemp.cli.main import AppContext

PROMPT = "Enter n for the fibonacci sequence"


@click.command("fib")
@click.argument("n", required=False, default=None)
@click.option(
    "--standard",
    is_flag=True,
    default=False,
    help="Report the mathematical F(n) instead of the classic exercise output",
)
@click.option(
    "--bits",
    type=click.IntRange(min=2),
    default=None,
    help="Unsigned integer width for positions and values (default: 32)",
)
@click.option("--retry", is_flag=True, default=False, help="Prompt again on unparseable input")
@global_options
def fib_cmd(
    app_ctx: AppContext,
    n: str | None,
    standard: bool,
    bits: int | None,
    retry: bool,
) -> None:
    """Print the fibonacci number at position N.

    N is read from standard input when omitted.  Without --standard the
    classic exercise output is kept: position 0 prints as position 1, and
    positions 1 and 2 report 0.
    """
    formatter = app_ctx.formatter
    width = bits if bits is not None else app_ctx.settings.value_bits
    parse = functools.partial(parse_position, bits=width)

    position = parse(n) if n is not None else prompt_value(formatter, PROMPT, parse, retry=retry)
    result = evaluate_position(position, bits=width, standard=standard)

    if formatter.format == "json":
        formatter.output(result, command="fib", message=format_sequence_message(result))
    else:
        formatter.rich.sequence_result(result)
