"""CLI command for the Celsius/Fahrenheit converter."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from fibtemp._internal.numbers import parse_temperature
from fibtemp._internal.prompt import prompt_value, read_line
from fibtemp.cli._options import global_options
from fibtemp.converter import convert, format_conversion_message

if TYPE_CHECKING:
    from fibtemp.cli.main import AppContext

UNIT_PROMPT = "Convert to what unit? (Enter C or F)"
TEMPERATURE_PROMPT = "Enter the temperature you want to convert"


# Negative temperatures look like short options; pass them through as arguments.
@click.command("temp", context_settings={"ignore_unknown_options": True})
@click.argument("unit", required=False, default=None)
@click.argument("temperature", required=False, default=None)
@click.option(
    "--precision",
    type=click.IntRange(min=0),
    default=None,
    help="Round the converted value to this many decimal places",
)
@click.option("--retry", is_flag=True, default=False, help="Prompt again on unparseable input")
@global_options
def temp_cmd(
    app_ctx: AppContext,
    unit: str | None,
    temperature: str | None,
    precision: int | None,
    retry: bool,
) -> None:
    """Convert TEMPERATURE to UNIT (C or F).

    F treats the temperature as Celsius and prints Fahrenheit; C treats it
    as Fahrenheit and prints Celsius.  Missing arguments are read from
    standard input.
    """
    formatter = app_ctx.formatter
    if precision is None:
        precision = app_ctx.settings.precision

    # Both inputs are read before the unit is checked.
    selector = unit if unit is not None else read_line(formatter, UNIT_PROMPT)
    if temperature is not None:
        value = parse_temperature(temperature)
    else:
        value = prompt_value(formatter, TEMPERATURE_PROMPT, parse_temperature, retry=retry)

    result = convert(selector, value)

    if formatter.format == "json":
        formatter.output(
            result,
            command="temp",
            message=format_conversion_message(result, precision),
        )
    else:
        formatter.rich.conversion_result(result, precision)
