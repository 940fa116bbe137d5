"""Tests for the ``temp`` command."""

from __future__ import annotations

import json

from click.testing import CliRunner

from fibtemp.cli.main import cli
from fibtemp.cli.temp import TEMPERATURE_PROMPT, UNIT_PROMPT
from fibtemp.errors import InputReadError, ParseError


class TestInteractive:
    def test_prompts_in_order(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["temp"], input="F\n0\n")
        assert result.exit_code == 0
        assert result.output == (
            "Convert to what unit? (Enter C or F)\n"
            "Enter the temperature you want to convert\n"
            "0 C is 32 in F\n"
        )
        assert UNIT_PROMPT in result.output
        assert TEMPERATURE_PROMPT in result.output

    def test_fahrenheit_to_celsius(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["temp"], input="C\n32\n")
        assert result.output.endswith("32 F is 0 in C\n")

    def test_invalid_selector_exits_normally(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["temp"], input="X\n100\n")
        assert result.exit_code == 0
        assert result.output.endswith("That is not a valid input\n")

    def test_temperature_is_parsed_before_selector_check(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["temp"], input="X\nabc\n")
        assert result.exit_code == 1
        assert isinstance(result.exception, ParseError)

    def test_missing_temperature_is_fatal(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["temp"], input="F\n")
        assert isinstance(result.exception, InputReadError)

    def test_retry_prompts_again(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["temp", "--retry"], input="F\nwarm\n20\n")
        assert result.exit_code == 0
        assert result.output.count(TEMPERATURE_PROMPT) == 2
        assert result.output.endswith("20 C is 68 in F\n")


class TestArguments:
    def test_fractional_result(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["temp", "C", "100"])
        assert result.output == "100 F is 37.77777777777778 in C\n"

    def test_precision_option(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["temp", "C", "100", "--precision", "1"])
        assert result.output == "100 F is 37.8 in C\n"

    def test_precision_from_settings(self, runner: CliRunner, cli_env: dict[str, str]) -> None:
        result = runner.invoke(cli, ["temp", "C", "100"])
        assert result.output == "100 F is 38 in C\n"

    def test_negative_temperature_after_separator(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["temp", "F", "--", "-40"])
        assert result.output == "-40 C is -40 in F\n"

    def test_negative_temperature_without_separator(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["temp", "F", "-40"])
        assert result.exit_code == 0
        assert result.output == "-40 C is -40 in F\n"

    def test_negative_temperature_with_options(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["temp", "C", "-40.5", "--precision", "1"])
        assert result.exit_code == 0
        assert result.output == "-40.5 F is -40.3 in C\n"

    def test_only_unit_given_prompts_for_temperature(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["temp", "F"], input="100\n")
        assert result.output == "Enter the temperature you want to convert\n100 C is 212 in F\n"

    def test_unparseable_argument(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["temp", "F", "1_000"])
        assert isinstance(result.exception, ParseError)


class TestJsonFormat:
    def test_conversion_envelope(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["temp", "F", "100", "--format", "json"])
        parsed = json.loads(result.stdout)
        assert parsed["command"] == "temp"
        assert parsed["data"]["result"] == 212.0
        assert parsed["data"]["source_unit"] == "C"
        assert parsed["data"]["target_unit"] == "F"
        assert parsed["message"] == "100 C is 212 in F"

    def test_invalid_selector_envelope(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["--format", "json", "temp", "X", "100"])
        parsed = json.loads(result.stdout)
        assert parsed["ok"] is True
        assert parsed["data"]["valid"] is False
        assert parsed["message"] == "That is not a valid input"
