"""Tests for the Celsius/Fahrenheit converter."""

from __future__ import annotations

import pytest

from fibtemp._internal.units import celsius_to_fahrenheit, fahrenheit_to_celsius
from fibtemp.converter import INVALID_INPUT_MESSAGE, convert, format_conversion_message


class TestFormulas:
    def test_freezing_point(self) -> None:
        assert celsius_to_fahrenheit(0.0) == 32.0
        assert fahrenheit_to_celsius(32.0) == 0.0

    def test_boiling_point(self) -> None:
        assert celsius_to_fahrenheit(100.0) == 212.0
        assert fahrenheit_to_celsius(212.0) == 100.0

    def test_scales_meet_at_minus_forty(self) -> None:
        assert celsius_to_fahrenheit(-40.0) == -40.0
        assert fahrenheit_to_celsius(-40.0) == -40.0

    @pytest.mark.parametrize("c", [-273.15, -40.0, 0.0, 36.6, 100.0, 1234.5678, 1e6, -1e6])
    def test_round_trip(self, c: float) -> None:
        assert fahrenheit_to_celsius(celsius_to_fahrenheit(c)) == pytest.approx(c, abs=1e-9)


class TestConvert:
    def test_f_selector_treats_input_as_celsius(self) -> None:
        result = convert("F", 0.0)
        assert result.valid is True
        assert result.source_unit == "C"
        assert result.target_unit == "F"
        assert result.result == 32.0

    def test_c_selector_treats_input_as_fahrenheit(self) -> None:
        result = convert("C", 32.0)
        assert result.source_unit == "F"
        assert result.target_unit == "C"
        assert result.result == 0.0

    def test_selector_is_trimmed(self) -> None:
        assert convert("  F\n", 100.0).result == 212.0

    @pytest.mark.parametrize("selector", ["X", "f", "c", "", "FF", "Celsius"])
    def test_invalid_selector_skips_computation(self, selector: str) -> None:
        result = convert(selector, 100.0)
        assert result.valid is False
        assert result.result is None
        assert result.source_unit is None

    def test_no_range_validation(self) -> None:
        assert convert("F", -1e300).result == pytest.approx(-1.8e300)
        assert convert("C", float("inf")).result == float("inf")


class TestFormatConversionMessage:
    def test_celsius_to_fahrenheit(self) -> None:
        assert format_conversion_message(convert("F", 0.0)) == "0 C is 32 in F"

    def test_fahrenheit_to_celsius(self) -> None:
        assert format_conversion_message(convert("C", 32.0)) == "32 F is 0 in C"

    def test_invalid_selector(self) -> None:
        assert format_conversion_message(convert("X", 100.0)) == INVALID_INPUT_MESSAGE
        assert INVALID_INPUT_MESSAGE == "That is not a valid input"

    def test_fractional_result_keeps_full_digits(self) -> None:
        message = format_conversion_message(convert("C", 100.0))
        assert message == "100 F is 37.77777777777778 in C"

    def test_precision_rounds_only_the_result(self) -> None:
        message = format_conversion_message(convert("C", 100.5), precision=1)
        assert message == "100.5 F is 38.1 in C"

    def test_zero_precision(self) -> None:
        assert format_conversion_message(convert("C", 100.0), precision=0) == "100 F is 38 in C"
