"""Tests for command-line color parsing."""

import pytest

from colorpicker.cli.parsing import parse_color_value
from colorpicker.exceptions import ColorParseError, ColorPickerError


class TestParseColorValue:
    """Test every accepted notation."""

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "text",
        [
            "#3b82f6",
            "3B82F6",
            "  #3B82F6 ",
            "rgb(59, 130, 246)",
            "RGB(59,130,246)",
            "59,130,246",
            "59 130 246",
        ],
    )
    def test_notations(self, text):
        assert parse_color_value(text).hex == "#3b82f6"

    @pytest.mark.unit
    def test_hsl_notation(self):
        assert parse_color_value("hsl(0, 100%, 50%)").hex == "#ff0000"
        assert parse_color_value("HSL(120,100,25)").hex == "#008000"

    @pytest.mark.unit
    def test_out_of_range_numbers_are_clamped(self):
        assert parse_color_value("rgb(300, -4, 0)").hex == "#ff0000"

    @pytest.mark.unit
    @pytest.mark.parametrize("text", ["blue", "#12", "rgb(1, 2)", "hsl(a, b, c)", ""])
    def test_unknown_notation_raises(self, text):
        with pytest.raises(ColorParseError) as exc_info:
            parse_color_value(text)

        assert isinstance(exc_info.value, ColorPickerError)
        assert exc_info.value.recovery_hint is not None
