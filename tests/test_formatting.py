"""Tests for clipboard and display formatting."""

import pytest

from colorpicker.conversions import normalize
from colorpicker.ui_shared import FORMAT_LABELS, format_all, format_display


@pytest.fixture
def blue():
    return normalize(59, 130, 246)


class TestFormatting:
    """Test formatted strings for the default sample color."""

    @pytest.mark.unit
    def test_copy_strings(self, blue):
        assert format_all(blue) == {
            "HEX": "#3b82f6",
            "RGB": "rgb(59, 130, 246)",
            "HSL": "hsl(217, 91%, 60%)",
            "HSV": "hsv(217, 76%, 96%)",
        }

    @pytest.mark.unit
    def test_display_strings(self, blue):
        display = format_display(blue)
        assert display["HEX"] == "#3B82F6"
        assert display["RGB"] == "59, 130, 246"
        assert display["HSL"] == "217°, 91%, 60%"
        assert display["HSV"] == "217°, 76%, 96%"

    @pytest.mark.unit
    def test_labels_cover_every_format(self, blue):
        assert tuple(format_all(blue)) == FORMAT_LABELS
        assert tuple(format_display(blue)) == FORMAT_LABELS
