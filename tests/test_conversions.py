"""Unit tests for the color conversion core."""

import pytest

from colorpicker.conversions import (
    add_to_history,
    hex_to_rgb,
    hsl_to_rgb,
    is_valid_hex,
    normalize,
    rgb_to_hex,
    rgb_to_hsl,
    rgb_to_hsv,
    round_half_up,
)

# Multiples of 51 give exact hues and lightness, leaving only saturation rounding
GRID = range(0, 256, 51)


class TestHex:
    """Test RGB <-> hex conversion."""

    @pytest.mark.unit
    def test_rgb_to_hex_is_lowercase_and_padded(self):
        assert rgb_to_hex(59, 130, 246) == "#3b82f6"
        assert rgb_to_hex(0, 0, 0) == "#000000"
        assert rgb_to_hex(1, 2, 3) == "#010203"

    @pytest.mark.unit
    def test_rgb_to_hex_clamps_and_rounds(self):
        assert rgb_to_hex(300, -5, 15.6) == "#ff0010"

    @pytest.mark.unit
    def test_hex_to_rgb_accepts_optional_hash_and_any_case(self):
        assert hex_to_rgb("#3b82f6").to_tuple() == (59, 130, 246)
        assert hex_to_rgb("3B82F6").to_tuple() == (59, 130, 246)

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "value", ["zzz", "#12345", "#1234567", "", "#gggggg", "#3b82f6\n", "3b82f6\n", None, 123]
    )
    def test_hex_to_rgb_invalid_falls_back_to_black(self, value):
        assert hex_to_rgb(value).to_tuple() == (0, 0, 0)

    @pytest.mark.unit
    def test_hex_round_trip_is_exact(self):
        for r in range(0, 256, 17):
            for g in range(0, 256, 15):
                for b in (0, 1, 127, 128, 254, 255):
                    assert hex_to_rgb(rgb_to_hex(r, g, b)).to_tuple() == (r, g, b)

    @pytest.mark.unit
    def test_is_valid_hex_is_strict(self):
        assert is_valid_hex("#3b82f6")
        assert is_valid_hex("#FF0000")
        assert not is_valid_hex("3b82f6")
        assert not is_valid_hex("#12")
        assert not is_valid_hex("#3b82f6\n")
        assert not is_valid_hex(None)


class TestHSL:
    """Test RGB <-> HSL conversion."""

    @pytest.mark.unit
    def test_known_values(self):
        assert rgb_to_hsl(59, 130, 246).to_tuple() == (217, 91, 60)
        assert rgb_to_hsl(255, 0, 0).to_tuple() == (0, 100, 50)
        assert rgb_to_hsl(0, 255, 0).to_tuple() == (120, 100, 50)
        assert rgb_to_hsl(0, 0, 255).to_tuple() == (240, 100, 50)

    @pytest.mark.unit
    def test_grays_have_zero_hue_and_saturation(self):
        assert rgb_to_hsl(128, 128, 128).to_tuple()[:2] == (0, 0)

    @pytest.mark.unit
    def test_hue_rounding_to_360_wraps(self):
        # Pure hue just below 360 degrees
        assert rgb_to_hsl(255, 0, 1).h == 0

    @pytest.mark.unit
    def test_hsl_to_rgb_known_values(self):
        assert hsl_to_rgb(0, 100, 50).to_tuple() == (255, 0, 0)
        assert hsl_to_rgb(120, 100, 50).to_tuple() == (0, 255, 0)
        assert hsl_to_rgb(0, 0, 100).to_tuple() == (255, 255, 255)
        assert hsl_to_rgb(200, 0, 0).to_tuple() == (0, 0, 0)

    @pytest.mark.unit
    def test_hsl_to_rgb_wraps_hue_and_clamps_percentages(self):
        assert hsl_to_rgb(360, 100, 50).to_tuple() == (255, 0, 0)
        assert hsl_to_rgb(-240, 100, 50).to_tuple() == hsl_to_rgb(120, 100, 50).to_tuple()
        assert hsl_to_rgb(0, 150, 50).to_tuple() == (255, 0, 0)
        assert hsl_to_rgb(0, 100, -10).to_tuple() == (0, 0, 0)

    @pytest.mark.unit
    def test_round_trip_on_grid_within_two(self):
        for r in GRID:
            for g in GRID:
                for b in GRID:
                    back = hsl_to_rgb(*rgb_to_hsl(r, g, b).to_tuple()).to_tuple()
                    for original, result in zip((r, g, b), back):
                        assert abs(original - result) <= 2, (r, g, b, back)

    @pytest.mark.unit
    def test_dark_saturated_round_trip_drifts_past_two(self):
        assert rgb_to_hsl(0, 0, 23).to_tuple() == (240, 100, 5)
        assert hsl_to_rgb(240, 100, 5).to_tuple() == (0, 0, 26)

    @pytest.mark.unit
    def test_lossy_round_trip_within_five(self):
        samples = list(range(0, 256, 5)) + [1, 2, 3, 13, 23, 33, 127, 128, 253, 254]
        worst = 0
        for r in samples:
            for g in samples:
                for b in samples:
                    back = hsl_to_rgb(*rgb_to_hsl(r, g, b).to_tuple()).to_tuple()
                    for original, result in zip((r, g, b), back):
                        worst = max(worst, abs(original - result))
                        assert abs(original - result) <= 5, (r, g, b, back)
        assert worst > 2


class TestHSV:
    """Test RGB -> HSV conversion."""

    @pytest.mark.unit
    def test_known_values(self):
        assert rgb_to_hsv(59, 130, 246).to_tuple() == (217, 76, 96)
        assert rgb_to_hsv(255, 255, 0).to_tuple() == (60, 100, 100)
        assert rgb_to_hsv(0, 0, 0).to_tuple() == (0, 0, 0)

    @pytest.mark.unit
    def test_hsv_hue_matches_hsl_hue(self):
        for r in GRID:
            for g in GRID:
                for b in GRID:
                    assert rgb_to_hsv(r, g, b).h == rgb_to_hsl(r, g, b).h


class TestNormalize:
    """Test building color snapshots."""

    @pytest.mark.unit
    def test_black(self):
        color = normalize(0, 0, 0)
        assert color.hex == "#000000"
        assert color.hsl.to_tuple() == (0, 0, 0)
        assert color.hsv.to_tuple() == (0, 0, 0)

    @pytest.mark.unit
    def test_white(self):
        color = normalize(255, 255, 255)
        assert color.hex == "#ffffff"
        assert color.hsl.to_tuple() == (0, 0, 100)
        assert color.hsv.to_tuple() == (0, 0, 100)

    @pytest.mark.unit
    def test_default_sample(self):
        color = normalize(59, 130, 246)
        assert color.hex == "#3b82f6"
        assert color.rgb.to_tuple() == (59, 130, 246)
        assert color.hsl.to_tuple() == (217, 91, 60)
        assert color.hsv.to_tuple() == (217, 76, 96)

    @pytest.mark.unit
    def test_out_of_range_input_is_clamped(self):
        color = normalize(-20, 127.5, 999)
        assert color.rgb.to_tuple() == (0, 128, 255)
        assert color.hex == "#0080ff"

    @pytest.mark.unit
    def test_components_always_in_range(self):
        for r in range(0, 256, 15):
            for g in range(0, 256, 15):
                for b in range(0, 256, 15):
                    color = normalize(r, g, b)
                    assert 0 <= color.hsl.h < 360
                    assert 0 <= color.hsv.h < 360
                    assert 0 <= color.hsl.s <= 100 and 0 <= color.hsl.l <= 100
                    assert 0 <= color.hsv.s <= 100 and 0 <= color.hsv.v <= 100

    @pytest.mark.unit
    def test_round_half_up(self):
        assert round_half_up(0.5) == 1
        assert round_half_up(2.5) == 3
        assert round_half_up(2.49) == 2


class TestAddToHistory:
    """Test move-to-front history updates."""

    @pytest.mark.unit
    def test_existing_color_moves_to_front(self):
        assert add_to_history(["#a", "#b", "#c"], "#b") == ["#b", "#a", "#c"]

    @pytest.mark.unit
    def test_new_color_is_prepended(self):
        assert add_to_history(["#a", "#b"], "#c") == ["#c", "#a", "#b"]

    @pytest.mark.unit
    def test_full_history_drops_oldest(self):
        history = [f"#{i:06x}" for i in range(10)]
        result = add_to_history(history, "#ffffff")
        assert len(result) == 10
        assert result[0] == "#ffffff"
        assert "#000009" not in result

    @pytest.mark.unit
    def test_matching_is_case_sensitive(self):
        assert add_to_history(["#ABCDEF"], "#abcdef") == ["#abcdef", "#ABCDEF"]

    @pytest.mark.unit
    def test_input_is_not_mutated(self):
        history = ["#a", "#b"]
        add_to_history(history, "#b")
        assert history == ["#a", "#b"]

    @pytest.mark.unit
    def test_custom_limit(self):
        assert add_to_history(["#a", "#b", "#c"], "#d", limit=2) == ["#d", "#a"]
