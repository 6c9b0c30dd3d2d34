"""Color-space conversion core.

Pure functions converting between RGB, hex, HSL and HSV, plus ``normalize``,
the single path by which a ``Color`` snapshot is produced.

## Rounding Policy

Hue, saturation, lightness and value are rounded half-up to whole degrees and
percentages, and a hue that rounds to 360 wraps to 0. Because of that rounding
``hsl_to_rgb(*rgb_to_hsl(r, g, b).to_tuple())`` is only guaranteed to land
within +-5 of the original channels. Dark, saturated colors drift the most:
``(0, 0, 23)`` becomes ``hsl(240, 100%, 5%)`` and comes back as ``(0, 0, 26)``.
Hex is lossless.

## Clamping

Channel and percentage inputs outside their ranges are clamped, never
rejected. ``hex_to_rgb`` is lenient: anything that is not an
optional ``#`` followed by exactly six hex digits yields black.

Example:
    ```python
    from colorpicker.conversions import normalize

    color = normalize(59, 130, 246)
    color.hex            # '#3b82f6'
    color.hsl.to_tuple() # (217, 91, 60)
    color.hsv.to_tuple() # (217, 76, 96)
    ```
"""

import math
import re
from collections.abc import Sequence

from colorpicker.models.color import HSL, HSV, RGB, Color

HEX_PATTERN = re.compile(r"#?([a-f\d]{2})([a-f\d]{2})([a-f\d]{2})", re.IGNORECASE)
STRICT_HEX_PATTERN = re.compile(r"#[0-9a-f]{6}", re.IGNORECASE)

HISTORY_LIMIT = 10


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves going up (0.5 -> 1, 2.5 -> 3)."""
    return math.floor(value + 0.5)


def clamp_channel(value: float) -> int:
    """Clamp an RGB channel to an integer in [0, 255]."""
    return max(0, min(255, round_half_up(value)))


def clamp_percent(value: float) -> int:
    """Clamp a saturation/lightness/value percentage to an integer in [0, 100]."""
    return max(0, min(100, round_half_up(value)))


def wrap_hue(value: float) -> int:
    """Wrap a hue in degrees into [0, 360)."""
    return round_half_up(value) % 360


def is_valid_hex(value: object) -> bool:
    """Strict check for a complete ``#rrggbb`` string (case-insensitive)."""
    return isinstance(value, str) and STRICT_HEX_PATTERN.fullmatch(value) is not None


def rgb_to_hex(r: float, g: float, b: float) -> str:
    """Convert RGB channels to a lowercase ``#rrggbb`` string."""
    return "#" + "".join(f"{clamp_channel(c):02x}" for c in (r, g, b))


def hex_to_rgb(value: str) -> RGB:
    """Parse ``#rrggbb`` or ``rrggbb``; anything else falls back to black."""
    if not isinstance(value, str):
        return RGB.black()

    match = HEX_PATTERN.fullmatch(value)
    if match is None:
        return RGB.black()

    r, g, b = (int(part, 16) for part in match.groups())
    return RGB(r=r, g=g, b=b)


def _hue_fraction(r: float, g: float, b: float, max_c: float, d: float) -> float:
    """Hue as a fraction of a full turn, from channels already scaled to [0, 1].

    Ties for the max channel resolve red, then green, then blue.
    """
    if max_c == r:
        h = (g - b) / d + (6 if g < b else 0)
    elif max_c == g:
        h = (b - r) / d + 2
    else:
        h = (r - g) / d + 4
    return h / 6


def rgb_to_hsl(r: float, g: float, b: float) -> HSL:
    """Convert RGB channels to HSL (degrees and percentages)."""
    r, g, b = (clamp_channel(c) / 255 for c in (r, g, b))
    max_c = max(r, g, b)
    min_c = min(r, g, b)
    lightness = (max_c + min_c) / 2

    if max_c == min_c:
        hue = saturation = 0.0
    else:
        d = max_c - min_c
        if lightness > 0.5:
            saturation = d / (2 - max_c - min_c)
        else:
            saturation = d / (max_c + min_c)
        hue = _hue_fraction(r, g, b, max_c, d)

    return HSL(
        h=wrap_hue(hue * 360),
        s=clamp_percent(saturation * 100),
        l=clamp_percent(lightness * 100),
    )


def rgb_to_hsv(r: float, g: float, b: float) -> HSV:
    """Convert RGB channels to HSV (degrees and percentages)."""
    r, g, b = (clamp_channel(c) / 255 for c in (r, g, b))
    max_c = max(r, g, b)
    min_c = min(r, g, b)
    d = max_c - min_c

    saturation = 0.0 if max_c == 0 else d / max_c
    hue = 0.0 if max_c == min_c else _hue_fraction(r, g, b, max_c, d)

    return HSV(
        h=wrap_hue(hue * 360),
        s=clamp_percent(saturation * 100),
        v=clamp_percent(max_c * 100),
    )


def _hue_to_rgb(p: float, q: float, t: float) -> float:
    if t < 0:
        t += 1
    if t > 1:
        t -= 1
    if t < 1 / 6:
        return p + (q - p) * 6 * t
    if t < 1 / 2:
        return q
    if t < 2 / 3:
        return p + (q - p) * (2 / 3 - t) * 6
    return p


def hsl_to_rgb(h: float, s: float, l: float) -> RGB:  # noqa: E741
    """Convert HSL (degrees and percentages) back to RGB.

    Hue wraps modulo 360; saturation and lightness are clamped to [0, 100].
    """
    hue = (h % 360) / 360
    saturation = max(0.0, min(100.0, s)) / 100
    lightness = max(0.0, min(100.0, l)) / 100

    if saturation == 0:
        r = g = b = lightness
    else:
        if lightness < 0.5:
            q = lightness * (1 + saturation)
        else:
            q = lightness + saturation - lightness * saturation
        p = 2 * lightness - q
        r = _hue_to_rgb(p, q, hue + 1 / 3)
        g = _hue_to_rgb(p, q, hue)
        b = _hue_to_rgb(p, q, hue - 1 / 3)

    return RGB(r=clamp_channel(r * 255), g=clamp_channel(g * 255), b=clamp_channel(b * 255))


def normalize(r: float, g: float, b: float) -> Color:
    """Build a consistent ``Color`` snapshot from a candidate RGB triple.

    This is the only place snapshots are created. Every color-changing input
    (spectrum click, slider, text entry, history, eye-dropper, random) reduces
    to an RGB triple and comes through here.

    Args:
        r: Red channel; clamped to an integer in [0, 255]
        g: Green channel; clamped likewise
        b: Blue channel; clamped likewise

    Returns:
        Color with hex, rgb, hsl and hsv all derived from the clamped triple
    """
    r, g, b = clamp_channel(r), clamp_channel(g), clamp_channel(b)
    return Color(
        hex=rgb_to_hex(r, g, b),
        rgb=RGB(r=r, g=g, b=b),
        hsl=rgb_to_hsl(r, g, b),
        hsv=rgb_to_hsv(r, g, b),
    )


def add_to_history(history: Sequence[str], color: str, limit: int = HISTORY_LIMIT) -> list[str]:
    """Return a new history with ``color`` moved (or added) to the front.

    Matching is exact and case-sensitive. The result holds at most ``limit``
    entries; the oldest ones fall off the end.
    """
    return [color, *(entry for entry in history if entry != color)][:limit]
