"""Clipboard/display formatting for color snapshots.

Formatting is presentation: the conversion core only produces numbers, and
every UI (TUI, CLI) renders them through these helpers so copied strings look
the same everywhere.
"""

from colorpicker.models import Color

FORMAT_LABELS = ("HEX", "RGB", "HSL", "HSV")


def format_hex(color: Color) -> str:
    """'#3b82f6'"""
    return color.hex


def format_rgb(color: Color) -> str:
    """'rgb(59, 130, 246)'"""
    r, g, b = color.rgb.to_tuple()
    return f"rgb({r}, {g}, {b})"


def format_hsl(color: Color) -> str:
    """'hsl(217, 91%, 60%)'"""
    h, s, l = color.hsl.to_tuple()  # noqa: E741
    return f"hsl({h}, {s}%, {l}%)"


def format_hsv(color: Color) -> str:
    """'hsv(217, 76%, 96%)'"""
    h, s, v = color.hsv.to_tuple()
    return f"hsv({h}, {s}%, {v}%)"


def format_all(color: Color) -> dict[str, str]:
    """All four copyable strings keyed by label (HEX, RGB, HSL, HSV)."""
    return {
        "HEX": format_hex(color),
        "RGB": format_rgb(color),
        "HSL": format_hsl(color),
        "HSV": format_hsv(color),
    }


def format_display(color: Color) -> dict[str, str]:
    """Compact labels for on-screen badges (e.g. '217°, 91%, 60%')."""
    r, g, b = color.rgb.to_tuple()
    h, s, l = color.hsl.to_tuple()  # noqa: E741
    vh, vs, vv = color.hsv.to_tuple()
    return {
        "HEX": color.hex.upper(),
        "RGB": f"{r}, {g}, {b}",
        "HSL": f"{h}°, {s}%, {l}%",
        "HSV": f"{vh}°, {vs}%, {vv}%",
    }
