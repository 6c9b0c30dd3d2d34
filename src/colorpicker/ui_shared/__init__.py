"""Presentation helpers shared by the TUI and the CLI."""

from .formatting import FORMAT_LABELS, format_all, format_display, format_hex, format_hsl, format_hsv, format_rgb

__all__ = [
    "FORMAT_LABELS",
    "format_all",
    "format_display",
    "format_hex",
    "format_hsl",
    "format_hsv",
    "format_rgb",
]
