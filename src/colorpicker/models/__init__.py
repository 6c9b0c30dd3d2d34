"""Data models for the color picker."""

from .color import HSL, HSV, RGB, Color
from .config import AppConfig
from .history import DEFAULT_HISTORY, ColorHistory

__all__ = [
    "AppConfig",
    # Models
    "Color",
    "ColorHistory",
    "DEFAULT_HISTORY",
    "HSL",
    "HSV",
    "RGB",
]
