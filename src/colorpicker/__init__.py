"""colorpicker: keep hex, RGB, HSL and HSV in sync while picking colors."""

__version__ = "0.1.0"

from .conversions import add_to_history, hex_to_rgb, hsl_to_rgb, normalize, rgb_to_hex, rgb_to_hsl, rgb_to_hsv
from .core import ColorPickerController
from .models import Color

__all__ = [
    "Color",
    "ColorPickerController",
    "add_to_history",
    "hex_to_rgb",
    "hsl_to_rgb",
    "normalize",
    "rgb_to_hex",
    "rgb_to_hsl",
    "rgb_to_hsv",
]
