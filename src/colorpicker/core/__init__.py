"""Core picker logic: state controller, spectrum canvas and eye-dropper."""

from .controller import ColorPickerController
from .eyedropper import Cancelled, EyeDropper, EyeDropperResult, Picked, ScreenEyeDropper, Unavailable
from .spectrum import SpectrumCanvas

__all__ = [
    "Cancelled",
    "ColorPickerController",
    "EyeDropper",
    "EyeDropperResult",
    "Picked",
    "ScreenEyeDropper",
    "SpectrumCanvas",
    "Unavailable",
]
