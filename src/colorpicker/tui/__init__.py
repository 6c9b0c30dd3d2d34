"""Textual user interface for the color picker."""

from .app import ColorPickerApp

__all__ = ["ColorPickerApp"]
