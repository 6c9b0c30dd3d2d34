"""Large swatch showing the current color."""

from textual.widgets import Static

from colorpicker.models import Color

from .messages import CopyRequested


class ColorPreview(Static):
    """
    Swatch filled with the current color (presentation only).

    Clicking it asks for the hex value to be copied.
    """

    DEFAULT_CSS = """
    ColorPreview {
        height: 7;
        width: 100%;
        border: round $primary;
        content-align: center middle;
        text-style: bold;
    }
    """

    def __init__(self, **kwargs) -> None:
        super().__init__("", **kwargs)
        self._hex = ""

    def show_color(self, color: Color) -> None:
        """Fill the swatch and label it with a readable text color."""
        self._hex = color.hex
        self.styles.background = color.hex
        self.styles.color = "black" if color.hsl.l > 55 else "white"
        self.update(f"{color.hex.upper()}\n(click to copy)")

    def on_click(self) -> None:
        """Request a copy of the hex value."""
        if self._hex:
            self.post_message(CopyRequested("HEX", self._hex))
