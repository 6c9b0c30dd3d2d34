"""Spectrum view: the clickable hue x lightness gradient."""

import numpy as np
from textual import events
from textual.message import Message
from textual.widget import Widget

from colorpicker.core import SpectrumCanvas


def _cell_hex(pixel: np.ndarray) -> str:
    r, g, b = (int(c) for c in pixel)
    return f"#{r:02x}{g:02x}{b:02x}"


class SpectrumView(Widget):
    """
    Draws a SpectrumCanvas with half-block characters (presentation only).

    Each terminal cell shows two canvas rows: the glyph takes the upper pixel
    and the cell background the lower one. Clicks are translated to
    fractional canvas coordinates and posted as ``Picked``.
    """

    DEFAULT_CSS = """
    SpectrumView {
        height: 1fr;
        min-height: 6;
        width: 100%;
    }
    """

    class Picked(Message):
        """Posted when the user clicks a point of the spectrum."""

        def __init__(self, fx: float, fy: float) -> None:
            super().__init__()
            self.fx = fx
            self.fy = fy

    def __init__(self, canvas: SpectrumCanvas, **kwargs) -> None:
        super().__init__(**kwargs)
        self.canvas = canvas
        self._marker: tuple[float, float] | None = None

    def set_marker(self, fx: float, fy: float) -> None:
        """Mark the last picked point."""
        self._marker = (fx, fy)
        self.refresh()

    def clear_marker(self) -> None:
        if self._marker is not None:
            self._marker = None
            self.refresh()

    def render(self) -> str:
        cols, rows = self.size.width, self.size.height
        if cols < 2 or rows < 1:
            return ""

        pixels = self.canvas.render()
        xs = np.round(np.linspace(0, self.canvas.width - 1, cols)).astype(int)
        ys = np.round(np.linspace(0, self.canvas.height - 1, rows * 2)).astype(int)
        grid = pixels[np.ix_(ys, xs)]

        marker_cell = None
        if self._marker is not None:
            fx, fy = self._marker
            marker_cell = (round(fx * (cols - 1)), round(fy * (2 * rows - 1)) // 2)

        lines = []
        for row in range(rows):
            cells = []
            for col in range(cols):
                top = _cell_hex(grid[2 * row, col])
                bottom = _cell_hex(grid[2 * row + 1, col])
                if (col, row) == marker_cell:
                    cells.append(f"[bold black on {bottom}]✛[/]")
                else:
                    cells.append(f"[{top} on {bottom}]▀[/]")
            lines.append("".join(cells))
        return "\n".join(lines)

    def on_click(self, event: events.Click) -> None:
        offset = event.get_content_offset(self)
        if offset is None:
            return
        cols, rows = self.size.width, self.size.height
        if cols < 2 or rows < 1:
            return
        fx = min(1.0, max(0.0, offset.x / (cols - 1)))
        fy = min(1.0, max(0.0, (2 * offset.y) / max(1, 2 * rows - 1)))
        self.post_message(self.Picked(fx, fy))
