"""Spectrum canvas: the hue x lightness gradient users click to pick a color.

The canvas is a horizontal hue gradient (red, yellow, green, cyan, blue,
magenta, back to red) overlaid with a vertical gradient that fades from
opaque white at the top to transparent at mid-height, then from transparent
to opaque black at the bottom. The middle row is therefore fully saturated.
"""

import logging

import numpy as np

from colorpicker.models import RGB

logger = logging.getLogger(__name__)

HUE_STOPS = np.linspace(0.0, 1.0, 7)
HUE_STOP_COLORS = np.array(
    [
        [255, 0, 0],
        [255, 255, 0],
        [0, 255, 0],
        [0, 255, 255],
        [0, 0, 255],
        [255, 0, 255],
        [255, 0, 0],
    ],
    dtype=np.float64,
)


def _compose(t: np.ndarray, u: np.ndarray) -> np.ndarray:
    """Composite the gradients at horizontal positions ``t`` and vertical ``u``.

    Both arguments are fractions in [0, 1]. Returns a uint8 array of shape
    ``(len(u), len(t), 3)``.
    """
    hue = np.stack([np.interp(t, HUE_STOPS, HUE_STOP_COLORS[:, c]) for c in range(3)], axis=-1)

    white_alpha = np.clip(1.0 - u / 0.5, 0.0, 1.0)[:, None, None]
    black_alpha = np.clip((u - 0.5) / 0.5, 0.0, 1.0)[:, None, None]

    pixels = hue[None, :, :] * (1.0 - white_alpha) + 255.0 * white_alpha
    pixels = pixels * (1.0 - black_alpha)
    return np.floor(pixels + 0.5).astype(np.uint8)


class SpectrumCanvas:
    """
    Renders and samples the spectrum gradient.

    Column ``x`` sits at hue position ``x / (width - 1)`` and row ``y`` at
    ``y / (height - 1)``, so the four corners are exact: top corners white,
    bottom corners black, and the left/right edges of the middle row red.

    Example:
        ```python
        canvas = SpectrumCanvas(400, 300)
        rgb = canvas.sample(120, 80)
        color = normalize(*rgb.to_tuple())
        ```
    """

    def __init__(self, width: int = 400, height: int = 300):
        """
        Initialize the canvas.

        Args:
            width: Canvas width in pixels (at least 2)
            height: Canvas height in pixels (at least 2)

        Raises:
            ValueError: If either dimension is below 2
        """
        if width < 2 or height < 2:
            raise ValueError(f"Spectrum must be at least 2x2 pixels, got {width}x{height}")
        self.width = width
        self.height = height
        self._pixels: np.ndarray | None = None

    def render(self) -> np.ndarray:
        """Return the full canvas as a ``(height, width, 3)`` uint8 array (cached)."""
        if self._pixels is None:
            t = np.arange(self.width) / (self.width - 1)
            u = np.arange(self.height) / (self.height - 1)
            self._pixels = _compose(t, u)
            logger.debug(f"Rendered {self.width}x{self.height} spectrum")
        return self._pixels

    def sample(self, x: int, y: int) -> RGB:
        """
        Return the RGB triple at pixel (x, y).

        Coordinates outside the canvas are clamped to the nearest edge pixel,
        matching a click that lands on the canvas border.
        """
        x = max(0, min(self.width - 1, int(x)))
        y = max(0, min(self.height - 1, int(y)))
        r, g, b = (int(c) for c in self.render()[y, x])
        return RGB(r=r, g=g, b=b)

    def sample_fraction(self, fx: float, fy: float) -> RGB:
        """Sample at fractional coordinates in [0, 1] (used by scaled-down views)."""
        return self.sample(round(fx * (self.width - 1)), round(fy * (self.height - 1)))
