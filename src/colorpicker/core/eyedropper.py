"""System eye-dropper capability.

Acquiring a color from the screen has exactly three outcomes, modelled as a
result type rather than exceptions:

- ``Picked(hex)``: a color was captured
- ``Cancelled()``: the user gave up; a silent no-op
- ``Unavailable(reason)``: this host cannot grab screen pixels

Cancelling the awaiting task is not a result: ``asyncio.CancelledError``
propagates to the caller.

``ScreenEyeDropper`` captures the pixel under the mouse cursor after a short
delay, using pyautogui for the cursor position and Pillow's ImageGrab for the
pixel. Both are optional (``pip install colorpicker[eyedropper]``); when they
are missing, or there is no display to grab from, the result is
``Unavailable``.
"""

import asyncio
import logging
from dataclasses import dataclass
from typing import Protocol, runtime_checkable

from colorpicker.conversions import rgb_to_hex

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Picked:
    """A color was captured from the screen."""

    hex: str


@dataclass(frozen=True, slots=True)
class Cancelled:
    """Acquisition was cancelled; not an error."""


@dataclass(frozen=True, slots=True)
class Unavailable:
    """The host has no usable eye-dropper."""

    reason: str


EyeDropperResult = Picked | Cancelled | Unavailable


@runtime_checkable
class EyeDropper(Protocol):
    """A host capability that can capture one color from the screen."""

    async def acquire(self) -> EyeDropperResult:
        """
        Capture a color.

        Implementations return ``Cancelled`` when the user backs out and
        ``Unavailable`` when the capability is missing. Task cancellation
        propagates as ``asyncio.CancelledError``.
        """
        ...


class ScreenEyeDropper:
    """
    Eye-dropper that samples the pixel under the mouse cursor.

    After ``delay`` seconds (time for the user to move the pointer over the
    target) the cursor position is read and a 1x1 screenshot taken. The
    blocking grab runs in a worker thread so the event loop stays responsive.
    """

    def __init__(self, delay: float = 2.0):
        """
        Initialize the eye-dropper.

        Args:
            delay: Seconds to wait before grabbing the pixel
        """
        self.delay = delay

    def availability(self) -> str | None:
        """Return None when usable, otherwise the reason it is not."""
        try:
            import pyautogui  # noqa: F401
            from PIL import ImageGrab  # noqa: F401
        except ImportError as e:
            return f"Screen capture support is not installed ({e.name})"
        except Exception as e:
            # pyautogui probes the display at import time (e.g. no $DISPLAY)
            return f"No screen available to pick from: {e}"
        return None

    async def acquire(self) -> EyeDropperResult:
        """Wait ``delay`` seconds, then grab the pixel under the cursor."""
        reason = self.availability()
        if reason is not None:
            logger.info(f"Eye-dropper unavailable: {reason}")
            return Unavailable(reason)

        try:
            await asyncio.sleep(self.delay)
            hex_value = await asyncio.to_thread(self._grab_pixel)
        except OSError as e:
            logger.warning(f"Screen grab failed: {e}")
            return Unavailable(f"Screen grab failed: {e}")

        logger.info(f"Eye-dropper picked {hex_value}")
        return Picked(hex_value)

    @staticmethod
    def _grab_pixel() -> str:
        import pyautogui
        from PIL import ImageGrab

        x, y = pyautogui.position()
        image = ImageGrab.grab(bbox=(x, y, x + 1, y + 1))
        r, g, b = image.convert("RGB").getpixel((0, 0))
        return rgb_to_hex(r, g, b)
