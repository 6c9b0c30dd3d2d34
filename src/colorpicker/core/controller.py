"""Color picker controller: the single owner of picker state."""

import asyncio
import logging
import random
from typing import Any

from colorpicker.conversions import hex_to_rgb, hsl_to_rgb, is_valid_hex, normalize
from colorpicker.core.eyedropper import (
    Cancelled,
    EyeDropper,
    EyeDropperResult,
    Picked,
    ScreenEyeDropper,
    Unavailable,
)
from colorpicker.core.spectrum import SpectrumCanvas
from colorpicker.models import RGB, AppConfig, Color, ColorHistory
from colorpicker.protocols import (
    ColorEvent,
    ColorObserver,
    ColorSource,
    HistoryEvent,
    HistoryObserver,
    PickerEvent,
    PickerObserver,
)
from colorpicker.utils import ObserverManager

logger = logging.getLogger(__name__)

RGB_CHANNELS = ("r", "g", "b")
HSL_CHANNELS = ("h", "s", "l")


class ColorPickerController:
    """
    Owns the current color, the history palette and the eye-dropper busy flag.

    Every input is reduced to an RGB triple and passed through ``normalize``;
    the history only changes through ``add_to_history``. Presentation layers
    never write these fields. They call the operations below and subscribe
    to events:

    - ``ColorObserver.on_color_event`` after every new snapshot
    - ``HistoryObserver.on_history_event`` after every history change
    - ``PickerObserver.on_picker_event`` when the eye-dropper starts/finishes

    Threading:
        Designed for a single event loop. Observer notification is
        synchronous and observer errors are logged, never propagated.
    """

    def __init__(
        self,
        config: AppConfig | None = None,
        eyedropper: EyeDropper | None = None,
        spectrum: SpectrumCanvas | None = None,
        rng: random.Random | None = None,
    ):
        """
        Initialize the controller.

        Args:
            config: Application preferences (defaults if None)
            eyedropper: Screen color capability (ScreenEyeDropper if None)
            spectrum: Spectrum canvas used by ``sample_spectrum``
            rng: Random source for ``random_color`` (seedable for tests)
        """
        self.config = config or AppConfig()
        self.eyedropper = eyedropper or ScreenEyeDropper(delay=self.config.eyedropper_delay)
        self.spectrum = spectrum or SpectrumCanvas(self.config.spectrum_width, self.config.spectrum_height)
        self._rng = rng or random.Random()

        self._color = normalize(*hex_to_rgb(self.config.initial_color).to_tuple())
        self._history = ColorHistory.seeded(self.config.history_seed, self.config.history_limit)
        self._is_picking = False

        self._color_observers = ObserverManager[ColorObserver]("color")
        self._history_observers = ObserverManager[HistoryObserver]("history")
        self._picker_observers = ObserverManager[PickerObserver]("picker")

        logger.info(f"ColorPickerController initialized with {self._color.hex}")

    # =================================================================
    # State (read-only)
    # =================================================================

    @property
    def color(self) -> Color:
        """The current color snapshot."""
        return self._color

    @property
    def history(self) -> tuple[str, ...]:
        """History entries, most recent first."""
        return self._history.entries

    @property
    def is_picking(self) -> bool:
        """True while an eye-dropper acquisition is in flight."""
        return self._is_picking

    # =================================================================
    # Observers
    # =================================================================

    def register_observer(self, observer: Any) -> None:
        """
        Register an observer for every event family it implements.

        An object may implement any combination of ColorObserver,
        HistoryObserver and PickerObserver.
        """
        registered = False
        if isinstance(observer, ColorObserver):
            self._color_observers.register(observer)
            registered = True
        if isinstance(observer, HistoryObserver):
            self._history_observers.register(observer)
            registered = True
        if isinstance(observer, PickerObserver):
            self._picker_observers.register(observer)
            registered = True
        if not registered:
            raise TypeError(f"{observer!r} implements no colorpicker observer protocol")

    def unregister_observer(self, observer: Any) -> None:
        """Unregister an observer from every event family it was registered for."""
        for manager in (self._color_observers, self._history_observers, self._picker_observers):
            if observer in manager:
                manager.unregister(observer)

    # =================================================================
    # Internal state transitions
    # =================================================================

    def _apply_rgb(self, rgb: RGB | tuple[float, float, float], source: ColorSource) -> Color:
        r, g, b = rgb.to_tuple() if isinstance(rgb, RGB) else rgb
        self._color = normalize(r, g, b)
        logger.debug(f"Color set to {self._color.hex} from {source.value}")
        self._color_observers.notify("on_color_event", ColorEvent.COLOR_CHANGED, self._color, source)
        return self._color

    def _remember(self, hex_value: str) -> None:
        self._history = self._history.add(hex_value)
        self._history_observers.notify("on_history_event", HistoryEvent.HISTORY_CHANGED, self._history.entries)

    def _set_picking(self, picking: bool, result: EyeDropperResult | None = None) -> None:
        self._is_picking = picking
        if picking:
            self._picker_observers.notify("on_picker_event", PickerEvent.PICKING_STARTED)
        else:
            self._picker_observers.notify("on_picker_event", PickerEvent.PICKING_FINISHED, result)

    # =================================================================
    # Color operations
    # =================================================================

    def set_rgb(self, r: float, g: float, b: float) -> Color:
        """Set the color from numeric RGB input (values are clamped)."""
        return self._apply_rgb((r, g, b), ColorSource.RGB_INPUT)

    def set_channel(self, channel: str, value: float) -> Color:
        """
        Replace one RGB channel, as an RGB slider drag does.

        Args:
            channel: One of "r", "g", "b"
            value: New channel value (clamped to 0-255)

        Raises:
            ValueError: If channel is not r, g or b
        """
        if channel not in RGB_CHANNELS:
            raise ValueError(f"Unknown RGB channel '{channel}' (expected one of r, g, b)")

        current = self._color.rgb.model_dump()
        current[channel] = value
        return self._apply_rgb((current["r"], current["g"], current["b"]), ColorSource.RGB_INPUT)

    def set_hsl_channel(self, channel: str, value: float) -> Color:
        """
        Replace one HSL component, as an HSL slider drag does.

        The new color is rebuilt from the current HSL with one component
        swapped, converted back to RGB, then normalized.

        Raises:
            ValueError: If channel is not h, s or l
        """
        if channel not in HSL_CHANNELS:
            raise ValueError(f"Unknown HSL channel '{channel}' (expected one of h, s, l)")

        current = self._color.hsl.model_dump()
        current[channel] = value
        rgb = hsl_to_rgb(current["h"], current["s"], current["l"])
        return self._apply_rgb(rgb, ColorSource.HSL_INPUT)

    def set_hex(self, text: str) -> bool:
        """
        Apply a hex text entry.

        Only a complete ``#rrggbb`` value is applied; partial or malformed
        text is ignored so typing does not flash the color to black. An
        applied value is added to the history.

        Returns:
            True if the value was applied
        """
        if not is_valid_hex(text):
            logger.debug(f"Ignoring incomplete hex entry {text!r}")
            return False

        color = self._apply_rgb(hex_to_rgb(text), ColorSource.HEX_INPUT)
        self._remember(color.hex)
        return True

    def sample_spectrum(self, x: int, y: int) -> Color:
        """Set the color from the spectrum pixel at (x, y)."""
        return self._apply_rgb(self.spectrum.sample(x, y), ColorSource.SPECTRUM)

    def sample_spectrum_fraction(self, fx: float, fy: float) -> Color:
        """Set the color from fractional spectrum coordinates in [0, 1]."""
        return self._apply_rgb(self.spectrum.sample_fraction(fx, fy), ColorSource.SPECTRUM)

    def select_history(self, index: int) -> Color:
        """
        Re-select a history entry (the history order is unchanged).

        Raises:
            IndexError: If index is out of range
        """
        entries = self._history.entries
        if not 0 <= index < len(entries):
            raise IndexError(f"History index {index} out of range (0-{len(entries) - 1})")
        return self._apply_rgb(hex_to_rgb(entries[index]), ColorSource.HISTORY)

    def random_color(self) -> Color:
        """Pick a uniformly random color."""
        r, g, b = (self._rng.randrange(256) for _ in range(3))
        color = self._apply_rgb((r, g, b), ColorSource.RANDOM)
        if self.config.add_random_to_history:
            self._remember(color.hex)
        return color

    def add_current_to_history(self) -> None:
        """Save the current color to the front of the history."""
        self._remember(self._color.hex)

    async def pick_from_screen(self) -> EyeDropperResult:
        """
        Run the system eye-dropper.

        At most one acquisition runs at a time: while one is in flight, a
        second call returns ``Cancelled`` immediately without touching the
        device. ``Picked`` updates the color and history; ``Cancelled`` and
        ``Unavailable`` leave state untouched.

        Cancelling the task re-raises ``asyncio.CancelledError`` once the
        picking flag is cleared and ``PICKING_FINISHED`` has reported
        ``Cancelled``.
        """
        if self._is_picking:
            logger.debug("Eye-dropper already active, ignoring request")
            return Cancelled()

        self._set_picking(True)
        result: EyeDropperResult = Cancelled()
        try:
            result = await self.eyedropper.acquire()
            if isinstance(result, Picked):
                color = self._apply_rgb(hex_to_rgb(result.hex), ColorSource.EYEDROPPER)
                self._remember(color.hex)
            elif isinstance(result, Unavailable):
                logger.info(f"Eye-dropper unavailable: {result.reason}")
            else:
                logger.debug("Eye-dropper cancelled by user")
        except asyncio.CancelledError:
            logger.debug("Eye-dropper task cancelled")
            result = Cancelled()
            raise
        except Exception as e:
            logger.error(f"Eye-dropper failed: {e}", exc_info=True)
            result = Unavailable(f"Eye-dropper failed: {e}")
        finally:
            self._set_picking(False, result)

        return result
