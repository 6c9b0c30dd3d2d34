"""Observer protocol definitions for color picker events.

Presentation layers (TUI widgets, CLI) implement these protocols and register
with the ColorPickerController instead of reading or writing shared state.
"""

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from colorpicker.core.eyedropper import EyeDropperResult
    from colorpicker.models import Color

from .events import ColorEvent, ColorSource, HistoryEvent, PickerEvent


@runtime_checkable
class ColorObserver(Protocol):
    """Observer that receives current-color changes."""

    def on_color_event(self, event: ColorEvent, color: "Color", source: ColorSource) -> None:
        """
        Handle a color change.

        Args:
            event: The type of color event
            color: The new snapshot (all four representations consistent)
            source: Which input produced the change
        """
        ...


@runtime_checkable
class HistoryObserver(Protocol):
    """Observer that receives history palette changes."""

    def on_history_event(self, event: HistoryEvent, history: tuple[str, ...]) -> None:
        """
        Handle a history change.

        Args:
            event: The type of history event
            history: The full history, most recent first
        """
        ...


@runtime_checkable
class PickerObserver(Protocol):
    """
    Observer that receives eye-dropper lifecycle events.

    Used by the UI to disable the eye-dropper control while an acquisition
    is in flight.
    """

    def on_picker_event(self, event: PickerEvent, result: "EyeDropperResult | None" = None) -> None:
        """
        Handle an eye-dropper lifecycle event.

        Args:
            event: PICKING_STARTED or PICKING_FINISHED
            result: The outcome, only for PICKING_FINISHED
        """
        ...
