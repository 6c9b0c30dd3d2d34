"""Domain events for the observer pattern.

- Color events: The current color snapshot changed
- History events: The history palette changed
- Picker events: System eye-dropper acquisition started or finished
"""

from enum import Enum


class ColorEvent(Enum):
    """Events from changes to the current color."""

    COLOR_CHANGED = "color_changed"  # A new snapshot was produced by normalize()


class ColorSource(str, Enum):
    """Where a color change came from (carried with COLOR_CHANGED)."""

    RGB_INPUT = "rgb_input"          # Numeric RGB entry or RGB slider
    HSL_INPUT = "hsl_input"          # HSL slider
    HEX_INPUT = "hex_input"          # Hex text field
    SPECTRUM = "spectrum"            # Spectrum canvas click
    HISTORY = "history"              # History swatch click
    EYEDROPPER = "eyedropper"        # System eye-dropper
    RANDOM = "random"                # Random generator


class HistoryEvent(Enum):
    """Events from the color history."""

    HISTORY_CHANGED = "history_changed"  # An entry was added or moved to the front


class PickerEvent(Enum):
    """Events from the system eye-dropper."""

    PICKING_STARTED = "picking_started"    # Acquisition began; re-entry is blocked
    PICKING_FINISHED = "picking_finished"  # Acquisition resolved (picked, cancelled or unavailable)
