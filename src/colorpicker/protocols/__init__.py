"""Events and observer protocols for the color picker."""

from .events import ColorEvent, ColorSource, HistoryEvent, PickerEvent
from .observers import ColorObserver, HistoryObserver, PickerObserver

__all__ = [
    # Events
    "ColorEvent",
    "ColorSource",
    "HistoryEvent",
    "PickerEvent",
    # Observers
    "ColorObserver",
    "HistoryObserver",
    "PickerObserver",
]
