"""Reusable UI widgets for the TUI."""

from .channel_slider import ChannelSlider
from .color_preview import ColorPreview
from .history_palette import HistoryPalette, HistorySwatch
from .input_panel import InputPanel
from .messages import CopyRequested
from .slider_panel import SliderPanel
from .spectrum_view import SpectrumView
from .status_bar import StatusBar
from .value_panel import ValueBadge, ValuePanel

__all__ = [
    "ChannelSlider",
    "ColorPreview",
    "CopyRequested",
    "HistoryPalette",
    "HistorySwatch",
    "InputPanel",
    "SliderPanel",
    "SpectrumView",
    "StatusBar",
    "ValueBadge",
    "ValuePanel",
]
