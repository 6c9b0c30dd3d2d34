"""RGB and HSL slider groups."""

from textual.app import ComposeResult
from textual.containers import VerticalScroll
from textual.widgets import Label

from colorpicker.models import Color

from .channel_slider import ChannelSlider

RGB_SLIDERS = (("Red", "r"), ("Green", "g"), ("Blue", "b"))
HSL_SLIDERS = (("Hue", "h", 359, "°"), ("Saturation", "s", 100, "%"), ("Lightness", "l", 100, "%"))


class SliderPanel(VerticalScroll):
    """
    Six sliders: R, G, B over 0-255 and H, S, L over their own ranges.

    Slider ids are ``rgb-<channel>`` and ``hsl-<channel>`` so the app can
    tell the two families apart when a ``ChannelSlider.Changed`` arrives.
    """

    DEFAULT_CSS = """
    SliderPanel {
        padding: 1 1;
    }

    SliderPanel Label {
        text-style: bold;
        margin-bottom: 1;
    }
    """

    def compose(self) -> ComposeResult:
        yield Label("RGB")
        for label, channel in RGB_SLIDERS:
            yield ChannelSlider(label, channel, 255, id=f"rgb-{channel}")
        yield Label("HSL")
        for label, channel, maximum, suffix in HSL_SLIDERS:
            yield ChannelSlider(label, channel, maximum, suffix, id=f"hsl-{channel}")

    def show_color(self, color: Color) -> None:
        """Move every slider to match ``color``."""
        for channel, value in color.rgb.model_dump().items():
            self.query_one(f"#rgb-{channel}", ChannelSlider).set_value(value)
        for channel, value in color.hsl.model_dump().items():
            self.query_one(f"#hsl-{channel}", ChannelSlider).set_value(value)
