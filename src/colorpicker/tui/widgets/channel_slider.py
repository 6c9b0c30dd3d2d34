"""Keyboard and mouse driven slider for one color channel."""

from textual import events
from textual.binding import Binding
from textual.message import Message
from textual.widget import Widget

LABEL_WIDTH = 12
VALUE_WIDTH = 6


class ChannelSlider(Widget, can_focus=True):
    """
    Horizontal slider over the integer range 0..maximum.

    Left/right step by one, shift+left/right by ten, home/end jump to the
    ends, and clicking the bar jumps to that position. User changes post
    ``ChannelSlider.Changed``; ``set_value`` updates silently so the owner
    can mirror controller state without feedback loops.
    """

    DEFAULT_CSS = """
    ChannelSlider {
        height: 1;
        width: 100%;
        margin-bottom: 1;
    }

    ChannelSlider:focus {
        background: $boost;
        text-style: bold;
    }
    """

    BINDINGS = [
        Binding("left", "step(-1)", "Decrease", show=False),
        Binding("right", "step(1)", "Increase", show=False),
        Binding("shift+left", "step(-10)", "Decrease x10", show=False),
        Binding("shift+right", "step(10)", "Increase x10", show=False),
        Binding("home", "jump(0)", "Minimum", show=False),
        Binding("end", "jump_max", "Maximum", show=False),
    ]

    class Changed(Message):
        """Posted when the user moves the slider."""

        def __init__(self, slider: "ChannelSlider", value: int) -> None:
            super().__init__()
            self.slider = slider
            self.value = value

        @property
        def channel(self) -> str:
            return self.slider.channel

    def __init__(self, label: str, channel: str, maximum: int, suffix: str = "", **kwargs) -> None:
        super().__init__(**kwargs)
        self.label = label
        self.channel = channel
        self.maximum = maximum
        self.suffix = suffix
        self.value = 0

    @property
    def _bar_width(self) -> int:
        return max(2, self.size.width - LABEL_WIDTH - VALUE_WIDTH - 2)

    def set_value(self, value: int) -> None:
        """Show ``value`` without posting Changed."""
        self.value = max(0, min(self.maximum, int(value)))
        self.refresh()

    def _change(self, value: int) -> None:
        value = max(0, min(self.maximum, int(value)))
        if value == self.value:
            return
        self.value = value
        self.refresh()
        self.post_message(self.Changed(self, value))

    def action_step(self, delta: int) -> None:
        self._change(self.value + delta)

    def action_jump(self, value: int) -> None:
        self._change(value)

    def action_jump_max(self) -> None:
        self._change(self.maximum)

    def render(self) -> str:
        width = self._bar_width
        knob = round(self.value / self.maximum * (width - 1)) if self.maximum else 0
        bar = "━" * knob + "●" + "─" * (width - knob - 1)
        value_text = f"{self.value}{self.suffix}"
        return f"{self.label:<{LABEL_WIDTH}} {bar} {value_text:>{VALUE_WIDTH}}"

    def on_click(self, event: events.Click) -> None:
        offset = event.get_content_offset(self)
        if offset is None:
            return
        position = offset.x - (LABEL_WIDTH + 1)
        width = self._bar_width
        if 0 <= position < width:
            self.focus()
            self._change(round(position / (width - 1) * self.maximum))
