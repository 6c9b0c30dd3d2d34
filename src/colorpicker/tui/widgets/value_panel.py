"""Panel listing HEX, RGB, HSL and HSV values of the current color."""

from textual.app import ComposeResult
from textual.containers import Horizontal, Vertical
from textual.widgets import Label, Static

from colorpicker.models import Color
from colorpicker.ui_shared import FORMAT_LABELS, format_all, format_display

from .messages import CopyRequested


class ValueBadge(Static):
    """One clickable value; clicking copies its formatted string."""

    DEFAULT_CSS = """
    ValueBadge {
        width: 1fr;
        background: $boost;
        padding: 0 1;
    }

    ValueBadge:hover {
        background: $accent 30%;
    }
    """

    def __init__(self, label: str, **kwargs) -> None:
        super().__init__("", **kwargs)
        self.label = label
        self._copy_text = ""

    def set_value(self, display: str, copy_text: str) -> None:
        self._copy_text = copy_text
        self.update(display)

    def on_click(self) -> None:
        if self._copy_text:
            self.post_message(CopyRequested(self.label, self._copy_text))


class ValuePanel(Vertical):
    """The four representations, kept in sync with the controller."""

    DEFAULT_CSS = """
    ValuePanel {
        height: auto;
        margin-top: 1;
    }

    ValuePanel Horizontal {
        height: 1;
        margin-bottom: 1;
    }

    ValuePanel Label {
        width: 6;
        text-style: bold;
    }
    """

    def compose(self) -> ComposeResult:
        for label in FORMAT_LABELS:
            with Horizontal():
                yield Label(label)
                yield ValueBadge(label, id=f"value-{label.lower()}")

    def show_color(self, color: Color) -> None:
        """Refresh every badge from one snapshot."""
        display = format_display(color)
        copy = format_all(color)
        for label in FORMAT_LABELS:
            self.query_one(f"#value-{label.lower()}", ValueBadge).set_value(display[label], copy[label])
