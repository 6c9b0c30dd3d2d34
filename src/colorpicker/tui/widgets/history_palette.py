"""Row of swatches for the color history."""

from textual.app import ComposeResult
from textual.containers import Horizontal
from textual.message import Message
from textual.widgets import Static


class HistorySwatch(Static):
    """A single history entry; clicking it selects the color."""

    DEFAULT_CSS = """
    HistorySwatch {
        width: 3;
        height: 2;
        margin-right: 1;
        border: none;
    }

    HistorySwatch:hover {
        border: tall $accent;
    }
    """

    class Selected(Message):
        """Posted when a swatch is clicked."""

        def __init__(self, index: int, hex_value: str) -> None:
            super().__init__()
            self.index = index
            self.hex_value = hex_value

    def __init__(self, index: int) -> None:
        super().__init__("")
        self.index = index
        self.hex_value: str | None = None

    def set_color(self, hex_value: str | None) -> None:
        """Show ``hex_value``, or hide the swatch when None."""
        self.hex_value = hex_value
        self.display = hex_value is not None
        if hex_value is not None:
            self.styles.background = hex_value
            self.tooltip = hex_value

    def on_click(self) -> None:
        if self.hex_value is not None:
            self.post_message(self.Selected(self.index, self.hex_value))


class HistoryPalette(Horizontal):
    """
    Fixed set of swatches, one per history slot.

    Slots beyond the current history length are hidden rather than removed,
    so updates never remount widgets.
    """

    DEFAULT_CSS = """
    HistoryPalette {
        height: 3;
        margin-top: 1;
        overflow-x: auto;
    }
    """

    def __init__(self, limit: int = 10, **kwargs) -> None:
        super().__init__(**kwargs)
        self.limit = limit

    def compose(self) -> ComposeResult:
        for index in range(self.limit):
            yield HistorySwatch(index)

    def show_history(self, history: tuple[str, ...]) -> None:
        """Refresh the swatches, most recent first."""
        for swatch in self.query(HistorySwatch):
            swatch.set_color(history[swatch.index] if swatch.index < len(history) else None)
