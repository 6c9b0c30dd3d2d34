"""Status bar showing the last input source and eye-dropper state."""

from textual.widgets import Static


class StatusBar(Static):
    """
    Status bar displaying current picker state.

    Shows:
    - Where the last color change came from
    - Eye-dropper state (ready or picking)
    - Number of history entries
    """

    DEFAULT_CSS = """
    StatusBar {
        height: 1;
        background: $panel;
        color: $text;
        padding: 0 1;
    }

    StatusBar.picking {
        background: $warning;
    }
    """

    def __init__(self) -> None:
        """Initialize status bar."""
        super().__init__()
        self._source = "startup"
        self._picking = False
        self._history_count = 0

    def update_state(self, source: str | None = None, picking: bool | None = None, history_count: int | None = None) -> None:
        """Update any subset of the status fields."""
        if source is not None:
            self._source = source
        if picking is not None:
            self._picking = picking
        if history_count is not None:
            self._history_count = history_count
        self._update_display()

    def _update_display(self) -> None:
        if self._picking:
            picker_text = "◉ Picking color..."
            self.add_class("picking")
        else:
            picker_text = "◎ Eye-dropper ready"
            self.remove_class("picking")

        source_text = f"Last change: {self._source.replace('_', ' ')}"
        history_text = f"History: {self._history_count}"
        self.update(" | ".join([source_text, picker_text, history_text]))
