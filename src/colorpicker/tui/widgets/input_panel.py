"""Text entry for hex and numeric RGB values."""

from textual.app import ComposeResult
from textual.containers import Horizontal, Vertical
from textual.message import Message
from textual.widgets import Input, Label

from colorpicker.models import Color


class InputPanel(Vertical):
    """
    Hex field plus three RGB number fields.

    Every edit is forwarded as a message; deciding whether the text is
    complete enough to apply is left to the controller. ``show_color``
    refreshes the fields without re-posting messages.
    """

    DEFAULT_CSS = """
    InputPanel {
        padding: 1 1;
        height: auto;
    }

    InputPanel Label {
        margin-top: 1;
        text-style: bold;
    }

    InputPanel Horizontal {
        height: auto;
    }

    InputPanel .channel-input {
        width: 1fr;
    }
    """

    class HexEntered(Message):
        def __init__(self, value: str) -> None:
            super().__init__()
            self.value = value

    class ChannelEntered(Message):
        def __init__(self, channel: str, value: int) -> None:
            super().__init__()
            self.channel = channel
            self.value = value

    def compose(self) -> ComposeResult:
        yield Label("HEX")
        yield Input(placeholder="#3b82f6", max_length=7, id="hex-input")
        yield Label("RGB")
        with Horizontal():
            for channel in ("r", "g", "b"):
                yield Input(
                    placeholder=channel.upper(),
                    type="integer",
                    max_length=3,
                    id=f"{channel}-input",
                    classes="channel-input",
                )

    def on_input_changed(self, event: Input.Changed) -> None:
        event.stop()
        if event.input.id == "hex-input":
            self.post_message(self.HexEntered(event.value))
            return

        channel = (event.input.id or "").removesuffix("-input")
        try:
            value = int(event.value)
        except ValueError:
            return
        self.post_message(self.ChannelEntered(channel, value))

    def show_color(self, color: Color) -> None:
        """Mirror ``color`` into the fields, leaving matching fields untouched."""
        values = {"hex-input": color.hex}
        values.update({f"{channel}-input": str(value) for channel, value in color.rgb.model_dump().items()})
        with self.prevent(Input.Changed):
            for input_id, text in values.items():
                field = self.query_one(f"#{input_id}", Input)
                if field.value.lower() != text:
                    field.value = text
