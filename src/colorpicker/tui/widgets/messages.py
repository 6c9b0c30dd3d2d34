"""Messages shared by several widgets."""

from textual.message import Message


class CopyRequested(Message):
    """Posted when the user clicks a value to copy it."""

    def __init__(self, label: str, text: str) -> None:
        super().__init__()
        self.label = label
        self.text = text
