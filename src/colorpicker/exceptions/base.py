"""Root of the colorpicker exception hierarchy.

Every error the app raises on purpose derives from ColorPickerError. The CLI
banner and the TUI notifications show ``user_message`` (plus the hint, if
any), while logs get ``technical_message``.
"""


class ColorPickerError(Exception):
    """
    Error carrying a display message, a log message and a recovery hint.

    Attributes:
        user_message: Short text safe to show in the TUI or on the terminal
        technical_message: Log text; falls back to ``user_message``
        recoverable: True when the user can fix the input and try again
        recovery_hint: What to do about it, e.g. the expected color notation
    """

    def __init__(
        self,
        user_message: str,
        technical_message: str | None = None,
        recoverable: bool = False,
        recovery_hint: str | None = None,
    ):
        super().__init__(user_message)
        self.user_message = user_message
        self.technical_message = technical_message or user_message
        self.recoverable = recoverable
        self.recovery_hint = recovery_hint

    def __str__(self) -> str:
        return self.user_message

    def get_full_message(self) -> str:
        """Display message, followed by the recovery hint when there is one."""
        if not self.recovery_hint:
            return self.user_message
        return f"{self.user_message}\n\nSuggestion: {self.recovery_hint}"
