"""Color input exceptions.

The conversion core never raises: malformed hex falls back to black and
out-of-range numbers are clamped. ColorParseError is only for command-line
arguments that cannot be read as any color notation at all.
"""

from .base import ColorPickerError


class ColorParseError(ColorPickerError):
    """A textual color value could not be understood."""

    def __init__(self, value: str):
        """
        Initialize color parse error.

        Args:
            value: The text that failed to parse
        """
        super().__init__(
            user_message=f"Cannot read '{value}' as a color",
            technical_message=f"No color notation matched input {value!r}",
            recoverable=True,
            recovery_hint=(
                "Use one of: #3b82f6, 3b82f6, rgb(59, 130, 246), 59,130,246, hsl(217, 91%, 60%)"
            ),
        )
        self.value = value
