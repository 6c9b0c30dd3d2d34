"""
Custom exception hierarchy for colorpicker.

## Exception Hierarchy

```
ColorPickerError (base)
├── ColorParseError
└── ConfigurationError
    ├── ConfigFileInvalidError
    └── ConfigValidationError
```

All custom exceptions inherit from `ColorPickerError`, which provides:

- `user_message`: Human-friendly message for display to users
- `technical_message`: Detailed message for logging
- `recoverable`: Whether the error can be recovered from
- `recovery_hint`: Optional suggestion for how to fix the issue

The conversion core itself never raises; see `colorpicker.conversions`.
"""

from .base import ColorPickerError
from .color import ColorParseError
from .config import ConfigFileInvalidError, ConfigurationError, ConfigValidationError
from .handlers import format_error_for_display, handle_errors, wrap_pydantic_error

__all__ = [
    # Base
    "ColorPickerError",
    # Color input
    "ColorParseError",
    # Config
    "ConfigFileInvalidError",
    "ConfigValidationError",
    "ConfigurationError",
    # Handlers
    "format_error_for_display",
    "handle_errors",
    "wrap_pydantic_error",
]
