"""Application configuration model."""

import re
from pathlib import Path

from pydantic import BaseModel, Field, field_validator

from colorpicker.models.history import DEFAULT_HISTORY
from colorpicker.utils.persistence import PydanticPersistence

CONFIG_DIR = Path.home() / ".colorpicker"
DEFAULT_CONFIG_PATH = CONFIG_DIR / "config.json"

_HEX_RE = re.compile(r"#[0-9a-fA-F]{6}")


def _check_hex(value: str) -> str:
    if not _HEX_RE.fullmatch(value):
        raise ValueError(f"'{value}' is not a #rrggbb color")
    return value.lower()


class AppConfig(BaseModel):
    """Application preferences.

    Only preferences are stored here. The color history itself is never
    saved; ``history_seed`` is what a fresh session starts with.
    """

    initial_color: str = Field(default="#3b82f6", description="Color shown at startup")
    history_seed: list[str] = Field(
        default_factory=lambda: list(DEFAULT_HISTORY),
        description="History entries a new session starts with",
    )
    history_limit: int = Field(default=10, ge=1, le=100, description="Maximum history entries")

    spectrum_width: int = Field(default=400, ge=2, description="Spectrum canvas width in pixels")
    spectrum_height: int = Field(default=300, ge=2, description="Spectrum canvas height in pixels")

    eyedropper_delay: float = Field(
        default=2.0,
        ge=0.0,
        le=30.0,
        description="Seconds to wait before grabbing the pixel under the mouse cursor",
    )
    add_random_to_history: bool = Field(default=True, description="Add random colors to the history")

    @field_validator("initial_color")
    @classmethod
    def validate_initial_color(cls, v: str) -> str:
        """Require a complete #rrggbb value (stored lowercase)."""
        return _check_hex(v)

    @field_validator("history_seed")
    @classmethod
    def validate_history_seed(cls, v: list[str]) -> list[str]:
        """Require #rrggbb entries (stored lowercase)."""
        return [_check_hex(entry) for entry in v]

    @classmethod
    def load_or_default(cls, path: Path | None = None) -> "AppConfig":
        """
        Load config from file or return defaults when the file is missing.

        Args:
            path: Path to config file. If None, uses ~/.colorpicker/config.json.

        Raises:
            ConfigFileInvalidError: If config file has invalid JSON syntax
            ConfigValidationError: If config values fail validation
        """
        return PydanticPersistence.load_json_or_default(path or DEFAULT_CONFIG_PATH, cls)

    def save(self, path: Path | None = None) -> None:
        """Save config to file (atomic write, previous file kept as .bak)."""
        PydanticPersistence.save_json(self, path or DEFAULT_CONFIG_PATH)
