"""Color history model."""

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_HISTORY: tuple[str, ...] = (
    "#3b82f6",
    "#ef4444",
    "#10b981",
    "#f59e0b",
    "#8b5cf6",
)


class ColorHistory(BaseModel):
    """Most-recent-first list of hex strings, capped at ``limit`` entries.

    The model is frozen: ``add`` returns a new history instead of mutating.
    History lives for the process lifetime only and is never written to disk.
    """

    model_config = ConfigDict(frozen=True)

    entries: tuple[str, ...] = Field(default=DEFAULT_HISTORY)
    limit: int = Field(default=10, ge=1, description="Maximum number of entries kept")

    @classmethod
    def seeded(cls, seed: tuple[str, ...] | list[str] = DEFAULT_HISTORY, limit: int = 10) -> "ColorHistory":
        """Create a history pre-filled with ``seed`` (truncated to ``limit``)."""
        return cls(entries=tuple(seed)[:limit], limit=limit)

    def add(self, color: str) -> "ColorHistory":
        """Return a new history with ``color`` moved to the front."""
        from colorpicker.conversions import add_to_history

        return self.model_copy(update={"entries": tuple(add_to_history(self.entries, color, self.limit))})

    def __len__(self) -> int:
        return len(self.entries)

    def __getitem__(self, index: int) -> str:
        return self.entries[index]
