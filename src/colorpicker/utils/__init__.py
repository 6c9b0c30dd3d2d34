"""Generic utilities that are not specific to colors.

- observer: Thread-safe observer list management
- persistence: JSON load/save for Pydantic models
"""

from .observer import ObserverManager
from .persistence import PydanticPersistence

__all__ = ["ObserverManager", "PydanticPersistence"]
