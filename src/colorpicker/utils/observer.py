"""Observer list shared by the controller's event families.

Each event family (color, history, picker) gets its own manager. Callbacks
are looked up by name at notification time, and run on a snapshot of the
list taken under the lock, so an observer may unregister itself from inside
its own callback.
"""

import logging
from threading import Lock
from typing import Any, Generic, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=object)


class ObserverManager(Generic[T]):
    """
    Thread-safe list of observers for one event family.

    A failing observer is logged and skipped; the others are still notified
    and the controller never sees the exception.

    Example:
        ```python
        self._color_observers = ObserverManager[ColorObserver]("color")
        self._color_observers.register(panel)
        self._color_observers.notify("on_color_event", ColorEvent.COLOR_CHANGED, color=color)
        ```
    """

    def __init__(self, family: str = "observer"):
        self._observers: list[T] = []
        self._lock = Lock()
        self._family = family

    def register(self, observer: T) -> None:
        """Add an observer; registering twice is a no-op."""
        with self._lock:
            if observer in self._observers:
                logger.debug(f"{self._family} observer already registered: {observer}")
                return
            self._observers.append(observer)
        logger.debug(f"Registered {self._family} observer: {observer}")

    def unregister(self, observer: T) -> None:
        with self._lock:
            if observer not in self._observers:
                logger.warning(f"Attempted to unregister unknown {self._family} observer: {observer}")
                return
            self._observers.remove(observer)
        logger.debug(f"Unregistered {self._family} observer: {observer}")

    def notify(self, callback_name: str, *args: Any, **kwargs: Any) -> None:
        """Call ``callback_name(*args, **kwargs)`` on every registered observer."""
        with self._lock:
            snapshot = tuple(self._observers)

        for observer in snapshot:
            callback = getattr(observer, callback_name, None)
            if callback is None:
                logger.error(f"{self._family} observer {observer} has no method '{callback_name}'")
                continue
            try:
                callback(*args, **kwargs)
            except Exception as e:
                logger.error(
                    f"{self._family} observer {observer} failed in {callback_name}: {e}",
                    exc_info=True,
                )

    def __contains__(self, observer: T) -> bool:
        with self._lock:
            return observer in self._observers

    def __len__(self) -> int:
        with self._lock:
            return len(self._observers)
