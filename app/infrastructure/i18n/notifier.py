"""Change notification for translation state observers.

Listeners are zero-argument callables. A notification carries no payload;
listeners re-read whatever state they need.
"""

from typing import Callable, List

from infrastructure.logging import get_module_logger

logger = get_module_logger()

Listener = Callable[[], None]


class ChangeNotifier:
    """Registry of listeners called synchronously on every change."""

    def __init__(self):
        self._listeners: List[Listener] = []
        self._disposed = False

    @property
    def has_listeners(self) -> bool:
        return bool(self._listeners)

    def add_listener(self, listener: Listener) -> None:
        """Subscribe listener to change notifications.

        Raises:
            RuntimeError: If the notifier has been disposed.
        """
        if self._disposed:
            raise RuntimeError("Cannot add a listener to a disposed notifier")
        self._listeners.append(listener)

    def remove_listener(self, listener: Listener) -> None:
        """Unsubscribe listener. Unknown listeners are ignored."""
        try:
            self._listeners.remove(listener)
        except ValueError:
            pass

    def notify_listeners(self) -> None:
        """Call every listener in subscription order.

        If a listener raises, the error is logged and the remaining
        listeners are still called.
        """
        for listener in list(self._listeners):
            try:
                listener()
            except Exception as e:
                listener_name = getattr(listener, "__name__", repr(listener))
                logger.error(
                    "listener_failed",
                    listener=listener_name,
                    error=str(e),
                )

    def dispose(self) -> None:
        """Drop every listener; later subscriptions are rejected."""
        self._listeners.clear()
        self._disposed = True
