"""Online/offline signal shared by provider clients."""

import logging
import threading
from collections.abc import Callable

logger = logging.getLogger(__name__)

ConnectivityListener = Callable[[bool], None]


class ConnectivityMonitor:
    """Publishes connectivity change events to subscribed clients.

    The host application reports changes with ``set_online``; clients
    subscribe at construction and mirror the latest state in their
    ``is_available()``.
    """

    def __init__(self, online: bool = True):
        self._online = online
        self._listeners: list[ConnectivityListener] = []
        self._lock = threading.Lock()

    @property
    def online(self) -> bool:
        return self._online

    def subscribe(self, listener: ConnectivityListener) -> Callable[[], None]:
        """Register a listener for connectivity changes.

        Args:
            listener: Called with the new state on every change.

        Returns:
            A function that removes the listener again.
        """
        with self._lock:
            self._listeners.append(listener)

        def unsubscribe() -> None:
            with self._lock:
                if listener in self._listeners:
                    self._listeners.remove(listener)

        return unsubscribe

    def set_online(self, online: bool) -> None:
        """Report the current connectivity state, notifying on change."""
        with self._lock:
            if online == self._online:
                return
            self._online = online
            listeners = list(self._listeners)

        logger.info(f"Connectivity changed: {'online' if online else 'offline'}")
        for listener in listeners:
            listener(online)

    @property
    def listener_count(self) -> int:
        return len(self._listeners)
