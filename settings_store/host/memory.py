"""
In-process string store with web storage-event semantics.

A MemoryOrigin holds the items shared by all contexts of one origin. Each context gets its
own MemoryLocalStorage view and MemoryWindow; a write through one view notifies the windows
of every other context, never the writer's own window.
"""

from __future__ import annotations

import logging
from typing import Callable, Dict, Iterator, List, Optional

from .base import HostEnvironment, StorageEvent

logger = logging.getLogger(__name__)


class MemoryWindow:
    """Minimal event target: listeners per event type, dispatched in registration order."""

    def __init__(self) -> None:
        self._listeners: Dict[str, List[Callable[[StorageEvent], None]]] = {}

    def add_event_listener(self, event_type: str, listener: Callable[[StorageEvent], None]) -> None:
        self._listeners.setdefault(event_type, []).append(listener)

    def listener_count(self, event_type: str) -> int:
        return len(self._listeners.get(event_type, []))

    def dispatch_event(self, event_type: str, event: StorageEvent) -> None:
        for listener in list(self._listeners.get(event_type, [])):
            listener(event)


class MemoryOrigin:
    """Shared items and attached windows for one origin."""

    def __init__(self) -> None:
        self._items: Dict[str, str] = {}
        self._windows: List[MemoryWindow] = []

    def new_context(self) -> HostEnvironment:
        """Return a fresh host for a new context of this origin (local fallback only)."""
        window = MemoryWindow()
        self._windows.append(window)
        return HostEnvironment(local_storage=MemoryLocalStorage(self, window), window=window)

    def _notify(self, source: Optional[MemoryWindow], event: StorageEvent) -> None:
        for window in list(self._windows):
            if window is not source:
                window.dispatch_event("storage", event)


class MemoryLocalStorage:
    """String-only key-value view of a MemoryOrigin, bound to one context's window."""

    def __init__(self, origin: Optional[MemoryOrigin] = None, window: Optional[MemoryWindow] = None) -> None:
        self._origin = origin or MemoryOrigin()
        self._window = window

    def get_item(self, key: str) -> Optional[str]:
        return self._origin._items.get(key)

    def set_item(self, key: str, value: str) -> None:
        value = str(value)
        old = self._origin._items.get(key)
        self._origin._items[key] = value
        if old != value:
            self._origin._notify(self._window, StorageEvent(key=key, old_value=old, new_value=value))

    def remove_item(self, key: str) -> None:
        old = self._origin._items.pop(key, None)
        if old is not None:
            self._origin._notify(self._window, StorageEvent(key=key, old_value=old, new_value=None))

    def clear(self) -> None:
        if not self._origin._items:
            return
        self._origin._items.clear()
        # clear() is announced with key=None
        self._origin._notify(self._window, StorageEvent(key=None))

    def keys(self) -> Iterator[str]:
        return iter(list(self._origin._items))

    def __len__(self) -> int:
        return len(self._origin._items)
