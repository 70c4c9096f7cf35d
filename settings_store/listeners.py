"""
Change Listener Normalizer helpers.

Every handler receives (changes, namespace) where changes maps key -> StorageChange.
Extension hosts deliver {"oldValue": ..., "newValue": ...} entries (either may be missing);
the local store delivers StorageEvent objects, one key per event.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Callable

from settings_store.core.types import NAMESPACE_LOCAL, Changes, StorageChange, StorageChangeHandler
from settings_store.host.base import StorageEvent


def _to_change(entry: Any) -> StorageChange:
    if isinstance(entry, StorageChange):
        return entry
    if isinstance(entry, Mapping):
        return StorageChange(old_value=entry.get("oldValue"), new_value=entry.get("newValue"))
    return StorageChange(
        old_value=getattr(entry, "old_value", None),
        new_value=getattr(entry, "new_value", None),
    )


def normalize_changes(raw: Mapping[str, Any]) -> Changes:
    """Convert a host change mapping into key -> StorageChange."""
    return {key: _to_change(entry) for key, entry in raw.items()}


def storage_event_listener(handler: StorageChangeHandler) -> Callable[[StorageEvent], None]:
    """
    Build the callback installed on a window for "storage" events.
    Events without a key (clear()) are ignored.
    """

    def _on_storage(event: StorageEvent) -> None:
        if event.key:
            changes = {event.key: StorageChange(old_value=event.old_value, new_value=event.new_value)}
            handler(changes, NAMESPACE_LOCAL)

    return _on_storage
