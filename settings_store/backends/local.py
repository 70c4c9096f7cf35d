"""
Local fallback adapter over a same-origin string-only store.

Values are written as str(value), one key at a time, with no rollback: a failure partway
through set() leaves earlier keys written and propagates the store's exception.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Mapping, Optional, Union

from settings_store.core.types import BackendName, Primitive, StorageChangeHandler
from settings_store.host.base import EventTarget, StringStore
from settings_store.listeners import storage_event_listener

from .base import StorageAdapter, key_list

logger = logging.getLogger(__name__)


class LocalStorageAdapter(StorageAdapter):
    name = BackendName.LOCAL

    def __init__(self, store: StringStore, window: Optional[EventTarget] = None) -> None:
        self._store = store
        self._window = window

    def get_item(self, key: str) -> Optional[str]:
        """Raw stored string, or None if the key was never written."""
        return self._store.get_item(key)

    async def get(self, keys: Union[str, List[str]]) -> Dict[str, Any]:
        items: Dict[str, Any] = {}
        for key in key_list(keys):
            raw = self._store.get_item(key)
            if raw is not None:
                items[key] = raw
        return items

    async def set(self, items: Mapping[str, Primitive]) -> None:
        for key, value in items.items():
            self._store.set_item(key, str(value))

    def add_listener(self, handler: StorageChangeHandler) -> None:
        if self._window is None:
            logger.debug("Host has no window; local change listener not installed")
            return
        self._window.add_event_listener("storage", storage_event_listener(handler))
        logger.debug("Installed localStorage change listener")
