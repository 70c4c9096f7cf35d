"""
Extension sync-storage adapter, shared by the primary and secondary vendor APIs.

get: callback-style native call wrapped in an asyncio future; the API's runtime.last_error,
if set while the callback runs, fails the future.
set: the native setter is already awaitable.
add_listener: storage.on_changed, entries normalized to StorageChange, namespace passed through.
"""

from __future__ import annotations

import asyncio
import inspect
import logging
from typing import Any, Dict, List, Mapping, Optional, Union

from settings_store.core.errors import BackendCallError
from settings_store.core.types import BackendName, Primitive, StorageChangeHandler
from settings_store.listeners import normalize_changes

from .base import StorageAdapter

logger = logging.getLogger(__name__)


class ExtensionStorageAdapter(StorageAdapter):
    """Adapter over an ExtensionApi-shaped object (storage.sync, storage.on_changed, runtime)."""

    def __init__(self, api: Any, name: BackendName) -> None:
        self._api = api
        self.name = name

    @property
    def _area(self) -> Any:
        return self._api.storage.sync

    def _last_error(self) -> Optional[Any]:
        runtime = getattr(self._api, "runtime", None)
        return getattr(runtime, "last_error", None)

    async def get(self, keys: Union[str, List[str]]) -> Dict[str, Any]:
        loop = asyncio.get_running_loop()
        future: asyncio.Future = loop.create_future()

        def _callback(items: Optional[Mapping[str, Any]]) -> None:
            if future.done():
                return
            error = self._last_error()
            if error is None:
                future.set_result(dict(items or {}))
            elif isinstance(error, BaseException):
                future.set_exception(error)
            else:
                future.set_exception(BackendCallError(error, backend=self.name.value))

        self._area.get(keys, _callback)
        return await future

    async def set(self, items: Mapping[str, Primitive]) -> None:
        result = self._area.set(dict(items))
        if inspect.isawaitable(result):
            await result

    def add_listener(self, handler: StorageChangeHandler) -> None:
        def _on_changed(changes: Mapping[str, Any], namespace: str) -> None:
            handler(normalize_changes(changes), namespace)

        self._api.storage.on_changed.add_listener(_on_changed)
        logger.debug("Installed %s change listener", self.name.value)
