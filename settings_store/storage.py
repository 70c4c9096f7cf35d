"""
Unified Accessor: one get/set/add_listener contract over whichever backend the host offers.

The backend is resolved once per SettingsStorage, lazily, and never changes afterward.
The process-wide instance (get_storage) is built from the process host on first use.
"""

from __future__ import annotations

import asyncio
import inspect
import logging
from typing import Any, Awaitable, Mapping, Optional, Set, Tuple, TypeVar, Union

from settings_store import config
from settings_store.backends.base import StorageAdapter
from settings_store.backends.local import LocalStorageAdapter
from settings_store.backends.registry import build_adapter
from settings_store.backends.selector import detect_backend
from settings_store.core.coerce import parse_digits
from settings_store.core.errors import InvalidRequestError
from settings_store.core.types import BackendName, Primitive, StorageChangeHandler
from settings_store.debounce import DebouncedWriter
from settings_store.host import HostEnvironment, get_host
from settings_store.listeners import storage_event_listener

logger = logging.getLogger(__name__)

V = TypeVar("V")

# Process-wide storage (set by get_storage)
_storage: Optional["SettingsStorage"] = None

# In-flight broadcast tasks; held until done so they are not collected mid-flight
_pending_sends: Set[asyncio.Task] = set()


def _single_entry(default_wrapped: Mapping[str, V]) -> Tuple[str, V]:
    if len(default_wrapped) != 1:
        raise InvalidRequestError(
            f"get() takes exactly one {{key: default}} entry, got {len(default_wrapped)}: {list(default_wrapped)}"
        )
    ((key, default),) = default_wrapped.items()
    return key, default


class SettingsStorage:
    """
    Settings store bound to one host.

    Usage:
        storage = SettingsStorage(host)
        theme = await storage.get({"theme": "dark"})
        await storage.set({"theme": "light", "font_size": 14})
        storage.throttled_set({"font_size": 15})
    """

    def __init__(
        self,
        host: Optional[HostEnvironment] = None,
        *,
        debounce_s: Optional[float] = None,
        always_attach_local_listener: Optional[bool] = None,
    ) -> None:
        self._host = host if host is not None else get_host()
        self._backend_name: Optional[BackendName] = None
        self._adapter: Optional[StorageAdapter] = None
        if always_attach_local_listener is None:
            always_attach_local_listener = config.always_attach_local_listener()
        self._always_attach_local = always_attach_local_listener
        period = debounce_s if debounce_s is not None else config.debounce_quiet_period_s()
        self.throttled_set = DebouncedWriter(self.set, period_s=period)

    @property
    def host(self) -> HostEnvironment:
        return self._host

    @property
    def backend_name(self) -> BackendName:
        """Backend in use. Resolved on first access, constant afterward."""
        if self._backend_name is None:
            self._backend_name = detect_backend(self._host)
            logger.debug("Resolved storage backend: %s", self._backend_name.value)
        return self._backend_name

    @property
    def adapter(self) -> StorageAdapter:
        if self._adapter is None:
            self._adapter = build_adapter(self.backend_name, self._host)
        return self._adapter

    async def get(self, default_wrapped: Mapping[str, V]) -> Union[V, Any]:
        """
        Read one setting. default_wrapped is {key: default}; the default comes back when nothing is stored.
        Extension backends return the stored value as-is; the local store's strings go through parse_digits.
        """
        key, default = _single_entry(default_wrapped)
        adapter = self.adapter
        if isinstance(adapter, LocalStorageAdapter):
            raw = adapter.get_item(key)
            return parse_digits(raw) if raw is not None else default
        items = await adapter.get(key)
        value = items.get(key)
        return value if value is not None else default

    async def set(self, items: Mapping[str, Primitive]) -> None:
        """
        Write settings. Extension backends take the whole mapping in one native call;
        the local store is written key by key (no atomicity across keys).
        """
        await self.adapter.set(items)

    def add_listener(self, handler: StorageChangeHandler) -> None:
        """
        Subscribe handler(changes, namespace) to the resolved backend's change events.
        With always_attach_local, extension backends also get the window's storage events.
        """
        self.adapter.add_listener(handler)
        if self._always_attach_local and self.backend_name.is_extension and self._host.window is not None:
            self._host.window.add_event_listener("storage", storage_event_listener(handler))
            logger.debug("Also installed localStorage change listener")

    def send(self, message: Any) -> None:
        """Fire-and-forget broadcast to other contexts. Dropped when the host has no message runtime."""
        for api in (self._host.chrome, self._host.browser):
            send_message = getattr(getattr(api, "runtime", None), "send_message", None)
            if send_message is not None:
                break
        else:
            logger.debug("Host has no runtime.send_message; message dropped")
            return
        result = send_message(message)
        if not inspect.isawaitable(result):
            return
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            logger.debug("No running event loop; send_message response not awaited")
            if inspect.iscoroutine(result):
                result.close()
            return
        task = loop.create_task(_await_response(result))
        _pending_sends.add(task)
        task.add_done_callback(_discard_response)


async def _await_response(result: Awaitable[Any]) -> Any:
    return await result


def _discard_response(task: asyncio.Task) -> None:
    _pending_sends.discard(task)
    if not task.cancelled() and task.exception() is not None:
        logger.debug("send_message failed: %s", task.exception())


def get_storage() -> SettingsStorage:
    """Return the process-wide storage, built from the process host on first use."""
    global _storage
    if _storage is None:
        _storage = SettingsStorage(get_host())
    return _storage


def storage_backend_name() -> BackendName:
    """Backend used by the process-wide storage. Constant for the process lifetime."""
    return get_storage().backend_name
