"""
Host capability contracts.

A host exposes up to three storage mechanisms:
- chrome: primary extension API (storage.sync, storage.on_changed, runtime)
- browser: secondary vendor extension API with the same shape
- local_storage + window: same-origin string-only store and its storage events

Only the shapes below are relied upon; concrete host objects are duck-typed.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Dict, List, Mapping, Optional, Protocol, Union, runtime_checkable

from settings_store.core.types import Primitive


@dataclass(frozen=True)
class StorageEvent:
    """Event delivered to other contexts after a local store write. key is None for clear()."""

    key: Optional[str]
    old_value: Optional[str] = None
    new_value: Optional[str] = None


@runtime_checkable
class SyncStorageArea(Protocol):
    """Synchronized extension area: callback-style get, awaitable set."""

    def get(
        self,
        keys: Union[str, List[str]],
        callback: Callable[[Dict[str, Any]], None],
    ) -> None:
        """Look up keys and invoke callback with the items found (absent keys omitted)."""
        ...

    def set(self, items: Mapping[str, Primitive]) -> Awaitable[None]: ...


@runtime_checkable
class ChangeEventSource(Protocol):
    def add_listener(self, callback: Callable[[Mapping[str, Any], str], None]) -> None: ...


@runtime_checkable
class StorageApi(Protocol):
    sync: SyncStorageArea
    on_changed: ChangeEventSource


@runtime_checkable
class RuntimeApi(Protocol):
    """last_error is set by the host for the duration of a failing callback."""

    last_error: Optional[Any]

    def send_message(self, message: Any) -> Any: ...


@runtime_checkable
class ExtensionApi(Protocol):
    storage: StorageApi
    runtime: RuntimeApi


@runtime_checkable
class StringStore(Protocol):
    def get_item(self, key: str) -> Optional[str]: ...

    def set_item(self, key: str, value: str) -> None: ...


@runtime_checkable
class EventTarget(Protocol):
    def add_event_listener(self, event_type: str, listener: Callable[[StorageEvent], None]) -> None: ...


@dataclass
class HostEnvironment:
    """
    Everything the current process can reach. Missing mechanisms are None.
    chrome and browser are ExtensionApi-shaped objects; they are not type-checked here.
    """

    chrome: Optional[Any] = None
    browser: Optional[Any] = None
    local_storage: Optional[StringStore] = None
    window: Optional[EventTarget] = None
