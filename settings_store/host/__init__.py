"""
Host environment: capability contracts and the process-wide host.
The default host is an in-process local store (the fallback every context has).
"""

from __future__ import annotations

import logging
from typing import Optional

from .base import (
    ChangeEventSource,
    EventTarget,
    ExtensionApi,
    HostEnvironment,
    RuntimeApi,
    StorageApi,
    StorageEvent,
    StringStore,
    SyncStorageArea,
)
from .memory import MemoryLocalStorage, MemoryOrigin, MemoryWindow

logger = logging.getLogger(__name__)

# Process host (set by get_host or set_host)
_host: Optional[HostEnvironment] = None


def get_host() -> HostEnvironment:
    """Return the process host. Defaults to a fresh in-process local store context."""
    global _host
    if _host is None:
        _host = MemoryOrigin().new_context()
        logger.debug("No host configured; using in-process local store")
    return _host


def set_host(host: HostEnvironment) -> None:
    """Set the process host. Call at startup, before the default storage is first used."""
    global _host
    _host = host


__all__ = [
    "ChangeEventSource",
    "EventTarget",
    "ExtensionApi",
    "HostEnvironment",
    "MemoryLocalStorage",
    "MemoryOrigin",
    "MemoryWindow",
    "RuntimeApi",
    "StorageApi",
    "StorageEvent",
    "StringStore",
    "SyncStorageArea",
    "get_host",
    "set_host",
]
