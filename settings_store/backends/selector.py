"""
Backend Selector: fixed priority, primary extension store > secondary extension store > local.
Hosts exposing both extension APIs always get the primary. Resolution never fails.
"""

from __future__ import annotations

from typing import Any

from settings_store.core.types import BackendName
from settings_store.host.base import HostEnvironment


def has_sync_storage(api: Any) -> bool:
    """True if api exposes storage.sync."""
    storage = getattr(api, "storage", None)
    return storage is not None and getattr(storage, "sync", None) is not None


def detect_backend(host: HostEnvironment) -> BackendName:
    if has_sync_storage(host.chrome):
        return BackendName.PRIMARY  # chrome/edge extension
    if has_sync_storage(host.browser):
        return BackendName.SECONDARY  # firefox/safari extension
    return BackendName.LOCAL  # plain web page
