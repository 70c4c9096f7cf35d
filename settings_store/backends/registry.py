"""
Adapter registry: backend name -> factory taking the host.
Explicit registration only.
"""

from __future__ import annotations

import logging
from typing import Callable, Dict

from settings_store.core.types import BackendName
from settings_store.host.base import HostEnvironment

from .base import StorageAdapter
from .extension import ExtensionStorageAdapter
from .local import LocalStorageAdapter

logger = logging.getLogger(__name__)

AdapterFactory = Callable[[HostEnvironment], StorageAdapter]


def _local(host: HostEnvironment) -> StorageAdapter:
    if host.local_storage is None:
        raise ValueError("Host has no local_storage; the local fallback requires one")
    return LocalStorageAdapter(host.local_storage, host.window)


_AdapterRegistry: Dict[BackendName, AdapterFactory] = {
    BackendName.PRIMARY: lambda host: ExtensionStorageAdapter(host.chrome, BackendName.PRIMARY),
    BackendName.SECONDARY: lambda host: ExtensionStorageAdapter(host.browser, BackendName.SECONDARY),
    BackendName.LOCAL: _local,
}


def register_adapter(name: BackendName, factory: AdapterFactory) -> None:
    """Register an adapter factory for a backend name. Overwrites if same name."""
    _AdapterRegistry[name] = factory


def build_adapter(name: BackendName, host: HostEnvironment) -> StorageAdapter:
    factory = _AdapterRegistry.get(name)
    if factory is None:
        raise KeyError(f"No adapter registered for '{name.value}'. Available: {[n.value for n in _AdapterRegistry]}")
    adapter = factory(host)
    logger.debug("Built %s adapter for %s", type(adapter).__name__, name.value)
    return adapter
