"""
Top-level public API surface.
One get/set/subscribe contract over the primary extension store, the secondary vendor's
extension store, or the same-origin local store, whichever the host offers first.
"""

from __future__ import annotations

from ._version import __version__
from .core import BackendName, InvalidRequestError, SettingsStoreError, StorageChange, parse_digits
from .debounce import DebouncedWriter
from .host import HostEnvironment, get_host, set_host
from .storage import SettingsStorage, get_storage, storage_backend_name

# Do not add exports without updating __all__.
__all__ = [
    "__version__",
    "BackendName",
    "DebouncedWriter",
    "HostEnvironment",
    "InvalidRequestError",
    "SettingsStorage",
    "SettingsStoreError",
    "StorageChange",
    "get_host",
    "get_storage",
    "parse_digits",
    "set_host",
    "storage_backend_name",
]
