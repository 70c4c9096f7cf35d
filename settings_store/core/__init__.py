"""
Stable facade: shared types, errors and the digit coercion rule.
No imports from backends, host or storage.
"""

from __future__ import annotations

from .coerce import parse_digits
from .errors import BackendCallError, InvalidRequestError, SettingsStoreError
from .types import (
    NAMESPACE_LOCAL,
    NAMESPACE_SYNC,
    BackendName,
    Changes,
    Primitive,
    StorageChange,
    StorageChangeHandler,
)

# Do not add exports without updating __all__.
__all__ = [
    "BackendCallError",
    "BackendName",
    "Changes",
    "InvalidRequestError",
    "NAMESPACE_LOCAL",
    "NAMESPACE_SYNC",
    "Primitive",
    "SettingsStoreError",
    "StorageChange",
    "StorageChangeHandler",
    "parse_digits",
]
