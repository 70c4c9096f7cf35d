"""
Backend adapters for the three host storage mechanisms and the selector choosing between them.
"""

from __future__ import annotations

from .base import StorageAdapter
from .extension import ExtensionStorageAdapter
from .local import LocalStorageAdapter
from .registry import build_adapter, register_adapter
from .selector import detect_backend, has_sync_storage

__all__ = [
    "ExtensionStorageAdapter",
    "LocalStorageAdapter",
    "StorageAdapter",
    "build_adapter",
    "detect_backend",
    "has_sync_storage",
    "register_adapter",
]
