"""Fake extension hosts and local stores for storage tests (no browser)."""

from .hosts import (
    FailingLocalStorage,
    FakeChangeEvents,
    FakeExtensionApi,
    FakeRuntime,
    FakeSyncArea,
    LastErrorMessage,
    make_extension_host,
)

__all__ = [
    "FailingLocalStorage",
    "FakeChangeEvents",
    "FakeExtensionApi",
    "FakeRuntime",
    "FakeSyncArea",
    "LastErrorMessage",
    "make_extension_host",
]
