"""
Shared exception types for settings_store.
Errors reported by a host backend are re-raised unmodified when they are exceptions;
only non-exception last-error objects are wrapped in BackendCallError.
"""

from __future__ import annotations

from typing import Any


class SettingsStoreError(Exception):
    """Base exception for settings_store; catch this for any package-raised error."""

    pass


class InvalidRequestError(SettingsStoreError, ValueError):
    """A read request was not a single-key default-wrapped mapping."""

    pass


class BackendCallError(SettingsStoreError):
    """
    A host storage call reported a last-error that is not itself an exception
    (e.g. an object carrying only a message). The host object is kept on native_error.
    """

    def __init__(self, native_error: Any, backend: str = "") -> None:
        self.native_error = native_error
        self.backend = backend
        message = getattr(native_error, "message", None) or str(native_error)
        prefix = f"{backend}: " if backend else ""
        super().__init__(f"{prefix}{message}")


__all__ = ["BackendCallError", "InvalidRequestError", "SettingsStoreError"]
