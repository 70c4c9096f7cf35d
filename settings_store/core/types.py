"""
Data contracts shared by every backend: backend identifiers, change events, handler signature.
Change events are normalized to StorageChange regardless of the originating backend.
"""

from __future__ import annotations

import enum
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Callable, Dict, Iterator, Optional, Union

Primitive = Union[str, int, float]

# Namespace tags carried by change events.
NAMESPACE_SYNC = "sync"
NAMESPACE_LOCAL = "local"

_CHANGE_KEYS = ("oldValue", "newValue")


class BackendName(str, enum.Enum):
    """Identifier of the persistence mechanism in use. Values match the host API names."""

    PRIMARY = "chrome.storage"
    SECONDARY = "browser.storage"
    LOCAL = "localStorage"

    @property
    def is_extension(self) -> bool:
        return self is not BackendName.LOCAL


@dataclass(frozen=True, eq=False)
class StorageChange(Mapping):
    """
    One changed key: value before and after the write (None when absent).
    Also reads as the host shape: change["oldValue"], change["newValue"]; compares equal
    to the equivalent dict.
    """

    old_value: Optional[Any] = None
    new_value: Optional[Any] = None

    def __getitem__(self, key: str) -> Any:
        if key == "oldValue":
            return self.old_value
        if key == "newValue":
            return self.new_value
        raise KeyError(key)

    def __iter__(self) -> Iterator[str]:
        return iter(_CHANGE_KEYS)

    def __len__(self) -> int:
        return len(_CHANGE_KEYS)

    def as_dict(self) -> Dict[str, Any]:
        """Host-shaped view: {"oldValue": ..., "newValue": ...}."""
        return {"oldValue": self.old_value, "newValue": self.new_value}


Changes = Dict[str, StorageChange]
StorageChangeHandler = Callable[[Changes, str], None]
