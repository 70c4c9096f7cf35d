"""
Adapter interface: one implementation per host storage mechanism.
Adapters translate the native call shape (callback, awaitable, string-only) into coroutines.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Mapping, Union

from settings_store.core.types import BackendName, Primitive, StorageChangeHandler


def key_list(keys: Union[str, List[str]]) -> List[str]:
    return [keys] if isinstance(keys, str) else list(keys)


class StorageAdapter(ABC):
    """
    get/set/add_listener against one native backend.
    get omits keys that were never set; callers treat absence as "use default".
    """

    name: BackendName

    @abstractmethod
    async def get(self, keys: Union[str, List[str]]) -> Dict[str, Any]:
        """Return stored items for keys; absent keys are omitted."""
        ...

    @abstractmethod
    async def set(self, items: Mapping[str, Primitive]) -> None:
        """Write all items. Failures propagate to the caller."""
        ...

    @abstractmethod
    def add_listener(self, handler: StorageChangeHandler) -> None:
        """Subscribe handler to committed writes, including those from other contexts."""
        ...
