from __future__ import annotations

from typing import Any, Protocol

from ..core.enums import StoreKey


class RecordStore(Protocol):
    """Key-value persistence of whole collections.

    Each logical collection (see StoreKey) is read and written as one value.
    There are no transactions across keys.
    """

    def get(self, key: StoreKey, default: Any) -> Any:
        """Return the stored value for key, or default when absent."""

        raise NotImplementedError

    def save(self, key: StoreKey, value: Any) -> None:
        raise NotImplementedError
