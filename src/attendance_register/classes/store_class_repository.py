from __future__ import annotations

from typing import Sequence

from ..core.enums import StoreKey
from ..database.record_store import RecordStore
from .model import ClassInfo
from .repository import ClassRepository


class StoreClassRepository(ClassRepository):
    def __init__(self, store: RecordStore):
        self._store = store

    def list_all(self) -> Sequence[ClassInfo]:
        rows = self._store.get(StoreKey.CLASSES, [])
        return [ClassInfo(class_id=r["id"], name=r["name"]) for r in rows]

    def save_all(self, classes: Sequence[ClassInfo]) -> None:
        self._store.save(StoreKey.CLASSES, [{"id": c.class_id, "name": c.name} for c in classes])
