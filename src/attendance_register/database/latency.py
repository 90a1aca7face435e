from __future__ import annotations

import time
from typing import Any, Callable, Mapping, Optional

from ..core.enums import StoreKey
from .record_store import RecordStore


class SimulatedLatencyStore(RecordStore):
    """Decorator that adds a fixed round-trip delay to every store call.

    `save_latency_ms` overrides the delay for writes of specific keys
    (attendance saves are slower than the rest).
    """

    def __init__(
        self,
        inner: RecordStore,
        *,
        latency_ms: int,
        save_latency_ms: Optional[Mapping[StoreKey, int]] = None,
        sleep: Callable[[float], None] = time.sleep,
    ):
        self._inner = inner
        self._latency_ms = max(int(latency_ms), 0)
        self._save_latency_ms = dict(save_latency_ms or {})
        self._sleep = sleep

    def _wait(self, ms: int) -> None:
        if ms > 0:
            self._sleep(ms / 1000.0)

    def get(self, key: StoreKey, default: Any) -> Any:
        self._wait(self._latency_ms)
        return self._inner.get(key, default)

    def save(self, key: StoreKey, value: Any) -> None:
        self._wait(self._save_latency_ms.get(key, self._latency_ms))
        self._inner.save(key, value)
