from __future__ import annotations

import threading
import time
from typing import Any, Callable, Dict, Optional, Tuple


DEFAULT_TTL_SECONDS = 60.0


class SummaryCache:
    """In-process TTL cache for rendered summaries.

    Entries are stored with the time they were written. A read treats an
    entry as absent once ``now - written_at >= ttl`` and drops it. There is
    no size bound; concurrent writers for one key simply overwrite each
    other.
    """

    def __init__(
        self,
        ttl: float = DEFAULT_TTL_SECONDS,
        time_func: Callable[[], float] = time.monotonic,
    ) -> None:
        if ttl <= 0:
            raise ValueError("ttl must be positive")
        self.ttl = ttl
        self._time_func = time_func
        self._storage: Dict[str, Tuple[float, Any]] = {}
        self._lock = threading.Lock()

    def get(self, key: str) -> Optional[Any]:
        now = self._time_func()
        with self._lock:
            item = self._storage.get(key)
            if item is None:
                return None
            written_at, payload = item
            if now - written_at >= self.ttl:
                self._storage.pop(key, None)
                return None
            return payload

    def put(self, key: str, payload: Any) -> None:
        written_at = self._time_func()
        with self._lock:
            self._storage[key] = (written_at, payload)

    def clear(self) -> None:
        with self._lock:
            self._storage.clear()

    def __len__(self) -> int:
        return len(self._storage)


__all__ = ["SummaryCache", "DEFAULT_TTL_SECONDS"]
