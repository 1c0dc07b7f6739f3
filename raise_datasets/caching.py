import asyncio
import time
from typing import Any, Callable


class TTLCache:
    """In-process expiring key/value store shared by concurrent requests.

    Entries are replaced whole and expire lazily on read. There is no size
    bound: keys are listing queries, and only a handful of those are ever
    requested.
    """

    def __init__(self, ttl_seconds: int = 300, clock: Callable[[], float] = time.monotonic):
        self.ttl = ttl_seconds
        self._clock = clock
        self._store: dict[str, tuple[float, Any]] = {}
        self._lock = asyncio.Lock()

    async def get(self, key: str) -> Any | None:
        async with self._lock:
            v = self._store.get(key)
            if not v:
                return None
            expires_at, data = v
            if self._clock() >= expires_at:
                self._store.pop(key, None)
                return None
            return data

    async def set(self, key: str, value: Any, ttl: float | None = None):
        lifetime = self.ttl if ttl is None else ttl
        async with self._lock:
            self._store[key] = (self._clock() + lifetime, value)

    async def invalidate(self, key: str):
        async with self._lock:
            self._store.pop(key, None)

    async def clear(self):
        async with self._lock:
            self._store.clear()

    def __len__(self) -> int:
        """Number of live entries; expired ones still awaiting eviction are skipped."""
        now = self._clock()
        return sum(1 for expires_at, _ in self._store.values() if now < expires_at)

    def backend_name(self) -> str:
        return "memory"
