"""In-process TTL cache implementing CacheProtocol.

Entries:
    CacheEntry(data, timestamp, ttl_seconds). An entry is expired once
    now > timestamp + ttl_seconds. Reads never refresh the timestamp.

Expiry:
    get/exists drop expired entries they encounter (lazy). A background
    sweep task, started with start() and cancelled with close(), drops the
    rest; correctness never depends on it.

Eviction:
    Inserting a new key into a full cache first evicts the single entry with
    the smallest timestamp (oldest write, not least recently read). A cache
    built with max_size=None never evicts; entries leave only by expiry or
    deletion.

Disabled mode:
    get always misses and set does nothing (fail-open).
"""

import asyncio
import contextlib
import time
from collections.abc import Callable
from dataclasses import asdict, dataclass
from typing import Any

from src.domain.protocols import LoggerProtocol


@dataclass(slots=True)
class CacheEntry:
    """Cached value with its write time and lifetime.

    Attributes:
        data: Cached value.
        timestamp: Clock reading (seconds) at write time.
        ttl_seconds: Lifetime in seconds.
    """

    data: Any
    timestamp: float
    ttl_seconds: float

    def is_expired(self, now: float) -> bool:
        return now > self.timestamp + self.ttl_seconds


@dataclass(slots=True)
class CacheStats:
    """Counters since creation (or the last clear)."""

    hits: int = 0
    misses: int = 0
    sets: int = 0
    deletes: int = 0
    evictions: int = 0
    expirations: int = 0
    size: int = 0

    @property
    def hit_rate(self) -> float:
        total = self.hits + self.misses
        return self.hits / total if total else 0.0

    def to_dict(self) -> dict[str, Any]:
        return {**asdict(self), "hit_rate": self.hit_rate}


class MemoryCache:
    """Tenant-agnostic TTL cache with max-size eviction.

    Keys carry the tenant scope (see TenantCacheKeys); the cache itself only
    sees strings.

    Args:
        enabled: False turns every read into a miss and every write into a
            no-op.
        max_size: Maximum number of entries, or None for no bound.
        default_ttl_seconds: TTL used when set() is called without one.
        cleanup_interval_seconds: Sweep period of the background task.
        clock: Seconds source, time.time by default.
        logger: Optional structured logger.

    Example:
        >>> cache = MemoryCache(max_size=2)
        >>> await cache.set("gatekeeper:acme:role:1", {"id": "1"}, ttl=60)
        >>> await cache.get("gatekeeper:acme:role:1")
        {'id': '1'}
    """

    def __init__(
        self,
        *,
        enabled: bool = True,
        max_size: int | None = 1000,
        default_ttl_seconds: float = 3600,
        cleanup_interval_seconds: float = 60.0,
        clock: Callable[[], float] = time.time,
        logger: LoggerProtocol | None = None,
    ) -> None:
        if max_size is not None and max_size < 1:
            raise ValueError("max_size must be at least 1")
        if default_ttl_seconds <= 0:
            raise ValueError("default_ttl_seconds must be positive")
        if cleanup_interval_seconds <= 0:
            raise ValueError("cleanup_interval_seconds must be positive")

        self._enabled = enabled
        self._max_size = max_size
        self._default_ttl = default_ttl_seconds
        self._cleanup_interval = cleanup_interval_seconds
        self._clock = clock
        self._logger = logger

        self._entries: dict[str, CacheEntry] = {}
        self._lock = asyncio.Lock()
        self._stats = CacheStats()
        self._sweep_task: asyncio.Task[None] | None = None

    @property
    def enabled(self) -> bool:
        return self._enabled

    @property
    def max_size(self) -> int | None:
        return self._max_size

    @property
    def size(self) -> int:
        return len(self._entries)

    # =========================================================================
    # CacheProtocol
    # =========================================================================

    async def get(self, key: str) -> Any | None:
        if not self._enabled:
            return None

        async with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                self._stats.misses += 1
                return None
            if entry.is_expired(self._clock()):
                del self._entries[key]
                self._stats.expirations += 1
                self._stats.misses += 1
                return None
            self._stats.hits += 1
            return entry.data

    async def set(self, key: str, value: Any, ttl: float | None = None) -> None:
        if not self._enabled:
            return
        ttl_seconds = self._default_ttl if ttl is None else ttl
        if ttl_seconds <= 0:
            raise ValueError("ttl must be positive")

        async with self._lock:
            if (
                self._max_size is not None
                and key not in self._entries
                and len(self._entries) >= self._max_size
            ):
                self._evict_oldest()
            self._entries[key] = CacheEntry(
                data=value, timestamp=self._clock(), ttl_seconds=ttl_seconds
            )
            self._stats.sets += 1

    async def delete(self, key: str) -> bool:
        async with self._lock:
            if self._entries.pop(key, None) is None:
                return False
            self._stats.deletes += 1
            return True

    async def exists(self, key: str) -> bool:
        if not self._enabled:
            return False
        async with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                return False
            if entry.is_expired(self._clock()):
                del self._entries[key]
                self._stats.expirations += 1
                return False
            return True

    async def delete_prefix(self, prefix: str) -> int:
        async with self._lock:
            doomed = [key for key in self._entries if key.startswith(prefix)]
            for key in doomed:
                del self._entries[key]
            self._stats.deletes += len(doomed)
        return len(doomed)

    async def clear(self) -> None:
        async with self._lock:
            self._entries.clear()
            self._stats = CacheStats()

    # =========================================================================
    # Introspection
    # =========================================================================

    def keys(self) -> list[str]:
        """Current keys in insertion order (expired entries included until swept)."""
        return list(self._entries)

    def stats(self) -> CacheStats:
        """Snapshot of the counters."""
        snapshot = CacheStats(**asdict(self._stats))
        snapshot.size = len(self._entries)
        return snapshot

    # =========================================================================
    # Background sweep
    # =========================================================================

    async def sweep(self) -> int:
        """Drop every expired entry. Returns the number removed."""
        async with self._lock:
            now = self._clock()
            expired = [k for k, e in self._entries.items() if e.is_expired(now)]
            for key in expired:
                del self._entries[key]
            self._stats.expirations += len(expired)

        if expired and self._logger is not None:
            self._logger.debug("Cache sweep removed expired entries", count=len(expired))
        return len(expired)

    def start(self) -> None:
        """Start the periodic sweep on the running event loop (idempotent).

        Raises:
            RuntimeError: If called outside a running event loop.
        """
        if self._sweep_task is not None and not self._sweep_task.done():
            return
        self._sweep_task = asyncio.get_running_loop().create_task(
            self._sweep_loop(), name="memory-cache-sweep"
        )

    @property
    def is_running(self) -> bool:
        return self._sweep_task is not None and not self._sweep_task.done()

    async def close(self) -> None:
        """Cancel the sweep task and wait for it to finish."""
        task, self._sweep_task = self._sweep_task, None
        if task is None:
            return
        task.cancel()
        with contextlib.suppress(asyncio.CancelledError):
            await task

    async def _sweep_loop(self) -> None:
        while True:
            await asyncio.sleep(self._cleanup_interval)
            try:
                await self.sweep()
            except Exception as e:
                if self._logger is not None:
                    self._logger.error("Cache sweep failed", error=e)

    def _evict_oldest(self) -> None:
        oldest = min(self._entries, key=lambda k: self._entries[k].timestamp)
        del self._entries[oldest]
        self._stats.evictions += 1
        if self._logger is not None:
            self._logger.debug("Cache entry evicted", key=oldest)
