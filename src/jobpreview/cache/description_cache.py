"""TTL cache from job posting URL to extracted description."""

from __future__ import annotations

import asyncio
import logging
import time
from collections.abc import Callable
from dataclasses import dataclass
from datetime import timedelta

logger = logging.getLogger(__name__)

DEFAULT_TTL = timedelta(hours=24)
DEFAULT_SWEEP_INTERVAL = timedelta(hours=1)


@dataclass(frozen=True)
class CacheEntry:
    """A cached description and the clock reading when it was fetched."""

    description: str
    fetched_at: float


class DescriptionCache:
    """Process-local description cache with a periodic expiry sweep.

    Keys are the request URL exactly as given. An entry is served while its
    age is below the TTL; the background sweep deletes entries older than
    the TTL so URLs that are never requested again do not accumulate.

    All access goes through one ``asyncio.Lock``. Two concurrent misses for
    the same URL both fetch and the later ``put`` wins.
    """

    def __init__(
        self,
        ttl: timedelta = DEFAULT_TTL,
        sweep_interval: timedelta = DEFAULT_SWEEP_INTERVAL,
        clock: Callable[[], float] = time.monotonic,
    ):
        if ttl <= timedelta(0):
            raise ValueError("ttl must be positive")
        if sweep_interval <= timedelta(0):
            raise ValueError("sweep_interval must be positive")

        self._ttl_seconds = ttl.total_seconds()
        self._sweep_seconds = sweep_interval.total_seconds()
        self._clock = clock
        self._entries: dict[str, CacheEntry] = {}
        self._lock = asyncio.Lock()
        self._sweep_task: asyncio.Task[None] | None = None

    def __len__(self) -> int:
        return len(self._entries)

    @property
    def ttl(self) -> timedelta:
        return timedelta(seconds=self._ttl_seconds)

    @property
    def sweep_interval(self) -> timedelta:
        return timedelta(seconds=self._sweep_seconds)

    @property
    def running(self) -> bool:
        return self._sweep_task is not None and not self._sweep_task.done()

    def _age(self, entry: CacheEntry, now: float) -> float:
        return now - entry.fetched_at

    async def get(self, url: str) -> str | None:
        """Return the cached description if present and still fresh."""
        async with self._lock:
            entry = self._entries.get(url)
            if entry is None:
                return None
            if self._age(entry, self._clock()) >= self._ttl_seconds:
                # Left for the sweep to delete.
                return None
            return entry.description

    async def put(self, url: str, description: str) -> None:
        """Insert or overwrite the entry for ``url`` stamped with the current time."""
        async with self._lock:
            self._entries[url] = CacheEntry(description=description, fetched_at=self._clock())
        logger.debug("Cached description for %s (%d chars)", url, len(description))

    async def sweep(self) -> int:
        """Delete every entry older than the TTL. Returns count of deleted."""
        async with self._lock:
            now = self._clock()
            expired = [
                url
                for url, entry in self._entries.items()
                if self._age(entry, now) > self._ttl_seconds
            ]
            for url in expired:
                del self._entries[url]
            remaining = len(self._entries)

        if expired:
            logger.info("Cache sweep removed %d expired entries (%d left)", len(expired), remaining)
        return len(expired)

    async def clear(self) -> int:
        """Remove all entries. Returns count of deleted."""
        async with self._lock:
            count = len(self._entries)
            self._entries.clear()
        return count

    @property
    def stats(self) -> dict[str, float | int | bool]:
        """Get cache statistics."""
        return {
            "entries": len(self._entries),
            "ttl_seconds": self._ttl_seconds,
            "sweep_interval_seconds": self._sweep_seconds,
            "sweep_running": self.running,
        }

    def start(self) -> None:
        """Start the background sweep on the running event loop."""
        if self.running:
            return
        self._sweep_task = asyncio.create_task(self._sweep_loop(), name="description-cache-sweep")
        logger.debug("Cache sweep started (every %.0fs)", self._sweep_seconds)

    async def stop(self) -> None:
        """Cancel the background sweep and wait for it to finish."""
        task = self._sweep_task
        self._sweep_task = None
        if task is None:
            return

        task.cancel()
        try:
            await task
        except asyncio.CancelledError:
            pass
        logger.debug("Cache sweep stopped")

    async def _sweep_loop(self) -> None:
        while True:
            await asyncio.sleep(self._sweep_seconds)
            await self.sweep()
