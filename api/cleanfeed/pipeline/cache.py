"""
Per-identifier verdict cache with a 24h TTL and a hard size ceiling.

Expired entries are removed lazily on read, and in bulk whenever a new
verdict is written. If the cache is still over its ceiling after dropping
expired entries, the oldest batch is evicted regardless of age.
"""

import logging
import threading
import time
from dataclasses import dataclass
from typing import Callable, Dict, Optional

from .verdict import Verdict

logger = logging.getLogger(__name__)

DEFAULT_TTL_MS = 24 * 60 * 60 * 1000
MAX_ENTRIES = 1000
EVICTION_BATCH = 200


def _wall_clock_ms() -> int:
    return int(time.time() * 1000)


@dataclass
class CacheEntry:
    identifier: str
    verdict: Verdict
    recorded_at: int


@dataclass
class CacheStats:
    size: int
    filtered: int


class VerdictCache:
    """
    Bounded identifier -> Verdict store.

    Keys are case-sensitive; callers normalize identifiers before use. The
    clock is a zero-argument callable returning milliseconds so tests can
    drive expiry without sleeping.
    """

    def __init__(
        self,
        ttl_ms: int = DEFAULT_TTL_MS,
        max_entries: int = MAX_ENTRIES,
        eviction_batch: int = EVICTION_BATCH,
        clock: Callable[[], int] = _wall_clock_ms,
    ):
        self.ttl_ms = ttl_ms
        self.max_entries = max_entries
        self.eviction_batch = eviction_batch
        self._clock = clock
        self._entries: Dict[str, CacheEntry] = {}
        self._lock = threading.Lock()

    def set(self, identifier: str, verdict: Verdict) -> None:
        """Insert or overwrite an entry, then run cleanup."""
        with self._lock:
            now = self._clock()
            self._entries[identifier] = CacheEntry(identifier, verdict, now)
            self._cleanup(now)

    def get(self, identifier: str) -> Optional[Verdict]:
        with self._lock:
            entry = self._entries.get(identifier)
            if entry is None:
                return None
            if self._expired(entry, self._clock()):
                del self._entries[identifier]
                return None
            return entry.verdict

    def has(self, identifier: str) -> bool:
        return self.get(identifier) is not None

    def clear(self) -> None:
        with self._lock:
            count = len(self._entries)
            self._entries.clear()
        logger.info(f"Cleared verdict cache ({count} entries)")

    def stats(self) -> CacheStats:
        """
        Counts over physically stored entries. Stale entries not yet removed
        by a read or a write are still included in ``size``.
        """
        with self._lock:
            filtered = sum(1 for e in self._entries.values() if e.verdict.should_filter)
            return CacheStats(size=len(self._entries), filtered=filtered)

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def __contains__(self, identifier: object) -> bool:
        return isinstance(identifier, str) and self.has(identifier)

    def _expired(self, entry: CacheEntry, now: int) -> bool:
        return now - entry.recorded_at > self.ttl_ms

    def _cleanup(self, now: int) -> None:
        # Caller holds the lock.
        stale = [k for k, e in self._entries.items() if self._expired(e, now)]
        for key in stale:
            del self._entries[key]

        if len(self._entries) > self.max_entries:
            oldest = sorted(self._entries.values(), key=lambda e: e.recorded_at)
            for entry in oldest[: self.eviction_batch]:
                del self._entries[entry.identifier]
            logger.info(
                f"Evicted {min(self.eviction_batch, len(oldest))} oldest entries "
                f"(size now {len(self._entries)})"
            )
