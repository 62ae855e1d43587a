"""In-memory response cache with a background reaper thread.

Stores raw response payloads keyed by the fully-qualified request URL.
Entries are never refreshed on read; a reaper thread wakes every
``interval`` seconds and drops every entry older than ``interval``.

Eviction is periodic, not on access: between sweeps a stale entry can still
be returned by :meth:`Cache.get`. The window is bounded by ``interval``.

See Also:
    :func:`~pokedex.cache.fetch.fetch_with_cache` -- the "check cache, else
    fetch and populate" helper every command goes through.
"""

from __future__ import annotations

import logging
import threading
import time
from dataclasses import dataclass
from typing import Callable, Optional

from pokedex.cache.rwlock import ReadWriteLock

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CacheEntry:
    """A cached payload and the clock reading taken when it was stored."""

    created_at: float
    value: bytes


class Cache:
    """Thread-safe, time-expiring key/value store for raw payloads.

    ``get`` takes the shared side of a :class:`ReadWriteLock`; ``put`` and the
    reaper's sweep take the exclusive side, so no reader ever sees the map in
    the middle of a deletion.

    Args:
        interval: Seconds after which an entry becomes eligible for eviction.
            Also the period of the reaper thread.
        clock: Monotonic time source. Overridable for tests.

    Example::

        cache = Cache(interval=300)
        cache.put("https://pokeapi.co/api/v2/location-area/", payload)
        data, found = cache.get("https://pokeapi.co/api/v2/location-area/")
        cache.stop()
    """

    def __init__(
        self,
        interval: float,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        if interval <= 0:
            raise ValueError(f"Cache interval must be positive, got {interval!r}")
        self._interval = float(interval)
        self._clock = clock
        self._entries: dict[str, CacheEntry] = {}
        self._lock = ReadWriteLock()
        self._stopped = threading.Event()
        self._stop_lock = threading.Lock()
        self._reaper: Optional[threading.Thread] = threading.Thread(
            target=self._reap_loop,
            name="pokedex-cache-reaper",
            daemon=True,
        )
        self._reaper.start()

    # ------------------------------------------------------------------ #
    # Public API
    # ------------------------------------------------------------------ #

    @property
    def interval(self) -> float:
        """The eviction interval in seconds."""
        return self._interval

    def put(self, key: str, value: bytes) -> None:
        """Insert or overwrite the entry for *key*, stamped with the current time."""
        with self._lock.write():
            self._entries[key] = CacheEntry(created_at=self._clock(), value=value)

    def get(self, key: str) -> tuple[bytes, bool]:
        """Look up *key*.

        Reading does not extend the entry's lifetime.

        Returns:
            ``(value, True)`` on a hit, ``(b"", False)`` on a miss.
        """
        with self._lock.read():
            entry = self._entries.get(key)
        if entry is None:
            return b"", False
        return entry.value, True

    def stop(self) -> None:
        """Stop the reaper thread and wait for it to exit.

        Safe to call more than once. Waits for a sweep that is already
        running to finish. Entries stay readable after the reaper stops.
        """
        with self._stop_lock:
            if self._reaper is None:
                return
            self._stopped.set()
            if self._reaper is not threading.current_thread():
                self._reaper.join()
            self._reaper = None
        logger.debug("Cache reaper stopped")

    def __len__(self) -> int:
        with self._lock.read():
            return len(self._entries)

    def __contains__(self, key: object) -> bool:
        with self._lock.read():
            return key in self._entries

    def __enter__(self) -> Cache:
        return self

    def __exit__(self, *args: object) -> None:
        self.stop()

    # ------------------------------------------------------------------ #
    # Reaper
    # ------------------------------------------------------------------ #

    def _reap_loop(self) -> None:
        # Event.wait returns True once stop() is called, False on each tick.
        while not self._stopped.wait(self._interval):
            self._reap()

    def _reap(self) -> None:
        """Remove every entry whose age is strictly greater than the interval."""
        with self._lock.write():
            now = self._clock()
            expired = [
                key
                for key, entry in self._entries.items()
                if now - entry.created_at > self._interval
            ]
            for key in expired:
                del self._entries[key]
        if expired:
            logger.debug("Reaped %d expired cache entries", len(expired))
