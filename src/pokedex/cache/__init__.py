"""In-memory response caching for pokedex.

This package provides :class:`Cache`, a thread-safe store of raw response
payloads keyed by URL whose entries are evicted by a background reaper once
they are older than the configured interval, and :func:`fetch_with_cache`,
the helper that consults the cache before falling back to the network.

The cache is created once per REPL session from the ``cache`` section of the
global configuration (:class:`~pokedex.models.CacheConfig`) and lives only as
long as the process.
"""

from pokedex.cache.cache import Cache, CacheEntry
from pokedex.cache.fetch import Fetcher, fetch_with_cache

__all__ = ["Cache", "CacheEntry", "Fetcher", "fetch_with_cache"]
