"""Cache-aware fetching.

:func:`fetch_with_cache` is the single place that knows how the cache and
the network collaborate. It is payload-agnostic: callers decode the bytes
they get back, and a decode failure is theirs to report. The entry stays
cached either way.
"""

from __future__ import annotations

from typing import Callable

from pokedex.cache.cache import Cache
from pokedex.output import debug

Fetcher = Callable[[str], bytes]
"""A fetch capability: takes a URL, returns the raw body or raises."""


def fetch_with_cache(cache: Cache, key: str, fetch: Fetcher) -> bytes:
    """Return the payload for *key*, from *cache* if present, else via *fetch*.

    On a miss the fetched bytes are stored under *key* before being returned.
    Exceptions raised by *fetch* propagate unchanged and nothing is cached,
    so the next call for the same key goes back to the network.

    Args:
        cache: The response cache.
        key: The fully-qualified resource URL.
        fetch: Called with *key* on a cache miss.

    Returns:
        The raw payload bytes.
    """
    data, found = cache.get(key)
    if found:
        debug(f"Cache hit: {key}")
        return data

    debug(f"Cache miss: {key}")
    data = fetch(key)
    cache.put(key, data)
    return data
