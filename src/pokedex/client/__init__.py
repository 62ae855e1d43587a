"""HTTP client module for pokedex.

Provides :class:`SyncClient`, a blocking client backed by
:class:`httpx.Client`. Its :meth:`~SyncClient.fetch` method is the fetch
capability handed to :func:`~pokedex.cache.fetch_with_cache`.
"""

from pokedex.client.sync_client import SyncClient

__all__ = ["SyncClient"]
