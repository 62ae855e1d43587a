"""Synchronous HTTP client for the PokeAPI.

:class:`SyncClient` wraps :class:`httpx.Client` and exposes a single
:meth:`~SyncClient.fetch` capability that returns the raw response body.
It knows nothing about caching; :func:`~pokedex.cache.fetch_with_cache`
composes the two. Failed requests are mapped to typed exceptions and are
never retried.
"""

from __future__ import annotations

from typing import Optional

import httpx

from pokedex.exceptions import ConnectionError_, NotFoundError, ServerError
from pokedex.models import RequestConfig


class SyncClient:
    """Blocking client that fetches raw JSON payloads.

    Must be used as a context manager so that the underlying transport is
    opened and closed.

    Args:
        config: Base URL and timeout settings.
        transport: Optional :class:`httpx.BaseTransport`, used by tests to
            plug in an :class:`httpx.MockTransport`.

    Example::

        with SyncClient(RequestConfig()) as client:
            body = client.fetch(client.location_areas_url())
    """

    def __init__(
        self,
        config: RequestConfig,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        self._config = config
        self._transport = transport
        self._client: Optional[httpx.Client] = None

    # ------------------------------------------------------------------ #
    # Context manager
    # ------------------------------------------------------------------ #

    def __enter__(self) -> SyncClient:
        self._client = httpx.Client(
            timeout=self._config.timeout,
            headers={"Accept": "application/json"},
            follow_redirects=True,
            transport=self._transport,
        )
        return self

    def __exit__(self, *args: object) -> None:
        if self._client:
            self._client.close()
            self._client = None

    # ------------------------------------------------------------------ #
    # URLs
    # ------------------------------------------------------------------ #

    @property
    def base_url(self) -> str:
        return self._config.base_url.rstrip("/")

    def location_areas_url(self) -> str:
        """URL of the first page of the location-area listing."""
        return f"{self.base_url}/location-area/"

    def location_area_url(self, name: str) -> str:
        return f"{self.base_url}/location-area/{name}/"

    def pokemon_url(self, name: str) -> str:
        return f"{self.base_url}/pokemon/{name}/"

    # ------------------------------------------------------------------ #
    # Fetch
    # ------------------------------------------------------------------ #

    def fetch(self, url: str) -> bytes:
        """GET *url* and return the raw response body.

        Args:
            url: Fully-qualified resource URL.

        Returns:
            The response body bytes.

        Raises:
            NotFoundError: On 404.
            ServerError: On any other status >= 400.
            ConnectionError_: On network / timeout errors.
        """
        assert self._client is not None, "Client not initialised -- use as context manager"

        try:
            response = self._client.get(url)
        except httpx.TransportError as exc:
            raise ConnectionError_(f"Request to {url} failed: {exc}") from exc

        self._map_response_error(response)
        return response.content

    def _map_response_error(self, response: httpx.Response) -> None:
        """Raise a typed exception for error HTTP status codes."""
        status = response.status_code
        if status < 400:
            return

        msg = response.text[:200].strip() if response.text else ""
        prefix = f"HTTP {status}"
        full_msg = f"{prefix}: {msg}" if msg else prefix

        if status == 404:
            raise NotFoundError(full_msg)
        raise ServerError(full_msg)
