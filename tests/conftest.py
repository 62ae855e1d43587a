"""Shared test fixtures for pokedex.

Provides fixtures for isolating configuration, managing output state,
serving canned API payloads through :class:`httpx.MockTransport`, and
building a ready-to-use :class:`~pokedex.commands.Session`.
"""

from __future__ import annotations

import json
import random
from pathlib import Path
from typing import Any, Callable, Iterator

import httpx
import pytest

from pokedex.cache import Cache
from pokedex.client import SyncClient
from pokedex.commands import Session
from pokedex.models import RequestConfig
from pokedex.output import OutputFormat, OutputManager, reset_output, set_output


BASE_URL = "https://pokeapi.test/api/v2"


# ---------------------------------------------------------------------------
# Auto-reset global output state between tests
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def _reset_output_between_tests() -> Iterator[None]:
    """Reset the global OutputManager after every test.

    The OutputManager caches references to sys.stdout/sys.stderr at
    creation time, which go stale once a test's capture ends.
    """
    yield
    reset_output()


# ---------------------------------------------------------------------------
# Config isolation fixture
# ---------------------------------------------------------------------------


@pytest.fixture
def isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point XDG directories at tmp_path and clear POKEDEX_* variables."""
    monkeypatch.setattr("pokedex.config._is_xdg_platform", lambda: True)
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "config"))
    monkeypatch.setenv("XDG_DATA_HOME", str(tmp_path / "data"))
    for var in ["POKEDEX_CACHE_INTERVAL", "POKEDEX_BASE_URL"]:
        monkeypatch.delenv(var, raising=False)
    monkeypatch.chdir(tmp_path)
    return tmp_path


# ---------------------------------------------------------------------------
# Output fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def plain_output() -> Iterator[OutputManager]:
    """Install a PLAIN, colourless OutputManager so capsys sees plain text."""
    output = OutputManager(format=OutputFormat.PLAIN, no_color=True)
    set_output(output)
    yield output
    reset_output()


# ---------------------------------------------------------------------------
# Cache fixture
# ---------------------------------------------------------------------------


@pytest.fixture
def cache() -> Iterator[Cache]:
    """A cache with a long interval whose reaper is stopped after the test."""
    c = Cache(interval=300)
    yield c
    c.stop()


# ---------------------------------------------------------------------------
# Fake API
# ---------------------------------------------------------------------------


class FakeAPI:
    """Serves JSON payloads keyed by URL and records every request made."""

    def __init__(self) -> None:
        self.routes: dict[str, tuple[int, bytes]] = {}
        self.requests: list[str] = []

    def add_json(self, url: str, data: Any, status_code: int = 200) -> None:
        self.routes[url] = (status_code, json.dumps(data).encode())

    def add_raw(self, url: str, body: bytes, status_code: int = 200) -> None:
        self.routes[url] = (status_code, body)

    def calls_to(self, url: str) -> int:
        return self.requests.count(url)

    def handler(self, request: httpx.Request) -> httpx.Response:
        url = str(request.url)
        self.requests.append(url)
        status_code, body = self.routes.get(url, (404, b"Not Found"))
        return httpx.Response(status_code, content=body)

    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)


def _area_page(
    names: list[str],
    next_url: str | None = None,
    previous_url: str | None = None,
) -> dict[str, Any]:
    return {
        "count": 1089,
        "next": next_url,
        "previous": previous_url,
        "results": [
            {"name": name, "url": f"{BASE_URL}/location-area/{i}/"}
            for i, name in enumerate(names, start=1)
        ],
    }


def _pokemon_payload(name: str, base_experience: int = 64) -> dict[str, Any]:
    return {
        "id": 1,
        "name": name,
        "base_experience": base_experience,
        "height": 7,
        "weight": 69,
        "stats": [
            {"base_stat": 45, "effort": 0, "stat": {"name": "hp", "url": ""}},
            {"base_stat": 49, "effort": 0, "stat": {"name": "attack", "url": ""}},
        ],
        "types": [
            {"slot": 1, "type": {"name": "grass", "url": ""}},
            {"slot": 2, "type": {"name": "poison", "url": ""}},
        ],
        "abilities": [],
    }


@pytest.fixture
def base_url() -> str:
    return BASE_URL


@pytest.fixture
def fake_api() -> FakeAPI:
    return FakeAPI()


@pytest.fixture
def area_page() -> Callable[..., dict[str, Any]]:
    """Builder for a location-area listing page."""
    return _area_page


@pytest.fixture
def pokemon_payload() -> Callable[..., dict[str, Any]]:
    """Builder for a creature payload."""
    return _pokemon_payload


class FixedRandom(random.Random):
    """A Random whose ``random()`` always returns the same value."""

    def __init__(self, value: float) -> None:
        super().__init__()
        self.value = value

    def random(self) -> float:
        return self.value


@pytest.fixture
def fixed_rng() -> Callable[[float], random.Random]:
    """Factory for a Random whose random() always returns the given value."""
    return FixedRandom


@pytest.fixture
def make_session(
    fake_api: FakeAPI, cache: Cache
) -> Iterator[Callable[..., Session]]:
    """Factory building a Session over the fake API and the shared cache."""
    clients: list[SyncClient] = []

    def _make(rng: random.Random | None = None) -> Session:
        client = SyncClient(RequestConfig(base_url=BASE_URL), transport=fake_api.transport())
        client.__enter__()
        clients.append(client)
        return Session(cache=cache, client=client, rng=rng or random.Random(0))

    yield _make

    for client in clients:
        client.__exit__(None, None, None)
