"""Shared building blocks for REPL commands.

:class:`Session` is the mutable state every command receives: the response
cache, the HTTP client, the pagination cursors, and the caught collection.
:class:`Command` is one row of the command registry.
"""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import Callable, Optional, TypeVar

from pydantic import BaseModel, ValidationError

from pokedex.cache import Cache, fetch_with_cache
from pokedex.client import SyncClient
from pokedex.exceptions import DecodeError, InvalidUsageError
from pokedex.models import Pokemon

ModelT = TypeVar("ModelT", bound=BaseModel)


@dataclass
class Session:
    """State shared by all commands for the lifetime of one REPL.

    Attributes:
        cache: Response cache consulted before every fetch.
        client: Open HTTP client supplying the fetch capability.
        next_url: Next page of the area listing, or ``None`` before the
            first ``map`` and after the last page.
        previous_url: Previous page of the area listing, or ``None`` on the
            first page.
        caught: Caught creatures by name. Only ever grows.
        rng: Random source for catch attempts.
    """

    cache: Cache
    client: SyncClient
    next_url: Optional[str] = None
    previous_url: Optional[str] = None
    caught: dict[str, Pokemon] = field(default_factory=dict)
    rng: random.Random = field(default_factory=random.Random)


CommandCallback = Callable[[Session, list[str]], None]


@dataclass(frozen=True)
class Command:
    """A named REPL command and the callable that implements it."""

    name: str
    description: str
    callback: CommandCallback
    usage: str = ""

    @property
    def signature(self) -> str:
        return f"{self.name} {self.usage}".strip()


def load(session: Session, url: str, model: type[ModelT]) -> ModelT:
    """Fetch *url* through the cache and decode it as *model*.

    A payload that fails validation raises :class:`DecodeError` but stays in
    the cache.
    """
    data = fetch_with_cache(session.cache, url, session.client.fetch)
    try:
        return model.model_validate_json(data)
    except ValidationError as exc:
        raise DecodeError(f"Unexpected payload from {url}: {exc}") from exc


def require_arg(args: list[str], what: str) -> str:
    """Return the first argument or raise :class:`InvalidUsageError`."""
    if not args:
        raise InvalidUsageError(f"please provide a {what}")
    return args[0]
