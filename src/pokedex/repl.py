"""The interactive read-eval-print loop.

:func:`open_session` wires a :class:`~pokedex.cache.Cache` and a
:class:`~pokedex.client.SyncClient` into a
:class:`~pokedex.commands.Session` and tears both down afterwards, stopping
the cache's reaper thread. :func:`run_repl` reads lines, looks the first word
up in the command table and runs it. Command failures are printed and the
loop keeps going; only ``exit`` or end of input leaves it.
"""

from __future__ import annotations

import random
from contextlib import contextmanager
from typing import Callable, Iterator, Optional

import httpx

from pokedex.cache import Cache
from pokedex.client import SyncClient
from pokedex.commands import Session, get_command
from pokedex.exceptions import PokedexError
from pokedex.models import GlobalConfig
from pokedex.output import debug, error, print_data

PROMPT = "Pokedex > "


def clean_input(text: str) -> list[str]:
    """Lower-case *text* and split it on whitespace."""
    return text.lower().split()


@contextmanager
def open_session(
    config: GlobalConfig,
    transport: Optional[httpx.BaseTransport] = None,
    rng: Optional[random.Random] = None,
) -> Iterator[Session]:
    """Create the cache and client for one REPL session.

    The cache's reaper is stopped when the block exits, however it exits.
    """
    cache = Cache(config.cache.interval_seconds)
    debug(f"Cache interval: {cache.interval}s")
    try:
        with SyncClient(config.request, transport=transport) as client:
            yield Session(cache=cache, client=client, rng=rng or random.Random())
    finally:
        cache.stop()


def _read_line() -> str:
    return input(PROMPT)


def run_repl(session: Session, read_line: Callable[[], str] = _read_line) -> None:
    """Run commands until ``exit`` or end of input.

    Args:
        session: Shared state passed to every command.
        read_line: Returns the next input line; raises :class:`EOFError`
            at end of input.

    Raises:
        typer.Exit: Raised by the ``exit`` command.
    """
    while True:
        try:
            line = read_line()
        except EOFError:
            print_data("")
            return

        words = clean_input(line)
        if not words:
            continue

        command = get_command(words[0])
        if command is None:
            print_data("Unknown command.")
            continue

        try:
            command.callback(session, words[1:])
        except PokedexError as exc:
            error(str(exc))
