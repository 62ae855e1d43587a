"""REPL commands for pokedex.

Each module implements one or more command callbacks with the signature
``callback(session, args) -> None``:

* :mod:`~pokedex.commands.general` -- ``help`` and ``exit``.
* :mod:`~pokedex.commands.map` -- ``map`` and ``mapb`` (area paging).
* :mod:`~pokedex.commands.explore` -- ``explore <area>``.
* :mod:`~pokedex.commands.pokedex` -- ``catch``, ``inspect`` and ``pokedex``.

:data:`~pokedex.commands.registry.COMMANDS` maps each command name to its
:class:`~pokedex.commands.base.Command`. Callbacks report failures by raising
:class:`~pokedex.exceptions.PokedexError`.
"""

from pokedex.commands.base import Command, Session
from pokedex.commands.registry import COMMANDS, get_command

__all__ = ["COMMANDS", "Command", "Session", "get_command"]
