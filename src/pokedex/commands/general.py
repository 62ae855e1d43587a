"""``help`` and ``exit``."""

from __future__ import annotations

import typer

from pokedex.commands.base import Session
from pokedex.output import print_data


def command_help(session: Session, args: list[str]) -> None:
    from pokedex.commands.registry import COMMANDS

    print_data("Welcome to the Pokedex!")
    print_data("Usage:")
    print_data("")
    for command in COMMANDS.values():
        print_data(f"{command.signature}: {command.description}")


def command_exit(session: Session, args: list[str]) -> None:
    print_data("Closing the Pokedex... Goodbye!")
    raise typer.Exit(code=0)
