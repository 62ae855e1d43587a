"""The REPL command table, keyed by command name."""

from __future__ import annotations

from pokedex.commands.base import Command
from pokedex.commands.explore import command_explore
from pokedex.commands.general import command_exit, command_help
from pokedex.commands.map import command_map, command_map_back
from pokedex.commands.pokedex import command_catch, command_inspect, command_pokedex

COMMANDS: dict[str, Command] = {
    command.name: command
    for command in (
        Command("help", "Displays a help message", command_help),
        Command("exit", "Exit the Pokedex", command_exit),
        Command("map", "Displays the next 20 location areas in the Pokemon world", command_map),
        Command(
            "mapb",
            "Displays the previous 20 location areas in the Pokemon world",
            command_map_back,
        ),
        Command(
            "explore",
            "Displays a list of all Pokemon in a location area",
            command_explore,
            usage="<location_area>",
        ),
        Command("catch", "Attempt to catch a Pokemon", command_catch, usage="<pokemon>"),
        Command(
            "inspect", "View details about a caught Pokemon", command_inspect, usage="<pokemon>"
        ),
        Command("pokedex", "List all caught Pokemon", command_pokedex),
    )
}


def get_command(name: str) -> Command | None:
    return COMMANDS.get(name)
