"""``explore <area>`` -- list the creatures that can be encountered in an area."""

from __future__ import annotations

from pokedex.commands.base import Session, load, require_arg
from pokedex.models import LocationAreaDetail
from pokedex.output import print_data


def command_explore(session: Session, args: list[str]) -> None:
    area_name = require_arg(args, "location area name")
    area = load(session, session.client.location_area_url(area_name), LocationAreaDetail)

    print_data(f"Exploring {area.name}...")
    print_data("Found Pokemon:")
    for encounter in area.pokemon_encounters:
        print_data(f" - {encounter.pokemon.name}")
