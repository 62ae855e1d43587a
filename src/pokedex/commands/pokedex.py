"""Catching and the caught collection -- ``catch``, ``inspect`` and ``pokedex``.

A catch attempt succeeds with probability ``1 - min(base_experience / 100, 0.9)``,
so rare, experienced creatures are harder to catch but never impossible.
"""

from __future__ import annotations

from pokedex.commands.base import Session, load, require_arg
from pokedex.models import Pokemon
from pokedex.output import print_data

MAX_ESCAPE_CHANCE = 0.9


def catch_chance(base_experience: int) -> float:
    """Probability of catching a creature with the given base experience."""
    escape = min(base_experience / 100.0, MAX_ESCAPE_CHANCE)
    return 1.0 - escape


def command_catch(session: Session, args: list[str]) -> None:
    name = require_arg(args, "Pokemon name")

    print_data(f"Throwing a Pokeball at {name}...")
    pokemon = load(session, session.client.pokemon_url(name), Pokemon)

    if session.rng.random() < catch_chance(pokemon.base_experience):
        session.caught[pokemon.name] = pokemon
        print_data(f"{pokemon.name} was caught!")
        print_data("You may now inspect it with the inspect command.")
    else:
        print_data(f"{pokemon.name} escaped!")


def command_inspect(session: Session, args: list[str]) -> None:
    name = require_arg(args, "Pokemon name")
    pokemon = session.caught.get(name)
    if pokemon is None:
        print_data("you have not caught that pokemon")
        return

    print_data(f"Name: {pokemon.name}")
    print_data(f"Height: {pokemon.height}")
    print_data(f"Weight: {pokemon.weight}")
    print_data("Stats:")
    for stat in pokemon.stats:
        print_data(f" -{stat.stat.name}: {stat.base_stat}")
    print_data("Types:")
    for slot in pokemon.types:
        print_data(f" - {slot.type.name}")


def command_pokedex(session: Session, args: list[str]) -> None:
    if not session.caught:
        print_data("Your Pokedex is empty")
        return

    print_data("Your Pokedex:")
    for name in session.caught:
        print_data(f" - {name}")
