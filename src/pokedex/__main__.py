"""Allow ``python -m pokedex``."""

from pokedex.app import main

main()
