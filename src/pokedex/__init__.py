"""pokedex -- an interactive command-line explorer for the PokeAPI.

The explorer runs a small REPL (``Pokedex > ``) whose commands page through
location areas, explore an area's encounters, and try to catch the creatures
found there. Every remote payload goes through a short-lived in-memory cache
so that paging back and forth does not hit the network twice.

Typical session::

    $ pokedex
    Pokedex > map
    Pokedex > explore canalave-city-area
    Pokedex > catch tentacool

Modules:
    app: Typer application and console-script entry point.
    cache: In-memory response cache with a background reaper.
    client: HTTP client that fetches raw payloads from the API.
    commands: REPL command registry and handlers.
    models: Pydantic models for configuration and API payloads.
    config: XDG-aware configuration loading and precedence resolution.
    exceptions: Exception hierarchy with exit-code mapping.
    output: stdout/stderr formatting system with Rich support.
"""

__version__ = "0.1.0"
