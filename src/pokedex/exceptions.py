"""Exception hierarchy for pokedex.

All exceptions inherit from :class:`PokedexError`, which carries an
``exit_code`` attribute mapped to a constant from :mod:`pokedex.exit_codes`.
The REPL catches ``PokedexError`` raised by a command, prints it and keeps
reading input. :func:`pokedex.app.main` maps an escaping ``PokedexError`` to
its exit code, while unexpected exceptions produce a crash log.

Subclass hierarchy::

    PokedexError (exit 1)
    +-- InvalidUsageError   (exit 2)
    +-- NotFoundError       (exit 4)
    +-- ServerError         (exit 5)
    +-- ConnectionError_    (exit 6)
    +-- DecodeError         (exit 7)
    +-- ConfigError         (exit 1)
"""

from pokedex.exit_codes import (
    EXIT_CONNECTION_ERROR,
    EXIT_DECODE_ERROR,
    EXIT_GENERIC_FAILURE,
    EXIT_INVALID_USAGE,
    EXIT_NOT_FOUND,
    EXIT_SERVER_ERROR,
)


class PokedexError(Exception):
    """Base exception for all pokedex errors.

    Args:
        message: Human-readable error description printed to stderr.
        exit_code: Optional override for the class-level exit code.
    """

    exit_code: int = EXIT_GENERIC_FAILURE

    def __init__(self, message: str, exit_code: int | None = None):
        super().__init__(message)
        if exit_code is not None:
            self.exit_code = exit_code


class InvalidUsageError(PokedexError):
    """Raised when a command is missing a required argument."""

    exit_code = EXIT_INVALID_USAGE


class NotFoundError(PokedexError):
    """Raised when the API returns HTTP 404 (unknown area or creature)."""

    exit_code = EXIT_NOT_FOUND


class ServerError(PokedexError):
    """Raised when the API returns any other error status."""

    exit_code = EXIT_SERVER_ERROR


class ConnectionError_(PokedexError):
    """Raised on network-level failures (timeout, DNS resolution, connection refused).

    Named with a trailing underscore to avoid shadowing the built-in
    ``ConnectionError``.
    """

    exit_code = EXIT_CONNECTION_ERROR


class DecodeError(PokedexError):
    """Raised when a fetched or cached payload does not match the expected model."""

    exit_code = EXIT_DECODE_ERROR


class ConfigError(PokedexError):
    """Raised for configuration problems (invalid JSON, bad values)."""

    exit_code = EXIT_GENERIC_FAILURE
