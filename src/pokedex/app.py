"""Typer application and CLI entry point for pokedex.

Running ``pokedex`` with no sub-command starts the interactive REPL. The
``config`` sub-command group manages the configuration file.

The :func:`main` function is the console-script entry point declared in
``pyproject.toml``. It installs a SIGINT handler and invokes the Typer app.
:class:`~pokedex.exceptions.PokedexError` exits with the error's code;
anything else is written to a crash log under the data directory.
"""

from __future__ import annotations

import logging
import signal
import sys
import traceback
from datetime import datetime
from typing import Any, Optional

import typer
from rich.console import Console
from rich.logging import RichHandler

from pokedex import __version__
from pokedex.config_commands import config_app
from pokedex.exit_codes import EXIT_GENERIC_FAILURE
from pokedex.output import OutputFormat


app = typer.Typer(
    name="pokedex",
    help="Explore the Pokemon world from your terminal.",
    add_completion=False,
    rich_markup_mode="rich",
)

app.add_typer(config_app, name="config", help="Configuration management.")


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"pokedex {__version__}")
        raise typer.Exit()


def _configure_logging(verbose: bool, no_color: bool) -> None:
    """Route the package's loggers to stderr through Rich."""
    logger = logging.getLogger("pokedex")
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    for handler in list(logger.handlers):
        if isinstance(handler, RichHandler):
            logger.removeHandler(handler)
    logger.addHandler(
        RichHandler(
            console=Console(stderr=True, no_color=no_color),
            show_path=False,
        )
    )


def _resolve_output_format(json_output: bool, plain_output: bool) -> OutputFormat:
    """Pick the output format: the flags first, then ``output.format`` from the config file."""
    if json_output:
        return OutputFormat.JSON
    if plain_output:
        return OutputFormat.PLAIN

    from pokedex.config import load_global_config
    from pokedex.exceptions import ConfigError

    try:
        return load_global_config().output.format
    except ConfigError:
        # A broken file is reported by the command that reads it; ``config reset`` still runs.
        return OutputFormat.AUTO


@app.callback(invoke_without_command=True)
def main_callback(
    ctx: typer.Context,
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
    cache_interval: Optional[float] = typer.Option(
        None, "--cache-interval", help="Cache eviction interval in seconds."
    ),
    base_url: Optional[str] = typer.Option(
        None, "--base-url", help="API root URL."
    ),
    json_output: bool = typer.Option(
        False, "--json", help="JSON output for config commands."
    ),
    plain_output: bool = typer.Option(
        False, "--plain", help="Plain text output for config commands."
    ),
    no_color: bool = typer.Option(
        False, "--no-color", help="Disable color output."
    ),
    quiet: bool = typer.Option(
        False, "--quiet", "-q", help="Suppress non-essential output."
    ),
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Enable debug output."
    ),
) -> None:
    """Start the interactive explorer, or run a sub-command.

    Initialises the global :class:`~pokedex.output.OutputManager` and
    logging from the flags. Without a sub-command, resolves the
    configuration and runs the REPL until ``exit`` or end of input.
    """
    from pokedex.output import OutputManager, set_output

    fmt = _resolve_output_format(json_output, plain_output)
    set_output(OutputManager(format=fmt, no_color=no_color, quiet=quiet, verbose=verbose))
    _configure_logging(verbose, no_color)

    if ctx.invoked_subcommand is not None:
        return

    from pokedex.config import resolve_config
    from pokedex.repl import open_session, run_repl

    config = resolve_config(cli_cache_interval=cache_interval, cli_base_url=base_url)
    with open_session(config) as session:
        run_repl(session)


def _setup_signal_handlers() -> None:
    """Install a SIGINT handler so Ctrl-C exits cleanly."""

    def _handler(signum: int, frame: Any) -> None:  # noqa: ANN401
        sys.stderr.write("\nCancelled.\n")
        sys.exit(130)

    signal.signal(signal.SIGINT, _handler)


def _write_crash_log(exc: Exception) -> str:
    """Write the current traceback to the data directory and return its path."""
    from pokedex.config import get_data_dir

    logs_dir = get_data_dir() / "logs"
    logs_dir.mkdir(parents=True, exist_ok=True)
    timestamp = datetime.now().strftime("%Y%m%d-%H%M%S")
    log_path = logs_dir / f"crash-{timestamp}.log"
    log_path.write_text(traceback.format_exc())
    return str(log_path)


def main() -> None:
    """CLI entry point invoked by the ``pokedex`` console script.

    Raises:
        SystemExit: Always raised (either by Typer or explicitly).
    """
    _setup_signal_handlers()
    try:
        app()
    except SystemExit:
        raise
    except KeyboardInterrupt:
        sys.stderr.write("\nCancelled.\n")
        sys.exit(130)
    except Exception as exc:
        from pokedex.exceptions import PokedexError
        from pokedex.output import error

        if isinstance(exc, PokedexError):
            error(str(exc))
            sys.exit(exc.exit_code)
        else:
            log_path = _write_crash_log(exc)
            error(f"Unexpected error. Debug log: {log_path}")
            sys.exit(EXIT_GENERIC_FAILURE)
