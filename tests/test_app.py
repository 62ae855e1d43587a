"""Tests for the Typer entry point and config sub-commands."""

from __future__ import annotations

import json

import pytest
import typer
from typer.testing import CliRunner

from pokedex import __version__
from pokedex.app import app, main
from pokedex.config import global_config_path, load_global_config
from pokedex.exceptions import NotFoundError
from pokedex.models import GlobalConfig
from pokedex.output import OutputFormat


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture(autouse=True)
def _isolated(isolated_config):
    """Every test runs against a throwaway config directory."""


@pytest.fixture
def no_reaper(monkeypatch):
    """Record the caches the REPL creates so tests can assert they were stopped."""
    import pokedex.repl as repl_module

    created = []
    real_cache = repl_module.Cache

    def _factory(interval):
        cache = real_cache(interval)
        created.append(cache)
        return cache

    monkeypatch.setattr(repl_module, "Cache", _factory)
    return created


class TestRoot:
    def test_version(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert f"pokedex {__version__}" in result.output

    def test_repl_help_then_exit(self, runner: CliRunner, no_reaper) -> None:
        result = runner.invoke(app, ["--plain", "--no-color"], input="help\nexit\n")

        assert result.exit_code == 0
        assert "Pokedex > " in result.output
        assert "Welcome to the Pokedex!" in result.output
        assert "Closing the Pokedex... Goodbye!" in result.output
        assert len(no_reaper) == 1
        assert no_reaper[0]._reaper is None

    def test_repl_ends_on_eof(self, runner: CliRunner, no_reaper) -> None:
        result = runner.invoke(app, ["--plain", "--no-color"], input="pokedex\n")

        assert result.exit_code == 0
        assert "Your Pokedex is empty" in result.output
        assert no_reaper[0]._reaper is None

    def test_cache_interval_flag(self, runner: CliRunner, no_reaper) -> None:
        result = runner.invoke(app, ["--cache-interval", "42", "--plain"], input="exit\n")
        assert result.exit_code == 0
        assert no_reaper[0].interval == 42

    def test_format_flags_describe_config_scope(self) -> None:
        params = {p.name: p for p in typer.main.get_command(app).params}
        assert "config" in params["json_output"].help
        assert "config" in params["plain_output"].help

    def test_invalid_cache_interval_is_config_error(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["--cache-interval", "0"], input="exit\n")
        assert result.exit_code != 0
        assert "Invalid configuration override" in str(result.exception)


class TestConfigCommands:
    def test_show_defaults(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["--quiet", "--json", "config", "show"])
        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["cache"]["interval_seconds"] == 300
        assert data["request"]["base_url"] == "https://pokeapi.co/api/v2"

    def test_show_reflects_environment(self, runner: CliRunner, monkeypatch) -> None:
        monkeypatch.setenv("POKEDEX_CACHE_INTERVAL", "15")
        result = runner.invoke(app, ["--quiet", "--json", "config", "show"])
        assert result.exit_code == 0
        assert json.loads(result.stdout)["cache"]["interval_seconds"] == 15

    def test_set_interval(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["config", "set", "cache.interval_seconds", "60"])
        assert result.exit_code == 0
        assert load_global_config().cache.interval_seconds == 60

    def test_set_base_url(self, runner: CliRunner) -> None:
        result = runner.invoke(
            app, ["config", "set", "request.base_url", "http://localhost:8000/api/v2"]
        )
        assert result.exit_code == 0
        assert load_global_config().request.base_url == "http://localhost:8000/api/v2"

    @pytest.mark.parametrize(
        ("key", "value"),
        [
            ("nope", "1"),
            ("cache.nope", "1"),
            ("cache", "1"),
            ("cache.interval_seconds", "soon"),
            ("cache.interval_seconds", "-5"),
        ],
    )
    def test_set_rejects_bad_input(self, runner: CliRunner, key: str, value: str) -> None:
        result = runner.invoke(app, ["config", "set", key, value])
        assert result.exit_code == 2
        assert not global_config_path().exists()

    def test_output_format_setting_applies_to_show(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["config", "set", "output.format", "json"])
        assert result.exit_code == 0
        assert load_global_config().output.format == OutputFormat.JSON

        result = runner.invoke(app, ["--quiet", "config", "show"])
        assert result.exit_code == 0
        assert json.loads(result.stdout)["output"]["format"] == "json"

    def test_flag_beats_output_format_setting(self, runner: CliRunner) -> None:
        runner.invoke(app, ["config", "set", "output.format", "json"])
        result = runner.invoke(app, ["--quiet", "--plain", "config", "show"])
        assert result.exit_code == 0
        assert "cache\t" in result.stdout

    def test_unknown_output_format_rejected(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["config", "set", "output.format", "bogus"])
        assert result.exit_code == 2
        assert not global_config_path().exists()

    def test_reset_repairs_broken_file(self, runner: CliRunner) -> None:
        global_config_path().write_text("{not json", encoding="utf-8")
        result = runner.invoke(app, ["config", "reset", "--force"])
        assert result.exit_code == 0
        assert load_global_config() == GlobalConfig()

    def test_reset_with_force(self, runner: CliRunner) -> None:
        runner.invoke(app, ["config", "set", "cache.interval_seconds", "60"])
        result = runner.invoke(app, ["config", "reset", "--force"])
        assert result.exit_code == 0
        assert load_global_config().cache.interval_seconds == 300

    def test_reset_declined(self, runner: CliRunner) -> None:
        runner.invoke(app, ["config", "set", "cache.interval_seconds", "60"])
        result = runner.invoke(app, ["config", "reset"], input="n\n")
        assert result.exit_code == 0
        assert load_global_config().cache.interval_seconds == 60


class TestMain:
    @pytest.fixture(autouse=True)
    def _no_signal_handlers(self, monkeypatch) -> None:
        monkeypatch.setattr("pokedex.app._setup_signal_handlers", lambda: None)

    def test_pokedex_error_maps_to_exit_code(self, monkeypatch, capsys) -> None:
        def _boom() -> None:
            raise NotFoundError("HTTP 404")

        monkeypatch.setattr("pokedex.app.app", _boom)
        with pytest.raises(SystemExit) as info:
            main()
        assert info.value.code == NotFoundError.exit_code
        assert "HTTP 404" in capsys.readouterr().err

    def test_unexpected_error_writes_crash_log(self, monkeypatch, isolated_config) -> None:
        def _boom() -> None:
            raise RuntimeError("kaboom")

        monkeypatch.setattr("pokedex.app.app", _boom)
        with pytest.raises(SystemExit) as info:
            main()
        assert info.value.code == 1
        logs = list((isolated_config / "data" / "pokedex" / "logs").glob("crash-*.log"))
        assert len(logs) == 1
        assert "kaboom" in logs[0].read_text()
