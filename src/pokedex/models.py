"""Canonical Pydantic models shared across all pokedex modules.

The models fall into two groups:

**Configuration models** -- serialised as JSON in the user's config directory:
    :class:`CacheConfig`, :class:`RequestConfig`, :class:`OutputConfig`, and
    :class:`GlobalConfig`.

**Payload models** -- decoded from the raw bytes the cache hands back:
    :class:`NamedResource`, :class:`LocationAreaPage`,
    :class:`LocationAreaDetail`, and :class:`Pokemon`.

Payload models ignore unknown keys; the API returns far more fields than the
explorer renders.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from pokedex.output import OutputFormat


DEFAULT_BASE_URL = "https://pokeapi.co/api/v2"


# --- Configuration ---


class CacheConfig(BaseModel):
    """Response cache settings stored in :class:`GlobalConfig`.

    ``interval_seconds`` is both the eviction threshold and the reaper's
    polling period.
    """

    interval_seconds: float = Field(
        default=300.0, gt=0, description="Cache eviction interval in seconds"
    )


class RequestConfig(BaseModel):
    """HTTP settings applied to every API call."""

    base_url: str = Field(default=DEFAULT_BASE_URL, description="API root URL")
    timeout: float = Field(default=10.0, gt=0, description="Request timeout in seconds")


class OutputConfig(BaseModel):
    """Default output format preference."""

    format: OutputFormat = Field(
        default=OutputFormat.AUTO,
        description="Output format used when neither --json nor --plain is given",
    )


class GlobalConfig(BaseModel):
    """User-wide configuration persisted at ``~/.config/pokedex/config.json``.

    Loaded and saved by :func:`~pokedex.config.load_global_config` and
    :func:`~pokedex.config.save_global_config`. See
    :func:`~pokedex.config.resolve_config` for the precedence chain.
    """

    cache: CacheConfig = Field(default_factory=CacheConfig)
    request: RequestConfig = Field(default_factory=RequestConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)


# --- Payloads ---


class _Payload(BaseModel):
    model_config = ConfigDict(extra="ignore")


class NamedResource(_Payload):
    """A ``{name, url}`` reference to another API resource."""

    name: str
    url: str = ""


class LocationAreaPage(_Payload):
    """One page of the ``/location-area/`` listing.

    ``next`` and ``previous`` are absolute URLs (or ``None`` at either end)
    and become the session's pagination cursors.
    """

    count: int = 0
    next: Optional[str] = None
    previous: Optional[str] = None
    results: list[NamedResource] = Field(default_factory=list)


class PokemonEncounter(_Payload):
    pokemon: NamedResource


class LocationAreaDetail(_Payload):
    """A single location area with the creatures that can be encountered there."""

    id: int = 0
    name: str
    pokemon_encounters: list[PokemonEncounter] = Field(default_factory=list)


class PokemonStat(_Payload):
    base_stat: int
    stat: NamedResource


class PokemonType(_Payload):
    slot: int = 0
    type: NamedResource


class Pokemon(_Payload):
    """A creature record, kept whole in the session's caught collection."""

    id: int = 0
    name: str
    base_experience: int = 0
    height: int = 0
    weight: int = 0
    stats: list[PokemonStat] = Field(default_factory=list)
    types: list[PokemonType] = Field(default_factory=list)

    @field_validator("base_experience", "height", "weight", mode="before")
    @classmethod
    def _null_as_zero(cls, value: object) -> object:
        # Some alternate forms report null for these.
        return 0 if value is None else value
