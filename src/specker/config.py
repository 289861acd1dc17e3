"""Driver configuration for Specker.

Defaults for the console driver, overridable through environment
variables. The core engine takes everything it needs as arguments and never
reads configuration itself.
"""

import logging
import os
from pathlib import Path

from specker.models.player import Player, new_player

# Default configuration (can be overridden via environment variables)
DEFAULT_HEAPS = (10, 20, 17)
DEFAULT_PLAYERS = (
    ("Tom", "sneaky"),
    ("Mary", "spartan"),
    ("Alan", "greedy"),
    ("Robin", "righteous"),
)
DEFAULT_LOG_LEVEL = "WARNING"


def parse_heaps(value: str) -> list[int]:
    """Parse a comma- or space-separated list of coin counts.

    Raises:
        ValueError: If an entry is not an integer
    """
    parts = value.replace(",", " ").split()
    try:
        return [int(p) for p in parts]
    except ValueError:
        raise ValueError(f"Invalid heap list: {value!r}") from None


def parse_player(value: str) -> Player:
    """Parse a "name:strategy" player specification.

    Raises:
        ValueError: If the format or strategy is invalid
    """
    name, sep, kind = value.rpartition(":")
    if not sep or not name.strip():
        raise ValueError(f"Invalid player {value!r}, expected NAME:STRATEGY")
    return new_player(name.strip(), kind)


def get_heaps() -> list[int]:
    """Get configured initial heaps from environment."""
    value = os.environ.get("SPECKER_HEAPS")
    if not value:
        return list(DEFAULT_HEAPS)
    return parse_heaps(value)


def get_players() -> list[Player]:
    """Get configured players from environment."""
    value = os.environ.get("SPECKER_PLAYERS")
    if not value:
        return [new_player(name, kind) for name, kind in DEFAULT_PLAYERS]
    return [parse_player(p) for p in value.split(",") if p.strip()]


def get_trace_dir() -> Path | None:
    """Get configured trace directory from environment (None disables tracing)."""
    value = os.environ.get("SPECKER_TRACE_DIR")
    return Path(value) if value else None


def get_log_level() -> str:
    """Get configured log level from environment.

    Raises:
        ValueError: If the level is not a standard logging level name
    """
    level = os.environ.get("SPECKER_LOG_LEVEL", DEFAULT_LOG_LEVEL).strip().upper()
    if not isinstance(logging.getLevelName(level), int):
        raise ValueError(f"Invalid log level: {level!r}")
    return level
