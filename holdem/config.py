"""
Environment configuration for holdem-rules.
Values come from the process environment, optionally seeded from a .env file.
"""

import logging
import os
from dataclasses import dataclass
from typing import Optional

from dotenv import find_dotenv, load_dotenv

from holdem.exceptions import ConfigError

DEFAULT_PLAYERS = 4
MIN_PLAYERS = 2
MAX_PLAYERS = 10


@dataclass(frozen=True)
class Settings:
    seed: Optional[int] = None
    players: int = DEFAULT_PLAYERS
    log_level: str = 'INFO'
    color: bool = True


def _int_setting(name: str, default: Optional[int]) -> Optional[int]:
    raw = os.getenv(name)
    if raw is None or raw.strip() == '':
        return default
    try:
        return int(raw)
    except ValueError:
        raise ConfigError(f"{name} must be an integer, got {raw!r}") from None


def load_settings(env_file: Optional[str] = None) -> Settings:
    """Read HOLDEM_* settings, loading ``env_file`` (or ./.env) first.

    Variables already set in the environment win over the file.
    """
    load_dotenv(env_file or find_dotenv(usecwd=True), override=False)

    players = _int_setting('HOLDEM_PLAYERS', DEFAULT_PLAYERS)
    if not MIN_PLAYERS <= players <= MAX_PLAYERS:
        raise ConfigError(f"HOLDEM_PLAYERS must be between {MIN_PLAYERS} and {MAX_PLAYERS}, got {players}")

    log_level = os.getenv('HOLDEM_LOG_LEVEL', 'INFO').upper()
    if not isinstance(logging.getLevelName(log_level), int):
        raise ConfigError(f"Unknown HOLDEM_LOG_LEVEL {log_level!r}")

    settings = Settings(
        seed=_int_setting('HOLDEM_SEED', None),
        players=players,
        log_level=log_level,
        color=os.getenv('HOLDEM_COLOR', '1').strip().lower() not in ('0', 'false', 'no', 'off'),
    )
    logging.debug(f"Loaded settings: {settings}")
    return settings
