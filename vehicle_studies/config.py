"""Global configuration: constants, environment profiles, logging setup."""

from __future__ import annotations

import logging
import os
from typing import Any, Mapping

from vehicle_studies.models.kinds import VehicleKind

logger = logging.getLogger(__name__)

# Choices offered by the first console prompt, in display order
VEHICLE_CHOICES = tuple(kind.value for kind in VehicleKind)

# Vehicles assembled through the builder/director pair on every session
DEMO_BUILDS = (VehicleKind.CAR, VehicleKind.VAN)

# Choices offered by the closing prompt
GAME_CHOICES = (
    "Chess",
    "Checkers",
    "Global Pandemic",
    "Thermonuclear War",
    "Yahtzee",
    "Go",
)

GREETING = (
    "Hello! My name is Skynet. Instead of this crazy coding stuff, "
    "let's play a nice game of chess or thermonuclear war."
)
CLOSING_MESSAGE = "Good choice. Starting thermonuclear war now..."

# Number of slots in a NoteBooks indexer
DEFAULT_NOTEBOOK_CAPACITY = 1000

# All known configuration keys with defaults
_CONFIG_KEYS: dict[str, dict[str, Any]] = {
    "VEHICLE_STUDIES_ENV": {"default": "development", "description": "Environment profile"},
    "VEHICLE_STUDIES_LOG_LEVEL": {"default": "WARNING", "description": "Logging level"},
    "VEHICLE_STUDIES_NOTEBOOK_CAPACITY": {
        "default": str(DEFAULT_NOTEBOOK_CAPACITY),
        "description": "Slots per NoteBooks indexer",
    },
}

_PROFILES: dict[str, dict[str, str]] = {
    "development": {
        "VEHICLE_STUDIES_ENV": "development",
        "VEHICLE_STUDIES_LOG_LEVEL": "WARNING",
    },
    "production": {
        "VEHICLE_STUDIES_ENV": "production",
        "VEHICLE_STUDIES_LOG_LEVEL": "WARNING",
    },
    "testing": {
        "VEHICLE_STUDIES_ENV": "testing",
        "VEHICLE_STUDIES_LOG_LEVEL": "DEBUG",
    },
}


def load_config(environ: Mapping[str, str] | None = None) -> dict[str, str]:
    """Load merged config: defaults -> profile -> environment variables.

    Returns a flat dict of configuration values.
    """
    env = os.environ if environ is None else environ
    config: dict[str, str] = {key: str(info["default"]) for key, info in _CONFIG_KEYS.items()}

    env_name = env.get("VEHICLE_STUDIES_ENV", config["VEHICLE_STUDIES_ENV"])
    profile = _PROFILES.get(env_name)
    if profile is None:
        logger.warning("Unknown environment profile %r, using defaults", env_name)
    else:
        config.update(profile)

    for key in _CONFIG_KEYS:
        env_val = env.get(key)
        if env_val is not None:
            config[key] = env_val

    return config


def notebook_capacity(config: Mapping[str, str] | None = None) -> int:
    """Return the configured NoteBooks capacity, falling back to the default."""
    config = load_config() if config is None else config
    raw = config.get("VEHICLE_STUDIES_NOTEBOOK_CAPACITY", "")
    try:
        value = int(raw)
    except (TypeError, ValueError):
        logger.debug("Invalid notebook capacity %r", raw)
        return DEFAULT_NOTEBOOK_CAPACITY
    return value if value > 0 else DEFAULT_NOTEBOOK_CAPACITY


def configure_logging(level: str | int = "WARNING") -> None:
    """Configure root logging for the console entry point."""
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
