"""Runtime settings for semver_range.

Settings are read from the mapping passed to ``load_settings``, or from
``os.environ`` when none is given. Unset or blank variables fall back to their
defaults.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass

log = logging.getLogger(__name__)

CACHE_SIZE_ENV_VAR = "SEMVER_RANGE_CACHE_SIZE"
DEFAULT_CACHE_SIZE = 256


class ConfigError(RuntimeError):
    """Raised when a setting cannot be parsed or is out of range."""


@dataclass(slots=True, frozen=True)
class Settings:
    """Top-level settings container."""

    cache_size: int = DEFAULT_CACHE_SIZE

    def __post_init__(self) -> None:
        if self.cache_size < 0:
            raise ConfigError("cache_size must be non-negative")


def _read_int(environ: Mapping[str, str], name: str, default: int) -> int:
    raw = environ.get(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError as exc:
        raise ConfigError(f"{name} must be an integer, got '{raw}'") from exc


def load_settings(environ: Mapping[str, str] | None = None) -> Settings:
    """Load and validate settings.

    Args:
        environ: Optional mapping to read from instead of ``os.environ``.

    Returns:
        A Settings object.

    Raises:
        ConfigError: If a variable is set to an invalid value.
    """
    if environ is None:
        environ = os.environ

    cache_size = _read_int(environ, CACHE_SIZE_ENV_VAR, DEFAULT_CACHE_SIZE)
    if cache_size < 0:
        raise ConfigError(f"{CACHE_SIZE_ENV_VAR} must be non-negative, got {cache_size}")

    settings = Settings(cache_size=cache_size)
    log.debug("Loaded settings: %s", settings)
    return settings
