"""
Runtime settings.

Defaults live in DEFAULTS; each key can be overridden by the environment
variable named in ENV_VARS (optionally read from a .env file).
"""

import os
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

from dotenv import load_dotenv

from .errors import ConfigError

DEFAULTS = {
    "max_curves": 1_000_000,       # cap on curves returned per enumeration
    "enumeration_timeout": 0.0,    # seconds, 0 disables
    "min_prime_bits": 2,
    "max_prime_bits": 64,          # keeps max_curves formatted strings small
    "host": "0.0.0.0",
    "port": 18080,
    "output_dir": ".",
}

ENV_VARS = {
    "max_curves": ("EC_MAX_CURVES", int),
    "enumeration_timeout": ("EC_ENUMERATION_TIMEOUT", float),
    "min_prime_bits": ("EC_MIN_PRIME_BITS", int),
    "max_prime_bits": ("EC_MAX_PRIME_BITS", int),
    "host": ("EC_HOST", str),
    "port": ("EC_PORT", int),
    "output_dir": ("EC_OUTPUT_DIR", str),
}

settings: Dict[str, Any] = dict(DEFAULTS)


def load_settings(environ: Optional[Mapping[str, str]] = None,
                  env_file: Optional[str] = None) -> Dict[str, Any]:
    """
    Build settings from DEFAULTS plus environment overrides.

    Args:
        environ: Mapping to read overrides from (defaults to os.environ)
        env_file: Optional .env file loaded into os.environ first

    Returns:
        A new settings dict; the global settings are left untouched

    Raises:
        ConfigError: If an override cannot be parsed or is out of range
    """
    if env_file and Path(env_file).exists():
        load_dotenv(env_file)
    if environ is None:
        environ = os.environ

    loaded = dict(DEFAULTS)
    for key, (var, cast) in ENV_VARS.items():
        raw = environ.get(var)
        if raw is None or raw == "":
            continue
        try:
            loaded[key] = cast(raw)
        except ValueError:
            raise ConfigError(f"{var}={raw!r} is not a valid {cast.__name__}") from None

    if loaded["max_curves"] < 0:
        raise ConfigError("EC_MAX_CURVES must be non-negative")
    if loaded["min_prime_bits"] < 2:
        raise ConfigError("EC_MIN_PRIME_BITS must be at least 2")
    if loaded["max_prime_bits"] < loaded["min_prime_bits"]:
        raise ConfigError("EC_MAX_PRIME_BITS must not be below EC_MIN_PRIME_BITS")

    return loaded


def get_settings() -> Dict[str, Any]:
    """Return the global settings."""
    return settings


def update_settings(new_settings: Dict[str, Any]) -> None:
    """Update the global settings in place."""
    unknown = set(new_settings) - set(DEFAULTS)
    if unknown:
        raise ConfigError(f"Unknown settings: {', '.join(sorted(unknown))}")
    settings.update(new_settings)
