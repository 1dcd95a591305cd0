"""Configuration for the Bazaar service.

Reads from config/bazaar.ini if present, environment variables override.
"""

from __future__ import annotations

import configparser
import os
from dataclasses import dataclass
from pathlib import Path

_CONFIG_FILE = Path(__file__).resolve().parent.parent.parent / "config" / "bazaar.ini"

_TRUE = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class BazaarConfig:
    """Service configuration. Immutable once loaded."""

    host: str = "127.0.0.1"
    port: int = 8080
    log_level: str = "INFO"
    seed: bool = True


def _coerce(config_key: str, val: str):
    if config_key == "port":
        return int(val)
    if config_key == "seed":
        return val.strip().lower() in _TRUE
    if config_key == "log_level":
        return val.strip().upper()
    return val


def load_config(config_path: Path | None = None) -> BazaarConfig:
    """Load config from INI file, then override with environment variables."""
    path = config_path or _CONFIG_FILE
    kwargs: dict = {}

    if path.exists():
        parser = configparser.ConfigParser()
        parser.read(path)
        sections = [
            ("server", [("host", "host"), ("port", "port"), ("log_level", "log_level")]),
            ("catalogue", [("seed", "seed")]),
        ]
        for section, keys in sections:
            if not parser.has_section(section):
                continue
            for ini_key, config_key in keys:
                val = parser.get(section, ini_key, fallback=None)
                if val is not None:
                    kwargs[config_key] = _coerce(config_key, val)

    env_map = {
        "BAZAAR_HOST": "host",
        "BAZAAR_PORT": "port",
        "BAZAAR_LOG_LEVEL": "log_level",
        "BAZAAR_SEED": "seed",
    }
    for env_key, config_key in env_map.items():
        val = os.getenv(env_key)
        if val is not None:
            kwargs[config_key] = _coerce(config_key, val)

    return BazaarConfig(**kwargs)
