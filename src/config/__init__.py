"""Configuration module for the Battle.net API client."""

from config.loader import (
    load_config,
    Config,
    BlizzardConfig,
)

__all__ = [
    "load_config",
    "Config",
    "BlizzardConfig",
]
