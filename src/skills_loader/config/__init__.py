"""Configuration for skills-loader."""

from skills_loader.config.loader import (
    ConfigurationError,
    get_env_overrides,
    load_config,
    load_yaml_file,
)
from skills_loader.config.schema import DEFAULT_MAX_RECENT, LoaderConfig

__all__ = [
    "DEFAULT_MAX_RECENT",
    "ConfigurationError",
    "LoaderConfig",
    "get_env_overrides",
    "load_config",
    "load_yaml_file",
]
