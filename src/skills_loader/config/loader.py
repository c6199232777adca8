"""
Configuration loader for skills-loader.

Loads and merges configuration from multiple sources:
1. Default values
2. Config file (~/.config/skills-loader/config.yaml)
3. Environment variables (SKILLS_LOADER_*)
4. Explicit overrides passed by the caller
"""

import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from skills_loader.config.schema import LoaderConfig
from skills_loader.storage.paths import get_config_path

ENV_PREFIX = "SKILLS_LOADER_"

# Variables under the prefix that are not config fields
_RESERVED_ENV = {"SKILLS_LOADER_CONFIG"}


class ConfigurationError(Exception):
    """Raised when configuration loading or validation fails."""

    pass


def load_yaml_file(path: Path) -> dict[str, Any]:
    """
    Load a YAML configuration file.

    Args:
        path: Path to the YAML file.

    Returns:
        Parsed configuration dictionary (empty if the file does not exist).

    Raises:
        ConfigurationError: If the file cannot be read or parsed.
    """
    try:
        with open(path, encoding="utf-8") as f:
            content = yaml.safe_load(f)
    except FileNotFoundError:
        return {}
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Invalid YAML in {path}: {e}") from e
    except OSError as e:
        raise ConfigurationError(f"Cannot read {path}: {e}") from e

    if content is None:
        return {}
    if not isinstance(content, dict):
        raise ConfigurationError(f"Config file {path} must contain a YAML mapping")
    return content


def get_env_overrides() -> dict[str, str]:
    """
    Collect configuration overrides from the environment.

    SKILLS_LOADER_<FIELD>=<value> sets the config field <field>, e.g.
    SKILLS_LOADER_DANGEROUS=1 or SKILLS_LOADER_MAX_RECENT=20. Values are
    left as strings; the schema coerces them. Empty values are skipped so
    the field keeps its default.

    Returns:
        Dictionary of field name to raw value.
    """
    fields = LoaderConfig.model_fields
    overrides: dict[str, str] = {}

    for key, value in os.environ.items():
        if not key.startswith(ENV_PREFIX) or key in _RESERVED_ENV:
            continue
        if not value.strip():
            continue

        field_name = key[len(ENV_PREFIX) :].lower()
        if field_name in fields:
            overrides[field_name] = value

    return overrides


def load_config(
    config_path: Path | None = None,
    skip_env: bool = False,
    **overrides: Any,
) -> LoaderConfig:
    """
    Load and merge configuration from all sources.

    Args:
        config_path: Config file to read. Defaults to get_config_path().
        skip_env: Skip environment variable overrides.
        **overrides: Field values that take precedence over every other source.

    Returns:
        Validated LoaderConfig.

    Raises:
        ConfigurationError: If configuration is invalid.
    """
    config_dict: dict[str, Any] = {}

    path = config_path or get_config_path()
    config_dict.update(load_yaml_file(path))

    if not skip_env:
        config_dict.update(get_env_overrides())

    config_dict.update(overrides)

    try:
        return LoaderConfig.model_validate(config_dict)
    except ValidationError as e:
        raise ConfigurationError(f"Configuration validation failed: {e}") from e
