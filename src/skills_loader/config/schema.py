"""
Pydantic configuration schema for skills-loader.
"""

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator

from skills_loader.storage.paths import (
    get_global_skills_dir,
    get_local_skills_dir,
    get_recent_cache_path,
)

DEFAULT_MAX_RECENT = 10


class LoaderConfig(BaseModel):
    """Runtime configuration for a skills-loader invocation."""

    model_config = ConfigDict(extra="ignore")

    # Skill locations
    global_skills_dir: Path = Field(default_factory=get_global_skills_dir)
    local_skills_dir: Path = Field(default_factory=get_local_skills_dir)

    # Recent skills cache
    cache_file: Path = Field(default_factory=get_recent_cache_path)
    max_recent: int = Field(default=DEFAULT_MAX_RECENT, ge=1)

    # Launch settings
    claude_command: str = "claude"
    system_prompt_flag: str = "--append-system-prompt"
    dangerous_flag: str = "--dangerously-skip-permissions"
    dangerous: bool = False

    log_level: str = "WARNING"

    @field_validator("global_skills_dir", "local_skills_dir", "cache_file", mode="before")
    @classmethod
    def _expand_user(cls, value: object) -> object:
        if isinstance(value, str):
            return Path(value).expanduser()
        return value

    @field_validator("log_level")
    @classmethod
    def _normalize_level(cls, value: str) -> str:
        level = value.upper()
        if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"Unknown log level: {value}")
        return level
