"""Storage utilities for skills-loader."""

from skills_loader.storage.paths import (
    ensure_directory,
    expand_path,
    get_cache_dir,
    get_config_path,
    get_global_skills_dir,
    get_local_skills_dir,
    get_recent_cache_path,
)

__all__ = [
    "ensure_directory",
    "expand_path",
    "get_cache_dir",
    "get_config_path",
    "get_global_skills_dir",
    "get_local_skills_dir",
    "get_recent_cache_path",
]
