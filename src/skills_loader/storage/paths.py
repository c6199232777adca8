"""
Path utilities for skills-loader.

Provides the default locations of the skill directories, the recent-skills
cache and the optional configuration file.
"""

import os
from pathlib import Path

SKILLS_DIR_NAME = "skills"
CLAUDE_DIR_NAME = ".claude"
APP_DIR_NAME = "skills-loader"


def get_global_skills_dir() -> Path:
    """
    Get the global skills directory.

    Returns:
        Path to ~/.claude/skills/
    """
    return Path.home() / CLAUDE_DIR_NAME / SKILLS_DIR_NAME


def get_local_skills_dir(start_path: Path | None = None) -> Path:
    """
    Get the project-local skills directory.

    The directory is not required to exist; scanning a missing
    directory simply yields no skills.

    Args:
        start_path: Project directory. Defaults to cwd.

    Returns:
        Path to <project>/.claude/skills/
    """
    base = Path(start_path) if start_path is not None else Path.cwd()
    return base / CLAUDE_DIR_NAME / SKILLS_DIR_NAME


def get_cache_dir() -> Path:
    """
    Get the cache directory.

    Returns:
        Path to ~/.cache/skills-loader/
    """
    return Path.home() / ".cache" / APP_DIR_NAME


def get_recent_cache_path() -> Path:
    """
    Get the path to the recently-used skills cache.

    Returns:
        Path to ~/.cache/skills-loader/recent.json
    """
    return get_cache_dir() / "recent.json"


def get_config_path() -> Path:
    """
    Get the path to the configuration file.

    Resolution order:
    1. SKILLS_LOADER_CONFIG environment variable
    2. Default: ~/.config/skills-loader/config.yaml

    Returns:
        Path to the configuration file (which may not exist).
    """
    env_path = os.environ.get("SKILLS_LOADER_CONFIG")
    if env_path:
        return expand_path(env_path)
    return Path.home() / ".config" / APP_DIR_NAME / "config.yaml"


def expand_path(path: str | Path) -> Path:
    """
    Expand a path string, handling ~ and environment variables.

    Args:
        path: Path string or Path object.

    Returns:
        Expanded and resolved Path.
    """
    if isinstance(path, str):
        path = os.path.expandvars(path)
        path = os.path.expanduser(path)
    return Path(path).resolve()


def ensure_directory(path: Path, mode: int = 0o755) -> Path:
    """
    Ensure a directory exists, creating it if necessary.

    Args:
        path: Directory path.
        mode: Permission mode for created directories.

    Returns:
        The path (for chaining).
    """
    path.mkdir(parents=True, exist_ok=True, mode=mode)
    return path
