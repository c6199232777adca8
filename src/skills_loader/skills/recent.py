"""
Recently used skills for skills-loader.

The cache is loaded once per run, updated in memory after the user makes
a selection, and written back before Claude launches. It only affects
display order, so every failure here degrades to an empty cache.
"""

import json
import logging
import os
import tempfile
import time
from collections.abc import Iterable
from pathlib import Path

from pydantic import ValidationError

from skills_loader.config.schema import DEFAULT_MAX_RECENT
from skills_loader.skills.models import RecentCache, Skill
from skills_loader.storage.paths import ensure_directory

logger = logging.getLogger(__name__)


def now_ms() -> int:
    """Current time in milliseconds since the epoch."""
    return int(time.time() * 1000)


def load_recent_cache(path: Path) -> RecentCache:
    """Load the recent skills cache from disk.

    Args:
        path: Cache file.

    Returns:
        RecentCache (empty if the file is missing or invalid).
    """
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
        return RecentCache.model_validate(data)
    except FileNotFoundError:
        return RecentCache()
    except (OSError, ValueError, RecursionError, ValidationError) as e:
        logger.debug(f"Ignoring unreadable recent cache {path}: {e}")
        return RecentCache()


def prune_recent(cache: RecentCache, max_recent: int = DEFAULT_MAX_RECENT) -> RecentCache:
    """Drop the least recently used entries beyond capacity.

    Args:
        cache: Cache to prune in place.
        max_recent: Number of entries to keep.

    Returns:
        The same cache (for chaining).
    """
    if len(cache.recent) > max_recent:
        entries = sorted(cache.recent.items(), key=lambda item: item[1], reverse=True)
        cache.recent = dict(entries[:max_recent])
    return cache


def touch_recent(
    cache: RecentCache,
    keys: Iterable[str],
    now: int | None = None,
    max_recent: int = DEFAULT_MAX_RECENT,
) -> RecentCache:
    """Mark skills as used now.

    Args:
        cache: Cache to update in place.
        keys: Skill keys (``origin:name``) that were selected.
        now: Timestamp in ms to record. Defaults to the current time.
        max_recent: Capacity of the cache.

    Returns:
        The same cache (for chaining).
    """
    if now is None:
        now = now_ms()

    for key in keys:
        cache.recent[key] = now

    return prune_recent(cache, max_recent)


def save_recent_cache(cache: RecentCache, path: Path) -> bool:
    """Write the cache to disk.

    The file is replaced atomically. Failures are logged and ignored.

    Args:
        cache: Cache to save.
        path: Cache file.

    Returns:
        True if the cache was written.
    """
    tmp_name = None
    try:
        ensure_directory(path.parent)
        with tempfile.NamedTemporaryFile(
            "w",
            encoding="utf-8",
            dir=path.parent,
            prefix=f".{path.name}.",
            suffix=".tmp",
            delete=False,
        ) as f:
            tmp_name = f.name
            f.write(json.dumps(cache.model_dump(), indent=2))
        os.replace(tmp_name, path)
        return True
    except OSError as e:
        logger.debug(f"Could not save recent cache to {path}: {e}")
        if tmp_name is not None:
            Path(tmp_name).unlink(missing_ok=True)
        return False


def clear_recent_cache(path: Path) -> bool:
    """Delete the cache file.

    Args:
        path: Cache file.

    Returns:
        True if a file was removed.
    """
    try:
        path.unlink()
    except FileNotFoundError:
        return False
    except OSError as e:
        logger.debug(f"Could not remove recent cache {path}: {e}")
        return False
    return True


def is_recent(skill: Skill, cache: RecentCache) -> bool:
    """Check whether a skill is in the recent cache."""
    return skill.key in cache.recent


def sort_skills_by_recent(skills: Iterable[Skill], cache: RecentCache) -> list[Skill]:
    """Order skills by last use, most recent first, then by name.

    Skills missing from the cache rank after every cached skill.

    Args:
        skills: Skills to order.
        cache: Recent skills cache.

    Returns:
        A new, sorted list.
    """
    return sorted(
        skills,
        key=lambda s: (not is_recent(s, cache), -cache.timestamp(s.key), s.name),
    )
