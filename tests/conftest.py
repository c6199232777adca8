"""
Pytest configuration and fixtures for skills-loader tests.
"""

import os
import tempfile
from collections.abc import Callable, Generator
from pathlib import Path

import pytest
from typer.testing import CliRunner

from skills_loader.config import LoaderConfig


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep the developer's SKILLS_LOADER_* settings out of tests."""
    for key in list(os.environ):
        if key.startswith("SKILLS_LOADER_"):
            monkeypatch.delenv(key)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Typer CLI test runner."""
    return CliRunner()


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Provide a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def global_skills_dir(temp_dir: Path) -> Path:
    """Provide a mock ~/.claude/skills directory."""
    path = temp_dir / "home" / ".claude" / "skills"
    path.mkdir(parents=True)
    return path


@pytest.fixture
def local_skills_dir(temp_dir: Path) -> Path:
    """Provide a mock <project>/.claude/skills directory."""
    path = temp_dir / "project" / ".claude" / "skills"
    path.mkdir(parents=True)
    return path


@pytest.fixture
def cache_file(temp_dir: Path) -> Path:
    """Provide a cache file location (not created)."""
    return temp_dir / "cache" / "recent.json"


@pytest.fixture
def loader_config(global_skills_dir: Path, local_skills_dir: Path, cache_file: Path) -> LoaderConfig:
    """Provide a config pointing at the temporary directories."""
    return LoaderConfig(
        global_skills_dir=global_skills_dir,
        local_skills_dir=local_skills_dir,
        cache_file=cache_file,
    )


@pytest.fixture
def make_skill() -> Callable[..., Path]:
    """Provide a helper that writes a skill directory.

    Returns the path to the SKILL.md file.
    """

    def _make_skill(
        root: Path,
        dirname: str,
        name: str | None = None,
        description: str | None = None,
        body: str = "Follow these instructions.\n",
        references: dict[str, str] | None = None,
    ) -> Path:
        skill_dir = root / dirname
        skill_dir.mkdir(parents=True)

        header = []
        if name is not None:
            header.append(f"name: {name}")
        if description is not None:
            header.append(f"description: {description}")

        content = body
        if header:
            content = "---\n" + "\n".join(header) + "\n---\n\n" + body

        skill_md = skill_dir / "SKILL.md"
        skill_md.write_text(content)

        if references:
            refs_dir = skill_dir / "references"
            refs_dir.mkdir()
            for filename, text in references.items():
                (refs_dir / filename).write_text(text)

        return skill_md

    return _make_skill


@pytest.fixture
def sample_skill_md() -> str:
    """Provide sample SKILL.md content."""
    return """---
name: test-skill
description: A test skill for unit tests
---

# Test Skill

This is a test skill for unit testing.

## Instructions

1. Do something
2. Do something else
"""
