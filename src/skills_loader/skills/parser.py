"""
Skill parser for skills-loader.

Parses the YAML frontmatter of SKILL.md files into skill records.
"""

from pathlib import Path
from typing import Any

import yaml

from skills_loader.skills.models import (
    DEFAULT_DESCRIPTION,
    Skill,
    SkillFrontmatter,
    SkillOrigin,
)

MANIFEST_NAME = "SKILL.md"


class SkillParseError(Exception):
    """Error parsing a skill."""

    def __init__(self, message: str, path: Path | None = None):
        self.path = path
        super().__init__(f"{message}" + (f" (at {path})" if path else ""))


def parse_yaml_frontmatter(
    content: str, path: Path | None = None
) -> tuple[dict[str, Any] | None, str]:
    """Parse YAML frontmatter from a markdown file.

    Frontmatter is delimited by --- at the start and end. A leading
    byte order mark is ignored.

    Args:
        content: The full markdown content.
        path: Optional path for error messages.

    Returns:
        Tuple of (frontmatter dict or None, remaining content).

    Raises:
        SkillParseError: If the frontmatter is not a valid YAML mapping.
    """
    content = content.removeprefix("\ufeff")

    if not content.startswith("---"):
        return None, content

    lines = content.split("\n")
    end_index = None

    for i, line in enumerate(lines[1:], start=1):
        if line.strip() == "---":
            end_index = i
            break

    if end_index is None:
        # No closing delimiter, so the whole file is body
        return None, content

    frontmatter_text = "\n".join(lines[1:end_index])
    remaining_content = "\n".join(lines[end_index + 1 :]).strip()

    try:
        frontmatter = yaml.safe_load(frontmatter_text)
    except yaml.YAMLError as e:
        raise SkillParseError(f"Invalid YAML frontmatter: {e}", path) from e

    if frontmatter is None:
        return {}, remaining_content
    if not isinstance(frontmatter, dict):
        raise SkillParseError("Frontmatter must be a YAML mapping", path)

    return frontmatter, remaining_content


def _optional_text(value: Any) -> str | None:
    if value is None:
        return None
    text = value if isinstance(value, str) else str(value)
    return text.strip() or None


def parse_skill_frontmatter(
    content: str, path: Path | None = None
) -> tuple[SkillFrontmatter, str]:
    """Parse the header fields of a SKILL.md file.

    Missing, empty or absent header fields come back as None.

    Args:
        content: The SKILL.md file content.
        path: Optional path for error messages.

    Returns:
        Tuple of (frontmatter model, body).

    Raises:
        SkillParseError: If the frontmatter cannot be parsed.
    """
    data, body = parse_yaml_frontmatter(content, path)
    data = data or {}

    frontmatter = SkillFrontmatter(
        name=_optional_text(data.get("name")),
        description=_optional_text(data.get("description")),
    )
    return frontmatter, body


def parse_skill_file(path: Path, origin: SkillOrigin) -> Skill:
    """Parse a SKILL.md file into a Skill.

    The name falls back to the directory containing the manifest, the
    description to a fixed placeholder.

    Args:
        path: Path to the SKILL.md file.
        origin: Scan root the file was found in.

    Returns:
        Parsed Skill.

    Raises:
        SkillParseError: If the file cannot be read or parsed.
    """
    try:
        content = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise SkillParseError(f"Failed to read {MANIFEST_NAME}: {e}", path) from e

    frontmatter, _ = parse_skill_frontmatter(content, path)

    return Skill(
        name=frontmatter.name or path.parent.name,
        description=frontmatter.description or DEFAULT_DESCRIPTION,
        path=path,
        origin=origin,
    )
