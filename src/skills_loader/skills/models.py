"""
Skill models for skills-loader.

Defines the discovered skill records, the content read for selected
skills, and the persisted recent-skills cache.
"""

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_DESCRIPTION = "No description provided"


class SkillOrigin(str, Enum):
    """Which scan root a skill was found in."""

    GLOBAL = "global"
    LOCAL = "local"


class SkillFrontmatter(BaseModel):
    """Header fields parsed from SKILL.md.

    Both fields are optional; the parser applies the fallbacks.
    """

    name: str | None = Field(default=None, description="Skill name")
    description: str | None = Field(default=None, description="Short description")


class Skill(BaseModel):
    """A discovered skill.

    Identified by (origin, name). Only the header is read during
    discovery; the content is loaded for selected skills.
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Skill name")
    description: str = Field(default=DEFAULT_DESCRIPTION, description="Short description")
    path: Path = Field(..., description="Path to the SKILL.md file")
    origin: SkillOrigin = Field(..., description="Scan root the skill came from")

    @property
    def key(self) -> str:
        """Get the cache key for this skill (``origin:name``)."""
        return f"{self.origin.value}:{self.name}"

    @property
    def directory(self) -> Path:
        """Get the directory holding the manifest."""
        return self.path.parent


class SkillReference(BaseModel):
    """An auxiliary file shipped next to a skill."""

    name: str
    content: str


class SkillContent(BaseModel):
    """Full text of a selected skill plus its reference files."""

    skill: Skill
    main_content: str
    references: list[SkillReference] = Field(default_factory=list)


class RecentCache(BaseModel):
    """Recently used skills.

    Stored at ~/.cache/skills-loader/recent.json as
    ``{"recent": {"<origin>:<name>": <ms timestamp>}}``.
    """

    recent: dict[str, int] = Field(
        default_factory=dict,
        description="Map of skill key to last use, in ms since epoch",
    )

    def timestamp(self, key: str) -> int:
        """Get the last-use timestamp for a key (0 if never used)."""
        return self.recent.get(key, 0)
