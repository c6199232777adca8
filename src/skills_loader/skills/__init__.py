"""
Skills for skills-loader.

A skill is a directory holding a SKILL.md file (YAML frontmatter with
``name`` and ``description``, followed by instructions) and, optionally,
a ``references/`` directory of supporting files.

Usage:
    from skills_loader.skills import discover_skills, read_skill_content

    skills = discover_skills(global_dir, local_dir)
    contents = [read_skill_content(s) for s in selected]
    prompt = build_system_prompt(contents)
"""

# Models
from skills_loader.skills.models import (
    DEFAULT_DESCRIPTION,
    RecentCache,
    Skill,
    SkillContent,
    SkillFrontmatter,
    SkillOrigin,
    SkillReference,
)

# Parser
from skills_loader.skills.parser import (
    MANIFEST_NAME,
    SkillParseError,
    parse_skill_file,
    parse_skill_frontmatter,
    parse_yaml_frontmatter,
)

# Loader
from skills_loader.skills.loader import (
    REFERENCES_DIR_NAME,
    discover_skills,
    find_skill_files,
    load_skills_from_directory,
    read_references,
    read_skill_content,
    resolve_entry,
)

# Recent cache
from skills_loader.skills.recent import (
    clear_recent_cache,
    is_recent,
    load_recent_cache,
    prune_recent,
    save_recent_cache,
    sort_skills_by_recent,
    touch_recent,
)

# Prompt
from skills_loader.skills.prompt import (
    PRELOAD_HEADER,
    build_system_prompt,
    estimate_tokens,
    format_skill_section,
)

__all__ = [
    # Models
    "DEFAULT_DESCRIPTION",
    "RecentCache",
    "Skill",
    "SkillContent",
    "SkillFrontmatter",
    "SkillOrigin",
    "SkillReference",
    # Parser
    "MANIFEST_NAME",
    "SkillParseError",
    "parse_skill_file",
    "parse_skill_frontmatter",
    "parse_yaml_frontmatter",
    # Loader
    "REFERENCES_DIR_NAME",
    "discover_skills",
    "find_skill_files",
    "load_skills_from_directory",
    "read_references",
    "read_skill_content",
    "resolve_entry",
    # Recent cache
    "clear_recent_cache",
    "is_recent",
    "load_recent_cache",
    "prune_recent",
    "save_recent_cache",
    "sort_skills_by_recent",
    "touch_recent",
    # Prompt
    "PRELOAD_HEADER",
    "build_system_prompt",
    "estimate_tokens",
    "format_skill_section",
]
