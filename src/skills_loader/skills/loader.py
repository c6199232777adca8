"""
Skill loader for skills-loader.

Discovers skills in the global and local directories and reads the
content of the ones the user selects.
"""

import logging
from pathlib import Path

from skills_loader.skills.models import Skill, SkillContent, SkillOrigin, SkillReference
from skills_loader.skills.parser import MANIFEST_NAME, SkillParseError, parse_skill_file

logger = logging.getLogger(__name__)

REFERENCES_DIR_NAME = "references"


def resolve_entry(path: Path) -> Path | None:
    """Resolve a directory entry, following symlinks.

    Args:
        path: Entry to resolve.

    Returns:
        The resolved path, or None if the entry is a symlink whose
        target cannot be resolved (broken or looping link).
    """
    if not path.is_symlink():
        return path

    try:
        resolved = path.resolve(strict=True)
    except (OSError, RuntimeError):
        return None
    return resolved


def find_skill_files(directory: Path) -> list[Path]:
    """Find the SKILL.md files directly under a directory.

    An entry counts when it is a directory (or a symlink to one) holding
    a SKILL.md, or when it is itself a file named SKILL.md.

    Args:
        directory: Directory to scan.

    Returns:
        Paths to SKILL.md files, in entry name order. Empty if the
        directory does not exist.
    """
    if not directory.is_dir():
        return []

    skill_files: list[Path] = []
    for entry in sorted(directory.iterdir(), key=lambda p: p.name):
        resolved = resolve_entry(entry)
        if resolved is None:
            logger.debug(f"Skipping unresolvable link: {entry}")
            continue

        if resolved.is_dir():
            manifest = resolved / MANIFEST_NAME
            if manifest.is_file():
                skill_files.append(manifest)
        elif entry.name == MANIFEST_NAME:
            skill_files.append(entry)

    return skill_files


def load_skills_from_directory(directory: Path, origin: SkillOrigin) -> list[Skill]:
    """Parse every skill found in a directory.

    Manifests that fail to parse are logged and skipped.

    Args:
        directory: Directory to scan.
        origin: Origin recorded on the skills.

    Returns:
        Parsed skills.
    """
    skills = []
    for skill_file in find_skill_files(directory):
        try:
            skills.append(parse_skill_file(skill_file, origin))
        except SkillParseError as e:
            logger.warning(f"Failed to parse skill at {skill_file}: {e}")
    return skills


def discover_skills(global_dir: Path, local_dir: Path) -> list[Skill]:
    """Discover skills in the global and local directories.

    Args:
        global_dir: Global skills directory.
        local_dir: Project-local skills directory.

    Returns:
        Global skills followed by local skills.
    """
    skills = load_skills_from_directory(global_dir, SkillOrigin.GLOBAL)
    skills.extend(load_skills_from_directory(local_dir, SkillOrigin.LOCAL))
    logger.debug(f"Discovered {len(skills)} skill(s) in {global_dir} and {local_dir}")
    return skills


def read_references(skill_dir: Path) -> list[SkillReference]:
    """Read the files in a skill's references directory.

    Subdirectories are ignored and files that cannot be read as text
    are skipped.

    Args:
        skill_dir: Directory holding the skill's SKILL.md.

    Returns:
        References in file name order.
    """
    references_dir = skill_dir / REFERENCES_DIR_NAME
    if not references_dir.is_dir():
        return []

    references = []
    for ref_path in sorted(references_dir.iterdir(), key=lambda p: p.name):
        if not ref_path.is_file():
            continue
        try:
            content = ref_path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            logger.debug(f"Skipping unreadable reference {ref_path}: {e}")
            continue
        references.append(SkillReference(name=ref_path.name, content=content))

    return references


def read_skill_content(skill: Skill) -> SkillContent:
    """Read the full content of a selected skill.

    Args:
        skill: Skill to read.

    Returns:
        The manifest text, verbatim, plus its references.

    Raises:
        OSError: If the manifest itself can no longer be read.
    """
    main_content = skill.path.read_text(encoding="utf-8")
    return SkillContent(
        skill=skill,
        main_content=main_content,
        references=read_references(skill.directory),
    )
