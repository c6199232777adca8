"""
Interactive skill selection.

Presents ranked skills in a filterable questionary checkbox.
"""

import questionary
from questionary import Style

from skills_loader.cli.output import RECENT_MARKER
from skills_loader.skills.models import RecentCache, Skill
from skills_loader.skills.recent import is_recent

custom_style = Style(
    [
        ("qmark", "fg:#5f87ff bold"),
        ("question", "bold"),
        ("answer", "fg:#00d787 bold"),
        ("pointer", "fg:#5f87ff bold"),
        ("highlighted", "fg:#5f87ff bold"),
        ("selected", "fg:#00d787"),
        ("separator", "fg:#6c6c6c"),
        ("instruction", "fg:#6c6c6c"),
        ("text", ""),
        ("disabled", "fg:#6c6c6c italic"),
    ]
)


def skill_title(skill: Skill, cache: RecentCache) -> str:
    """Title shown for a skill, marking recently used ones.

    The search filter only matches titles, so the description is part
    of the title.
    """
    marker = RECENT_MARKER if is_recent(skill, cache) else " "
    return f"{marker} [{skill.origin.value}] {skill.name} - {skill.description}"


def build_choices(skills: list[Skill], cache: RecentCache) -> list[questionary.Choice]:
    """Build checkbox choices, keeping the ranked order."""
    return [questionary.Choice(title=skill_title(skill, cache), value=skill) for skill in skills]


def select_skills(skills: list[Skill], cache: RecentCache) -> list[Skill]:
    """Ask the user which skills to preload.

    Typing filters the list by name or description.

    Args:
        skills: Ranked skills to offer.
        cache: Recent cache, for the recent markers.

    Returns:
        Selected skills in display order. Empty if nothing was selected
        or the prompt was cancelled.
    """
    selected = questionary.checkbox(
        "Select skills to preload (type to filter)",
        choices=build_choices(skills, cache),
        instruction="- Space to select. Return to submit",
        style=custom_style,
        use_search_filter=True,
        use_jk_keys=False,
    ).ask()

    return list(selected or [])
