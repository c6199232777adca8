"""
System prompt assembly for skills-loader.

Concatenates the selected skills into the text passed to Claude. Skill
content is user-authored and inserted as-is.
"""

import math
from collections.abc import Sequence

from skills_loader.skills.models import SkillContent

PRELOAD_HEADER = """The user preloaded the following skills knowing that they would be required for the task they're about to start. These skills contain specialized knowledge, patterns, and best practices that you MUST follow when relevant to the user's request.

---
PRELOADED SKILLS
---

"""

SKILL_SEPARATOR = "\n---\n\n"

# Rough heuristic used for the size hint shown before launch
CHARS_PER_TOKEN = 4


def format_skill_section(content: SkillContent) -> str:
    """Format one skill and its references.

    Args:
        content: The skill's loaded content.

    Returns:
        The skill's section of the system prompt.
    """
    skill = content.skill
    text = f"## Skill: {skill.name} ({skill.origin.value})\n\n{content.main_content}"

    if content.references:
        text += f"\n\n### References for {skill.name}\n\n"
        for ref in content.references:
            text += f"#### {ref.name}\n\n{ref.content}\n\n"

    return text


def build_system_prompt(contents: Sequence[SkillContent]) -> str:
    """Build the system prompt for the selected skills.

    Args:
        contents: Loaded skills, in selection order.

    Returns:
        The header followed by one section per skill.
    """
    return PRELOAD_HEADER + SKILL_SEPARATOR.join(format_skill_section(c) for c in contents)


def estimate_tokens(text: str) -> int:
    """Estimate the token count of a prompt."""
    return math.ceil(len(text) / CHARS_PER_TOKEN)
