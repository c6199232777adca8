"""
Output formatting utilities for the CLI.

Informational output goes to stdout, errors and warnings to stderr.
"""

from rich.console import Console
from rich.table import Table
from rich.text import Text

from skills_loader.skills.models import RecentCache, Skill
from skills_loader.skills.recent import is_recent

# Global console instances
console = Console()
err_console = Console(stderr=True)

RECENT_MARKER = "⏱"
DESCRIPTION_WIDTH = 50


def print_success(message: str) -> None:
    """Print a success message."""
    console.print(f"[green]✓[/green] {message}")


def print_error(message: str) -> None:
    """Print an error message."""
    err_console.print(f"[red]✗[/red] {message}")


def print_warning(message: str) -> None:
    """Print a warning message."""
    err_console.print(f"[yellow]![/yellow] {message}")


def print_info(message: str) -> None:
    """Print an info message."""
    console.print(f"[blue]i[/blue] {message}")


def truncate(text: str, width: int = DESCRIPTION_WIDTH) -> str:
    """Shorten text to width characters, marking the cut with '...'."""
    return text[:width] + "..." if len(text) > width else text


def print_skills_table(skills: list[Skill], cache: RecentCache) -> None:
    """Print discovered skills, already ranked, as a table."""
    table = Table(title="Available Skills")
    table.add_column("", no_wrap=True)
    table.add_column("Source", style="dim", no_wrap=True)
    table.add_column("Name", style="cyan", no_wrap=True)
    table.add_column("Description")

    for skill in skills:
        table.add_row(
            RECENT_MARKER if is_recent(skill, cache) else "",
            skill.origin.value,
            Text(skill.name),
            Text(truncate(skill.description)),
        )

    console.print(table)
    console.print(f"\n[dim]Total: {len(skills)} skill(s)[/dim]")
