"""
Main Typer application for the skills-loader CLI.

Usage:
    skills-loader                      Pick skills, then launch Claude
    skills-loader --list               List skills, most recently used first
    skills-loader --clear-recent       Forget recently used skills
    skills-loader -- --model opus      Forward arguments to Claude

Options not recognized here are forwarded to Claude as well.
"""

import logging
from typing import Annotated, Any

import typer
from rich.markup import escape

from skills_loader import __version__
from skills_loader.cli.output import (
    console,
    err_console,
    print_error,
    print_info,
    print_skills_table,
    print_success,
    print_warning,
)
from skills_loader.cli.selector import select_skills
from skills_loader.config import ConfigurationError, LoaderConfig, load_config
from skills_loader.launcher import LauncherError, build_claude_args, launch_claude
from skills_loader.logging import configure_logging
from skills_loader.skills import (
    build_system_prompt,
    clear_recent_cache,
    discover_skills,
    estimate_tokens,
    load_recent_cache,
    read_skill_content,
    save_recent_cache,
    sort_skills_by_recent,
    touch_recent,
)

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="skills-loader",
    help="Preload skills into a Claude session.",
    add_completion=False,
    rich_markup_mode="rich",
    pretty_exceptions_enable=False,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        print_info(f"skills-loader version [green]{__version__}[/green]")
        raise typer.Exit()


def _resolve_config(obj: Any) -> LoaderConfig:
    """Use an injected config, or load one with optional overrides."""
    if isinstance(obj, LoaderConfig):
        return obj
    overrides = obj if isinstance(obj, dict) else {}
    return load_config(**overrides)


def run_loader(config: LoaderConfig, passthrough: list[str], list_only: bool = False) -> int:
    """Discover skills, then list them or launch Claude with a selection.

    Args:
        config: Loader configuration.
        passthrough: Arguments forwarded to Claude.
        list_only: Print the ranked skills instead of launching.

    Returns:
        Exit code for the process.
    """
    if not list_only:
        print_info("Scanning for skills...")

    skills = discover_skills(config.global_skills_dir, config.local_skills_dir)

    if not skills:
        print_warning("No skills found in:")
        err_console.print(f"  - {config.global_skills_dir}", markup=False, highlight=False, soft_wrap=True)
        err_console.print(f"  - {config.local_skills_dir}", markup=False, highlight=False, soft_wrap=True)
        return 1

    cache = load_recent_cache(config.cache_file)
    ranked = sort_skills_by_recent(skills, cache)

    if list_only:
        print_skills_table(ranked, cache)
        return 0

    print_info(f"Found {len(skills)} skill(s)")

    selected = select_skills(ranked, cache)

    if not selected:
        print_info("No skills selected. Launching Claude without preloaded skills...")
        return launch_claude(build_claude_args(passthrough, config=config), config.claude_command)

    touch_recent(cache, (s.key for s in selected), max_recent=config.max_recent)
    save_recent_cache(cache, config.cache_file)

    print_info(f"Loading {len(selected)} skill(s)...")
    contents = [read_skill_content(s) for s in selected]
    system_prompt = build_system_prompt(contents)
    print_info(f"Estimated context size: ~{estimate_tokens(system_prompt):,} tokens")

    console.rule("Loaded skills")
    for skill in selected:
        console.print(f"  • {skill.name} ({skill.origin.value})", markup=False, highlight=False)
    console.rule()

    args = build_claude_args(passthrough, system_prompt, config)
    return launch_claude(args, config.claude_command)


# noinspection PyUnusedLocal
@app.command(
    context_settings={
        "allow_extra_args": True,
        "ignore_unknown_options": True,
        "help_option_names": ["-h", "--help"],
    }
)
def launch(
    ctx: typer.Context,
    list_skills: Annotated[
        bool,
        typer.Option(
            "--list",
            "-l",
            help="List available skills and exit.",
        ),
    ] = False,
    clear_recent: Annotated[
        bool,
        typer.Option(
            "--clear-recent",
            help="Clear the recently used skills cache and exit.",
        ),
    ] = False,
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit.",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """
    [bold blue]skills-loader[/bold blue] - preload skills into Claude

    Scans ~/.claude/skills and ./.claude/skills, lets you pick skills,
    and launches [bold]claude[/bold] with them appended to the system prompt.
    Everything after [bold]--[/bold], and any unknown option, is passed to claude.

    Set SKILLS_LOADER_DANGEROUS=1 to launch with --dangerously-skip-permissions.
    """
    try:
        config = _resolve_config(ctx.obj)
    except ConfigurationError as e:
        print_error(escape(str(e)))
        raise typer.Exit(1)

    configure_logging(config.log_level)

    if clear_recent:
        if clear_recent_cache(config.cache_file):
            print_success("Cleared recently used skills.")
        else:
            print_info("No recently used skills to clear.")
        raise typer.Exit(0)

    try:
        exit_code = run_loader(config, list(ctx.args), list_only=list_skills)
    except LauncherError as e:
        print_error(escape(str(e)))
        exit_code = 1
    except Exception as e:
        logger.debug("Unexpected error", exc_info=True)
        print_error(f"Error: {escape(str(e))}")
        exit_code = 1

    raise typer.Exit(exit_code)


def main() -> None:
    """Console entry point."""
    app()


def dangerous_main() -> None:
    """Console entry point that skips Claude's permission prompts."""
    app(obj={"dangerous": True})


if __name__ == "__main__":
    main()
