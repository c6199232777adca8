"""
Claude launcher for skills-loader.

Builds the Claude command line and runs it in the foreground, sharing
the terminal with the child process.
"""

import logging
import subprocess
from collections.abc import Sequence

from skills_loader.config.schema import LoaderConfig

logger = logging.getLogger(__name__)


class LauncherError(Exception):
    """Raised when the Claude executable cannot be started."""

    def __init__(self, command: str, reason: str):
        self.command = command
        super().__init__(f"Failed to launch {command}: {reason}")


def build_claude_args(
    passthrough: Sequence[str],
    system_prompt: str | None = None,
    config: LoaderConfig | None = None,
) -> list[str]:
    """Build the arguments for the Claude process.

    Args:
        passthrough: Arguments forwarded verbatim from our own command line.
        system_prompt: Prompt to append, if any skills were selected.
        config: Launch settings (flag names, dangerous mode).

    Returns:
        Argument list, without the executable.
    """
    config = config or LoaderConfig()
    args: list[str] = []

    if system_prompt:
        args.extend([config.system_prompt_flag, system_prompt])

    if config.dangerous and config.dangerous_flag not in passthrough:
        args.append(config.dangerous_flag)

    args.extend(passthrough)
    return args


def launch_claude(args: Sequence[str], command: str = "claude") -> int:
    """Run Claude and wait for it to exit.

    The child inherits stdin, stdout and stderr. Ctrl+C is left to the
    child to handle; we keep waiting until it exits.

    Args:
        args: Arguments for the executable.
        command: Executable name or path.

    Returns:
        The child's exit code (128 + N if it was killed by signal N).

    Raises:
        LauncherError: If the executable cannot be started.
    """
    logger.debug(f"Launching {command} with {len(args)} argument(s)")

    try:
        process = subprocess.Popen([command, *args])
    except FileNotFoundError as e:
        raise LauncherError(command, "command not found") from e
    except OSError as e:
        raise LauncherError(command, str(e)) from e

    while True:
        try:
            returncode = process.wait()
            break
        except KeyboardInterrupt:
            continue

    if returncode < 0:
        return 128 - returncode
    return returncode
