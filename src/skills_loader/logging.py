"""Logging configuration for skills-loader."""

import logging

from rich.console import Console
from rich.logging import RichHandler

PACKAGE_LOGGER = "skills_loader"

# Diagnostics go to stderr so they never mix with listing output
_stderr_console = Console(stderr=True)


def configure_logging(level: str | int = logging.WARNING) -> logging.Logger:
    """Attach a Rich stderr handler to the package logger.

    Safe to call more than once: the handler is only added the first time,
    later calls just update the level.

    Args:
        level: Level name or number.

    Returns:
        The package logger.
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.WARNING

    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level)

    if not any(getattr(h, "_skills_loader", False) for h in logger.handlers):
        handler = RichHandler(
            console=_stderr_console,
            show_time=False,
            show_path=False,
            markup=False,
            rich_tracebacks=True,
        )
        handler._skills_loader = True  # type: ignore[attr-defined]
        logger.addHandler(handler)

    logger.debug(f"Logging configured at level {logging.getLevelName(level)}")
    return logger
