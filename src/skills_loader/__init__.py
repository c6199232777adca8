"""
skills-loader - preload Claude skills into a session.

Scans the global and project skill directories, lets you pick skills
interactively, and launches Claude with the selected skills appended
to its system prompt.
"""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("skills-loader")
except PackageNotFoundError:
    __version__ = "0.1.0"

__all__ = [
    "__version__",
]
