"""Command line interface for skills-loader."""
