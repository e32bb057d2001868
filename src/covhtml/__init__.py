"""Render Go coverage profiles as a single HTML report."""

from covhtml._meta import __version__, logger

__all__ = ["__version__", "logger"]
