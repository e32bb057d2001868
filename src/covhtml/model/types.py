"""Shared enumerations used across covhtml."""

from __future__ import annotations

from enum import StrEnum


class Theme(StrEnum):
    """Colour palettes available for the HTML report."""

    DARK = "dark"
    LIGHT = "light"


class CoverMode(StrEnum):
    """Counting modes written by ``go test -covermode``."""

    SET = "set"
    COUNT = "count"
    ATOMIC = "atomic"


__all__ = ["CoverMode", "Theme"]
