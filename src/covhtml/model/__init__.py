"""Domain model for covhtml (pure types + policy; no IO)."""

from .config import DEFAULT_INPUT, DEFAULT_OUTPUT, DEFAULT_THEME, EffectiveConfig
from .path_filter import PathFilter, normalize_path, segment_match
from .types import CoverMode, Theme

__all__ = [
    "DEFAULT_INPUT",
    "DEFAULT_OUTPUT",
    "DEFAULT_THEME",
    "CoverMode",
    "EffectiveConfig",
    "PathFilter",
    "Theme",
    "normalize_path",
    "segment_match",
]
