from __future__ import annotations

from dataclasses import dataclass

from .types import Theme

DEFAULT_INPUT = "coverage.out"
DEFAULT_OUTPUT = "coverage.html"
DEFAULT_THEME = Theme.DARK


@dataclass(frozen=True, slots=True)
class EffectiveConfig:
    """Fully resolved and validated run options.

    ``include`` and ``exclude`` hold normalized, relative path entries. An
    empty tuple means the list places no restriction.
    """

    input: str = DEFAULT_INPUT
    output: str = DEFAULT_OUTPUT
    theme: Theme = DEFAULT_THEME
    include: tuple[str, ...] = ()
    exclude: tuple[str, ...] = ()


__all__ = ["DEFAULT_INPUT", "DEFAULT_OUTPUT", "DEFAULT_THEME", "EffectiveConfig"]
