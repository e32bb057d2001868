"""Include/exclude decisions for source files named in a coverage profile.

Entries are relative paths compared on whole path segments: ``path/to``
matches ``path/to`` and ``path/to/dir1/file.go`` but never ``path/tooo``.
There is no glob syntax.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from covhtml._meta import logger

if TYPE_CHECKING:
    from .config import EffectiveConfig


def normalize_path(value: str) -> str:
    """Strip one leading ``./`` and one trailing ``/`` from *value*."""
    s = value.removeprefix("./")
    return s.removesuffix("/")


def segment_match(candidate: str, entry: str) -> bool:
    """Return True when *entry* equals *candidate* or is one of its ancestors."""
    if not candidate or not entry:
        return False
    return candidate == entry or candidate.startswith(entry + "/")


def join_path(path: str, file_name: str) -> str:
    if not file_name:
        return path
    if not path:
        return file_name
    return f"{path}/{file_name}"


@dataclass(frozen=True, slots=True)
class PathFilter:
    """Decide whether a profile file belongs in the report."""

    include: tuple[str, ...] = ()
    exclude: tuple[str, ...] = ()

    @classmethod
    def from_config(cls, config: EffectiveConfig) -> PathFilter:
        return cls(include=config.include, exclude=config.exclude)

    def _included(self, candidate: str) -> bool:
        if not self.include:
            return True
        return any(segment_match(candidate, entry) for entry in self.include)

    def _excluded(self, candidate: str, path: str) -> bool:
        return any(segment_match(candidate, entry) or segment_match(path, entry) for entry in self.exclude)

    def is_output_target(self, path: str, file_name: str = "") -> bool:
        """Return True if ``path/file_name`` should appear in the report."""
        norm = normalize_path(path)
        candidate = join_path(norm, file_name)

        # paths outside the project root are only kept through an include entry
        if path.startswith("/") and not self.include:
            logger.debug("path filter %s: absolute path", candidate)
            return False

        inc = self._included(candidate)
        exc = inc and self._excluded(candidate, norm)
        logger.debug("path filter %s include=%s exclude=%s", candidate, inc, exc)
        return inc and not exc


__all__ = ["PathFilter", "join_path", "normalize_path", "segment_match"]
