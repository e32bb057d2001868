"""Assemble the per-file coverage report from a parsed profile."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from covhtml._meta import logger
from covhtml.coverage.profile import split_profile_name
from covhtml.model.path_filter import join_path

if TYPE_CHECKING:
    from covhtml.coverage.profile import Profile, ProfileBlock
    from covhtml.model.path_filter import PathFilter
    from covhtml.model.types import CoverMode


def pct(covered: int, total: int) -> float:
    return 0.0 if total == 0 else 100.0 * covered / total


@dataclass(frozen=True, slots=True)
class FileReport:
    path: str
    name: str
    blocks: tuple[ProfileBlock, ...]
    statements: int
    covered: int

    @property
    def display_path(self) -> str:
        return join_path(self.path, self.name)

    @property
    def percent(self) -> float:
        return pct(self.covered, self.statements)


@dataclass(frozen=True, slots=True)
class Report:
    mode: CoverMode
    files: tuple[FileReport, ...]

    @property
    def statements(self) -> int:
        return sum(f.statements for f in self.files)

    @property
    def covered(self) -> int:
        return sum(f.covered for f in self.files)

    @property
    def percent(self) -> float:
        return pct(self.covered, self.statements)


def build_report(profile: Profile, path_filter: PathFilter, *, module: str | None = None) -> Report:
    """Keep the profile files the filter accepts and total their statements."""
    files: list[FileReport] = []
    for pf in profile.files:
        directory, name = split_profile_name(pf.name, module)
        if not path_filter.is_output_target(directory, name):
            logger.debug("skipping %s", pf.name)
            continue
        statements = sum(b.num_stmt for b in pf.blocks)
        covered = sum(b.num_stmt for b in pf.blocks if b.covered)
        files.append(
            FileReport(path=directory, name=name, blocks=pf.blocks, statements=statements, covered=covered)
        )
    logger.debug("report includes %d of %d files", len(files), len(profile.files))
    return Report(mode=profile.mode, files=tuple(files))


__all__ = ["FileReport", "Report", "build_report", "pct"]
