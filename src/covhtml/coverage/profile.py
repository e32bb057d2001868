"""Parser for the text coverage profile written by ``go test -coverprofile``.

The format is a ``mode:`` header followed by one line per block::

    mode: set
    example.com/mod/pkg/file.go:10.2,12.16 2 1
"""

from __future__ import annotations

import re
from dataclasses import dataclass, replace
from pathlib import Path  # noqa: TC003
from typing import TYPE_CHECKING

from covhtml._meta import logger
from covhtml.errors import InvalidProfileError, ProfileNotFoundError
from covhtml.model.types import CoverMode

if TYPE_CHECKING:
    from collections.abc import Iterable

_MODE_RE = re.compile(r"^mode:\s*(?P<mode>\S+)\s*$")
_BLOCK_RE = re.compile(
    r"^(?P<name>.+):(?P<sl>\d+)\.(?P<sc>\d+),(?P<el>\d+)\.(?P<ec>\d+) (?P<stmts>\d+) (?P<count>\d+)$"
)
_MODULE_RE = re.compile(r"^module\s+(?P<path>\S+)")


@dataclass(frozen=True, slots=True)
class ProfileBlock:
    start_line: int
    start_col: int
    end_line: int
    end_col: int
    num_stmt: int
    count: int

    @property
    def covered(self) -> bool:
        return self.count > 0


@dataclass(frozen=True, slots=True)
class ProfileFile:
    name: str
    blocks: tuple[ProfileBlock, ...]


@dataclass(frozen=True, slots=True)
class Profile:
    mode: CoverMode
    files: tuple[ProfileFile, ...]


def _parse_mode(line: str, lineno: int) -> CoverMode:
    m = _MODE_RE.match(line)
    if not m:
        msg = f"line {lineno}: expected 'mode: <set|count|atomic>', got {line!r}"
        raise InvalidProfileError(msg)
    try:
        return CoverMode(m.group("mode"))
    except ValueError as exc:
        msg = f"line {lineno}: unknown cover mode {m.group('mode')!r}"
        raise InvalidProfileError(msg) from exc


def parse_profile(lines: Iterable[str]) -> Profile:
    """Parse profile text lines into a :class:`Profile`."""
    mode: CoverMode | None = None
    blocks: dict[str, list[ProfileBlock]] = {}
    for lineno, raw in enumerate(lines, start=1):
        line = raw.strip()
        if not line:
            continue
        if mode is None:
            mode = _parse_mode(line, lineno)
            continue
        m = _BLOCK_RE.match(line)
        if not m:
            msg = f"line {lineno}: malformed profile block {line!r}"
            raise InvalidProfileError(msg)
        block = ProfileBlock(
            start_line=int(m.group("sl")),
            start_col=int(m.group("sc")),
            end_line=int(m.group("el")),
            end_col=int(m.group("ec")),
            num_stmt=int(m.group("stmts")),
            count=int(m.group("count")),
        )
        blocks.setdefault(m.group("name"), []).append(block)

    if mode is None:
        msg = "empty coverage profile"
        raise InvalidProfileError(msg)

    files = tuple(ProfileFile(name, _merge_blocks(bs, mode)) for name, bs in sorted(blocks.items()))
    return Profile(mode=mode, files=files)


def _merge_blocks(blocks: list[ProfileBlock], mode: CoverMode) -> tuple[ProfileBlock, ...]:
    # the same block is reported once per test binary that compiled it
    merged: dict[tuple[int, int, int, int], ProfileBlock] = {}
    for b in blocks:
        key = (b.start_line, b.start_col, b.end_line, b.end_col)
        prev = merged.get(key)
        if prev is None:
            merged[key] = b
            continue
        count = max(prev.count, b.count) if mode is CoverMode.SET else prev.count + b.count
        merged[key] = replace(prev, count=count)
    return tuple(merged[k] for k in sorted(merged))


def read_profile(path: Path) -> Profile:
    """Read and parse the coverage profile at *path*."""
    if not path.is_file():
        msg = f"coverage profile not found: {path}"
        raise ProfileNotFoundError(msg)
    try:
        with path.open(encoding="utf-8") as f:
            profile = parse_profile(f)
    except UnicodeDecodeError as exc:
        msg = f"coverage profile {path} is not valid UTF-8: {exc}"
        raise InvalidProfileError(msg) from exc
    logger.debug("read %d files from %s (mode=%s)", len(profile.files), path, profile.mode)
    return profile


def read_module_path(go_mod: Path) -> str | None:
    """Return the ``module`` directive of a ``go.mod`` file, if any."""
    try:
        text = go_mod.read_text(encoding="utf-8")
    except OSError:
        return None
    for line in text.splitlines():
        m = _MODULE_RE.match(line.strip())
        if m:
            return m.group("path").strip('"')
    return None


def split_profile_name(name: str, module: str | None = None) -> tuple[str, str]:
    """Split a profile file name into ``(directory, file_name)``.

    When *module* is given and *name* lives inside it, the module prefix is
    removed so the directory is relative to the module root.
    """
    if module and name.startswith(module + "/"):
        name = name[len(module) + 1 :]
    directory, _, file_name = name.rpartition("/")
    return directory, file_name


__all__ = [
    "Profile",
    "ProfileBlock",
    "ProfileFile",
    "parse_profile",
    "read_module_path",
    "read_profile",
    "split_profile_name",
]
