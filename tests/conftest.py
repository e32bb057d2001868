from __future__ import annotations

import io
from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass
from typing import TYPE_CHECKING

import pytest
from click.testing import CliRunner

if TYPE_CHECKING:
    from pathlib import Path

# (start_line, end_line, num_stmt, count)
BlockSpec = tuple[int, int, int, int]


@dataclass
class MemorySettingsSource:
    """In-memory stand-in for the settings file."""

    text: str | None = None
    read_error: OSError | None = None

    def exists(self, path: str) -> bool:
        return self.text is not None or self.read_error is not None

    def read(self, path: str) -> io.StringIO:
        if self.read_error is not None:
            raise self.read_error
        return io.StringIO(self.text or "")


@pytest.fixture
def cli_runner() -> CliRunner:
    """Return a Click CLI runner for invoking the command-line interface."""
    return CliRunner()


@pytest.fixture
def settings_source() -> Callable[..., MemorySettingsSource]:
    def build(text: str | None = None, *, read_error: OSError | None = None) -> MemorySettingsSource:
        return MemorySettingsSource(text=text, read_error=read_error)

    return build


@pytest.fixture
def profile_content() -> Callable[..., str]:
    def build(mapping: Mapping[str, Iterable[BlockSpec]], *, mode: str = "set") -> str:
        lines = [f"mode: {mode}"]
        for name, blocks in mapping.items():
            for start, end, stmts, count in blocks:
                lines.append(f"{name}:{start}.1,{end}.2 {stmts} {count}")
        return "\n".join(lines) + "\n"

    return build


@pytest.fixture
def profile_file(
    tmp_path: Path,
    profile_content: Callable[..., str],
) -> Callable[..., Path]:
    def write(
        mapping: Mapping[str, Iterable[BlockSpec]],
        *,
        mode: str = "set",
        filename: str = "coverage.out",
    ) -> Path:
        out = tmp_path / filename
        out.write_text(profile_content(mapping, mode=mode), encoding="utf-8")
        return out

    return write
