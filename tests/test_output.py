from __future__ import annotations

from pathlib import Path

import pytest

from covhtml.coverage.profile import ProfileBlock, parse_profile
from covhtml.io import STDOUT, write_output
from covhtml.model import PathFilter, Theme
from covhtml.output.html import line_states, read_file_lines, render_html
from covhtml.report import build_report


@pytest.fixture
def report():
    profile = parse_profile(
        [
            "mode: set",
            "example.com/mod/pkg/a.go:3.10,5.2 2 1",
            "example.com/mod/pkg/a.go:6.2,6.20 1 0",
            "example.com/mod/pkg/b<x>.go:1.1,1.5 1 0",
        ]
    )
    return build_report(profile, PathFilter(), module="example.com/mod")


@pytest.mark.parametrize("theme", list(Theme))
def test_render_html_theme(report, theme: Theme) -> None:
    html = render_html(report, theme=theme)
    assert html.startswith("<!DOCTYPE html>")
    assert f'<body class="theme-{theme.value}">' in html
    assert f"body.theme-{theme.value}" in html


def test_render_html_lists_blocks_without_source(report) -> None:
    html = render_html(report)
    assert "pkg/a.go" in html
    assert '<tr class="cov"><td>3.10-5.2</td><td>2</td><td>1</td></tr>' in html
    assert '<tr class="uncov"><td>6.2-6.20</td><td>1</td><td>0</td></tr>' in html
    assert "66.7" in html


def test_render_html_escapes_names(report) -> None:
    html = render_html(report)
    assert "b&lt;x&gt;.go" in html
    assert "b<x>.go" not in html


def test_render_html_with_source(tmp_path: Path, report) -> None:
    src = tmp_path / "pkg" / "a.go"
    src.parent.mkdir()
    src.write_text("package pkg\n\nfunc F() {\n\tx := 1\n}\n\treturn <nil>\n", encoding="utf-8")
    read_file_lines.cache_clear()
    html = render_html(report, source_root=tmp_path)
    assert '<span class="cov"><span class="muted">    3</span> func F() {</span>' in html
    assert '<span class="uncov"><span class="muted">    6</span> \treturn &lt;nil&gt;</span>' in html
    assert '<span><span class="muted">    1</span> package pkg</span>' in html


def test_line_states_uncovered_wins() -> None:
    blocks = (
        ProfileBlock(1, 1, 3, 2, 1, 1),
        ProfileBlock(3, 4, 4, 2, 1, 0),
        ProfileBlock(5, 1, 5, 2, 0, 0),
    )
    assert line_states(blocks) == {1: "cov", 2: "cov", 3: "uncov", 4: "uncov"}


def test_write_output_to_file(tmp_path: Path) -> None:
    dest = tmp_path / "out" / "coverage.html"
    write_output("<html></html>", str(dest))
    assert dest.read_text(encoding="utf-8") == "<html></html>"


def test_write_output_to_stdout(capsys: pytest.CaptureFixture[str]) -> None:
    write_output("<html></html>", STDOUT)
    assert capsys.readouterr().out == "<html></html>\n"


def test_write_output_to_relative_path(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.chdir(tmp_path)
    write_output("<html></html>\n", "reports/coverage.html")
    assert (tmp_path / "reports" / "coverage.html").read_text(encoding="utf-8") == "<html></html>\n"
