"""HTML rendering of a coverage :class:`~covhtml.report.Report`."""

from __future__ import annotations

from functools import lru_cache
from html import escape
from typing import TYPE_CHECKING

from covhtml.model.types import Theme

if TYPE_CHECKING:  # pragma: no cover
    from pathlib import Path

    from covhtml.coverage.profile import ProfileBlock
    from covhtml.report import FileReport, Report

_PALETTES: dict[Theme, dict[str, str]] = {
    Theme.DARK: {
        "bg": "#1e1e1e",
        "fg": "#d4d4d4",
        "muted": "#808080",
        "border": "#3c3c3c",
        "cov": "#2e7d32",
        "uncov": "#c62828",
    },
    Theme.LIGHT: {
        "bg": "#ffffff",
        "fg": "#1f2328",
        "muted": "#6e7781",
        "border": "#d0d7de",
        "cov": "#a5d6a7",
        "uncov": "#ef9a9a",
    },
}


@lru_cache(maxsize=256)
def read_file_lines(path: Path) -> list[str]:
    """Return the lines of *path*, or an empty list when it cannot be read."""
    try:
        with path.open(encoding="utf-8") as f:
            return [ln.rstrip("\n") for ln in f.readlines()]
    except (OSError, UnicodeDecodeError):
        return []


def _style(theme: Theme) -> str:
    p = _PALETTES[theme]
    return (
        f"body.theme-{theme.value}{{background:{p['bg']};color:{p['fg']};font-family:sans-serif}}"
        f"table{{border-collapse:collapse}}"
        f"td,th{{border:1px solid {p['border']};padding:2px 8px}}"
        f".muted{{color:{p['muted']}}}"
        f".cov{{background:{p['cov']}}}"
        f".uncov{{background:{p['uncov']}}}"
        f"pre{{margin:0}}"
    )


def line_states(blocks: tuple[ProfileBlock, ...]) -> dict[int, str]:
    """Map line numbers to ``"cov"`` or ``"uncov"``; uncovered wins on overlap."""
    states: dict[int, str] = {}
    for b in blocks:
        if b.num_stmt == 0:
            continue
        state = "cov" if b.covered else "uncov"
        for ln in range(b.start_line, b.end_line + 1):
            if states.get(ln) != "uncov":
                states[ln] = state
    return states


def _anchor(index: int) -> str:
    return f"file{index}"


def _summary(report: Report) -> list[str]:
    parts = ["<table>", "<tr><th>File</th><th>Statements</th><th>Covered</th><th>%</th></tr>"]
    for i, f in enumerate(report.files):
        parts.append(
            f'<tr><td><a href="#{_anchor(i)}">{escape(f.display_path)}</a></td>'
            f"<td>{f.statements}</td><td>{f.covered}</td><td>{f.percent:.1f}</td></tr>"
        )
    parts.append(
        f"<tr><th>Total</th><th>{report.statements}</th><th>{report.covered}</th>"
        f"<th>{report.percent:.1f}</th></tr>"
    )
    parts.append("</table>")
    return parts


def _file_section(index: int, f: FileReport, source_root: Path | None) -> list[str]:
    parts = [f'<h2 id="{_anchor(index)}">{escape(f.display_path)} ({f.percent:.1f}%)</h2>']
    lines = read_file_lines(source_root / f.display_path) if source_root is not None else []
    if lines:
        states = line_states(f.blocks)
        parts.append("<pre>")
        for ln, text in enumerate(lines, start=1):
            cls = states.get(ln)
            attr = f' class="{cls}"' if cls else ""
            parts.append(f'<span{attr}><span class="muted">{ln:>5}</span> {escape(text)}</span>')
        parts.append("</pre>")
        return parts

    parts.append("<table>")
    parts.append("<tr><th>Block</th><th>Statements</th><th>Hits</th></tr>")
    for b in f.blocks:
        cls = "cov" if b.covered else "uncov"
        parts.append(
            f'<tr class="{cls}"><td>{b.start_line}.{b.start_col}-{b.end_line}.{b.end_col}</td>'
            f"<td>{b.num_stmt}</td><td>{b.count}</td></tr>"
        )
    parts.append("</table>")
    return parts


def render_html(report: Report, *, theme: Theme = Theme.DARK, source_root: Path | None = None) -> str:
    """Return a standalone HTML document for *report*.

    When *source_root* is given, each file's source is looked up relative to
    it and shown with covered and uncovered lines highlighted; otherwise the
    raw profile blocks are listed.
    """
    parts: list[str] = [
        "<!DOCTYPE html>",
        "<html>",
        "<head>",
        '<meta charset="utf-8">',
        "<title>Coverage Report</title>",
        f"<style>{_style(theme)}</style>",
        "</head>",
        f'<body class="theme-{theme.value}">',
        f"<h1>Coverage Report <span class=\"muted\">mode: {escape(report.mode.value)}</span></h1>",
    ]
    parts.extend(_summary(report))
    for i, f in enumerate(report.files):
        parts.extend(_file_section(i, f, source_root))
    parts.extend(("</body>", "</html>"))
    return "\n".join(parts)


__all__ = ["line_states", "read_file_lines", "render_html"]
