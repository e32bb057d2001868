from __future__ import annotations

import pytest

from covhtml.coverage.profile import parse_profile
from covhtml.model import PathFilter
from covhtml.report import build_report, pct

PROFILE_LINES = [
    "mode: set",
    "example.com/mod/cmd/main.go:1.1,3.2 2 1",
    "example.com/mod/internal/cover/filter.go:1.1,5.2 3 1",
    "example.com/mod/internal/cover/filter.go:6.1,8.2 1 0",
    "example.com/mod/internal/option/option.go:1.1,2.2 4 0",
    "/tmp/generated/gen.go:1.1,2.2 1 1",
]


@pytest.fixture
def profile():
    return parse_profile(PROFILE_LINES)


def test_pct_handles_zero_total() -> None:
    assert pct(0, 0) == 0.0
    assert pct(1, 4) == 25.0


def test_build_report_unfiltered(profile) -> None:
    report = build_report(profile, PathFilter(), module="example.com/mod")
    assert [f.display_path for f in report.files] == [
        "cmd/main.go",
        "internal/cover/filter.go",
        "internal/option/option.go",
    ]
    filt = report.files[1]
    assert (filt.path, filt.name) == ("internal/cover", "filter.go")
    assert (filt.statements, filt.covered) == (4, 3)
    assert filt.percent == 75.0
    assert (report.statements, report.covered) == (10, 5)
    assert report.percent == 50.0


def test_build_report_include_exclude(profile) -> None:
    pf = PathFilter(include=("internal",), exclude=("internal/option",))
    report = build_report(profile, pf, module="example.com/mod")
    assert [f.display_path for f in report.files] == ["internal/cover/filter.go"]


def test_build_report_single_file_include(profile) -> None:
    pf = PathFilter(include=("internal/cover/filter.go",))
    report = build_report(profile, pf, module="example.com/mod")
    assert [f.display_path for f in report.files] == ["internal/cover/filter.go"]


def test_build_report_without_module_uses_full_names(profile) -> None:
    report = build_report(profile, PathFilter(include=("example.com/mod/cmd",)))
    assert [f.display_path for f in report.files] == ["example.com/mod/cmd/main.go"]


def test_empty_report(profile) -> None:
    report = build_report(profile, PathFilter(include=("nothing",)))
    assert report.files == ()
    assert report.percent == 0.0
