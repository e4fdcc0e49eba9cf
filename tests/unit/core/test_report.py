"""Tests for outdated report rendering."""

import click

from pkgup.core.formatting import ColorFormatter, PlainFormatter
from pkgup.core.package_manager.types import OutdatedEntry, OutdatedReport
from pkgup.core.report import NOTHING_TO_UPDATE, REPORT_HEADING, format_entry, render_report


def _entry(name: str, current: str, latest: str) -> OutdatedEntry:
    return OutdatedEntry(name=name, current=current, latest=latest)


def test_empty_report_renders_nothing_to_update() -> None:
    assert render_report({}, PlainFormatter()) == [NOTHING_TO_UPDATE]


def test_absent_report_renders_nothing_to_update() -> None:
    assert render_report(None, PlainFormatter()) == [NOTHING_TO_UPDATE]


def test_report_renders_heading_and_one_line_per_entry() -> None:
    report: OutdatedReport = {
        "left-pad": _entry("left-pad", "1.0.0", "1.3.0"),
        "react": _entry("react", "17.0.2", "18.3.1"),
    }

    lines = render_report(report, PlainFormatter())

    assert lines == [
        REPORT_HEADING,
        "left-pad : 1.0.0 -> 1.3.0",
        "react : 17.0.2 -> 18.3.1",
    ]


def test_render_does_not_mutate_report() -> None:
    report: OutdatedReport = {"left-pad": _entry("left-pad", "1.0.0", "1.3.0")}
    snapshot = dict(report)

    render_report(report, PlainFormatter())

    assert report == snapshot


def test_color_formatter_styles_name_and_versions() -> None:
    line = format_entry(_entry("left-pad", "1.0.0", "1.3.0"), ColorFormatter())

    assert click.style("left-pad", fg="blue") in line
    assert click.style("1.0.0", fg="yellow") in line
    assert click.style("1.3.0", fg="green") in line
    assert click.unstyle(line) == "left-pad : 1.0.0 -> 1.3.0"
