"""Rendering of outdated package reports."""

from pkgup.core.formatting import ReportFormatter
from pkgup.core.package_manager.types import OutdatedEntry, OutdatedReport

NOTHING_TO_UPDATE = "No packages to update."
REPORT_HEADING = "Outdated packages:"


def format_entry(entry: OutdatedEntry, formatter: ReportFormatter) -> str:
    """Format one entry as `<name> : <current> -> <latest>`."""
    return (
        f"{formatter.package(entry.name)} : "
        f"{formatter.current_version(entry.current)} -> "
        f"{formatter.latest_version(entry.latest)}"
    )


def render_report(report: OutdatedReport | None, formatter: ReportFormatter) -> list[str]:
    """Render a report as display lines, in the report's iteration order.

    An empty or absent report renders as the single nothing-to-update line.
    The report is not modified.
    """
    if not report:
        return [formatter.warning(NOTHING_TO_UPDATE)]

    lines = [formatter.heading(REPORT_HEADING)]
    lines.extend(format_entry(entry, formatter) for entry in report.values())
    return lines
