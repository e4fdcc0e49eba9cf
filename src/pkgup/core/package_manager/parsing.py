"""Parsing utilities for `<manager> outdated --json` output.

Two shapes are accepted:

- Object form (npm, pnpm):
  {"left-pad": {"current": "1.0.0", "wanted": "1.3.0", "latest": "1.3.0"}}
  npm workspaces may map one package to a list of such objects.
- Yarn classic JSON lines, one event per line. The "table" event carries the
  outdated packages:
  {"type": "table", "data": {"head": ["Package", "Current", ...], "body": [[...]]}}
"""

import json
import logging
from typing import Any

from pkgup.core.package_manager.types import OutdatedEntry, OutdatedReport

logger = logging.getLogger(__name__)

# Reported by npm when a dependency is declared but not installed
MISSING_VERSION = "missing"

VERSION_KEYS = ("current", "wanted", "latest")
ERROR_KEYS = ("code", "summary", "detail")


def parse_outdated_output(stdout: str) -> OutdatedReport:
    """Parse outdated output into a report keyed by package name.

    Empty output means nothing is outdated and yields an empty report.

    Raises:
        ValueError: If output is not recognizable outdated data, or is an
            error payload emitted by the package manager
    """
    text = stdout.strip()
    if not text:
        return {}

    try:
        data = json.loads(text)
    except json.JSONDecodeError:
        return _parse_json_lines(text)

    if not isinstance(data, dict):
        raise ValueError(f"Expected a JSON object, got {type(data).__name__}")

    if _is_yarn_event(data):
        return _parse_json_lines(text)

    error_summary = _extract_error_summary(data)
    if error_summary is not None:
        raise ValueError(f"Package manager reported an error: {error_summary}")

    return _parse_object_form(data)


def _is_yarn_event(data: dict[str, Any]) -> bool:
    return isinstance(data.get("type"), str) and "data" in data


def _extract_error_summary(data: dict[str, Any]) -> str | None:
    """Return npm's error summary if data is an error payload.

    npm prints {"error": {"code": ..., "summary": ..., "detail": ...}} on
    stdout when --json is set and the command fails.
    """
    error = data.get("error")
    if not isinstance(error, dict):
        return None
    # "error" is also a real npm package; an outdated entry carries versions
    if any(key in error for key in VERSION_KEYS):
        return None
    if not any(key in error for key in ERROR_KEYS):
        return None
    summary = error.get("summary") or error.get("code") or "unknown error"
    return str(summary)


def _parse_object_form(data: dict[str, Any]) -> OutdatedReport:
    report: OutdatedReport = {}
    for name, details in data.items():
        if isinstance(details, list):
            if not details:
                continue
            # Same package outdated in several workspaces; first location wins
            details = details[0]
        if not isinstance(details, dict):
            raise ValueError(f"Unexpected details for package '{name}': {details!r}")

        latest = details.get("latest")
        if latest is None:
            raise ValueError(f"Missing 'latest' version for package '{name}'")

        current = details.get("current")
        wanted = details.get("wanted")
        dependency_type = details.get("type") or details.get("dependencyType")
        report[name] = OutdatedEntry(
            name=name,
            current=str(current) if current is not None else MISSING_VERSION,
            latest=str(latest),
            wanted=str(wanted) if wanted is not None else None,
            dependency_type=str(dependency_type) if dependency_type is not None else None,
        )
    return report


def _parse_json_lines(text: str) -> OutdatedReport:
    report: OutdatedReport = {}
    errors: list[str] = []
    for line_number, line in enumerate(text.splitlines(), start=1):
        line = line.strip()
        if not line:
            continue
        try:
            event = json.loads(line)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON on line {line_number}: {line[:80]}") from e
        if not isinstance(event, dict):
            raise ValueError(f"Expected a JSON object on line {line_number}")

        event_type = event.get("type")
        if event_type == "table":
            report.update(_parse_yarn_table(event.get("data")))
        elif event_type == "error":
            errors.append(str(event.get("data")))
        else:
            logger.debug("Skipping %s event on line %d", event_type, line_number)

    if errors and not report:
        raise ValueError(f"Package manager reported an error: {'; '.join(errors)}")
    return report


def _parse_yarn_table(table: Any) -> OutdatedReport:
    if not isinstance(table, dict):
        raise ValueError("Yarn table event has no data")
    head = table.get("head")
    body = table.get("body")
    if not isinstance(head, list) or not isinstance(body, list):
        raise ValueError("Yarn table event is missing 'head' or 'body'")

    columns = {str(column): index for index, column in enumerate(head)}
    for required in ("Package", "Current", "Latest"):
        if required not in columns:
            raise ValueError(f"Yarn table is missing the '{required}' column")

    def cell(row: list[Any], column: str) -> str | None:
        index = columns.get(column)
        if index is None or index >= len(row):
            return None
        return str(row[index])

    report: OutdatedReport = {}
    for row in body:
        if not isinstance(row, list):
            raise ValueError(f"Unexpected yarn table row: {row!r}")
        name = cell(row, "Package")
        latest = cell(row, "Latest")
        if name is None or latest is None:
            raise ValueError(f"Incomplete yarn table row: {row!r}")
        report[name] = OutdatedEntry(
            name=name,
            current=cell(row, "Current") or MISSING_VERSION,
            latest=latest,
            wanted=cell(row, "Wanted"),
            dependency_type=cell(row, "Package Type"),
        )
    return report
