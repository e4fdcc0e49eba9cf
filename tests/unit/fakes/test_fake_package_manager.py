"""Tests for FakePackageManager test infrastructure.

These tests verify that FakePackageManager correctly simulates package manager
operations, providing reliable test doubles for CLI tests.
"""

from pathlib import Path

import pytest

from pkgup.core.package_manager.types import (
    OutdatedEntry,
    OutdatedQueryError,
    PackageManagerKind,
    UnsupportedPackageManagerError,
)
from tests.fakes.package_manager import FakePackageManager

PROJECT = Path("/project")


def test_unconfigured_kind_returns_empty_report() -> None:
    assert FakePackageManager().get_outdated(PackageManagerKind.NPM, PROJECT) == {}


def test_returns_configured_report_copy() -> None:
    entry = OutdatedEntry(name="zod", current="3.0.0", latest="3.23.8")
    fake = FakePackageManager(outdated={PackageManagerKind.YARN: {"zod": entry}})

    report = fake.get_outdated(PackageManagerKind.YARN, PROJECT)
    report.clear()

    assert fake.get_outdated(PackageManagerKind.YARN, PROJECT) == {"zod": entry}


def test_outdated_error_raises() -> None:
    fake = FakePackageManager(outdated_error="boom")

    with pytest.raises(OutdatedQueryError, match="boom"):
        fake.get_outdated(PackageManagerKind.PNPM, PROJECT)

    assert fake.outdated_calls == [(PackageManagerKind.PNPM, PROJECT)]


def test_install_failures_are_returned() -> None:
    fake = FakePackageManager(install_failures={"zod": "ERESOLVE"})

    ok = fake.install_latest(PackageManagerKind.NPM, "react", PROJECT)
    failed = fake.install_latest(PackageManagerKind.NPM, "zod", PROJECT)

    assert ok.success is True
    assert failed.success is False
    assert failed.stderr == "ERESOLVE"
    assert fake.install_calls == [
        (PackageManagerKind.NPM, "react", PROJECT),
        (PackageManagerKind.NPM, "zod", PROJECT),
    ]


def test_unknown_kind_rejected() -> None:
    with pytest.raises(UnsupportedPackageManagerError):
        FakePackageManager().get_outdated(PackageManagerKind.UNKNOWN, PROJECT)
