"""Tests for DryRunPackageManager."""

from pathlib import Path

import pytest

from pkgup.core.package_manager.dry_run import DryRunPackageManager
from pkgup.core.package_manager.types import (
    OutdatedEntry,
    PackageManagerKind,
    UnsupportedPackageManagerError,
)
from tests.fakes.package_manager import FakePackageManager

PROJECT = Path("/project")


def test_outdated_query_delegates_to_wrapped() -> None:
    entry = OutdatedEntry(name="left-pad", current="1.0.0", latest="1.3.0")
    fake = FakePackageManager(outdated={PackageManagerKind.NPM: {"left-pad": entry}})

    report = DryRunPackageManager(fake).get_outdated(PackageManagerKind.NPM, PROJECT)

    assert report == {"left-pad": entry}
    assert fake.outdated_calls == [(PackageManagerKind.NPM, PROJECT)]


def test_install_is_not_delegated() -> None:
    fake = FakePackageManager(install_failures={"left-pad": "boom"})

    result = DryRunPackageManager(fake).install_latest(PackageManagerKind.NPM, "left-pad", PROJECT)

    assert result.success is True
    assert fake.install_calls == []


def test_install_rejects_unknown_kind() -> None:
    with pytest.raises(UnsupportedPackageManagerError):
        DryRunPackageManager(FakePackageManager()).install_latest(
            PackageManagerKind.UNKNOWN, "left-pad", PROJECT
        )
