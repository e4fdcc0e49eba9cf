"""Tests for CLI Ensure utility class."""

from pathlib import Path

import pytest

from pkgup.cli.ensure import Ensure
from pkgup.core.package_manager.types import PackageManagerKind


class TestEnsurePackageManagerDetected:
    """Tests for Ensure.package_manager_detected method."""

    @pytest.mark.parametrize(
        "kind", [PackageManagerKind.NPM, PackageManagerKind.YARN, PackageManagerKind.PNPM]
    )
    def test_passes_for_known_kinds(
        self, kind: PackageManagerKind, capsys: pytest.CaptureFixture[str]
    ) -> None:
        Ensure.package_manager_detected(kind, Path("/project"))

        captured = capsys.readouterr()
        assert captured.out == ""
        assert captured.err == ""

    def test_exits_for_unknown(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            Ensure.package_manager_detected(PackageManagerKind.UNKNOWN, Path("/project"))

        assert exc_info.value.code == 1
        captured = capsys.readouterr()
        # user_output routes to stderr
        assert captured.out == ""
        assert "Error: No supported package manager detected in /project" in captured.err
        assert "Expected one of: package-lock.json, yarn.lock, pnpm-lock.yaml" in captured.err

    def test_names_the_checked_directory(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        with pytest.raises(SystemExit):
            Ensure.package_manager_detected(PackageManagerKind.UNKNOWN, tmp_path)

        assert f"detected in {tmp_path}" in capsys.readouterr().err
