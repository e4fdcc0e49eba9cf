"""No-op wrapper for package manager operations."""

from pathlib import Path

from pkgup.core.package_manager.abc import PackageManager
from pkgup.core.package_manager.commands import commands_for
from pkgup.core.package_manager.types import CommandResult, OutdatedReport, PackageManagerKind


class DryRunPackageManager(PackageManager):
    """No-op wrapper that prevents execution of upgrades.

    The outdated query is read-only and is delegated to the wrapped
    implementation. Upgrades return success without running anything.

    Usage:
        real_ops = RealPackageManager()
        noop_ops = DryRunPackageManager(real_ops)

        # No-op instead of running npm install left-pad@latest
        noop_ops.install_latest(PackageManagerKind.NPM, "left-pad", project_dir)
    """

    def __init__(self, wrapped: PackageManager) -> None:
        """Create a dry-run wrapper around a PackageManager implementation.

        Args:
            wrapped: The PackageManager implementation to wrap (usually RealPackageManager)
        """
        self._wrapped = wrapped

    def get_outdated(self, kind: PackageManagerKind, project_dir: Path) -> OutdatedReport:
        """List outdated packages (read-only, delegates to wrapped)."""
        return self._wrapped.get_outdated(kind, project_dir)

    def install_latest(
        self, kind: PackageManagerKind, package: str, project_dir: Path
    ) -> CommandResult:
        """No-op for package upgrades in dry-run mode, returns success."""
        # Still rejects UNKNOWN like the real implementation
        commands_for(kind)
        return CommandResult(success=True, stdout="", stderr="")
