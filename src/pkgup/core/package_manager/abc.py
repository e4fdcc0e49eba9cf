"""Abstract interface for JavaScript package manager operations.

Commands take the PackageManagerKind explicitly so one implementation serves
npm, yarn and pnpm through the command table in pkgup.core.package_manager.commands.
"""

from abc import ABC, abstractmethod
from pathlib import Path

from pkgup.core.package_manager.types import CommandResult, OutdatedReport, PackageManagerKind


class PackageManager(ABC):
    """Abstract package manager operations for dependency injection."""

    @abstractmethod
    def get_outdated(self, kind: PackageManagerKind, project_dir: Path) -> OutdatedReport:
        """List outdated dependencies of the project.

        A non-zero exit code paired with parseable output is not a failure:
        package managers exit 1 whenever something is outdated.

        Args:
            kind: Package manager governing the project
            project_dir: Directory containing the project's lockfile

        Returns:
            Report keyed by package name, empty when nothing is outdated

        Raises:
            UnsupportedPackageManagerError: If kind is UNKNOWN
            OutdatedQueryError: If the command cannot run or its output is unusable
        """
        ...

    @abstractmethod
    def install_latest(
        self, kind: PackageManagerKind, package: str, project_dir: Path
    ) -> CommandResult:
        """Upgrade a single package to its latest version.

        Failures are reported through the returned CommandResult, never raised,
        so callers can continue with the remaining packages.

        Args:
            kind: Package manager governing the project
            package: Name of the package to upgrade
            project_dir: Directory containing the project's lockfile

        Raises:
            UnsupportedPackageManagerError: If kind is UNKNOWN
        """
        ...
