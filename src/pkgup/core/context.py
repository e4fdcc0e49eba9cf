"""Application context with dependency injection."""

import os
from dataclasses import dataclass
from pathlib import Path

from pkgup.core.formatting import ColorFormatter, PlainFormatter, ReportFormatter
from pkgup.core.package_manager.abc import PackageManager
from pkgup.core.package_manager.dry_run import DryRunPackageManager
from pkgup.core.package_manager.real import RealPackageManager


@dataclass(frozen=True)
class PkgupContext:
    """Immutable context holding all dependencies for pkgup operations.

    Created at CLI entry point and threaded through the application.
    Frozen to prevent accidental modification at runtime.
    """

    package_manager: PackageManager
    formatter: ReportFormatter
    cwd: Path  # Project directory: current working directory at CLI invocation
    dry_run: bool
    debug: bool

    @staticmethod
    def for_test(
        package_manager: PackageManager | None = None,
        formatter: ReportFormatter | None = None,
        cwd: Path | None = None,
        dry_run: bool = False,
        debug: bool = False,
    ) -> "PkgupContext":
        """Create test context with optional pre-configured dependencies.

        Args:
            package_manager: Optional PackageManager implementation.
                If None, creates empty FakePackageManager.
            formatter: Optional ReportFormatter. If None, uses PlainFormatter so
                assertions can match undecorated text.
            cwd: Optional project directory. If None, uses Path("/test/default/cwd").
            dry_run: Whether to enable dry-run mode (default False).
            debug: Whether to enable debug mode (default False).

        Example:
            >>> from tests.fakes.package_manager import FakePackageManager
            >>> fake = FakePackageManager(outdated={...})
            >>> ctx = PkgupContext.for_test(package_manager=fake, cwd=tmp_path)
        """
        from tests.fakes.package_manager import FakePackageManager

        return PkgupContext(
            package_manager=package_manager or FakePackageManager(),
            formatter=formatter or PlainFormatter(),
            cwd=cwd or Path("/test/default/cwd"),
            dry_run=dry_run,
            debug=debug,
        )


def create_context(*, dry_run: bool, color: bool = True, debug: bool = False) -> PkgupContext:
    """Create production context with real implementations.

    Called once at CLI entry point to create the context for the entire
    command execution.

    Args:
        dry_run: If True, wrap the package manager so upgrades are not executed
        color: If False, or the NO_COLOR environment variable is set, use plain output
        debug: Whether errors should surface with full tracebacks
    """
    package_manager: PackageManager = RealPackageManager()
    if dry_run:
        package_manager = DryRunPackageManager(package_manager)

    formatter: ReportFormatter = ColorFormatter()
    if not color or os.environ.get("NO_COLOR"):
        formatter = PlainFormatter()

    return PkgupContext(
        package_manager=package_manager,
        formatter=formatter,
        cwd=Path.cwd(),
        dry_run=dry_run,
        debug=debug,
    )
