"""Package manager detection from lockfiles."""

from pathlib import Path

from pkgup.core.package_manager.commands import LOCKFILES
from pkgup.core.package_manager.types import PackageManagerKind


def _first_lockfile(project_path: Path) -> tuple[Path, PackageManagerKind] | None:
    # Only existence is checked; lockfile contents are never read
    for lockfile_name, kind in LOCKFILES:
        candidate = project_path / lockfile_name
        if candidate.exists():
            return candidate, kind
    return None


def find_lockfile(project_path: Path) -> Path | None:
    """Return the highest-priority lockfile present in project_path, if any."""
    match = _first_lockfile(project_path)
    if match is None:
        return None
    return match[0]


def detect_package_manager(project_path: Path | None = None) -> PackageManagerKind:
    """Detect the package manager governing project_path.

    Lockfiles are checked in priority order npm, yarn, pnpm and the first one
    present wins.

    Args:
        project_path: Project directory (defaults to the current working directory)

    Returns:
        Kind matching the first lockfile found, or PackageManagerKind.UNKNOWN if
        none exists (including when the directory itself does not exist)
    """
    if project_path is None:
        project_path = Path.cwd()

    match = _first_lockfile(project_path)
    if match is None:
        return PackageManagerKind.UNKNOWN
    return match[1]
