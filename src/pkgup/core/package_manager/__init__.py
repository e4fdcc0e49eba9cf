from pkgup.core.package_manager.abc import PackageManager
from pkgup.core.package_manager.dry_run import DryRunPackageManager
from pkgup.core.package_manager.real import RealPackageManager
from pkgup.core.package_manager.types import (
    CommandResult,
    OutdatedEntry,
    OutdatedQueryError,
    OutdatedReport,
    PackageManagerKind,
    UnsupportedPackageManagerError,
    UpdateResult,
)

__all__ = [
    "CommandResult",
    "DryRunPackageManager",
    "OutdatedEntry",
    "OutdatedQueryError",
    "OutdatedReport",
    "PackageManager",
    "PackageManagerKind",
    "RealPackageManager",
    "UnsupportedPackageManagerError",
    "UpdateResult",
]
