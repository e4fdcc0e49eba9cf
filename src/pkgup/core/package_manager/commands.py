"""Command lines for each supported package manager.

Dispatch is a lookup table keyed by PackageManagerKind. Supporting another
package manager means adding a row to MANAGER_COMMANDS and LOCKFILES.
"""

from dataclasses import dataclass

from pkgup.core.package_manager.types import PackageManagerKind, UnsupportedPackageManagerError


@dataclass(frozen=True)
class ManagerCommands:
    """Argument templates for one package manager."""

    binary: str
    outdated_args: tuple[str, ...]
    install_args: tuple[str, ...]

    def outdated_command(self) -> list[str]:
        """Command listing outdated dependencies as JSON."""
        return [self.binary, *self.outdated_args]

    def install_latest_command(self, package: str) -> list[str]:
        """Command upgrading a single package to its latest release."""
        return [self.binary, *self.install_args, f"{package}@latest"]


MANAGER_COMMANDS: dict[PackageManagerKind, ManagerCommands] = {
    PackageManagerKind.NPM: ManagerCommands(
        binary="npm",
        outdated_args=("outdated", "--json"),
        install_args=("install",),
    ),
    PackageManagerKind.YARN: ManagerCommands(
        binary="yarn",
        outdated_args=("outdated", "--json"),
        install_args=("add",),
    ),
    PackageManagerKind.PNPM: ManagerCommands(
        binary="pnpm",
        outdated_args=("outdated", "--json"),
        install_args=("add",),
    ),
}

# Checked in order; the first lockfile present decides the package manager.
LOCKFILES: tuple[tuple[str, PackageManagerKind], ...] = (
    ("package-lock.json", PackageManagerKind.NPM),
    ("yarn.lock", PackageManagerKind.YARN),
    ("pnpm-lock.yaml", PackageManagerKind.PNPM),
)


def commands_for(kind: PackageManagerKind) -> ManagerCommands:
    """Look up the command templates for a package manager.

    Raises:
        UnsupportedPackageManagerError: If kind is UNKNOWN or has no table entry
    """
    if kind not in MANAGER_COMMANDS:
        raise UnsupportedPackageManagerError(kind)
    return MANAGER_COMMANDS[kind]
