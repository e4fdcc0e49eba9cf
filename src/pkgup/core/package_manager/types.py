"""Type definitions for package manager operations."""

from dataclasses import dataclass
from enum import Enum
from typing import NamedTuple


class PackageManagerKind(Enum):
    """JavaScript package manager governing a project directory."""

    NPM = "npm"
    YARN = "yarn"
    PNPM = "pnpm"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class OutdatedEntry:
    """Version drift of a single dependency."""

    name: str
    current: str
    latest: str
    wanted: str | None = None
    dependency_type: str | None = None  # "dependencies", "devDependencies", ...


# Package name -> entry. Rebuilt from the package manager's output on every run.
OutdatedReport = dict[str, OutdatedEntry]


class CommandResult(NamedTuple):
    """Result from running a package manager subprocess.

    Attributes:
        success: True if command exited with code 0, False otherwise
        stdout: Standard output from the command
        stderr: Standard error from the command
    """

    success: bool
    stdout: str
    stderr: str


@dataclass(frozen=True)
class UpdateResult:
    """Outcome of upgrading one package to its latest version."""

    package: str
    command: str
    success: bool
    error_message: str | None = None


class UnsupportedPackageManagerError(ValueError):
    """Raised when a command is requested for a kind with no command table entry."""

    def __init__(self, kind: PackageManagerKind) -> None:
        super().__init__(f"Unknown or unsupported package manager: {kind.value}")
        self.kind = kind


class OutdatedQueryError(RuntimeError):
    """Raised when the outdated query cannot run or its output cannot be parsed."""
