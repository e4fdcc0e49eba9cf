"""CLI error handling utilities with styled output.

This module provides the Ensure class for precondition checks in CLI commands
with consistent, user-friendly error messages. All errors use red "Error:" prefix
for visual consistency.
"""

from pathlib import Path

import click

from pkgup.cli.output import user_output
from pkgup.core.package_manager.commands import LOCKFILES
from pkgup.core.package_manager.types import PackageManagerKind


class Ensure:
    """Helper class for CLI precondition checks with consistent error handling."""

    @staticmethod
    def package_manager_detected(kind: PackageManagerKind, project_dir: Path) -> None:
        """Ensure a lockfile identified the project's package manager.

        Raises:
            SystemExit: If kind is UNKNOWN (with exit code 1)

        Example:
            >>> kind = detect_package_manager(ctx.cwd)
            >>> Ensure.package_manager_detected(kind, ctx.cwd)
            >>> # Now safe to query kind for outdated packages
        """
        if kind is PackageManagerKind.UNKNOWN:
            expected = ", ".join(name for name, _ in LOCKFILES)
            user_output(
                click.style("Error: ", fg="red")
                + f"No supported package manager detected in {project_dir}\n"
                + f"Expected one of: {expected}"
            )
            raise SystemExit(1)
