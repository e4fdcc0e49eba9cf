"""Production implementation of package manager operations using subprocess."""

import logging
from pathlib import Path

from pkgup.core.package_manager.abc import PackageManager
from pkgup.core.package_manager.commands import commands_for
from pkgup.core.package_manager.parsing import parse_outdated_output
from pkgup.core.package_manager.types import (
    CommandResult,
    OutdatedQueryError,
    OutdatedReport,
    PackageManagerKind,
)
from pkgup.core.subprocess import describe_command_failure, run_subprocess_with_context

logger = logging.getLogger(__name__)


class RealPackageManager(PackageManager):
    """Runs npm, yarn or pnpm as child processes in the project directory."""

    def get_outdated(self, kind: PackageManagerKind, project_dir: Path) -> OutdatedReport:
        """List outdated dependencies with `<manager> outdated --json`."""
        cmd = commands_for(kind).outdated_command()
        cmd_str = " ".join(cmd)
        logger.debug("Running %s in %s", cmd_str, project_dir)

        try:
            # check=False: exit code 1 means "something is outdated"
            result = run_subprocess_with_context(
                cmd,
                operation_context=f"list outdated packages with {kind.value}",
                cwd=project_dir,
                check=False,
            )
        except RuntimeError as e:
            raise OutdatedQueryError(str(e)) from e

        logger.debug("%s exited with code %d", cmd_str, result.returncode)

        stderr = result.stderr.strip() if result.stderr else ""
        if not result.stdout.strip() and result.returncode != 0 and stderr:
            raise OutdatedQueryError(
                describe_command_failure(
                    "list outdated packages: no output", cmd_str, result.returncode, stderr=stderr
                )
            )

        try:
            return parse_outdated_output(result.stdout)
        except ValueError as e:
            raise OutdatedQueryError(
                describe_command_failure(
                    f"list outdated packages: {e}", cmd_str, result.returncode, stderr=stderr
                )
            ) from e

    def install_latest(
        self, kind: PackageManagerKind, package: str, project_dir: Path
    ) -> CommandResult:
        """Upgrade package with `npm install` / `yarn add` / `pnpm add` at @latest."""
        cmd = commands_for(kind).install_latest_command(package)
        logger.debug("Running %s in %s", " ".join(cmd), project_dir)

        try:
            result = run_subprocess_with_context(
                cmd,
                operation_context=f"update {package}",
                cwd=project_dir,
                check=False,
            )
        except (RuntimeError, ValueError, OSError) as e:
            # ValueError covers output that cannot be decoded at all
            return CommandResult(success=False, stdout="", stderr=str(e))

        logger.debug("%s exited with code %d", " ".join(cmd), result.returncode)
        return CommandResult(
            success=result.returncode == 0,
            stdout=result.stdout,
            stderr=result.stderr,
        )

