"""Sequential upgrade of outdated packages."""

from typing import TYPE_CHECKING

from rich.panel import Panel
from rich.text import Text

from pkgup.cli.output import user_output
from pkgup.core.package_manager.commands import commands_for
from pkgup.core.package_manager.types import (
    CommandResult,
    OutdatedReport,
    PackageManagerKind,
    UpdateResult,
)
from pkgup.core.report import NOTHING_TO_UPDATE

if TYPE_CHECKING:
    from pkgup.core.context import PkgupContext


def update_packages(
    ctx: "PkgupContext", kind: PackageManagerKind, report: OutdatedReport | None
) -> list[UpdateResult]:
    """Upgrade every package in report to its latest version, one at a time.

    Each install starts only after the previous one has finished. A failing
    package is reported and the loop moves on to the next one.

    Args:
        ctx: Application context providing the package manager and formatter
        kind: Package manager governing the project
        report: Outdated packages, in the order they should be upgraded

    Returns:
        One UpdateResult per package, in report order (empty if nothing to update)

    Raises:
        UnsupportedPackageManagerError: If kind is UNKNOWN and report is non-empty
    """
    if not report:
        user_output(ctx.formatter.warning(NOTHING_TO_UPDATE))
        return []

    commands = commands_for(kind)
    user_output(ctx.formatter.success("Updating packages..."))

    results: list[UpdateResult] = []
    for package in report:
        cmd_str = " ".join(commands.install_latest_command(package))
        if ctx.dry_run:
            user_output(ctx.formatter.heading(f"[dry-run] Would run: {cmd_str}"))
        else:
            user_output(ctx.formatter.heading(f"Running: {cmd_str}"))

        result = ctx.package_manager.install_latest(kind, package, ctx.cwd)
        if result.success:
            if not ctx.dry_run:
                user_output(ctx.formatter.success(f"Updated: {package}"))
            results.append(UpdateResult(package=package, command=cmd_str, success=True))
        else:
            reason = _failure_reason(result)
            user_output(ctx.formatter.error(f"Failed to update {package}: {reason}"))
            results.append(
                UpdateResult(package=package, command=cmd_str, success=False, error_message=reason)
            )

    return results


def _failure_reason(result: CommandResult) -> str:
    return result.stderr.strip() or result.stdout.strip() or "command exited with an error"


def format_update_summary(results: list[UpdateResult], *, dry_run: bool = False) -> Panel:
    """Format final summary box with update counts and failed packages.

    Args:
        results: UpdateResult list returned by update_packages
        dry_run: Whether the upgrades were only simulated

    Returns:
        Rich Panel with formatted summary
    """
    succeeded = [r for r in results if r.success]
    failed = [r for r in results if not r.success]
    overall_success = not failed

    lines: list[Text] = []
    if dry_run:
        lines.append(Text(f"Would update: {len(succeeded)}", style="yellow"))
    else:
        lines.append(Text(f"Updated: {len(succeeded)}", style="green"))

    if failed:
        lines.append(Text(f"Failed: {len(failed)}", style="red"))
        for result in failed:
            lines.append(Text(""))
            lines.append(Text(f"{result.package}:", style="red bold"))
            lines.append(Text(result.error_message or "unknown error", style="red"))

    content = Text("\n").join(lines)

    title = "Update Complete" if overall_success else "Update Failed"
    return Panel(
        content, title=title, border_style="green" if overall_success else "red", padding=(1, 2)
    )
