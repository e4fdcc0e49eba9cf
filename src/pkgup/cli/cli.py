import dataclasses
import logging
import os

import click
from rich.console import Console

from pkgup.cli.ensure import Ensure
from pkgup.cli.error_boundary import cli_error_boundary
from pkgup.cli.output import machine_output, user_output
from pkgup.core.context import PkgupContext, create_context
from pkgup.core.detection import detect_package_manager, find_lockfile
from pkgup.core.formatting import PlainFormatter
from pkgup.core.package_manager.dry_run import DryRunPackageManager
from pkgup.core.package_manager.types import OutdatedQueryError
from pkgup.core.report import render_report
from pkgup.core.update import format_update_summary, update_packages

logger = logging.getLogger(__name__)

CONTEXT_SETTINGS = dict(help_option_names=["-h", "--help"])  # terse help flags

DEBUG_LOG_FORMAT = "[DEBUG %(name)s:%(lineno)d] %(message)s"

# Enable debug logging if PKGUP_DEBUG environment variable is set
if os.getenv("PKGUP_DEBUG"):
    logging.basicConfig(level=logging.DEBUG, format=DEBUG_LOG_FORMAT)


@click.command("pkgup", context_settings=CONTEXT_SETTINGS)
@click.version_option(package_name="pkgup")
@click.option(
    "--update",
    is_flag=True,
    help="Upgrade every outdated package to its latest version instead of listing them.",
)
@click.option(
    "--dry-run",
    is_flag=True,
    default=False,
    help="With --update, show the install commands without running them.",
)
@click.option("--no-color", is_flag=True, help="Disable colored output.")
@click.option("--debug", is_flag=True, help="Show debug logs and full stack traces for errors.")
@click.pass_context
@cli_error_boundary
def cli(click_ctx: click.Context, update: bool, dry_run: bool, no_color: bool, debug: bool) -> None:
    """List outdated JavaScript dependencies, or upgrade them with --update.

    The package manager is detected from the lockfile in the current directory:
    package-lock.json (npm), yarn.lock (yarn) or pnpm-lock.yaml (pnpm), checked
    in that order.
    """
    if debug:
        logging.basicConfig(level=logging.DEBUG, format=DEBUG_LOG_FORMAT, force=True)

    # Only create context if not already provided (e.g., by tests)
    if click_ctx.obj is None:
        click_ctx.obj = create_context(dry_run=dry_run, color=not no_color, debug=debug)
    ctx = _apply_flags(click_ctx.obj, dry_run=dry_run, no_color=no_color, debug=debug)

    kind = detect_package_manager(ctx.cwd)
    Ensure.package_manager_detected(kind, ctx.cwd)
    logger.debug("Detected %s from %s", kind.value, find_lockfile(ctx.cwd))
    user_output(ctx.formatter.success(f"Detected package manager: {kind.value}"))

    try:
        report = ctx.package_manager.get_outdated(kind, ctx.cwd)
    except OutdatedQueryError as e:
        user_output(
            click.style("Error: ", fg="red")
            + f"Could not list outdated packages with {kind.value}\n{e}"
        )
        raise SystemExit(1) from None

    if not update:
        for line in render_report(report, ctx.formatter):
            machine_output(line)
        return

    results = update_packages(ctx, kind, report)
    if not results:
        return

    Console(stderr=True, no_color=isinstance(ctx.formatter, PlainFormatter)).print(
        format_update_summary(results, dry_run=ctx.dry_run)
    )
    if any(not result.success for result in results):
        raise SystemExit(1)


def _apply_flags(ctx: PkgupContext, *, dry_run: bool, no_color: bool, debug: bool) -> PkgupContext:
    """Fold command-line flags into a context that may have been built elsewhere."""
    if dry_run and not ctx.dry_run:
        ctx = dataclasses.replace(
            ctx, package_manager=DryRunPackageManager(ctx.package_manager), dry_run=True
        )
    if no_color and not isinstance(ctx.formatter, PlainFormatter):
        ctx = dataclasses.replace(ctx, formatter=PlainFormatter())
    if debug and not ctx.debug:
        ctx = dataclasses.replace(ctx, debug=True)
    return ctx


def main() -> None:
    """CLI entry point used by the `pkgup` console script."""
    cli()
