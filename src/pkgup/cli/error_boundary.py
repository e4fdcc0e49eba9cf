"""Error boundary handling for CLI commands.

This module provides a decorator to catch unexpected exceptions at the CLI entry
point and display a clean error message without a stack trace.
"""

import functools
import logging
import os
from collections.abc import Callable
from typing import Any, TypeVar

import click

from pkgup.cli.output import user_output

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=Callable[..., Any])


def cli_error_boundary(func: T) -> T:
    """Decorator that turns unexpected exceptions into a one-line error and exit 1.

    Catches:
        - RuntimeError: Subprocess and package manager failures
        - ValueError: Invalid input or unsupported package manager
        - OSError: Filesystem and process errors

    SystemExit raised by Ensure passes through untouched. When the wrapped
    command receives debug=True, or PKGUP_DEBUG is set, the exception is
    re-raised so the full traceback is shown.

    Example:
        @click.command()
        @click.option("--debug", is_flag=True)
        @cli_error_boundary
        def my_command(debug: bool):
            ...
    """

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return func(*args, **kwargs)
        except (RuntimeError, ValueError, OSError) as e:
            if kwargs.get("debug") or os.environ.get("PKGUP_DEBUG"):
                raise
            logger.debug("Unexpected error", exc_info=True)
            user_output(click.style(f"Unexpected error: {e}", fg="red"))
            raise SystemExit(1) from None

    return wrapper  # type: ignore[return-value]
