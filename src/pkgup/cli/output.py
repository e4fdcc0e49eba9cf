"""Output routing for CLI commands with clear intent.

user_output: status, progress and errors for humans, written to stderr.
machine_output: the command's result (the outdated report), written to stdout.
"""

import click


def user_output(message: str = "", nl: bool = True) -> None:
    """Write a human-facing status or error message to stderr."""
    click.echo(message, nl=nl, err=True)


def machine_output(message: str = "", nl: bool = True) -> None:
    """Write command results to stdout."""
    click.echo(message, nl=nl)
