"""Subprocess execution with rich error context.

Every package manager call goes through run_subprocess_with_context so that
failures carry the command, exit code and captured output.
"""

import subprocess
from collections.abc import Sequence
from pathlib import Path
from typing import Any


def describe_command_failure(
    operation_context: str,
    cmd_str: str,
    returncode: int,
    stdout: str | None = None,
    stderr: str | None = None,
) -> str:
    """Build the multi-line "Failed to ..." message shared by all subprocess errors.

    Blank or whitespace-only stdout/stderr are omitted.
    """
    error_msg = f"Failed to {operation_context}"
    error_msg += f"\nCommand: {cmd_str}"
    error_msg += f"\nExit code: {returncode}"

    if stdout and stdout.strip():
        error_msg += f"\nstdout: {stdout.strip()}"
    if stderr and stderr.strip():
        error_msg += f"\nstderr: {stderr.strip()}"
    return error_msg


def run_subprocess_with_context(
    cmd: Sequence[str],
    operation_context: str,
    cwd: Path | None = None,
    capture_output: bool = True,
    text: bool = True,
    encoding: str = "utf-8",
    errors: str = "replace",
    check: bool = True,
    **kwargs: Any,
) -> subprocess.CompletedProcess[str]:
    """Execute subprocess with enriched error reporting.

    Wraps subprocess.run() to catch CalledProcessError and re-raise as RuntimeError
    with operation context, stderr output, and command details.

    Args:
        cmd: Command and arguments to execute
        operation_context: Human-readable description of operation
        cwd: Working directory for command execution
        capture_output: Whether to capture stdout/stderr (default: True)
        text: Whether to decode output as text (default: True)
        encoding: Text encoding to use (default: "utf-8")
        errors: Decoding error handler (default: "replace", so undecodable
            output never raises)
        check: Whether to raise on non-zero exit (default: True)
        **kwargs: Additional arguments passed to subprocess.run()

    Returns:
        CompletedProcess instance from subprocess.run()

    Raises:
        RuntimeError: If command fails, is not found, or cannot be executed
    """
    cmd_str = " ".join(str(arg) for arg in cmd)
    try:
        return subprocess.run(
            cmd,
            cwd=cwd,
            capture_output=capture_output,
            text=text,
            encoding=encoding,
            errors=errors,
            check=check,
            **kwargs,
        )

    except subprocess.CalledProcessError as e:
        stdout = e.stdout if isinstance(e.stdout, str | None) else e.stdout.decode("utf-8")
        stderr = e.stderr if isinstance(e.stderr, str | None) else e.stderr.decode("utf-8")
        error_msg = describe_command_failure(
            operation_context, cmd_str, e.returncode, stdout=stdout, stderr=stderr
        )
        raise RuntimeError(error_msg) from e

    except FileNotFoundError as e:
        # Raised for a missing working directory as well as a missing binary
        if cwd is not None and not Path(cwd).is_dir():
            error_msg = f"Working directory not found while trying to {operation_context}: {cwd}"
        else:
            error_msg = f"Command not found while trying to {operation_context}: {cmd[0]}"
        error_msg += f"\nFull command: {cmd_str}"
        raise RuntimeError(error_msg) from e

    except PermissionError as e:
        error_msg = f"Permission denied while trying to {operation_context}: {cmd[0]}"
        error_msg += f"\nFull command: {cmd_str}"
        raise RuntimeError(error_msg) from e
