"""Subprocess execution with rich error context.

Two flavors of execution are provided:

- run_subprocess_with_context: captures output, for queries whose result the
  caller parses (branch names, counts, porcelain status).
- run_passthrough: inherits the terminal, for commands whose output belongs to
  the user (log graphs, push progress, clean previews).

Both raise ExternalCommandError on failure so the CLI layer can report the
wrapped tool's exit status.
"""

import logging
import subprocess
from collections.abc import Sequence
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)

# Conventional shell exit status for "command not found"
COMMAND_NOT_FOUND_EXIT_CODE = 127


class ExternalCommandError(RuntimeError):
    """An external command (git, gh) failed or could not be started."""

    def __init__(self, message: str, cmd: Sequence[str], returncode: int) -> None:
        super().__init__(message)
        self.cmd = list(cmd)
        self.returncode = returncode


def _format_command(cmd: Sequence[str]) -> str:
    return " ".join(str(arg) for arg in cmd)


def run_subprocess_with_context(
    cmd: Sequence[str],
    operation_context: str,
    cwd: Path | None = None,
    check: bool = True,
    **kwargs: Any,
) -> subprocess.CompletedProcess[str]:
    """Execute subprocess capturing output, with enriched error reporting.

    Args:
        cmd: Command and arguments to execute
        operation_context: Human-readable description of operation
        cwd: Working directory for command execution
        check: Whether to raise on non-zero exit (default: True)
        **kwargs: Additional arguments passed to subprocess.run()

    Returns:
        CompletedProcess instance from subprocess.run()

    Raises:
        ExternalCommandError: If command fails (check=True) or binary is not found
    """
    logger.debug("Running (captured): %s [cwd=%s]", _format_command(cmd), cwd)
    try:
        result = subprocess.run(
            list(cmd),
            cwd=cwd,
            capture_output=True,
            text=True,
            encoding="utf-8",
            check=check,
            **kwargs,
        )
    except subprocess.CalledProcessError as e:
        logger.debug("Command failed with exit code %d", e.returncode)
        error_msg = f"Failed to {operation_context}"
        error_msg += f"\nCommand: {_format_command(cmd)}"
        error_msg += f"\nExit code: {e.returncode}"

        if e.stdout and e.stdout.strip():
            error_msg += f"\nstdout: {e.stdout.strip()}"

        if e.stderr and e.stderr.strip():
            error_msg += f"\nstderr: {e.stderr.strip()}"

        raise ExternalCommandError(error_msg, cmd, e.returncode) from e

    except FileNotFoundError as e:
        error_msg = f"Command not found while trying to {operation_context}: {cmd[0]}"
        error_msg += f"\nFull command: {_format_command(cmd)}"
        raise ExternalCommandError(error_msg, cmd, COMMAND_NOT_FOUND_EXIT_CODE) from e

    return result


def run_passthrough(cmd: Sequence[str], operation_context: str, cwd: Path | None = None) -> None:
    """Execute subprocess attached to the terminal.

    The command writes directly to the user's stdout/stderr, so its own
    messages are what the user sees on failure.

    Raises:
        ExternalCommandError: If command exits non-zero or binary is not found
    """
    logger.debug("Running: %s [cwd=%s]", _format_command(cmd), cwd)
    try:
        result = subprocess.run(list(cmd), cwd=cwd, check=False)
    except FileNotFoundError as e:
        error_msg = f"Command not found while trying to {operation_context}: {cmd[0]}"
        raise ExternalCommandError(error_msg, cmd, COMMAND_NOT_FOUND_EXIT_CODE) from e

    if result.returncode != 0:
        logger.debug("Command failed with exit code %d", result.returncode)
        error_msg = f"Failed to {operation_context}"
        error_msg += f"\nCommand: {_format_command(cmd)}"
        error_msg += f"\nExit code: {result.returncode}"
        raise ExternalCommandError(error_msg, cmd, result.returncode)


def command_succeeds(cmd: Sequence[str], cwd: Path | None = None) -> bool:
    """Run a probe command silently and report whether it exited 0."""
    logger.debug("Probing: %s [cwd=%s]", _format_command(cmd), cwd)
    try:
        result = subprocess.run(list(cmd), cwd=cwd, capture_output=True, check=False)
    except FileNotFoundError:
        return False
    return result.returncode == 0
