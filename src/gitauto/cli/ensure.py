"""CLI error handling utilities with styled output.

This module provides the Ensure class for asserting invariants in CLI commands
with consistent, user-friendly error messages. All errors use red "Error:" prefix
for visual consistency.
"""

from typing import TypeVar

import click

from gitauto.cli.output import user_output
from gitauto.core.context import GitAutoContext
from gitauto.core.tools import (
    GIT_DOWNLOAD_URL,
    ToolStatus,
    check_hosting_cli,
    is_git_installed,
    warn_hosting_cli,
)


T = TypeVar("T")


class Ensure:
    """Helper class for asserting invariants with consistent error handling."""

    @staticmethod
    def invariant(condition: bool, error_message: str) -> None:
        """Ensure condition is true, otherwise output styled error and exit.

        Args:
            condition: Boolean condition to check
            error_message: Error message to display if condition is false.
                          "Error: " prefix will be added automatically in red.

        Raises:
            SystemExit: If condition is false (with exit code 1)
        """
        if not condition:
            user_output(click.style("Error: ", fg="red") + error_message)
            raise SystemExit(1)

    @staticmethod
    def truthy(value: T, error_message: str) -> T:
        """Ensure value is truthy, otherwise output styled error and exit.

        Returns:
            The value unchanged if truthy

        Raises:
            SystemExit: If value is falsy (with exit code 1)
        """
        if not value:
            user_output(click.style("Error: ", fg="red") + error_message)
            raise SystemExit(1)
        return value

    @staticmethod
    def not_none(value: T | None, error_message: str) -> T:
        """Ensure value is not None, otherwise output styled error and exit.

        Returns:
            The value unchanged if not None (with narrowed type T)

        Raises:
            SystemExit: If value is None (with exit code 1)
        """
        if value is None:
            user_output(click.style("Error: ", fg="red") + error_message)
            raise SystemExit(1)
        return value

    @staticmethod
    def git_installed(ctx: GitAutoContext) -> None:
        """Ensure git is available on PATH.

        Raises:
            SystemExit: If git is not found on PATH
        """
        if not is_git_installed(ctx):
            user_output(
                click.style("Error: ", fg="red")
                + "Git is not installed\n"
                + f"Please install Git first: {GIT_DOWNLOAD_URL}"
            )
            raise SystemExit(1)

    @staticmethod
    def hosting_cli_ready(ctx: GitAutoContext, purpose: str) -> None:
        """Ensure GitHub CLI (gh) is installed and authenticated.

        Args:
            ctx: Application context
            purpose: What gh is required for, used in the error message

        Raises:
            SystemExit: If gh is missing or not logged in
        """
        status = check_hosting_cli(ctx)
        if status is not ToolStatus.READY:
            warn_hosting_cli(status)
            user_output(click.style("Error: ", fg="red") + f"GitHub CLI required for {purpose}")
            raise SystemExit(1)
