"""Output utilities for CLI commands with clear intent.

user_output: human-facing status messages, routed to stderr.
machine_output: data meant for the caller, routed to stdout.
"""

import click


def user_output(message: str = "", *, nl: bool = True) -> None:
    """Output an informational message for the user (stderr)."""
    click.echo(message, err=True, nl=nl)


def machine_output(message: str = "", *, nl: bool = True) -> None:
    """Output structured data (stdout)."""
    click.echo(message, nl=nl)


def progress(message: str) -> None:
    """Blue progress line."""
    user_output(click.style(message, fg="blue"))


def success(message: str) -> None:
    """Green success line."""
    user_output(click.style(message, fg="green"))


def notice(message: str) -> None:
    """Yellow warning or notice line."""
    user_output(click.style(message, fg="yellow"))


def error(message: str) -> None:
    """Red error line."""
    user_output(click.style(message, fg="red"))
