"""No-op wrapper for GitHub operations."""

from pathlib import Path

import click

from gitauto.cli.output import user_output
from gitauto.core.github.abc import GitHub


class DryRunGitHub(GitHub):
    """Dry-run wrapper for GitHub operations.

    Read operations are delegated to the wrapped implementation.
    Write operations print the gh command they would run.
    """

    def __init__(self, wrapped: GitHub) -> None:
        """Initialize dry-run wrapper with a real implementation.

        Args:
            wrapped: The real GitHub operations implementation to wrap
        """
        self._wrapped = wrapped

    def _announce(self, cmd: list[str]) -> None:
        user_output(
            click.style("[DRY RUN] ", fg="yellow", bold=True) + f"Would run: {' '.join(cmd)}"
        )

    def is_authenticated(self, cwd: Path) -> bool:
        return self._wrapped.is_authenticated(cwd)

    def create_repo(self, cwd: Path, name: str, *, visibility: str) -> None:
        self._announce(["gh", "repo", "create", name, "--source=.", f"--{visibility}", "--push"])

    def create_pr(self, cwd: Path, title: str, body: str) -> None:
        self._announce(["gh", "pr", "create", "--title", repr(title), "--body", repr(body)])

    def create_release(self, cwd: Path, tag: str, *, title: str, notes: str) -> None:
        self._announce(
            ["gh", "release", "create", tag, "--title", repr(title), "--notes", repr(notes)]
        )
