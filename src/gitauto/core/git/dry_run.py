"""Dry-run wrapper for git operations."""

from pathlib import Path

import click

from gitauto.cli.output import user_output
from gitauto.core.git.abc import Git


def _announce(cmd: list[str]) -> None:
    user_output(click.style("[DRY RUN] ", fg="yellow", bold=True) + f"Would run: {' '.join(cmd)}")


class DryRunGit(Git):
    """Dry-run wrapper for git operations.

    Read operations and passthrough displays are delegated to the wrapped
    implementation. Write operations print the command they would run.
    """

    def __init__(self, wrapped: Git) -> None:
        """Initialize dry-run wrapper with a real implementation.

        Args:
            wrapped: The real Git implementation to wrap
        """
        self._wrapped = wrapped

    def get_current_branch(self, cwd: Path) -> str | None:
        return self._wrapped.get_current_branch(cwd)

    def has_uncommitted_changes(self, cwd: Path) -> bool:
        return self._wrapped.has_uncommitted_changes(cwd)

    def local_branch_exists(self, cwd: Path, branch: str) -> bool:
        return self._wrapped.local_branch_exists(cwd, branch)

    def remote_branch_exists(self, cwd: Path, remote: str, branch: str) -> bool:
        return self._wrapped.remote_branch_exists(cwd, remote, branch)

    def get_upstream_branch(self, cwd: Path) -> str | None:
        return self._wrapped.get_upstream_branch(cwd)

    def get_ahead_behind(self, cwd: Path, branch: str, upstream: str) -> tuple[int, int] | None:
        return self._wrapped.get_ahead_behind(cwd, branch, upstream)

    def get_stash_count(self, cwd: Path) -> int:
        return self._wrapped.get_stash_count(cwd)

    def init_repository(self, cwd: Path) -> None:
        _announce(["git", "init"])

    def stage_all(self, cwd: Path) -> None:
        _announce(["git", "add", "."])

    def commit(self, cwd: Path, message: str) -> None:
        _announce(["git", "commit", "-m", repr(message)])

    def checkout_branch(self, cwd: Path, branch: str) -> None:
        _announce(["git", "checkout", branch])

    def create_branch(self, cwd: Path, branch: str) -> None:
        _announce(["git", "checkout", "-b", branch])

    def rebase(self, cwd: Path, onto: str) -> bool:
        _announce(["git", "rebase", onto])
        return True

    def abort_rebase(self, cwd: Path) -> None:
        _announce(["git", "rebase", "--abort"])

    def preview_clean(self, cwd: Path) -> None:
        self._wrapped.preview_clean(cwd)

    def clean_untracked(self, cwd: Path) -> None:
        _announce(["git", "clean", "-fd"])

    def create_annotated_tag(self, cwd: Path, tag: str, message: str) -> None:
        _announce(["git", "tag", "-a", tag, "-m", repr(message)])

    def set_config(self, cwd: Path, key: str, value: str) -> None:
        _announce(["git", "config", key, value])

    def push_branch(self, cwd: Path, remote: str, branch: str, *, set_upstream: bool) -> None:
        cmd = ["git", "push"]
        if set_upstream:
            cmd.append("--set-upstream")
        _announce([*cmd, remote, branch])

    def push_current(self, cwd: Path) -> None:
        _announce(["git", "push"])

    def push_tag(self, cwd: Path, remote: str, tag: str) -> None:
        _announce(["git", "push", remote, tag])

    def fetch(self, cwd: Path, remote: str) -> None:
        _announce(["git", "fetch", remote])

    def fetch_all(self, cwd: Path) -> None:
        _announce(["git", "fetch", "--all"])

    def pull(self, cwd: Path, remote: str, branch: str) -> None:
        _announce(["git", "pull", remote, branch])

    def clone(self, cwd: Path, url: str, directory: str | None, *, depth: int) -> None:
        cmd = ["git", "clone", "--depth", str(depth), url]
        if directory is not None:
            cmd.append(directory)
        _announce(cmd)

    def show_log(self, cwd: Path, count: int) -> None:
        self._wrapped.show_log(cwd, count)

    def show_short_status(self, cwd: Path) -> None:
        self._wrapped.show_short_status(cwd)

    def show_branches(self, cwd: Path) -> None:
        self._wrapped.show_branches(cwd)
