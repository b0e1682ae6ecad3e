"""Production Git implementation using subprocess.

This module provides the real Git implementation that executes actual git
commands via subprocess.
"""

import subprocess
from pathlib import Path

from gitauto.core.git.abc import Git
from gitauto.core.subprocess import (
    ExternalCommandError,
    command_succeeds,
    run_passthrough,
    run_subprocess_with_context,
)

# ============================================================================
# Production Implementation
# ============================================================================


class RealGit(Git):
    """Production implementation using subprocess.

    All git operations execute actual git commands via subprocess.
    """

    def get_current_branch(self, cwd: Path) -> str | None:
        """Get the currently checked-out branch."""
        result = subprocess.run(
            ["git", "symbolic-ref", "--short", "HEAD"],
            cwd=cwd,
            capture_output=True,
            text=True,
            check=False,
        )
        if result.returncode != 0:
            return None
        return result.stdout.strip() or None

    def has_uncommitted_changes(self, cwd: Path) -> bool:
        """Check for staged, unstaged, or untracked (non-ignored) changes."""
        result = run_subprocess_with_context(
            ["git", "status", "--porcelain", "--untracked-files=normal"],
            operation_context="check working tree status",
            cwd=cwd,
        )
        return bool(result.stdout.strip())

    def local_branch_exists(self, cwd: Path, branch: str) -> bool:
        return command_succeeds(
            ["git", "show-ref", "--verify", "--quiet", f"refs/heads/{branch}"], cwd=cwd
        )

    def remote_branch_exists(self, cwd: Path, remote: str, branch: str) -> bool:
        return command_succeeds(
            ["git", "show-ref", "--verify", "--quiet", f"refs/remotes/{remote}/{branch}"],
            cwd=cwd,
        )

    def get_upstream_branch(self, cwd: Path) -> str | None:
        """Get the upstream of the current branch via for-each-ref."""
        head = subprocess.run(
            ["git", "symbolic-ref", "-q", "HEAD"],
            cwd=cwd,
            capture_output=True,
            text=True,
            check=False,
        )
        if head.returncode != 0:
            return None

        result = run_subprocess_with_context(
            ["git", "for-each-ref", "--format=%(upstream:short)", head.stdout.strip()],
            operation_context="read upstream branch",
            cwd=cwd,
        )
        return result.stdout.strip() or None

    def get_ahead_behind(self, cwd: Path, branch: str, upstream: str) -> tuple[int, int] | None:
        result = subprocess.run(
            ["git", "rev-list", "--left-right", "--count", f"{branch}...{upstream}"],
            cwd=cwd,
            capture_output=True,
            text=True,
            check=False,
        )
        if result.returncode != 0:
            return None

        parts = result.stdout.split()
        if len(parts) != 2 or not all(part.isdigit() for part in parts):
            return None
        return int(parts[0]), int(parts[1])

    def get_stash_count(self, cwd: Path) -> int:
        result = run_subprocess_with_context(
            ["git", "stash", "list"],
            operation_context="list stashes",
            cwd=cwd,
        )
        return len([line for line in result.stdout.splitlines() if line.strip()])

    def init_repository(self, cwd: Path) -> None:
        run_passthrough(["git", "init"], operation_context="initialize repository", cwd=cwd)

    def stage_all(self, cwd: Path) -> None:
        run_passthrough(["git", "add", "."], operation_context="stage changes", cwd=cwd)

    def commit(self, cwd: Path, message: str) -> None:
        run_passthrough(["git", "commit", "-m", message], operation_context="commit", cwd=cwd)

    def checkout_branch(self, cwd: Path, branch: str) -> None:
        run_passthrough(
            ["git", "checkout", branch],
            operation_context=f"checkout branch '{branch}'",
            cwd=cwd,
        )

    def create_branch(self, cwd: Path, branch: str) -> None:
        run_passthrough(
            ["git", "checkout", "-b", branch],
            operation_context=f"create branch '{branch}'",
            cwd=cwd,
        )

    def rebase(self, cwd: Path, onto: str) -> bool:
        try:
            run_passthrough(
                ["git", "rebase", onto],
                operation_context=f"rebase onto {onto}",
                cwd=cwd,
            )
        except ExternalCommandError:
            return False
        return True

    def abort_rebase(self, cwd: Path) -> None:
        run_passthrough(["git", "rebase", "--abort"], operation_context="abort rebase", cwd=cwd)

    def preview_clean(self, cwd: Path) -> None:
        run_passthrough(
            ["git", "clean", "-fd", "--dry-run"],
            operation_context="preview clean",
            cwd=cwd,
        )

    def clean_untracked(self, cwd: Path) -> None:
        run_passthrough(
            ["git", "clean", "-fd"],
            operation_context="remove untracked files",
            cwd=cwd,
        )

    def create_annotated_tag(self, cwd: Path, tag: str, message: str) -> None:
        run_passthrough(
            ["git", "tag", "-a", tag, "-m", message],
            operation_context=f"create tag '{tag}'",
            cwd=cwd,
        )

    def set_config(self, cwd: Path, key: str, value: str) -> None:
        run_subprocess_with_context(
            ["git", "config", key, value],
            operation_context=f"set config '{key}'",
            cwd=cwd,
        )

    def push_branch(self, cwd: Path, remote: str, branch: str, *, set_upstream: bool) -> None:
        cmd = ["git", "push"]
        if set_upstream:
            cmd.append("--set-upstream")
        cmd.extend([remote, branch])
        run_passthrough(cmd, operation_context=f"push branch '{branch}'", cwd=cwd)

    def push_current(self, cwd: Path) -> None:
        run_passthrough(["git", "push"], operation_context="push current branch", cwd=cwd)

    def push_tag(self, cwd: Path, remote: str, tag: str) -> None:
        run_passthrough(
            ["git", "push", remote, tag],
            operation_context=f"push tag '{tag}'",
            cwd=cwd,
        )

    def fetch(self, cwd: Path, remote: str) -> None:
        run_passthrough(["git", "fetch", remote], operation_context=f"fetch {remote}", cwd=cwd)

    def fetch_all(self, cwd: Path) -> None:
        run_passthrough(["git", "fetch", "--all"], operation_context="fetch all remotes", cwd=cwd)

    def pull(self, cwd: Path, remote: str, branch: str) -> None:
        run_passthrough(
            ["git", "pull", remote, branch],
            operation_context=f"pull {remote}/{branch}",
            cwd=cwd,
        )

    def clone(self, cwd: Path, url: str, directory: str | None, *, depth: int) -> None:
        cmd = ["git", "clone", "--depth", str(depth), url]
        if directory is not None:
            cmd.append(directory)
        run_passthrough(cmd, operation_context=f"clone {url}", cwd=cwd)

    def show_log(self, cwd: Path, count: int) -> None:
        run_passthrough(
            ["git", "log", "--oneline", "--graph", "--decorate", "--all", "-n", str(count)],
            operation_context="show log",
            cwd=cwd,
        )

    def show_short_status(self, cwd: Path) -> None:
        run_passthrough(["git", "status", "-s"], operation_context="show status", cwd=cwd)

    def show_branches(self, cwd: Path) -> None:
        run_passthrough(["git", "branch", "-a"], operation_context="list branches", cwd=cwd)
