"""High-level git operations interface.

This module provides a clean abstraction over git subprocess calls, making the
codebase more testable and maintainable.

Architecture:
- Git: Abstract base class defining the interface
- RealGit: Production implementation using subprocess
- FakeGit: In-memory implementation for tests
- DryRunGit: Wrapper that delegates reads and prints intended writes

Mutating operations raise ExternalCommandError when git fails.
"""

from abc import ABC, abstractmethod
from pathlib import Path


class Git(ABC):
    """Abstract interface for git operations.

    All implementations (real and fake) must implement this interface.
    This interface contains ONLY runtime operations - no test setup methods.
    """

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    @abstractmethod
    def get_current_branch(self, cwd: Path) -> str | None:
        """Get the currently checked-out branch, or None on detached HEAD."""
        ...

    @abstractmethod
    def has_uncommitted_changes(self, cwd: Path) -> bool:
        """Check if the working tree has staged, unstaged, or untracked changes."""
        ...

    @abstractmethod
    def local_branch_exists(self, cwd: Path, branch: str) -> bool:
        """Check whether refs/heads/<branch> exists."""
        ...

    @abstractmethod
    def remote_branch_exists(self, cwd: Path, remote: str, branch: str) -> bool:
        """Check whether refs/remotes/<remote>/<branch> exists."""
        ...

    @abstractmethod
    def get_upstream_branch(self, cwd: Path) -> str | None:
        """Get the short name of the current branch's upstream (e.g. 'origin/main').

        Returns:
            Upstream name, or None when no upstream is configured or HEAD is detached
        """
        ...

    @abstractmethod
    def get_ahead_behind(self, cwd: Path, branch: str, upstream: str) -> tuple[int, int] | None:
        """Count commits only on branch (ahead) and only on upstream (behind).

        Returns:
            (ahead, behind), or None if the counts cannot be computed
        """
        ...

    @abstractmethod
    def get_stash_count(self, cwd: Path) -> int:
        """Count stash entries."""
        ...

    # ------------------------------------------------------------------
    # Local repository mutations
    # ------------------------------------------------------------------

    @abstractmethod
    def init_repository(self, cwd: Path) -> None:
        """Create (or reinitialize) a repository in cwd."""
        ...

    @abstractmethod
    def stage_all(self, cwd: Path) -> None:
        """Stage every change below cwd."""
        ...

    @abstractmethod
    def commit(self, cwd: Path, message: str) -> None:
        """Commit staged changes with the given message."""
        ...

    @abstractmethod
    def checkout_branch(self, cwd: Path, branch: str) -> None:
        """Switch to an existing branch."""
        ...

    @abstractmethod
    def create_branch(self, cwd: Path, branch: str) -> None:
        """Create a branch from HEAD and switch to it."""
        ...

    @abstractmethod
    def rebase(self, cwd: Path, onto: str) -> bool:
        """Rebase the current branch onto a ref.

        Returns:
            True on success, False if the rebase stopped (e.g. conflicts)
        """
        ...

    @abstractmethod
    def abort_rebase(self, cwd: Path) -> None:
        """Abort an in-progress rebase."""
        ...

    @abstractmethod
    def preview_clean(self, cwd: Path) -> None:
        """Show the untracked files and directories a clean would remove."""
        ...

    @abstractmethod
    def clean_untracked(self, cwd: Path) -> None:
        """Remove untracked files and directories."""
        ...

    @abstractmethod
    def create_annotated_tag(self, cwd: Path, tag: str, message: str) -> None:
        """Create an annotated tag at HEAD."""
        ...

    @abstractmethod
    def set_config(self, cwd: Path, key: str, value: str) -> None:
        """Set a repository-local configuration value."""
        ...

    # ------------------------------------------------------------------
    # Remote operations
    # ------------------------------------------------------------------

    @abstractmethod
    def push_branch(self, cwd: Path, remote: str, branch: str, *, set_upstream: bool) -> None:
        """Push a branch to a remote.

        Args:
            cwd: Repository working directory
            remote: Remote name
            branch: Branch to push
            set_upstream: True to pass --set-upstream (creates the tracking ref)
        """
        ...

    @abstractmethod
    def push_current(self, cwd: Path) -> None:
        """Push the current branch to its configured upstream (plain `git push`)."""
        ...

    @abstractmethod
    def push_tag(self, cwd: Path, remote: str, tag: str) -> None:
        """Push a single tag to a remote."""
        ...

    @abstractmethod
    def fetch(self, cwd: Path, remote: str) -> None:
        """Fetch from a single remote."""
        ...

    @abstractmethod
    def fetch_all(self, cwd: Path) -> None:
        """Fetch from all remotes."""
        ...

    @abstractmethod
    def pull(self, cwd: Path, remote: str, branch: str) -> None:
        """Pull a branch from a remote into the current branch."""
        ...

    @abstractmethod
    def clone(self, cwd: Path, url: str, directory: str | None, *, depth: int) -> None:
        """Clone a repository.

        Args:
            cwd: Directory the clone is performed from
            url: Repository URL
            directory: Target directory name, or None for git's default
            depth: History depth for a shallow clone
        """
        ...

    # ------------------------------------------------------------------
    # Passthrough displays
    # ------------------------------------------------------------------

    @abstractmethod
    def show_log(self, cwd: Path, count: int) -> None:
        """Print the last `count` commits as a decorated graph over all refs."""
        ...

    @abstractmethod
    def show_short_status(self, cwd: Path) -> None:
        """Print the short working-tree status."""
        ...

    @abstractmethod
    def show_branches(self, cwd: Path) -> None:
        """Print local and remote-tracking branches."""
        ...
