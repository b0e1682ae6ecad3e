"""Abstract base class for GitHub operations.

All GitHub interaction is delegated to the GitHub CLI (gh); this program never
talks to the GitHub API directly.
"""

from abc import ABC, abstractmethod
from pathlib import Path


class GitHub(ABC):
    """Abstract interface for GitHub operations.

    All implementations (real and fake) must implement this interface.
    """

    @abstractmethod
    def is_authenticated(self, cwd: Path) -> bool:
        """Check whether `gh auth status` reports an authenticated session."""
        ...

    @abstractmethod
    def create_repo(self, cwd: Path, name: str, *, visibility: str) -> None:
        """Create a hosted repository from cwd and push it.

        Args:
            cwd: Local repository to use as the source
            name: Repository name on GitHub
            visibility: "public", "private", or "internal"
        """
        ...

    @abstractmethod
    def create_pr(self, cwd: Path, title: str, body: str) -> None:
        """Open a pull request for the current branch."""
        ...

    @abstractmethod
    def create_release(self, cwd: Path, tag: str, *, title: str, notes: str) -> None:
        """Create a GitHub release from an existing tag."""
        ...
