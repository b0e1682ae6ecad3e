"""Fake GitHub operations for testing.

FakeGitHub is an in-memory implementation that accepts pre-configured state
in its constructor. Construct instances directly with keyword arguments.
"""

from pathlib import Path

from gitauto.core.github.abc import GitHub
from gitauto.core.subprocess import ExternalCommandError


class FakeGitHub(GitHub):
    """In-memory fake implementation of GitHub operations.

    This class has NO public setup methods. All state is provided via constructor
    using keyword arguments with sensible defaults.
    """

    def __init__(
        self,
        *,
        authenticated: bool = True,
        failing_operations: dict[str, int] | None = None,
    ) -> None:
        """Create FakeGitHub with pre-configured state.

        Args:
            authenticated: Value returned from is_authenticated()
            failing_operations: Mapping of method name -> exit code to raise with
        """
        self._authenticated = authenticated
        self._failing_operations = dict(failing_operations or {})
        self._auth_checks: list[Path] = []
        self._created_repos: list[tuple[Path, str, str]] = []
        self._created_prs: list[tuple[str, str]] = []
        self._created_releases: list[tuple[str, str, str]] = []

    def _maybe_fail(self, operation: str, cmd: list[str]) -> None:
        if operation in self._failing_operations:
            raise ExternalCommandError(
                f"Failed to {operation}", cmd, self._failing_operations[operation]
            )

    def is_authenticated(self, cwd: Path) -> bool:
        self._auth_checks.append(cwd)
        return self._authenticated

    def create_repo(self, cwd: Path, name: str, *, visibility: str) -> None:
        self._maybe_fail("create_repo", ["gh", "repo", "create", name])
        self._created_repos.append((cwd, name, visibility))

    def create_pr(self, cwd: Path, title: str, body: str) -> None:
        self._maybe_fail("create_pr", ["gh", "pr", "create"])
        self._created_prs.append((title, body))

    def create_release(self, cwd: Path, tag: str, *, title: str, notes: str) -> None:
        self._maybe_fail("create_release", ["gh", "release", "create", tag])
        self._created_releases.append((tag, title, notes))

    @property
    def auth_checks(self) -> list[Path]:
        return list(self._auth_checks)

    @property
    def created_repos(self) -> list[tuple[Path, str, str]]:
        """(cwd, name, visibility) for each create_repo() call."""
        return list(self._created_repos)

    @property
    def created_prs(self) -> list[tuple[str, str]]:
        """(title, body) for each create_pr() call."""
        return list(self._created_prs)

    @property
    def created_releases(self) -> list[tuple[str, str, str]]:
        """(tag, title, notes) for each create_release() call."""
        return list(self._created_releases)
