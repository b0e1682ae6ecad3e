"""Fake git operations for testing.

FakeGit is an in-memory implementation that accepts pre-configured state
in its constructor. Construct instances directly with keyword arguments.
"""

from pathlib import Path

from gitauto.core.git.abc import Git
from gitauto.core.subprocess import ExternalCommandError


class FakeGit(Git):
    """In-memory fake implementation of git operations.

    This class has NO public setup methods. All state is provided via constructor
    using keyword arguments with sensible defaults (empty dicts). Mutating calls
    are recorded and exposed through read-only properties for test assertions.
    """

    def __init__(
        self,
        *,
        current_branches: dict[Path, str | None] | None = None,
        local_branches: dict[Path, list[str]] | None = None,
        remote_branches: dict[Path, list[str]] | None = None,
        dirty_paths: set[Path] | None = None,
        upstream_branches: dict[Path, str] | None = None,
        ahead_behind: dict[Path, tuple[int, int]] | None = None,
        stash_counts: dict[Path, int] | None = None,
        branches_without_upstream: set[str] | None = None,
        rebase_conflicts: bool = False,
        failing_operations: dict[str, int] | None = None,
    ) -> None:
        """Create FakeGit with pre-configured state.

        Args:
            current_branches: Mapping of cwd -> checked-out branch (None = detached)
            local_branches: Mapping of cwd -> local branch names
            remote_branches: Mapping of cwd -> remote branches ("origin/main")
            dirty_paths: Working directories that have uncommitted changes
            upstream_branches: Mapping of cwd -> upstream of the current branch
            ahead_behind: Mapping of cwd -> (ahead, behind); missing = not computable
            stash_counts: Mapping of cwd -> number of stash entries
            branches_without_upstream: Branches whose plain push fails
            rebase_conflicts: True to make every rebase stop with conflicts
            failing_operations: Mapping of method name -> exit code to raise with
        """
        self._current_branches = dict(current_branches or {})
        self._local_branches = {k: list(v) for k, v in (local_branches or {}).items()}
        self._remote_branches = {k: list(v) for k, v in (remote_branches or {}).items()}
        self._dirty_paths = set(dirty_paths or set())
        self._upstream_branches = dict(upstream_branches or {})
        self._ahead_behind = dict(ahead_behind or {})
        self._stash_counts = dict(stash_counts or {})
        self._branches_without_upstream = set(branches_without_upstream or set())
        self._rebase_conflicts = rebase_conflicts
        self._failing_operations = dict(failing_operations or {})

        self._initialized: list[Path] = []
        self._staged: list[Path] = []
        self._commits: list[tuple[Path, str]] = []
        self._checked_out_branches: list[tuple[Path, str]] = []
        self._created_branches: list[tuple[Path, str]] = []
        self._pushed_branches: list[tuple[str, str, bool]] = []
        self._current_pushes: list[Path] = []
        self._pushed_tags: list[tuple[str, str]] = []
        self._fetches: list[tuple[Path, str]] = []
        self._fetch_all_calls: list[Path] = []
        self._rebases: list[tuple[Path, str]] = []
        self._aborted_rebases: list[Path] = []
        self._pulls: list[tuple[str, str]] = []
        self._clean_previews: list[Path] = []
        self._cleaned: list[Path] = []
        self._tags: list[tuple[str, str]] = []
        self._config_settings: list[tuple[Path, str, str]] = []
        self._clones: list[tuple[Path, str, str | None, int]] = []
        self._log_calls: list[tuple[Path, int]] = []
        self._status_displays: list[Path] = []
        self._branch_displays: list[Path] = []

    def _maybe_fail(self, operation: str, cmd: list[str]) -> None:
        if operation in self._failing_operations:
            code = self._failing_operations[operation]
            raise ExternalCommandError(f"Failed to {operation}", cmd, code)

    # Queries

    def get_current_branch(self, cwd: Path) -> str | None:
        return self._current_branches.get(cwd)

    def has_uncommitted_changes(self, cwd: Path) -> bool:
        return cwd in self._dirty_paths

    def local_branch_exists(self, cwd: Path, branch: str) -> bool:
        return branch in self._local_branches.get(cwd, [])

    def remote_branch_exists(self, cwd: Path, remote: str, branch: str) -> bool:
        return f"{remote}/{branch}" in self._remote_branches.get(cwd, [])

    def get_upstream_branch(self, cwd: Path) -> str | None:
        if self._current_branches.get(cwd) is None:
            return None
        return self._upstream_branches.get(cwd)

    def get_ahead_behind(self, cwd: Path, branch: str, upstream: str) -> tuple[int, int] | None:
        return self._ahead_behind.get(cwd)

    def get_stash_count(self, cwd: Path) -> int:
        return self._stash_counts.get(cwd, 0)

    # Local mutations

    def init_repository(self, cwd: Path) -> None:
        self._maybe_fail("init_repository", ["git", "init"])
        self._initialized.append(cwd)

    def stage_all(self, cwd: Path) -> None:
        self._maybe_fail("stage_all", ["git", "add", "."])
        self._staged.append(cwd)

    def commit(self, cwd: Path, message: str) -> None:
        self._maybe_fail("commit", ["git", "commit", "-m", message])
        self._commits.append((cwd, message))
        self._dirty_paths.discard(cwd)

    def checkout_branch(self, cwd: Path, branch: str) -> None:
        self._maybe_fail("checkout_branch", ["git", "checkout", branch])
        self._checked_out_branches.append((cwd, branch))
        self._current_branches[cwd] = branch

    def create_branch(self, cwd: Path, branch: str) -> None:
        self._maybe_fail("create_branch", ["git", "checkout", "-b", branch])
        self._created_branches.append((cwd, branch))
        self._local_branches.setdefault(cwd, []).append(branch)
        self._current_branches[cwd] = branch

    def rebase(self, cwd: Path, onto: str) -> bool:
        self._rebases.append((cwd, onto))
        return not self._rebase_conflicts

    def abort_rebase(self, cwd: Path) -> None:
        self._maybe_fail("abort_rebase", ["git", "rebase", "--abort"])
        self._aborted_rebases.append(cwd)

    def preview_clean(self, cwd: Path) -> None:
        self._clean_previews.append(cwd)

    def clean_untracked(self, cwd: Path) -> None:
        self._maybe_fail("clean_untracked", ["git", "clean", "-fd"])
        self._cleaned.append(cwd)

    def create_annotated_tag(self, cwd: Path, tag: str, message: str) -> None:
        self._maybe_fail("create_annotated_tag", ["git", "tag", "-a", tag, "-m", message])
        self._tags.append((tag, message))

    def set_config(self, cwd: Path, key: str, value: str) -> None:
        self._config_settings.append((cwd, key, value))

    # Remote operations

    def push_branch(self, cwd: Path, remote: str, branch: str, *, set_upstream: bool) -> None:
        cmd = ["git", "push", remote, branch]
        if not set_upstream and branch in self._branches_without_upstream:
            raise ExternalCommandError(f"Failed to push branch '{branch}'", cmd, 1)
        self._maybe_fail("push_branch", cmd)
        self._pushed_branches.append((remote, branch, set_upstream))
        if set_upstream:
            self._branches_without_upstream.discard(branch)

    def push_current(self, cwd: Path) -> None:
        self._maybe_fail("push_current", ["git", "push"])
        self._current_pushes.append(cwd)

    def push_tag(self, cwd: Path, remote: str, tag: str) -> None:
        self._maybe_fail("push_tag", ["git", "push", remote, tag])
        self._pushed_tags.append((remote, tag))

    def fetch(self, cwd: Path, remote: str) -> None:
        self._maybe_fail("fetch", ["git", "fetch", remote])
        self._fetches.append((cwd, remote))

    def fetch_all(self, cwd: Path) -> None:
        self._fetch_all_calls.append(cwd)

    def pull(self, cwd: Path, remote: str, branch: str) -> None:
        self._maybe_fail("pull", ["git", "pull", remote, branch])
        self._pulls.append((remote, branch))

    def clone(self, cwd: Path, url: str, directory: str | None, *, depth: int) -> None:
        self._maybe_fail("clone", ["git", "clone", "--depth", str(depth), url])
        self._clones.append((cwd, url, directory, depth))

    # Passthrough displays

    def show_log(self, cwd: Path, count: int) -> None:
        self._log_calls.append((cwd, count))

    def show_short_status(self, cwd: Path) -> None:
        self._status_displays.append(cwd)

    def show_branches(self, cwd: Path) -> None:
        self._branch_displays.append(cwd)

    # Read-only access for test assertions

    @property
    def initialized(self) -> list[Path]:
        return list(self._initialized)

    @property
    def staged(self) -> list[Path]:
        return list(self._staged)

    @property
    def commits(self) -> list[tuple[Path, str]]:
        return list(self._commits)

    @property
    def checked_out_branches(self) -> list[tuple[Path, str]]:
        return list(self._checked_out_branches)

    @property
    def created_branches(self) -> list[tuple[Path, str]]:
        return list(self._created_branches)

    @property
    def pushed_branches(self) -> list[tuple[str, str, bool]]:
        """(remote, branch, set_upstream) for each successful push_branch()."""
        return list(self._pushed_branches)

    @property
    def current_pushes(self) -> list[Path]:
        return list(self._current_pushes)

    @property
    def pushed_tags(self) -> list[tuple[str, str]]:
        return list(self._pushed_tags)

    @property
    def fetches(self) -> list[tuple[Path, str]]:
        return list(self._fetches)

    @property
    def fetch_all_calls(self) -> list[Path]:
        return list(self._fetch_all_calls)

    @property
    def rebases(self) -> list[tuple[Path, str]]:
        return list(self._rebases)

    @property
    def aborted_rebases(self) -> list[Path]:
        return list(self._aborted_rebases)

    @property
    def pulls(self) -> list[tuple[str, str]]:
        return list(self._pulls)

    @property
    def clean_previews(self) -> list[Path]:
        return list(self._clean_previews)

    @property
    def cleaned(self) -> list[Path]:
        return list(self._cleaned)

    @property
    def tags(self) -> list[tuple[str, str]]:
        return list(self._tags)

    @property
    def config_settings(self) -> list[tuple[Path, str, str]]:
        return list(self._config_settings)

    @property
    def clones(self) -> list[tuple[Path, str, str | None, int]]:
        return list(self._clones)

    @property
    def log_calls(self) -> list[tuple[Path, int]]:
        return list(self._log_calls)

    @property
    def status_displays(self) -> list[Path]:
        return list(self._status_displays)

    @property
    def branch_displays(self) -> list[Path]:
        return list(self._branch_displays)
