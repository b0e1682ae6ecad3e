"""Tests for FakeGit test infrastructure.

These tests verify that FakeGit tracks state changes the way real git would,
providing reliable test doubles for CLI tests.
"""

from pathlib import Path

import pytest

from gitauto.core.git.fake import FakeGit
from gitauto.core.subprocess import ExternalCommandError

CWD = Path("/repo")


def test_fake_git_initialization() -> None:
    git = FakeGit()

    assert git.get_current_branch(CWD) is None
    assert git.has_uncommitted_changes(CWD) is False
    assert git.get_stash_count(CWD) == 0
    assert git.get_upstream_branch(CWD) is None


def test_create_branch_updates_state() -> None:
    git = FakeGit(current_branches={CWD: "main"}, local_branches={CWD: ["main"]})

    git.create_branch(CWD, "feature")

    assert git.local_branch_exists(CWD, "feature")
    assert git.get_current_branch(CWD) == "feature"


def test_commit_clears_dirty_state() -> None:
    git = FakeGit(dirty_paths={CWD})

    git.commit(CWD, "msg")

    assert git.has_uncommitted_changes(CWD) is False
    assert git.commits == [(CWD, "msg")]


def test_plain_push_fails_until_upstream_created() -> None:
    git = FakeGit(branches_without_upstream={"feature"})

    with pytest.raises(ExternalCommandError):
        git.push_branch(CWD, "origin", "feature", set_upstream=False)

    git.push_branch(CWD, "origin", "feature", set_upstream=True)
    git.push_branch(CWD, "origin", "feature", set_upstream=False)

    assert git.pushed_branches == [("origin", "feature", True), ("origin", "feature", False)]


def test_failing_operations_raise_with_exit_code() -> None:
    git = FakeGit(failing_operations={"pull": 2})

    with pytest.raises(ExternalCommandError) as exc_info:
        git.pull(CWD, "origin", "main")

    assert exc_info.value.returncode == 2
    assert git.pulls == []


def test_remote_branch_lookup_uses_remote_prefix() -> None:
    git = FakeGit(remote_branches={CWD: ["upstream/master"]})

    assert git.remote_branch_exists(CWD, "upstream", "master")
    assert not git.remote_branch_exists(CWD, "origin", "master")


def test_recorded_lists_are_copies() -> None:
    git = FakeGit()
    git.fetch(CWD, "origin")

    git.fetches.clear()

    assert git.fetches == [(CWD, "origin")]


def test_abort_rebase_can_fail() -> None:
    git = FakeGit(failing_operations={"abort_rebase": 128})

    with pytest.raises(ExternalCommandError) as exc_info:
        git.abort_rebase(CWD)

    assert exc_info.value.cmd == ["git", "rebase", "--abort"]
    assert exc_info.value.returncode == 128
    assert git.aborted_rebases == []
