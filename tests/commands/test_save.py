"""Tests for gitauto save command."""

from click.testing import CliRunner

from gitauto.cli.cli import cli
from gitauto.core.git.fake import FakeGit
from tests.test_utils.env_helpers import gitauto_inmem_env


def test_save_without_changes_is_a_noop() -> None:
    runner = CliRunner()
    with gitauto_inmem_env(runner) as env:
        git = FakeGit(current_branches={env.cwd: "main"})
        ctx = env.build_context(git=git)

        result = runner.invoke(cli, ["save", "nothing here"], obj=ctx)

        assert result.exit_code == 0
        assert "No changes to commit" in result.output
        assert git.staged == []
        assert git.commits == []
        assert git.pushed_branches == []


def test_save_commits_and_pushes_existing_upstream() -> None:
    runner = CliRunner()
    with gitauto_inmem_env(runner) as env:
        git = FakeGit(current_branches={env.cwd: "feature"}, dirty_paths={env.cwd})
        ctx = env.build_context(git=git)

        result = runner.invoke(cli, ["save", "Fix", "the", "bug"], obj=ctx)

        assert result.exit_code == 0, result.output
        assert git.staged == [env.cwd]
        assert git.commits == [(env.cwd, "Fix the bug")]
        assert git.pushed_branches == [("origin", "feature", False)]
        assert "Successfully pushed changes to feature" in result.output


def test_save_creates_upstream_when_plain_push_fails() -> None:
    runner = CliRunner()
    with gitauto_inmem_env(runner) as env:
        git = FakeGit(
            current_branches={env.cwd: "new-work"},
            dirty_paths={env.cwd},
            branches_without_upstream={"new-work"},
        )
        ctx = env.build_context(git=git)

        result = runner.invoke(cli, ["save", "wip"], obj=ctx)

        assert result.exit_code == 0, result.output
        assert git.pushed_branches == [("origin", "new-work", True)]
        assert "Remote branch doesn't exist. Creating it now..." in result.output
        assert "Successfully pushed changes to new branch: new-work" in result.output


def test_save_default_message_is_timestamped() -> None:
    runner = CliRunner()
    with gitauto_inmem_env(runner) as env:
        git = FakeGit(current_branches={env.cwd: "main"}, dirty_paths={env.cwd})
        ctx = env.build_context(git=git)

        result = runner.invoke(cli, ["save"], obj=ctx)

        assert result.exit_code == 0, result.output
        assert git.commits == [(env.cwd, "Update - 2025-04-21 14:30:05")]
        assert "No commit message provided. Using: Update - 2025-04-21 14:30:05" in result.output


def test_save_on_detached_head_fails_before_committing() -> None:
    runner = CliRunner()
    with gitauto_inmem_env(runner) as env:
        git = FakeGit(current_branches={env.cwd: None}, dirty_paths={env.cwd})
        ctx = env.build_context(git=git)

        result = runner.invoke(cli, ["save", "msg"], obj=ctx)

        assert result.exit_code == 1
        assert "detached HEAD" in result.output
        assert git.commits == []


def test_save_commit_failure_relays_exit_code() -> None:
    runner = CliRunner()
    with gitauto_inmem_env(runner) as env:
        git = FakeGit(
            current_branches={env.cwd: "main"},
            dirty_paths={env.cwd},
            failing_operations={"commit": 3},
        )
        ctx = env.build_context(git=git)

        result = runner.invoke(cli, ["save", "msg"], obj=ctx)

        assert result.exit_code == 3
        assert git.pushed_branches == []
