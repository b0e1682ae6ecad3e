"""Tests for gitauto sync command."""

from click.testing import CliRunner

from gitauto.cli.cli import cli
from gitauto.core.git.fake import FakeGit
from tests.test_utils.env_helpers import gitauto_inmem_env


def test_sync_feature_branch_rebases_onto_main() -> None:
    runner = CliRunner()
    with gitauto_inmem_env(runner) as env:
        git = FakeGit(
            current_branches={env.cwd: "feature"},
            remote_branches={env.cwd: ["origin/main", "origin/feature"]},
        )
        ctx = env.build_context(git=git)

        result = runner.invoke(cli, ["sync"], obj=ctx)

        assert result.exit_code == 0, result.output
        assert git.fetches == [(env.cwd, "origin")]
        assert git.rebases == [(env.cwd, "origin/main")]
        assert git.pulls == []
        assert "Branch is now in sync with main" in result.output


def test_sync_prefers_master_when_remote_has_it() -> None:
    runner = CliRunner()
    with gitauto_inmem_env(runner) as env:
        git = FakeGit(
            current_branches={env.cwd: "feature"},
            remote_branches={env.cwd: ["origin/master", "origin/main"]},
        )
        ctx = env.build_context(git=git)

        result = runner.invoke(cli, ["sync"], obj=ctx)

        assert result.exit_code == 0, result.output
        assert git.rebases == [(env.cwd, "origin/master")]


def test_sync_on_default_branch_pulls() -> None:
    runner = CliRunner()
    with gitauto_inmem_env(runner) as env:
        git = FakeGit(current_branches={env.cwd: "main"})
        ctx = env.build_context(git=git)

        result = runner.invoke(cli, ["sync"], obj=ctx)

        assert result.exit_code == 0, result.output
        assert git.rebases == []
        assert git.pulls == [("origin", "main")]


def test_sync_rebase_conflict_aborts_and_prints_manual_steps() -> None:
    runner = CliRunner()
    with gitauto_inmem_env(runner) as env:
        git = FakeGit(current_branches={env.cwd: "feature"}, rebase_conflicts=True)
        ctx = env.build_context(git=git)

        result = runner.invoke(cli, ["sync"], obj=ctx)

        assert result.exit_code == 1
        assert git.aborted_rebases == [env.cwd]
        assert "Rebase conflict! Aborting rebase..." in result.output
        assert "git checkout main" in result.output
        assert "git checkout feature" in result.output
        assert "git merge main" in result.output
        assert "Branch is now in sync" not in result.output


def test_sync_prints_manual_steps_when_abort_fails() -> None:
    runner = CliRunner()
    with gitauto_inmem_env(runner) as env:
        git = FakeGit(
            current_branches={env.cwd: "feature"},
            rebase_conflicts=True,
            failing_operations={"abort_rebase": 128},
        )
        ctx = env.build_context(git=git)

        result = runner.invoke(cli, ["sync"], obj=ctx)

        assert result.exit_code == 1
        assert git.aborted_rebases == []
        assert "Please merge manually:" in result.output
        assert "git merge main" in result.output
        assert "Failed to abort_rebase" not in result.output
