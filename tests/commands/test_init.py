"""Tests for gitauto init command."""

from click.testing import CliRunner

from gitauto.cli.cli import cli
from gitauto.cli.commands.init import GITIGNORE_TEMPLATE, INITIAL_COMMIT_MESSAGE
from gitauto.core.config import GitAutoConfig
from gitauto.core.git.fake import FakeGit
from gitauto.core.github.fake import FakeGitHub
from tests.fakes.shell import FakeShell
from tests.test_utils.env_helpers import gitauto_isolated_fs_env


def test_init_creates_files_commits_and_creates_github_repo() -> None:
    runner = CliRunner()
    with gitauto_isolated_fs_env(runner) as env:
        git = FakeGit()
        github = FakeGitHub(authenticated=True)
        ctx = env.build_context(git=git, github=github)

        result = runner.invoke(cli, ["init", "my-project"], obj=ctx)

        assert result.exit_code == 0, result.output
        assert git.initialized == [env.cwd]
        assert (env.cwd / "README.md").read_text(encoding="utf-8") == "# my-project\n"
        assert (env.cwd / ".gitignore").read_text(encoding="utf-8") == GITIGNORE_TEMPLATE
        assert git.staged == [env.cwd]
        assert git.commits == [(env.cwd, INITIAL_COMMIT_MESSAGE)]
        assert github.created_repos == [(env.cwd, "my-project", "public")]
        assert "Repository created and pushed to GitHub: my-project" in result.output


def test_init_defaults_name_to_directory() -> None:
    runner = CliRunner()
    with gitauto_isolated_fs_env(runner) as env:
        github = FakeGitHub()
        ctx = env.build_context(github=github)

        result = runner.invoke(cli, ["init"], obj=ctx)

        assert result.exit_code == 0, result.output
        assert f"Using current directory name: {env.cwd.name}" in result.output
        assert github.created_repos[0][1] == env.cwd.name


def test_init_keeps_existing_files() -> None:
    runner = CliRunner()
    with gitauto_isolated_fs_env(runner) as env:
        (env.cwd / "README.md").write_text("existing readme\n", encoding="utf-8")
        (env.cwd / ".gitignore").write_text("*.pyc\n", encoding="utf-8")
        ctx = env.build_context()

        result = runner.invoke(cli, ["init", "proj"], obj=ctx)

        assert result.exit_code == 0, result.output
        assert (env.cwd / "README.md").read_text(encoding="utf-8") == "existing readme\n"
        assert (env.cwd / ".gitignore").read_text(encoding="utf-8") == "*.pyc\n"
        assert "Created README.md" not in result.output


def test_init_without_gh_prints_manual_instructions() -> None:
    runner = CliRunner()
    with gitauto_isolated_fs_env(runner) as env:
        github = FakeGitHub()
        shell = FakeShell(installed_tools={"git": "/usr/bin/git"})
        ctx = env.build_context(github=github, shell=shell)

        result = runner.invoke(cli, ["init", "proj"], obj=ctx)

        assert result.exit_code == 0, result.output
        assert "Warning: GitHub CLI is not installed" in result.output
        assert "git remote add origin git@github.com:USERNAME/proj.git" in result.output
        assert "git branch -M main" in result.output
        assert "git push -u origin main" in result.output
        assert github.created_repos == []


def test_init_unauthenticated_gh_falls_back_to_manual_steps() -> None:
    runner = CliRunner()
    with gitauto_isolated_fs_env(runner) as env:
        github = FakeGitHub(authenticated=False)
        ctx = env.build_context(github=github)

        result = runner.invoke(cli, ["init", "proj"], obj=ctx)

        assert result.exit_code == 0, result.output
        assert "Not authenticated with GitHub CLI" in result.output
        assert github.created_repos == []


def test_init_uses_configured_visibility() -> None:
    runner = CliRunner()
    with gitauto_isolated_fs_env(runner) as env:
        github = FakeGitHub()
        ctx = env.build_context(github=github, config=GitAutoConfig(repo_visibility="private"))

        result = runner.invoke(cli, ["init", "proj"], obj=ctx)

        assert result.exit_code == 0, result.output
        assert github.created_repos == [(env.cwd, "proj", "private")]


def test_init_dry_run_writes_no_files() -> None:
    runner = CliRunner()
    with gitauto_isolated_fs_env(runner) as env:
        ctx = env.build_context(dry_run=True)

        result = runner.invoke(cli, ["init", "proj"], obj=ctx)

        assert result.exit_code == 0, result.output
        assert not (env.cwd / "README.md").exists()
        assert not (env.cwd / ".gitignore").exists()
        assert "[DRY RUN] Would create README.md" in result.output
