"""Application context with dependency injection."""

from dataclasses import dataclass
from pathlib import Path

from gitauto.core.config import GitAutoConfig, load_config
from gitauto.core.git.abc import Git
from gitauto.core.git.dry_run import DryRunGit
from gitauto.core.git.real import RealGit
from gitauto.core.github.abc import GitHub
from gitauto.core.github.dry_run import DryRunGitHub
from gitauto.core.github.real import RealGitHub
from gitauto.core.shell import RealShell, Shell
from gitauto.core.time import RealTime, Time


@dataclass(frozen=True)
class GitAutoContext:
    """Immutable context holding all dependencies for gitauto operations.

    Created at CLI entry point and threaded through the application.
    Frozen to prevent accidental modification at runtime.
    """

    git: Git
    github: GitHub
    shell: Shell
    time: Time
    config: GitAutoConfig
    cwd: Path  # Current working directory at CLI invocation
    dry_run: bool

    @staticmethod
    def for_test(
        git: Git | None = None,
        github: GitHub | None = None,
        shell: Shell | None = None,
        time: Time | None = None,
        config: GitAutoConfig | None = None,
        cwd: Path | None = None,
        dry_run: bool = False,
    ) -> "GitAutoContext":
        """Create test context with optional pre-configured integration classes.

        Unspecified integrations default to their fakes. The default shell has
        both git and gh installed.

        Args:
            git: Optional Git implementation. If None, creates empty FakeGit.
            github: Optional GitHub implementation. If None, creates authenticated FakeGitHub.
            shell: Optional Shell implementation. If None, creates FakeShell with git and gh.
            time: Optional Time implementation. If None, creates FakeTime.
            config: Optional GitAutoConfig. If None, uses defaults.
            cwd: Optional current working directory. If None, uses Path("/test/default/cwd").
            dry_run: Whether to enable dry-run mode (default False).
        """
        from tests.fakes.shell import FakeShell
        from tests.fakes.time import FakeTime

        from gitauto.core.git.fake import FakeGit
        from gitauto.core.github.fake import FakeGitHub

        return GitAutoContext(
            git=git if git is not None else FakeGit(),
            github=github if github is not None else FakeGitHub(),
            shell=(
                shell
                if shell is not None
                else FakeShell(installed_tools={"git": "/usr/bin/git", "gh": "/usr/bin/gh"})
            ),
            time=time if time is not None else FakeTime(),
            config=config if config is not None else GitAutoConfig(),
            cwd=cwd if cwd is not None else Path("/test/default/cwd"),
            dry_run=dry_run,
        )


def create_context(*, dry_run: bool) -> GitAutoContext:
    """Create production context with real implementations.

    Called once at CLI entry point to create the context for the entire
    command execution.

    Args:
        dry_run: If True, wrap integrations so writes are printed, not executed

    Returns:
        GitAutoContext with real implementations

    Raises:
        ValueError: If the configuration file is malformed
    """
    git: Git = RealGit()
    github: GitHub = RealGitHub()
    if dry_run:
        git = DryRunGit(git)
        github = DryRunGitHub(github)

    return GitAutoContext(
        git=git,
        github=github,
        shell=RealShell(),
        time=RealTime(),
        config=load_config(),
        cwd=Path.cwd(),
        dry_run=dry_run,
    )
