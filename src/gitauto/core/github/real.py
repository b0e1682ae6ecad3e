"""Production GitHub implementation using the gh CLI."""

from pathlib import Path

from gitauto.core.github.abc import GitHub
from gitauto.core.subprocess import command_succeeds, run_passthrough


class RealGitHub(GitHub):
    """Production implementation using gh CLI.

    gh writes its own progress and URLs to the terminal.
    """

    def is_authenticated(self, cwd: Path) -> bool:
        return command_succeeds(["gh", "auth", "status"], cwd=cwd)

    def create_repo(self, cwd: Path, name: str, *, visibility: str) -> None:
        run_passthrough(
            ["gh", "repo", "create", name, "--source=.", f"--{visibility}", "--push"],
            operation_context=f"create GitHub repository '{name}'",
            cwd=cwd,
        )

    def create_pr(self, cwd: Path, title: str, body: str) -> None:
        run_passthrough(
            ["gh", "pr", "create", "--title", title, "--body", body],
            operation_context="create pull request",
            cwd=cwd,
        )

    def create_release(self, cwd: Path, tag: str, *, title: str, notes: str) -> None:
        run_passthrough(
            ["gh", "release", "create", tag, "--title", title, "--notes", notes],
            operation_context=f"create GitHub release '{tag}'",
            cwd=cwd,
        )
