"""External tool availability checks.

The hosting CLI (gh) is optional: commands fall back to printing manual
instructions when it is missing or not logged in. Checks are not cached; each
command that needs one runs it.
"""

from enum import Enum

from gitauto.cli.output import notice, user_output
from gitauto.core.context import GitAutoContext

GIT_DOWNLOAD_URL = "https://git-scm.com/downloads"
GH_DOWNLOAD_URL = "https://cli.github.com/"


class ToolStatus(Enum):
    """Availability of the hosting-platform CLI."""

    READY = "ready"
    UNAUTHENTICATED = "unauthenticated"
    MISSING = "missing"


def is_git_installed(ctx: GitAutoContext) -> bool:
    return ctx.shell.get_installed_tool_path("git") is not None


def check_hosting_cli(ctx: GitAutoContext) -> ToolStatus:
    """Determine whether gh is installed and authenticated."""
    if ctx.shell.get_installed_tool_path("gh") is None:
        return ToolStatus.MISSING
    if not ctx.github.is_authenticated(ctx.cwd):
        return ToolStatus.UNAUTHENTICATED
    return ToolStatus.READY


def warn_hosting_cli(status: ToolStatus) -> None:
    """Print install or login guidance for a hosting CLI that is not ready."""
    if status is ToolStatus.MISSING:
        notice("Warning: GitHub CLI is not installed")
        user_output(f"For PR creation, please install GitHub CLI: {GH_DOWNLOAD_URL}")
        user_output("Then authenticate with: gh auth login")
    elif status is ToolStatus.UNAUTHENTICATED:
        notice("Warning: Not authenticated with GitHub CLI")
        user_output("Please run: gh auth login")


def hosting_cli_ready(ctx: GitAutoContext) -> bool:
    """Check the hosting CLI, printing guidance when it is not ready."""
    status = check_hosting_cli(ctx)
    warn_hosting_cli(status)
    return status is ToolStatus.READY
