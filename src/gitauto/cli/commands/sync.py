import logging

import click

from gitauto.cli.ensure import Ensure
from gitauto.cli.output import error, notice, progress, success, user_output
from gitauto.core.context import GitAutoContext
from gitauto.core.subprocess import ExternalCommandError

logger = logging.getLogger(__name__)


def detect_default_branch(ctx: GitAutoContext) -> str:
    """Return "master" if the remote has a master branch, otherwise "main"."""
    if ctx.git.remote_branch_exists(ctx.cwd, ctx.config.remote, "master"):
        return "master"
    return "main"


@click.command("sync")
@click.pass_obj
def sync_cmd(ctx: GitAutoContext) -> None:
    """Sync current branch with remote main/master.

    Feature branches are rebased onto the remote default branch; a conflicting
    rebase is aborted and manual merge steps are printed. On the default
    branch itself the latest changes are pulled.
    """
    progress("Syncing with main branch...")

    current_branch = Ensure.not_none(
        ctx.git.get_current_branch(ctx.cwd),
        "Cannot sync a detached HEAD - check out a branch first",
    )
    remote = ctx.config.remote
    default_branch = detect_default_branch(ctx)

    progress("Fetching latest changes...")
    ctx.git.fetch(ctx.cwd, remote)

    if current_branch != default_branch:
        onto = f"{remote}/{default_branch}"
        progress(f"Rebasing {current_branch} onto {onto}...")
        if not ctx.git.rebase(ctx.cwd, onto):
            error("Rebase conflict! Aborting rebase...")
            try:
                ctx.git.abort_rebase(ctx.cwd)
            except ExternalCommandError:
                # The rebase may have refused to start (e.g. unstaged changes)
                logger.debug("No rebase in progress to abort", exc_info=True)
            notice("Please merge manually:")
            user_output(f"git checkout {default_branch}")
            user_output("git pull")
            user_output(f"git checkout {current_branch}")
            user_output(f"git merge {default_branch}")
            raise SystemExit(1)
        success(f"Successfully rebased onto {default_branch}")
    else:
        progress(f"Pulling latest changes for {default_branch}...")
        ctx.git.pull(ctx.cwd, remote, default_branch)

    success(f"Branch is now in sync with {default_branch}")
