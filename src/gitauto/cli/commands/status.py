import click

from gitauto.cli.output import notice, success, user_output
from gitauto.core.context import GitAutoContext

DETACHED_HEAD_LABEL = "(detached HEAD)"


def _label(text: str) -> str:
    return click.style(text, fg="blue")


def _report_tracking(ctx: GitAutoContext, branch: str) -> None:
    upstream = ctx.git.get_upstream_branch(ctx.cwd)
    if upstream is None:
        notice("No remote tracking branch set")
        return

    user_output(f"{_label('Remote branch:')} {upstream}")
    counts = ctx.git.get_ahead_behind(ctx.cwd, branch, upstream)
    if counts is None:
        # Upstream ref missing locally (e.g. never fetched); nothing to compare
        return

    ahead, behind = counts
    if ahead > 0:
        notice(f"Local is ahead by {ahead} commit(s)")
    if behind > 0:
        notice(f"Local is behind by {behind} commit(s)")
    if ahead == 0 and behind == 0:
        success("Local is in sync with remote")


@click.command("status")
@click.pass_obj
def status_cmd(ctx: GitAutoContext) -> None:
    """Show repository status with enhanced output.

    Prints the current branch, its upstream with ahead/behind counts, the
    short working-tree status, and the stash count when there are stashes.
    """
    user_output(_label("Repository Status:"))
    user_output("==============================")

    branch = ctx.git.get_current_branch(ctx.cwd)
    branch_label = branch if branch is not None else DETACHED_HEAD_LABEL
    user_output(f"{_label('Current branch:')} {branch_label}")

    if branch is None:
        notice("No remote tracking branch set")
    else:
        _report_tracking(ctx, branch)

    user_output()
    user_output(_label("Local Changes:"))
    ctx.git.show_short_status(ctx.cwd)

    stash_count = ctx.git.get_stash_count(ctx.cwd)
    if stash_count > 0:
        user_output()
        notice(f"Stashed changes: {stash_count}")
