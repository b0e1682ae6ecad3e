import click

from gitauto.cli.ensure import Ensure
from gitauto.cli.output import notice, progress, success
from gitauto.core.context import GitAutoContext
from gitauto.core.subprocess import ExternalCommandError

DEFAULT_MESSAGE_FORMAT = "Update - %Y-%m-%d %H:%M:%S"


@click.command("save")
@click.argument("message_words", nargs=-1)
@click.pass_obj
def save_cmd(ctx: GitAutoContext, message_words: tuple[str, ...]) -> None:
    """Add all changes, commit, and push to remote.

    All words given are joined into the commit message. Without a message a
    timestamped one is used. Does nothing when the working tree is clean.
    """
    message = " ".join(message_words).strip()
    if not message:
        message = ctx.time.now().strftime(DEFAULT_MESSAGE_FORMAT)
        notice(f"No commit message provided. Using: {message}")

    progress("Saving changes...")

    if not ctx.git.has_uncommitted_changes(ctx.cwd):
        notice("No changes to commit")
        return

    # Checked before committing so a detached HEAD leaves the tree untouched
    branch = Ensure.not_none(
        ctx.git.get_current_branch(ctx.cwd),
        "Cannot push from a detached HEAD - check out a branch first",
    )

    ctx.git.stage_all(ctx.cwd)
    ctx.git.commit(ctx.cwd, message)

    remote = ctx.config.remote
    progress(f"Pushing to remote branch: {branch}")
    try:
        ctx.git.push_branch(ctx.cwd, remote, branch, set_upstream=False)
    except ExternalCommandError:
        notice("Remote branch doesn't exist. Creating it now...")
        ctx.git.push_branch(ctx.cwd, remote, branch, set_upstream=True)
        success(f"Successfully pushed changes to new branch: {branch}")
        return

    success(f"Successfully pushed changes to {branch}")
