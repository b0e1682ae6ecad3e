import click

from gitauto.cli.output import notice, progress, success
from gitauto.core.context import GitAutoContext


@click.command("clean")
@click.pass_obj
def clean_cmd(ctx: GitAutoContext) -> None:
    """Remove untracked files and directories.

    Asks twice: once before showing a dry-run preview of what would be
    removed, and again before removing anything.
    """
    notice("WARNING: This will remove all untracked files and directories.")
    notice("These changes cannot be recovered.")
    if not click.confirm("Are you sure you want to continue?", default=False):
        notice("Clean operation cancelled")
        return

    progress("Cleaning repository...")
    progress("Files and directories that will be removed:")
    ctx.git.preview_clean(ctx.cwd)

    if not click.confirm("Proceed with removal?", default=False):
        notice("Clean operation cancelled")
        return

    ctx.git.clean_untracked(ctx.cwd)
    success("Repository cleaned successfully")
