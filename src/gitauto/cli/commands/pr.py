import click

from gitauto.cli.ensure import Ensure
from gitauto.cli.output import notice, progress, success
from gitauto.core.context import GitAutoContext


@click.command("pr")
@click.argument("title", required=False)
@click.argument("description", required=False)
@click.pass_obj
def pr_cmd(ctx: GitAutoContext, title: str | None, description: str | None) -> None:
    """Create a pull request (requires GitHub CLI).

    TITLE defaults to "Pull request for <branch>" and DESCRIPTION to
    "Changes made in <branch>". The current branch is pushed first.
    """
    Ensure.hosting_cli_ready(ctx, "PR creation")

    branch = Ensure.not_none(
        ctx.git.get_current_branch(ctx.cwd),
        "Cannot create a pull request from a detached HEAD",
    )

    if not title:
        title = f"Pull request for {branch}"
        notice(f"No PR title provided. Using: {title}")

    if not description:
        description = f"Changes made in {branch}"

    progress("Creating pull request...")
    ctx.git.push_current(ctx.cwd)
    ctx.github.create_pr(ctx.cwd, title, description)
    success("Pull request created successfully")
