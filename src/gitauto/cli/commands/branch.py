import click

from gitauto.cli.ensure import Ensure
from gitauto.cli.output import notice, progress, success
from gitauto.core.context import GitAutoContext


@click.command("branch")
@click.argument("branch_name")
@click.pass_obj
def branch_cmd(ctx: GitAutoContext, branch_name: str) -> None:
    """Create and switch to a new branch.

    Switches to BRANCH_NAME if it already exists locally, then pushes it with
    upstream tracking.
    """
    branch_name = Ensure.truthy(branch_name.strip(), "Branch name required")
    progress(f"Creating branch: {branch_name}")

    if ctx.git.local_branch_exists(ctx.cwd, branch_name):
        notice(f"Branch '{branch_name}' already exists")
        progress(f"Switching to branch: {branch_name}")
        ctx.git.checkout_branch(ctx.cwd, branch_name)
    else:
        ctx.git.create_branch(ctx.cwd, branch_name)
        success(f"Created and switched to new branch: {branch_name}")

    progress("Pushing branch to remote...")
    ctx.git.push_branch(ctx.cwd, ctx.config.remote, branch_name, set_upstream=True)
    success("Branch pushed to remote")
