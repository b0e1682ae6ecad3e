import click

from gitauto.cli.output import progress
from gitauto.core.context import GitAutoContext


@click.command("log")
@click.argument("count", type=click.IntRange(min=1), required=False)
@click.pass_obj
def log_cmd(ctx: GitAutoContext, count: int | None) -> None:
    """Show the last COUNT commits across all refs (default: 5)."""
    if count is None:
        count = ctx.config.log_count

    progress(f"Showing last {count} commits:")
    ctx.git.show_log(ctx.cwd, count)
