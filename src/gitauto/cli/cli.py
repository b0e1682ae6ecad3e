import logging

import click

from gitauto.cli.commands.branch import branch_cmd
from gitauto.cli.commands.clean import clean_cmd
from gitauto.cli.commands.clone import clone_cmd
from gitauto.cli.commands.init import init_cmd
from gitauto.cli.commands.log import log_cmd
from gitauto.cli.commands.pr import pr_cmd
from gitauto.cli.commands.release import release_cmd
from gitauto.cli.commands.save import save_cmd
from gitauto.cli.commands.status import status_cmd
from gitauto.cli.commands.sync import sync_cmd
from gitauto.cli.ensure import Ensure
from gitauto.cli.help_formatter import HELP_REQUESTED, DispatchGroup, format_usage
from gitauto.cli.output import machine_output, user_output
from gitauto.core.context import create_context

CONTEXT_SETTINGS = dict(help_option_names=["-h", "--help"])  # terse help flags


@click.group(
    cls=DispatchGroup,
    context_settings=CONTEXT_SETTINGS,
    invoke_without_command=True,
)
@click.option(
    "--dry-run",
    is_flag=True,
    default=False,
    help="Print mutating git/gh commands instead of running them.",
)
@click.option("--debug", is_flag=True, default=False, help="Log every external command.")
@click.version_option(package_name="gitauto")
@click.pass_context
def cli(ctx: click.Context, dry_run: bool, debug: bool) -> None:
    """Automate common Git and GitHub workflows."""
    if debug:
        logging.basicConfig(level=logging.DEBUG, format="[DEBUG %(name)s:%(lineno)d] %(message)s")

    if ctx.invoked_subcommand is None:
        machine_output(format_usage(ctx.command_path))
        ctx.exit(0)

    # Only create context if not already provided (e.g., by tests)
    if ctx.obj is None:
        try:
            ctx.obj = create_context(dry_run=dry_run)
        except ValueError as e:
            user_output(click.style("Error: ", fg="red") + str(e))
            raise SystemExit(1) from e

    # Subcommand help is shown by click after this callback; it needs no tools
    if not ctx.meta.get(HELP_REQUESTED, False):
        Ensure.git_installed(ctx.obj)


# Register all commands
cli.add_command(init_cmd)
cli.add_command(save_cmd)
cli.add_command(branch_cmd)
cli.add_command(pr_cmd)
cli.add_command(sync_cmd)
cli.add_command(clean_cmd)
cli.add_command(log_cmd)
cli.add_command(status_cmd)
cli.add_command(release_cmd)
cli.add_command(clone_cmd)


def main() -> None:
    """CLI entry point used by the `gitauto` console script."""
    cli()
