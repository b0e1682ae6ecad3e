"""Dispatch group with the tool's usage text and exit-code conventions."""

from typing import Any

import click

from gitauto.cli.output import machine_output, user_output
from gitauto.core.subprocess import ExternalCommandError

HELP_COMMAND = "help"

# ctx.meta key set when a help flag is present in the arguments
HELP_REQUESTED = "gitauto.help_requested"

USAGE_COMMANDS = [
    ("init [repo-name]", "Initialize a new Git repository locally and on GitHub"),
    ("save [commit-message]", "Add all changes, commit, and push to remote"),
    ("branch <branch-name>", "Create and switch to a new branch"),
    ("pr [title] [description]", "Create a pull request (requires GitHub CLI)"),
    ("sync", "Sync current branch with remote main/master"),
    ("clean", "Remove untracked files and directories"),
    ("log [n]", "Show last n commits (default: 5)"),
    ("status", "Show repository status with enhanced output"),
    ("release <version> [message]", "Create and push a new tag/release"),
    ("clone <repo-url> [directory]", "Clone a repository with optimized settings"),
]

USAGE_OPTIONS = [
    ("--dry-run", "Print mutating git/gh commands instead of running them"),
    ("--debug", "Log every external command"),
    ("--version", "Show the version and exit"),
    ("-h, --help", "Show this help message"),
]


def format_usage(prog_name: str) -> str:
    """Build the top-level usage text."""
    width = max(len(usage) for usage, _ in USAGE_COMMANDS) + 2
    lines = [
        click.style("Git & GitHub Automation", fg="blue"),
        f"Usage: {prog_name} [OPTIONS] COMMAND [ARGS]...",
        "",
        "Commands:",
    ]
    lines.extend(f"  {usage.ljust(width)}- {description}" for usage, description in USAGE_COMMANDS)
    lines.extend(["", "Options:"])
    lines.extend(f"  {flag.ljust(width)}- {description}" for flag, description in USAGE_OPTIONS)
    return "\n".join(lines)


class DispatchGroup(click.Group):
    """Click Group that owns usage display and error exit codes.

    - Help prints the usage table instead of click's default layout.
    - "help" as a command name prints the usage table.
    - Unknown commands print an error plus usage and exit 1.
    - A help flag anywhere before "--" is recorded in ctx.meta so the group
      callback can skip tool checks for subcommand help.
    - Usage errors (missing argument, bad value) exit 1 instead of click's 2.
    - ExternalCommandError raised by a handler exits with the wrapped tool's status.
    """

    def get_help(self, ctx: click.Context) -> str:
        return format_usage(ctx.command_path)

    def parse_args(self, ctx: click.Context, args: list[str]) -> list[str]:
        options = args[: args.index("--")] if "--" in args else args
        ctx.meta[HELP_REQUESTED] = any(arg in ctx.help_option_names for arg in options)
        return super().parse_args(ctx, args)

    def make_context(
        self,
        info_name: str | None,
        args: list[str],
        parent: click.Context | None = None,
        **extra: Any,
    ) -> click.Context:
        try:
            return super().make_context(info_name, args, parent=parent, **extra)
        except click.UsageError as e:
            e.show()
            raise SystemExit(1) from None

    def resolve_command(
        self, ctx: click.Context, args: list[str]
    ) -> tuple[str | None, click.Command | None, list[str]]:
        cmd_name = click.utils.make_str(args[0])
        if cmd_name == HELP_COMMAND:
            machine_output(format_usage(ctx.command_path))
            raise SystemExit(0)
        if self.get_command(ctx, cmd_name) is None:
            user_output(click.style(f"Error: Unknown command: {cmd_name}", fg="red"))
            user_output(format_usage(ctx.command_path))
            raise SystemExit(1)
        return super().resolve_command(ctx, args)

    def invoke(self, ctx: click.Context) -> Any:
        try:
            return super().invoke(ctx)
        except click.UsageError as e:
            e.show()
            raise SystemExit(1) from None
        except ExternalCommandError as e:
            user_output(click.style("Error: ", fg="red") + str(e))
            raise SystemExit(e.returncode if e.returncode > 0 else 1) from None
