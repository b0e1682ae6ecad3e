import click

from gitauto.cli.ensure import Ensure
from gitauto.cli.output import progress, success
from gitauto.core.context import GitAutoContext
from gitauto.core.tools import hosting_cli_ready


def normalize_version(version: str) -> str:
    """Prefix a version with "v" unless it already starts with one."""
    if version.startswith("v"):
        return version
    return f"v{version}"


@click.command("release")
@click.argument("version")
@click.argument("message", required=False)
@click.pass_obj
def release_cmd(ctx: GitAutoContext, version: str, message: str | None) -> None:
    """Create and push a new tag/release.

    VERSION is tagged as "v<VERSION>" unless it already starts with "v".
    MESSAGE defaults to "Release <tag>". A GitHub release is created when the
    GitHub CLI is available.
    """
    version = Ensure.truthy(version.strip(), "Version required")
    tag = normalize_version(version)
    if not message:
        message = f"Release {tag}"

    progress(f"Creating release: {tag}")
    ctx.git.create_annotated_tag(ctx.cwd, tag, message)
    ctx.git.push_tag(ctx.cwd, ctx.config.remote, tag)

    if hosting_cli_ready(ctx):
        progress("Creating GitHub release...")
        ctx.github.create_release(ctx.cwd, tag, title=tag, notes=message)
        success(f"GitHub release created: {tag}")
    else:
        success("Tag pushed. Create release on GitHub manually if needed.")
