import click

from gitauto.cli.ensure import Ensure
from gitauto.cli.output import progress, success
from gitauto.core.context import GitAutoContext


def directory_from_url(url: str) -> str:
    """Derive the directory git clone creates for a URL.

    Handles both URL and scp-like ("git@host:owner/repo.git") forms:
    the last path component with trailing "/", "/.git" and ".git" removed.
    """
    name = url.rstrip("/")
    if name.endswith("/.git"):
        name = name[: -len("/.git")].rstrip("/")
    name = name.rsplit("/", 1)[-1]
    name = name.rsplit(":", 1)[-1]
    if name.endswith(".git"):
        name = name[: -len(".git")]
    return name


@click.command("clone")
@click.argument("repo_url")
@click.argument("directory", required=False)
@click.pass_obj
def clone_cmd(ctx: GitAutoContext, repo_url: str, directory: str | None) -> None:
    """Clone a repository with optimized settings.

    Makes a shallow clone, fetches all branches, and enables rebase-on-pull
    and prune-on-fetch for the new repository. DIRECTORY defaults to the
    name derived from REPO_URL.
    """
    target_name = directory if directory else directory_from_url(repo_url)
    Ensure.invariant(bool(target_name), f"Could not derive a directory name from {repo_url}")
    target = ctx.cwd / target_name

    progress(f"Cloning repository: {repo_url}")
    ctx.git.clone(ctx.cwd, repo_url, target_name, depth=ctx.config.clone_depth)

    progress("Fetching all branches...")
    ctx.git.fetch_all(target)

    ctx.git.set_config(target, "pull.rebase", "true")
    ctx.git.set_config(target, "fetch.prune", "true")

    success(f"Repository cloned successfully to: {target_name}")
    if ctx.dry_run:
        return
    progress("Current branches:")
    ctx.git.show_branches(target)
