from pathlib import Path

import click

from gitauto.cli.output import notice, progress, success, user_output
from gitauto.core.context import GitAutoContext
from gitauto.core.tools import hosting_cli_ready

INITIAL_COMMIT_MESSAGE = "Initial commit"

GITIGNORE_TEMPLATE = """\
# OS generated files
.DS_Store
.DS_Store?
._*
.Spotlight-V100
.Trashes
ehthumbs.db
Thumbs.db

# IDE files
.idea/
.vscode/
*.sublime-project
*.sublime-workspace

# Dependency directories
node_modules/
vendor/

# Log files
*.log
npm-debug.log*
yarn-debug.log*
yarn-error.log*

# Local env files
.env
.env.local
.env.development.local
.env.test.local
.env.production.local
"""


def _write_if_absent(ctx: GitAutoContext, path: Path, content: str, created_message: str) -> None:
    if path.exists():
        return
    if ctx.dry_run:
        notice(f"[DRY RUN] Would create {path.name}")
        return
    path.write_text(content, encoding="utf-8")
    success(created_message)


@click.command("init")
@click.argument("repo_name", required=False)
@click.pass_obj
def init_cmd(ctx: GitAutoContext, repo_name: str | None) -> None:
    """Initialize a new Git repository locally and on GitHub.

    REPO_NAME defaults to the current directory's name. README.md and
    .gitignore are created only if absent. When the GitHub CLI is installed and
    authenticated the repository is also created on GitHub and pushed;
    otherwise the manual remote setup steps are printed.
    """
    if not repo_name:
        repo_name = ctx.cwd.name
        notice(f"No repository name provided. Using current directory name: {repo_name}")

    progress(f"Initializing repository: {repo_name}")
    ctx.git.init_repository(ctx.cwd)

    _write_if_absent(ctx, ctx.cwd / "README.md", f"# {repo_name}\n", "Created README.md")
    _write_if_absent(
        ctx,
        ctx.cwd / ".gitignore",
        GITIGNORE_TEMPLATE,
        "Created .gitignore with common patterns",
    )

    ctx.git.stage_all(ctx.cwd)
    ctx.git.commit(ctx.cwd, INITIAL_COMMIT_MESSAGE)

    if hosting_cli_ready(ctx):
        progress(f"Creating GitHub repository: {repo_name}")
        ctx.github.create_repo(ctx.cwd, repo_name, visibility=ctx.config.repo_visibility)
        success(f"Repository created and pushed to GitHub: {repo_name}")
        return

    remote = ctx.config.remote
    notice("GitHub CLI not available. Please create repository manually and then run:")
    user_output(f"git remote add {remote} git@github.com:USERNAME/{repo_name}.git")
    user_output("git branch -M main")
    user_output(f"git push -u {remote} main")
