"""GitHub CLI operations subpackage."""

from gitauto.core.github.abc import GitHub
from gitauto.core.github.dry_run import DryRunGitHub
from gitauto.core.github.real import RealGitHub

__all__ = ["GitHub", "RealGitHub", "DryRunGitHub"]
