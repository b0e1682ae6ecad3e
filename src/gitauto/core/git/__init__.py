"""Git operations subpackage.

This subpackage provides abstractions over git operations with support for
testing via fakes and dry-run via wrappers.
"""

from gitauto.core.git.abc import Git
from gitauto.core.git.dry_run import DryRunGit
from gitauto.core.git.real import RealGit

__all__ = [
    "Git",
    "RealGit",
    "DryRunGit",
]
