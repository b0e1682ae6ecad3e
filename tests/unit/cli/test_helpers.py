"""Tests for pure helpers used by commands."""

from pathlib import Path

import pytest

from gitauto.cli.commands.clone import directory_from_url
from gitauto.cli.commands.release import normalize_version
from gitauto.cli.commands.sync import detect_default_branch
from gitauto.cli.help_formatter import USAGE_COMMANDS, format_usage
from gitauto.core.context import GitAutoContext
from gitauto.core.git.fake import FakeGit


@pytest.mark.parametrize(
    ("version", "expected"),
    [("1.0.0", "v1.0.0"), ("v1.0.0", "v1.0.0"), ("2024.1", "v2024.1")],
)
def test_normalize_version(version: str, expected: str) -> None:
    assert normalize_version(version) == expected


@pytest.mark.parametrize(
    ("url", "expected"),
    [
        ("https://github.com/owner/project.git", "project"),
        ("https://github.com/owner/project", "project"),
        ("https://github.com/owner/project/", "project"),
        ("git@github.com:owner/project.git", "project"),
        ("git@host:project.git", "project"),
        ("/srv/git/local-repo.git", "local-repo"),
        ("/srv/proj/.git", "proj"),
        ("/srv/proj/.git/", "proj"),
    ],
)
def test_directory_from_url(url: str, expected: str) -> None:
    assert directory_from_url(url) == expected


def test_default_branch_is_main_without_remote_master() -> None:
    ctx = GitAutoContext.for_test(git=FakeGit())

    assert detect_default_branch(ctx) == "main"


def test_default_branch_is_master_when_remote_has_it() -> None:
    cwd = Path("/repo")
    git = FakeGit(remote_branches={cwd: ["origin/master"]})
    ctx = GitAutoContext.for_test(git=git, cwd=cwd)

    assert detect_default_branch(ctx) == "master"


def test_usage_lists_every_command() -> None:
    usage = format_usage("gitauto")

    for usage_line, description in USAGE_COMMANDS:
        assert usage_line in usage
        assert description in usage
