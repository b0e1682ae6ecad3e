"""Tests for external tool availability checks."""

from pathlib import Path

import pytest

from gitauto.core.context import GitAutoContext
from gitauto.core.github.fake import FakeGitHub
from gitauto.core.tools import (
    ToolStatus,
    check_hosting_cli,
    hosting_cli_ready,
    is_git_installed,
)
from tests.fakes.shell import FakeShell


def test_hosting_cli_ready_when_installed_and_authenticated() -> None:
    ctx = GitAutoContext.for_test(github=FakeGitHub(authenticated=True))

    assert check_hosting_cli(ctx) is ToolStatus.READY


def test_hosting_cli_unauthenticated() -> None:
    ctx = GitAutoContext.for_test(github=FakeGitHub(authenticated=False))

    assert check_hosting_cli(ctx) is ToolStatus.UNAUTHENTICATED


def test_hosting_cli_missing_skips_auth_check() -> None:
    github = FakeGitHub()
    ctx = GitAutoContext.for_test(
        github=github, shell=FakeShell(installed_tools={"git": "/usr/bin/git"})
    )

    assert check_hosting_cli(ctx) is ToolStatus.MISSING
    assert github.auth_checks == []


def test_check_is_not_cached() -> None:
    github = FakeGitHub()
    ctx = GitAutoContext.for_test(github=github, cwd=Path("/repo"))

    check_hosting_cli(ctx)
    check_hosting_cli(ctx)

    assert github.auth_checks == [Path("/repo"), Path("/repo")]


def test_hosting_cli_ready_prints_guidance(capsys: pytest.CaptureFixture[str]) -> None:
    ctx = GitAutoContext.for_test(github=FakeGitHub(authenticated=False))

    assert hosting_cli_ready(ctx) is False

    captured = capsys.readouterr()
    assert "Not authenticated with GitHub CLI" in captured.err


def test_is_git_installed() -> None:
    assert is_git_installed(GitAutoContext.for_test())
    assert not is_git_installed(GitAutoContext.for_test(shell=FakeShell()))
