"""Tests for the git fetcher."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

from metaimport.errors import FetchError
from metaimport.git.fetch import GitFetcher, parse_symref
from metaimport.resolver import resolve
from tests._fixtures.git_runner import FakeGitRunner


def test_fetch_default_branch(git_runner: FakeGitRunner) -> None:
    snapshot = GitFetcher(runner=git_runner).fetch("https://github.com/user/repo")

    assert git_runner.commands() == ["ls-remote", "clone", "ls-tree"]
    clone = git_runner.calls[1]
    assert "--branch" not in clone
    assert clone[-2] == "https://github.com/user/repo"

    assert snapshot.repo_url == "https://github.com/user/repo"
    assert snapshot.used_default_branch is True
    assert snapshot.default_branch == "main"
    assert snapshot.branch == "main"
    assert "sub/lib.go" in snapshot.files
    assert "" not in snapshot.files


def test_fetch_requested_branch(git_runner: FakeGitRunner) -> None:
    snapshot = GitFetcher(runner=git_runner).fetch("https://github.com/user/repo", "refs/heads/dev")

    clone = git_runner.calls[1]
    assert clone[clone.index("--branch") + 1] == "dev"
    assert snapshot.used_default_branch is False
    assert snapshot.branch == "dev"
    assert snapshot.default_branch == "main"
    assert snapshot.is_default_branch("refs/heads/main")
    assert not snapshot.is_default_branch("dev")


def test_fetch_lists_files_inside_clone(git_runner: FakeGitRunner) -> None:
    GitFetcher(runner=git_runner).fetch("https://github.com/user/repo")

    clone_target = git_runner.calls[1][-1]
    assert str(git_runner.cwds[2]) == clone_target


def test_fetch_cleans_up_temporary_clone(git_runner: FakeGitRunner) -> None:
    GitFetcher(runner=git_runner).fetch("https://github.com/user/repo")

    assert not Path(git_runner.calls[1][-1]).exists()


def test_fetch_missing_branch_raises_fetch_error(git_runner: FakeGitRunner) -> None:
    with pytest.raises(FetchError) as excinfo:
        GitFetcher(runner=git_runner).fetch("https://github.com/user/repo", "nope")

    assert "Remote branch nope not found" in str(excinfo.value)


def test_fetch_missing_git_executable_raises_fetch_error() -> None:
    def runner(args, *, cwd, env=None, capture_output=False):
        raise FileNotFoundError("git")

    with pytest.raises(FetchError):
        GitFetcher(runner=runner).fetch("https://github.com/user/repo")


def test_default_branch_absent() -> None:
    runner = FakeGitRunner(["main.go"], default_branch=None)

    snapshot = GitFetcher(runner=runner).fetch("https://example.org/repo")

    assert snapshot.default_branch is None
    assert not snapshot.is_default_branch("main")


def test_parse_symref() -> None:
    lines = [
        "ref: refs/heads/develop\tHEAD",
        "abc123\tHEAD",
    ]

    assert parse_symref(lines) == "develop"
    assert parse_symref(["abc123\tHEAD"]) is None
    assert parse_symref([]) is None


def test_fetch_keeps_non_ascii_paths_unquoted() -> None:
    runner = FakeGitRunner(["main.go", "pkg/héllo/h.go", 'pkg/q"uote/q.go'])

    snapshot = GitFetcher(runner=runner).fetch("https://github.com/user/repo")

    assert "-z" in runner.calls[2]
    assert snapshot.files == ("main.go", "pkg/héllo/h.go", 'pkg/q"uote/q.go')
    assert resolve(snapshot.files) == {"", "pkg/héllo", 'pkg/q"uote'}


def test_default_runner_reports_stderr_of_uncaptured_command(tmp_path: Path) -> None:
    fetcher = GitFetcher()
    script = "import sys; sys.stderr.write('fatal: Remote branch nope not found'); sys.exit(128)"

    with pytest.raises(FetchError) as excinfo:
        fetcher._run([sys.executable, "-c", script], cwd=tmp_path, action="pulling branch")

    assert str(excinfo.value) == "pulling branch: fatal: Remote branch nope not found"


def test_default_runner_returns_captured_stdout(tmp_path: Path) -> None:
    output = GitFetcher._default_runner(
        [sys.executable, "-c", "print('a\\0b', end='')"],
        cwd=tmp_path,
        capture_output=True,
    )

    assert output == "a\0b"
