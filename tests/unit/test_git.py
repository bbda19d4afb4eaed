"""Tests for git queries and the optional remote update."""

import subprocess
from pathlib import Path

import pytest

from stencil.core.errors import GitCommandError
from stencil.core.init_impl.git import run_git, update_git_remote

URL = "https://github.com/janedoe/acme-app"
IS_REPO = {("rev-parse", "--git-dir"): ".git"}


class TestRunGit:
    def test_returns_stripped_stdout(self, tmp_path: Path, monkeypatch) -> None:
        def fake_run(cmd, **kwargs):
            assert cmd == ["git", "config", "user.name"]
            assert kwargs["cwd"] == tmp_path
            return subprocess.CompletedProcess(cmd, 0, stdout="Jane Doe\n", stderr="")

        monkeypatch.setattr(subprocess, "run", fake_run)

        assert run_git(["config", "user.name"], tmp_path) == "Jane Doe"

    def test_non_zero_exit_raises(self, tmp_path: Path, monkeypatch) -> None:
        def fake_run(cmd, **kwargs):
            return subprocess.CompletedProcess(cmd, 1, stdout="", stderr="error: No such remote\n")

        monkeypatch.setattr(subprocess, "run", fake_run)

        with pytest.raises(GitCommandError, match="No such remote"):
            run_git(["remote", "get-url", "origin"], tmp_path)


class TestUpdateGitRemote:
    def test_adds_missing_origin(self, tmp_path: Path, reporter, make_git) -> None:
        git = make_git({**IS_REPO, ("remote", "add", "origin", URL): ""})

        assert update_git_remote(tmp_path, URL, reporter, git=git)
        assert ["remote", "add", "origin", URL] in git.calls
        assert reporter.texts("success") == [f"Added git remote: {URL}"]

    def test_replaces_placeholder_origin(self, tmp_path: Path, reporter, make_git) -> None:
        git = make_git(
            {
                **IS_REPO,
                ("remote", "get-url", "origin"): "https://github.com/YOUR_USERNAME/REPO_NAME",
                ("remote", "set-url", "origin", URL): "",
            }
        )

        assert update_git_remote(tmp_path, URL, reporter, git=git)
        assert reporter.texts("success") == [f"Updated git remote: {URL}"]

    def test_keeps_real_origin(self, tmp_path: Path, reporter, make_git) -> None:
        git = make_git({**IS_REPO, ("remote", "get-url", "origin"): "git@github.com:acme/app.git"})

        assert not update_git_remote(tmp_path, URL, reporter, git=git)
        assert all(call[:2] != ["remote", "set-url"] for call in git.calls)
        assert "already configured" in reporter.texts("info")[0]

    def test_not_a_repository(self, tmp_path: Path, reporter, no_git) -> None:
        assert not update_git_remote(tmp_path, URL, reporter, git=no_git)
        assert reporter.texts("warn") == ["Not a git repository, skipping remote update"]

    def test_empty_url(self, tmp_path: Path, reporter, no_git) -> None:
        assert not update_git_remote(tmp_path, "", reporter, git=no_git)
        assert no_git.calls == []

    def test_failed_update_warns(self, tmp_path: Path, reporter, make_git) -> None:
        git = make_git(IS_REPO)

        assert not update_git_remote(tmp_path, URL, reporter, git=git)
        assert reporter.texts("warn")[0].startswith("Could not update git remote")
