"""Tests for the git collaborator."""
import subprocess
from types import SimpleNamespace

import pytest

from sampler.core.errors import NetworkError
from sampler.services.git_manager import GitManager, PullResult


def _fake_run(stdout="", stderr="", error=None, calls=None):
    def run(cmd, cwd=None, capture_output=False, text=False, check=False, timeout=None):
        if calls is not None:
            calls.append((cmd, cwd))
        if error is not None:
            raise error
        return SimpleNamespace(stdout=stdout, stderr=stderr, returncode=0)
    return run


class TestPull:

    @pytest.mark.parametrize("output", ["Already up to date.\n", "Already up-to-date.\n"])
    def test_already_up_to_date(self, monkeypatch, tmp_path, output):
        monkeypatch.setattr("sampler.services.git_manager.subprocess.run", _fake_run(stdout=output))
        assert GitManager().pull(tmp_path) is PullResult.ALREADY_UP_TO_DATE

    def test_updated(self, monkeypatch, tmp_path):
        calls = []
        monkeypatch.setattr(
            "sampler.services.git_manager.subprocess.run",
            _fake_run(stdout="Fast-forward\n README.md | 2 +-\n", calls=calls),
        )

        assert GitManager().pull(tmp_path) is PullResult.UPDATED
        assert calls == [(["git", "pull"], str(tmp_path))]

    def test_other_failure_raises(self, monkeypatch, tmp_path):
        error = subprocess.CalledProcessError(1, ["git", "pull"], stderr="fatal: unable to access")
        monkeypatch.setattr("sampler.services.git_manager.subprocess.run", _fake_run(error=error))

        with pytest.raises(NetworkError, match="unable to access"):
            GitManager().pull(tmp_path)


class TestClone:

    def test_clone_command(self, monkeypatch, tmp_path):
        calls = []
        monkeypatch.setattr("sampler.services.git_manager.subprocess.run", _fake_run(calls=calls))

        GitManager().clone(tmp_path / "repo", "https://github.com/stripe-samples/identity.git")

        cmd, cwd = calls[0]
        assert cmd[:2] == ["git", "clone"]
        assert cmd[-2:] == ["https://github.com/stripe-samples/identity.git", str(tmp_path / "repo")]

    def test_missing_git_binary(self, monkeypatch, tmp_path):
        monkeypatch.setattr(
            "sampler.services.git_manager.subprocess.run", _fake_run(error=FileNotFoundError("git"))
        )
        with pytest.raises(NetworkError, match="Git not found"):
            GitManager().clone(tmp_path / "repo", "https://example.com/repo.git")

    def test_timeout(self, monkeypatch, tmp_path):
        error = subprocess.TimeoutExpired(["git", "clone"], 5)
        monkeypatch.setattr("sampler.services.git_manager.subprocess.run", _fake_run(error=error))
        with pytest.raises(NetworkError, match="timed out"):
            GitManager(timeout=5).clone(tmp_path / "repo", "https://example.com/repo.git")
