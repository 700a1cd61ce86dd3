"""Shared test fixtures for Sampler tests."""
import json
from pathlib import Path

import pytest

from sampler.core.errors import NetworkError, UserCancelled
from sampler.core.profile import Profile
from sampler.services.git_manager import PullResult


class ScriptedPrompter:
    """Answers prompts from a queue and records every question asked."""

    def __init__(self, *answers):
        self.answers = list(answers)
        self.asked = []

    def select(self, axis, label, options):
        self.asked.append((axis, list(options)))
        if not self.answers:
            raise AssertionError(f"Unexpected prompt for {axis}: {options}")
        answer = self.answers.pop(0)
        if answer is UserCancelled:
            raise UserCancelled()
        assert answer in options
        return answer


class FakeGit:
    """In-memory stand-in for GitManager."""

    def __init__(self, pull_result=PullResult.UPDATED, files=None, fail=None):
        self.pull_result = pull_result
        self.files = files or {".cli.json": json.dumps({"integrations": [{"name": "main"}]})}
        self.fail = fail
        self.calls = []

    def clone(self, destination, url, branch=None):
        self.calls.append(("clone", Path(destination), url))
        if self.fail == "clone":
            raise NetworkError("git clone failed: repository not found")
        write_tree(Path(destination), self.files)

    def pull(self, path):
        self.calls.append(("pull", Path(path)))
        if self.fail == "pull":
            raise NetworkError("git pull failed: could not resolve host")
        return self.pull_result


class FakeClient:
    """Records API posts and replays canned responses."""

    def __init__(self, *responses):
        self.responses = list(responses)
        self.posts = []

    def post(self, path, fields=()):
        self.posts.append((path, list(fields)))
        response = self.responses.pop(0)
        if isinstance(response, Exception):
            raise response
        return response

    def authorize(self, device_name, feature="webhooks"):
        return self.post(
            "/v1/stripecli/sessions",
            [f"device_name={device_name}", f"websocket_features[]={feature}"],
        )


def write_tree(root, files):
    """Create files from a {relative path: content} mapping."""
    root = Path(root)
    root.mkdir(parents=True, exist_ok=True)
    for relative, content in files.items():
        path = root / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content)
    return root


@pytest.fixture
def profile_file(tmp_path):
    path = tmp_path / "config" / "config.yml"
    path.parent.mkdir(parents=True)
    path.write_text(
        "profiles:\n"
        "  default:\n"
        "    account_id: acct_123\n"
        "    test_mode_api_key: sk_test_123\n"
        "    test_mode_pub_key: pk_test_123\n"
        "    device_name: test-laptop\n"
    )
    return path


@pytest.fixture
def profile(profile_file, monkeypatch):
    monkeypatch.delenv("STRIPE_API_KEY", raising=False)
    monkeypatch.delenv("STRIPE_DEVICE_NAME", raising=False)
    return Profile(profile_file)
