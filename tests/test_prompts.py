"""Tests for the interactive prompters."""
import pytest
from rich.console import Console

from sampler.core.errors import UserCancelled
from sampler.prompts import AUTO_CREATE_AXIS, AutoAcceptPrompter, RichPrompter

from conftest import ScriptedPrompter


def test_rich_prompter_returns_choice(monkeypatch):
    asked = {}

    def fake_ask(prompt, choices=None, console=None):
        asked["choices"] = choices
        return "python"

    monkeypatch.setattr("sampler.prompts.Prompt.ask", fake_ask)
    console = Console(record=True)

    assert RichPrompter(console).select("server", "What server", ["node", "python"]) == "python"
    assert asked["choices"] == ["node", "python"]
    assert "Selected server: python" in console.export_text()


@pytest.mark.parametrize("error", [KeyboardInterrupt, EOFError])
def test_rich_prompter_cancel(monkeypatch, error):
    def fake_ask(prompt, choices=None, console=None):
        raise error()

    monkeypatch.setattr("sampler.prompts.Prompt.ask", fake_ask)

    with pytest.raises(UserCancelled):
        RichPrompter(Console(record=True)).select("client", "Which client", ["a", "b"])


def test_auto_accept_only_answers_creation_prompt():
    inner = ScriptedPrompter("react", "no")
    prompter = AutoAcceptPrompter(inner)

    assert prompter.select(AUTO_CREATE_AXIS, "Create?", ["yes", "no"]) == "yes"
    assert prompter.select("client", "Which client", ["html", "react"]) == "react"
    # variants that happen to be named yes/no still go to the user
    assert prompter.select("integration", "Which integration", ["yes", "no"]) == "no"
    assert [axis for axis, _ in inner.asked] == ["client", "integration"]
