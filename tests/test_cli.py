"""
Tests for the flowbot command-line interface.
"""

import json
import sys

import pytest

from flowbot import cli
from flowbot.services.flowchart_generation import FlowchartGenerationService


@pytest.fixture(autouse=True)
def local_only_service(mocker, offline_settings):
    return mocker.patch.object(
        cli, "FlowchartGenerationService",
        return_value=FlowchartGenerationService(settings=offline_settings, providers=[]),
    )


def run(monkeypatch, *argv):
    monkeypatch.setattr(sys, "argv", ["flowbot", *argv])
    return cli.main()


def test_generate_prints_json(monkeypatch, capsys):
    assert run(monkeypatch, "generate", "a -> b -> c", "--type", "roadmap") == 0

    payload = json.loads(capsys.readouterr().out)
    assert payload["success"] is True
    assert payload["usedAI"] == "local"
    assert payload["diagramType"] == "roadmap"
    assert [n["data"]["label"] for n in payload["nodes"]] == ["a", "b", "c"]


def test_generate_writes_file(monkeypatch, tmp_path, capsys):
    output = tmp_path / "flow.json"

    assert run(monkeypatch, "generate", "launch product", "--output", str(output)) == 0

    payload = json.loads(output.read_text(encoding="utf-8"))
    assert payload["diagramType"] == "process"
    assert len(payload["nodes"]) == 3
    assert "flow.json" in capsys.readouterr().out


def test_blank_prompt_fails(monkeypatch):
    assert run(monkeypatch, "generate", "   ") == 1


def test_no_command_prints_help(monkeypatch, capsys):
    assert run(monkeypatch) == 1
    assert "generate" in capsys.readouterr().out
