"""
Shared test fixtures for the FlowBot test suite.

Provides: credential-free settings, a clean metrics collector per test,
raw provider payloads and a fake chat completion endpoint.
"""

import json
from unittest.mock import Mock

import pytest
import requests

from flowbot.shared import Settings, get_metrics


@pytest.fixture(autouse=True)
def reset_metrics():
    """Metrics are a process-wide singleton; start every test from zero."""
    get_metrics().reset()
    yield
    get_metrics().reset()


@pytest.fixture
def offline_settings():
    """Settings with every provider credential missing and no .env lookup."""
    return Settings(NVIDIA_NIM_API_KEY=None, KIMI_API_KEY=None, _env_file=None)


@pytest.fixture
def keyed_settings():
    """Settings with both provider credentials present."""
    return Settings(NVIDIA_NIM_API_KEY="nim-test-key", KIMI_API_KEY="kimi-test-key", _env_file=None)


@pytest.fixture
def raw_flowchart():
    """A well-formed provider payload."""
    return {
        "nodes": [
            {"id": "1", "type": "startEnd", "position": {"x": 250, "y": 0}, "data": {"label": "Start"}},
            {"id": "2", "type": "decision", "position": {"x": 250, "y": 120}, "data": {"label": "In stock?"}},
            {"id": "3", "type": "startEnd", "position": {"x": 250, "y": 240}, "data": {"label": "End"}},
        ],
        "edges": [
            {"id": "e1-2", "source": "1", "target": "2", "animated": True},
            {"id": "e2-3", "source": "2", "target": "3", "label": "Yes", "animated": True},
        ],
    }


def raw_response(chunks, status_code=200):
    """Build a Mock shaped like a streamed ``requests.Response`` yielding ``chunks``."""
    response = Mock()
    response.status_code = status_code
    response.ok = 200 <= status_code < 300
    response.iter_content.return_value = iter(chunks)
    return response


def completion_response(content, status_code=200):
    """Build a Mock response from a chat completion endpoint carrying ``content``."""
    if 200 <= status_code < 300:
        body = json.dumps({"choices": [{"message": {"content": content}}]})
    else:
        body = content if isinstance(content, str) else json.dumps(content)
    return raw_response([body.encode("utf-8")], status_code)


@pytest.fixture
def fake_post(monkeypatch):
    """
    Patch ``requests.post`` and record every call.

    Tests set ``fake_post.responses`` to a list of Mock responses or
    exceptions consumed in order.
    """
    calls = []

    def _post(url, headers=None, json=None, timeout=None, stream=False):
        calls.append({"url": url, "headers": headers, "json": json, "timeout": timeout, "stream": stream})
        outcome = _post.responses.pop(0)
        if isinstance(outcome, Exception):
            raise outcome
        return outcome

    _post.calls = calls
    _post.responses = []
    monkeypatch.setattr(requests, "post", _post)
    return _post


@pytest.fixture
def completion():
    """Factory for fake chat completion responses."""
    return completion_response


@pytest.fixture
def streamed():
    """Factory for fake responses with an explicit chunk sequence."""
    return raw_response
