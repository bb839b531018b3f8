"""
Tests for the provider cascade in FlowchartGenerationService.
"""

import pytest

from flowbot.services.flowchart_generation import FlowchartGenerationService, sanitize_flowchart
from flowbot.shared import get_metrics


class StubProvider:
    """Provider double that records calls and returns a fixed result."""

    def __init__(self, name, result=None):
        self.name = name
        self.result = result
        self.calls = []

    def __call__(self, prompt, diagram_type):
        self.calls.append((prompt, diagram_type))
        return self.result


@pytest.fixture
def graph(raw_flowchart):
    return sanitize_flowchart(raw_flowchart)


def test_no_credentials_falls_back_to_local(offline_settings, fake_post):
    service = FlowchartGenerationService(settings=offline_settings)

    result = service.generate("launch product", "process")

    assert result.provenance == "local"
    assert result.used_ai is False
    assert [n.id for n in result.graph.nodes] == ["start", "process", "end"]
    assert fake_post.calls == []


def test_first_success_wins(offline_settings, graph):
    first = StubProvider("nvidia-nim", graph)
    second = StubProvider("kimi-via-nim", graph)
    service = FlowchartGenerationService(settings=offline_settings, providers=[first, second])

    result = service.generate("order flow", "process")

    assert result.provenance == "nvidia-nim"
    assert result.used_ai is True
    assert first.calls == [("order flow", "process")]
    assert second.calls == []


def test_fallthrough_preserves_order(offline_settings, graph):
    providers = [
        StubProvider("nvidia-nim"),
        StubProvider("kimi-via-nim"),
        StubProvider("kimi", graph),
    ]
    service = FlowchartGenerationService(settings=offline_settings, providers=providers)

    result = service.generate("order flow", "roadmap")

    assert result.provenance == "kimi"
    assert all(p.calls == [("order flow", "roadmap")] for p in providers)


def test_all_providers_failing_uses_local(offline_settings):
    providers = [StubProvider("nvidia-nim"), StubProvider("kimi")]
    service = FlowchartGenerationService(settings=offline_settings, providers=providers)

    result = service.generate("a -> b -> c", "process")

    assert result.provenance == "local"
    assert [n.label for n in result.graph.nodes] == ["a", "b", "c"]


def test_real_chain_falls_through_http_failures(keyed_settings, fake_post, completion):
    fake_post.responses = [
        completion("server error", status_code=500),
        completion("no json at all"),
        completion('{"nodes": [], "edges": []}'),
    ]
    service = FlowchartGenerationService(settings=keyed_settings)

    result = service.generate("launch product", "process")

    assert result.provenance == "local"
    assert len(fake_post.calls) == 3
    assert [c["json"]["model"] for c in fake_post.calls] == [
        "z-ai/glm4.7", "moonshotai/kimi-k2-instruct", "moonshot-v1-8k",
    ]


def test_attempts_are_recorded(offline_settings, graph):
    service = FlowchartGenerationService(
        settings=offline_settings,
        providers=[StubProvider("nvidia-nim"), StubProvider("kimi-via-nim", graph)],
    )

    service.generate("x", "process")

    metrics = get_metrics()
    if not metrics.enabled:
        pytest.skip("metrics disabled in this environment")
    assert metrics.get_counter("provider_fallthrough_total.nvidia-nim") == 1
    assert metrics.get_counter("provider_success_total.kimi-via-nim") == 1
    assert metrics.get_timer_stats("provider_duration.nvidia-nim")["count"] == 1


def test_summary(offline_settings):
    result = FlowchartGenerationService(settings=offline_settings, providers=[]).generate("a, b, c", "process")

    summary = result.get_summary()
    assert summary["provenance"] == "local"
    assert summary["node_count"] == 3
    assert summary["edge_count"] == 2


def test_huge_number_payload_still_yields_a_result(keyed_settings, fake_post, completion):
    huge = '{"nodes":[{"id":"a","data":{"label":"x"},"position":{"x":' + "9" * 5000 + '}}],"edges":[]}'
    fake_post.responses = [completion(huge), completion(huge), completion(huge)]
    service = FlowchartGenerationService(settings=keyed_settings)

    result = service.generate("a, b, c", "process")

    assert result.provenance in ("nvidia-nim", "local")
    assert result.graph.nodes
