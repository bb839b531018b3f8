"""
Tests for the rule-based local flowchart generator.
"""

import pytest

from flowbot.services.flowchart_generation import LocalFlowchartGenerator, sanitize_flowchart
from flowbot.services.flowchart_generation.local_generator import is_decision, split_segments


@pytest.fixture
def generator():
    return LocalFlowchartGenerator()


def test_short_prompt_gets_skeleton(generator):
    graph = generator.generate("launch product", "process")

    assert [n.id for n in graph.nodes] == ["start", "process", "end"]
    assert [n.label for n in graph.nodes] == ["Start", "launch product", "End"]
    assert [n.type for n in graph.nodes] == ["startEnd", "process", "startEnd"]
    assert [(e.id, e.source, e.target) for e in graph.edges] == [
        ("e1", "start", "process"),
        ("e2", "process", "end"),
    ]


def test_skeleton_label_is_truncated(generator):
    graph = generator.generate("a very long description of a single activity", "process")

    assert graph.nodes[1].label == "a very long description o"


def test_two_segments_still_get_skeleton(generator):
    graph = generator.generate("plan -> ship", "roadmap")

    assert [n.id for n in graph.nodes] == ["start", "process", "end"]


def test_linear_chain(generator):
    graph = generator.generate("a -> b -> c -> d", "process")

    assert [n.id for n in graph.nodes] == ["start", "step-1", "step-2", "step-3"]
    assert [n.label for n in graph.nodes] == ["a", "b", "c", "d"]
    assert [n.type for n in graph.nodes] == ["startEnd", "process", "process", "startEnd"]
    assert [n.position.y for n in graph.nodes] == [0, 120, 240, 360]
    assert all(n.position.x == 250 for n in graph.nodes)
    assert [(e.source, e.target) for e in graph.edges] == [
        ("start", "step-1"), ("step-1", "step-2"), ("step-2", "step-3"),
    ]


def test_unicode_arrow_and_commas_split(generator):
    graph = generator.generate("wake up → eat, work", "process")

    assert [n.label for n in graph.nodes] == ["wake up", "eat", "work"]


def test_decision_before_last_segment_merges_into_end(generator):
    graph = generator.generate("visit site, verify email, create profile", "process")
    by_id = {n.id: n for n in graph.nodes}

    assert [n.id for n in graph.nodes] == ["start", "step-1", "step-1-yes", "step-1-no", "merge-1"]
    assert by_id["start"].label == "visit site"
    assert by_id["step-1"].type == "decision"
    assert by_id["step-1-yes"].label == "Continue"
    assert by_id["step-1-yes"].position.x == 50
    assert by_id["step-1-no"].label == "Handle"
    assert by_id["step-1-no"].position.x == 450
    assert by_id["merge-1"].type == "startEnd"
    assert by_id["merge-1"].label == "End"
    assert by_id["merge-1"].position.y == 360

    branches = {e.label: e.target for e in graph.edges if e.source == "step-1"}
    assert branches == {"Yes": "step-1-yes", "No": "step-1-no"}
    assert {e.source for e in graph.edges if e.target == "merge-1"} == {"step-1-yes", "step-1-no"}


def test_order_example(generator):
    graph = generator.generate("receive order, check stock, ship order", "process")

    assert graph.nodes[0].type == "startEnd"
    assert graph.nodes[0].label == "receive order"
    assert graph.nodes[1].type == "decision"
    assert graph.nodes[-1].type == "startEnd"


def test_decision_in_middle_merges_into_next_segment(generator):
    graph = generator.generate("start, validate input, transform, store, notify", "process")
    ids = [n.id for n in graph.nodes]

    merge = graph.get_node_by_id("merge-1")
    assert merge.type == "process"
    assert merge.label == "transform"
    # The merge node replaces the segment it was labelled with
    assert "step-2" not in ids
    assert ids[-2:] == ["step-3", "step-4"]
    assert graph.get_node_by_id("step-4").type == "startEnd"
    assert [e.target for e in graph.get_outgoing_edges("merge-1")] == ["step-3"]


def test_keyword_matching_is_case_sensitive(generator):
    graph = generator.generate("begin, Check inventory, check stock, finish", "process")

    assert graph.get_node_by_id("step-1").type == "process"
    assert graph.get_node_by_id("step-2").type == "decision"


def test_decision_as_last_segment_is_plain_end(generator):
    graph = generator.generate("a, b, is it done?", "process")

    last = graph.nodes[-1]
    assert last.id == "step-2"
    assert last.type == "startEnd"


def test_parentheses_are_stripped(generator):
    graph = generator.generate("start (now), do (it), (), end", "process")

    assert [n.label for n in graph.nodes] == ["start now", "do it", "Step", "end"]


def test_segment_labels_are_truncated(generator):
    graph = generator.generate("x" * 60 + ", b, c", "process")

    assert graph.nodes[0].label == "x" * 25


def test_segment_count_is_capped(generator):
    prompt = ", ".join(f"s{i}" for i in range(12))
    graph = generator.generate(prompt, "process")

    assert [n.id for n in graph.nodes][-1] == "step-7"
    assert len(graph.nodes) == 8


def test_output_is_deterministic(generator):
    prompt = "receive order, check stock, pack, ship"

    assert generator(prompt, "process").to_wire() == generator(prompt, "mind-map").to_wire()


@pytest.mark.parametrize("prompt", [
    "",
    "launch product",
    "a, b, c",
    "visit site, verify email, create profile",
    "a, check b, check c, check d, e, f, g, h, i, j",
    ",,, -> ->",
])
def test_graph_is_always_valid(generator, prompt):
    graph = generator.generate(prompt, "process")
    ids = [n.id for n in graph.nodes]

    assert len(graph.nodes) >= 3
    assert len(ids) == len(set(ids))
    assert all(e.source in ids and e.target in ids for e in graph.edges)
    assert all(e.animated for e in graph.edges)
    assert all(1 <= len(n.label) <= 40 for n in graph.nodes)
    # Local output already satisfies every sanitizer rule
    assert sanitize_flowchart(graph.to_wire()).to_wire() == graph.to_wire()


def test_split_segments():
    assert split_segments(" a ->b→ c,,d ") == ["a", "b", "c", "d"]
    assert split_segments("   ") == []


@pytest.mark.parametrize("segment,expected", [
    ("check stock", True),
    ("verify email", True),
    ("Verify email", False),
    ("validate form", True),
    ("VALIDATE form", False),
    ("if paid", True),
    ("ready?", True),
    ("ship order", False),
    ("gift", False),
])
def test_is_decision(segment, expected):
    assert is_decision(segment) is expected
