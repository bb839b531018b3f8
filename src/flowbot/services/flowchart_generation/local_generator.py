"""
Rule-based flowchart generation used when no provider succeeds.

The prompt is split into steps on arrows or commas and laid out top to
bottom. Steps that read like checks become a decision with Yes/No lanes
that merge again below. No external resource is consulted, so this always
returns a valid graph.
"""

import re
from typing import List

from ...shared import FlowchartGraph, GraphNode, GraphEdge, NodeKind, get_logger

SEGMENT_SPLIT = re.compile(r'→|->|,')
DECISION_KEYWORDS = ('check', 'verify', 'validate', 'if ', '?')

MAX_SEGMENTS = 8
SEGMENT_LABEL_LENGTH = 25

MAIN_X = 250
LEFT_X = 50
RIGHT_X = 450
ROW_HEIGHT = 120


class LocalFlowchartGenerator:
    """
    Deterministic prompt-to-flowchart generator.

    The same prompt always yields the same graph; the diagram type is
    accepted for interface parity with the providers but does not change
    the layout.
    """

    def __init__(self):
        self.logger = get_logger(__name__)

    def __call__(self, prompt: str, diagram_type: str) -> FlowchartGraph:
        return self.generate(prompt, diagram_type)

    def generate(self, prompt: str, diagram_type: str) -> FlowchartGraph:
        """
        Build a flowchart directly from the prompt text.

        Args:
            prompt: Free-form description, ideally "a -> b -> c" or "a, b, c"
            diagram_type: Requested diagram category (unused)

        Returns:
            A graph with at least three nodes
        """
        parts = split_segments(prompt)

        if len(parts) < 3:
            graph = self._skeleton(prompt)
        else:
            graph = self._from_segments(parts)

        self.logger.info(
            f"Local generation built {len(graph.nodes)} nodes, {len(graph.edges)} edges "
            f"from {len(parts)} segments"
        )
        return graph

    def _skeleton(self, prompt: str) -> FlowchartGraph:
        """Start -> prompt -> End, for prompts that do not split into steps."""
        nodes = [
            GraphNode.build("start", NodeKind.START_END, MAIN_X, 0, "Start"),
            GraphNode.build("process", NodeKind.PROCESS, MAIN_X, ROW_HEIGHT,
                            prompt[:SEGMENT_LABEL_LENGTH] or "Process"),
            GraphNode.build("end", NodeKind.START_END, MAIN_X, 2 * ROW_HEIGHT, "End"),
        ]
        edges = [
            GraphEdge(id="e1", source="start", target="process"),
            GraphEdge(id="e2", source="process", target="end"),
        ]
        return FlowchartGraph(nodes=nodes, edges=edges)

    def _from_segments(self, parts: List[str]) -> FlowchartGraph:
        nodes = [GraphNode.build("start", NodeKind.START_END, MAIN_X, 0, _segment_label(parts[0]))]
        edges = []
        last = len(parts) - 1

        current_y = ROW_HEIGHT
        last_node_id = "start"

        i = 1
        while i < min(len(parts), MAX_SEGMENTS):
            part = parts[i]
            node_id = f"step-{i}"

            if is_decision(part) and i < last:
                yes_id = f"{node_id}-yes"
                no_id = f"{node_id}-no"
                merge_id = f"merge-{i}"
                merge_is_end = i == last - 1

                nodes.append(GraphNode.build(node_id, NodeKind.DECISION, MAIN_X, current_y, _segment_label(part)))
                edges.append(_link(last_node_id, node_id))

                nodes.append(GraphNode.build(yes_id, NodeKind.PROCESS, LEFT_X, current_y + ROW_HEIGHT, "Continue"))
                edges.append(_link(node_id, yes_id, label="Yes"))

                nodes.append(GraphNode.build(no_id, NodeKind.PROCESS, RIGHT_X, current_y + ROW_HEIGHT, "Handle"))
                edges.append(_link(node_id, no_id, label="No"))

                current_y += 2 * ROW_HEIGHT

                # The merge node stands in for the next segment
                if merge_is_end:
                    merge = GraphNode.build(merge_id, NodeKind.START_END, MAIN_X, current_y, "End")
                else:
                    merge = GraphNode.build(merge_id, NodeKind.PROCESS, MAIN_X, current_y,
                                            parts[i + 1][:SEGMENT_LABEL_LENGTH] or "Next")
                nodes.append(merge)
                edges.append(_link(yes_id, merge_id))
                edges.append(_link(no_id, merge_id))

                last_node_id = merge_id
                i += 2
            else:
                kind = NodeKind.START_END if i == last else NodeKind.PROCESS
                nodes.append(GraphNode.build(node_id, kind, MAIN_X, current_y, _segment_label(part)))
                edges.append(_link(last_node_id, node_id))

                last_node_id = node_id
                current_y += ROW_HEIGHT
                i += 1

        return FlowchartGraph(nodes=nodes, edges=edges)


def split_segments(prompt: str) -> List[str]:
    """Split a prompt on arrows and commas into trimmed, non-empty steps."""
    return [part.strip() for part in SEGMENT_SPLIT.split(prompt) if part.strip()]


def is_decision(segment: str) -> bool:
    """Keywords match case-sensitively, so "Check stock" stays a process step."""
    return any(keyword in segment for keyword in DECISION_KEYWORDS)


def _segment_label(segment: str) -> str:
    label = segment.replace('(', '').replace(')', '')[:SEGMENT_LABEL_LENGTH]
    return label or "Step"


def _link(source: str, target: str, label: str = None) -> GraphEdge:
    return GraphEdge(id=f"e-{source}-{target}", source=source, target=target, label=label)
