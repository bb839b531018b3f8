"""
Validation and sanitization of untrusted flowchart data.

Whatever a provider returns is treated as an untyped value and checked field
by field. The result is either a ``FlowchartGraph`` that satisfies every
graph invariant or ``None``.
"""

import math
from typing import Any, Dict, List, Optional, Set

from ...shared import (
    FlowchartGraph, GraphNode, GraphEdge, NodeKind, Position, NodeData,
    LABEL_MAX_LENGTH,
)
from ...shared.models.graph import DEFAULT_X, DEFAULT_Y

VALID_NODE_TYPES = NodeKind.values()


def sanitize_flowchart(candidate: Any) -> Optional[FlowchartGraph]:
    """
    Validate and normalize a decoded object into a flowchart graph.

    Args:
        candidate: Arbitrary decoded JSON value

    Returns:
        The sanitized graph, or None if it has no usable nodes
    """
    if not isinstance(candidate, dict):
        return None

    raw_nodes = candidate.get('nodes')
    raw_edges = candidate.get('edges')
    if not isinstance(raw_nodes, list) or not isinstance(raw_edges, list):
        return None
    if not raw_nodes:
        return None

    nodes = _sanitize_nodes(raw_nodes)
    if not nodes:
        return None

    # Edges are checked against the ids that survived, not the raw input
    node_ids = {node.id for node in nodes}
    edges = _sanitize_edges(raw_edges, node_ids)

    return FlowchartGraph(nodes=nodes, edges=edges)


def _sanitize_nodes(raw_nodes: List[Any]) -> List[GraphNode]:
    nodes = []
    for raw in raw_nodes:
        if not isinstance(raw, dict) or not raw.get('id'):
            continue

        data = raw.get('data')
        label = data.get('label') if isinstance(data, dict) else None
        if not label:
            continue

        kind = raw.get('type')
        position = raw.get('position')
        if not isinstance(position, dict):
            position = {}

        nodes.append(GraphNode(
            id=str(raw['id']),
            type=kind if isinstance(kind, str) and kind in VALID_NODE_TYPES else NodeKind.PROCESS,
            position=Position(
                x=_coordinate(position.get('x'), DEFAULT_X),
                y=_coordinate(position.get('y'), DEFAULT_Y),
            ),
            data=NodeData(label=str(label)[:LABEL_MAX_LENGTH]),
        ))
    return nodes


def _sanitize_edges(raw_edges: List[Any], node_ids: Set[str]) -> List[GraphEdge]:
    edges = []
    for raw in raw_edges:
        if not isinstance(raw, dict):
            continue

        source = raw.get('source')
        target = raw.get('target')
        if not source or not target:
            continue

        source, target = str(source), str(target)
        if source not in node_ids or target not in node_ids:
            continue

        edge: Dict[str, Any] = {
            'id': str(raw['id']) if raw.get('id') else f"e-{source}-{target}",
            'source': source,
            'target': target,
            'animated': True,
        }
        if raw.get('label'):
            edge['label'] = str(raw['label'])

        edges.append(GraphEdge(**edge))
    return edges


def _coordinate(value: Any, default: float) -> float:
    """Keep finite numbers; anything else (bools, strings, NaN) becomes the default."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return default
    try:
        number = float(value)
    except OverflowError:
        return default
    return number if math.isfinite(number) else default
