"""
Shared data models for FlowBot.
"""

from .graph import (
    NodeKind, Position, NodeData, GraphNode, GraphEdge, FlowchartGraph,
    LABEL_MAX_LENGTH,
)
from .base import BaseModel

__all__ = [
    # Graph models
    "NodeKind",
    "Position",
    "NodeData",
    "GraphNode",
    "GraphEdge",
    "FlowchartGraph",
    "LABEL_MAX_LENGTH",
    # Base models
    "BaseModel",
]
