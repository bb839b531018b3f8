"""
Flowchart graph models for FlowBot.

The field layout mirrors what the React Flow canvas consumes:

    node = {"id", "type", "position": {"x", "y"}, "data": {"label"}}
    edge = {"id", "source", "target", "label"?, "animated"}
"""

from enum import Enum
from typing import Dict, Any, List, Optional, Set
from pydantic import Field

from .base import BaseModel


LABEL_MAX_LENGTH = 40
DEFAULT_X = 250.0
DEFAULT_Y = 0.0


class NodeKind(str, Enum):
    """Shape of a flowchart node."""

    PROCESS = "process"           # rectangle, an action step
    DECISION = "decision"         # diamond, a yes/no branch
    START_END = "startEnd"        # oval
    INPUT_OUTPUT = "inputOutput"  # parallelogram, data in/out

    @classmethod
    def values(cls) -> Set[str]:
        return {kind.value for kind in cls}


class Position(BaseModel):
    """Canvas coordinates of a node."""

    x: float = Field(default=DEFAULT_X, description="Horizontal offset")
    y: float = Field(default=DEFAULT_Y, description="Vertical offset")


class NodeData(BaseModel):
    """Payload rendered inside a node."""

    label: str = Field(..., min_length=1, max_length=LABEL_MAX_LENGTH, description="Display text")


class GraphNode(BaseModel):
    """A single flowchart node."""

    id: str = Field(..., min_length=1, description="Node identifier")
    type: NodeKind = Field(default=NodeKind.PROCESS, description="Node kind")
    position: Position = Field(default_factory=Position, description="Canvas position")
    data: NodeData = Field(..., description="Node payload")

    @property
    def label(self) -> str:
        return self.data.label

    @classmethod
    def build(cls, node_id: str, kind: NodeKind, x: float, y: float, label: str) -> "GraphNode":
        """Shorthand constructor used by the local generator."""
        return cls(id=node_id, type=kind, position=Position(x=x, y=y), data=NodeData(label=label))


class GraphEdge(BaseModel):
    """A directed, always-animated connection between two nodes."""

    id: str = Field(..., description="Edge identifier")
    source: str = Field(..., description="Source node id")
    target: str = Field(..., description="Target node id")
    label: Optional[str] = Field(default=None, description="Optional edge text")
    animated: bool = Field(default=True, description="Always true")


class FlowchartGraph(BaseModel):
    """An ordered set of nodes and the edges between them."""

    nodes: List[GraphNode] = Field(default_factory=list, description="Nodes in output order")
    edges: List[GraphEdge] = Field(default_factory=list, description="Edges in output order")

    @property
    def node_ids(self) -> Set[str]:
        return {node.id for node in self.nodes}

    def get_node_by_id(self, node_id: str) -> Optional[GraphNode]:
        """Get the first node with the given id."""
        return next((n for n in self.nodes if n.id == node_id), None)

    def get_outgoing_edges(self, node_id: str) -> List[GraphEdge]:
        """Get all edges leaving a node."""
        return [e for e in self.edges if e.source == node_id]

    def to_wire(self) -> Dict[str, Any]:
        """Serialize to the JSON shape used by the canvas (no null labels)."""
        return self.model_dump(mode="json", exclude_none=True)
