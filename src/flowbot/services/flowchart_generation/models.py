"""
Service models for flowchart generation.
"""

from enum import Enum
from typing import Dict, Any
from pydantic import Field, field_validator

from ...shared.models.base import BaseModel
from ...shared.models.graph import FlowchartGraph


class DiagramType(str, Enum):
    """Diagram categories the UI can request."""

    ROADMAP = "roadmap"
    ORG_CHART = "org-chart"
    PROCESS = "process"
    MIND_MAP = "mind-map"


class Provenance(str, Enum):
    """Which producer yielded the returned graph."""

    NVIDIA_NIM = "nvidia-nim"
    KIMI_VIA_NIM = "kimi-via-nim"
    KIMI = "kimi"
    LOCAL = "local"


class GenerationRequest(BaseModel):
    """Request for flowchart generation."""

    prompt: str = Field(..., description="Natural-language description of the flow")
    diagram_type: DiagramType = Field(default=DiagramType.PROCESS, alias="diagramType",
                                      description="Requested diagram category")

    @field_validator('prompt')
    @classmethod
    def validate_prompt(cls, v):
        """Reject empty or whitespace-only prompts."""
        if not v or not v.strip():
            raise ValueError("Prompt is required")
        return v


class GenerationResult(BaseModel):
    """Graph produced for one request, tagged with its producer."""

    graph: FlowchartGraph = Field(..., description="Sanitized flowchart")
    provenance: Provenance = Field(..., description="Producer that yielded the graph")
    duration_seconds: float = Field(default=0.0, description="Wall time spent in the chain")

    @property
    def used_ai(self) -> bool:
        return self.provenance != Provenance.LOCAL

    def get_summary(self) -> Dict[str, Any]:
        """Get a summary of the generation result."""
        return {
            'provenance': self.provenance,
            'node_count': len(self.graph.nodes),
            'edge_count': len(self.graph.edges),
            'duration_seconds': self.duration_seconds,
        }
