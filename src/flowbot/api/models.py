"""
API models for request/response handling.
"""

from datetime import datetime, timezone
from typing import Any, Optional, Dict, List
from pydantic import Field

from ..shared.models.base import BaseModel


def utc_timestamp() -> str:
    """Current UTC time as ISO 8601 with a trailing Z."""
    return datetime.now(timezone.utc).isoformat().replace("+00:00", "Z")


class APIResponse(BaseModel):
    """Standard API response wrapper."""

    success: bool = Field(..., description="Whether the request succeeded")
    data: Any = Field(default=None, description="Response data")
    message: Optional[str] = Field(default=None, description="Response message")
    timestamp: Optional[str] = Field(default=None, description="Response timestamp")


class ErrorResponse(BaseModel):
    """Standard error response."""

    success: bool = Field(default=False, description="Always false for errors")
    error: str = Field(..., description="Error type")
    message: str = Field(..., description="Error message")
    details: Optional[Dict[str, Any]] = Field(default=None, description="Additional error details")
    timestamp: Optional[str] = Field(default=None, description="Error timestamp")

    model_config = {
        "json_schema_extra": {
            "example": {
                "success": False,
                "error": "ValidationError",
                "message": "Prompt is required",
                "timestamp": "2024-01-01T12:00:00Z"
            }
        }
    }


class GenerateResponse(BaseModel):
    """Flowchart returned to the canvas."""

    success: bool = Field(default=True, description="Always true; the chain cannot fail")
    nodes: List[Dict[str, Any]] = Field(..., description="Flowchart nodes")
    edges: List[Dict[str, Any]] = Field(..., description="Flowchart edges")
    prompt: str = Field(..., description="Prompt as received")
    diagram_type: str = Field(..., alias="diagramType", description="Requested diagram category")
    used_ai: str = Field(..., alias="usedAI", description="Provenance tag of the producer")

    model_config = {
        "json_schema_extra": {
            "example": {
                "success": True,
                "nodes": [
                    {"id": "start", "type": "startEnd", "position": {"x": 250, "y": 0},
                     "data": {"label": "Start"}}
                ],
                "edges": [],
                "prompt": "launch product",
                "diagramType": "process",
                "usedAI": "local"
            }
        }
    }


class HealthResponse(BaseModel):
    """Health check response."""

    status: str = Field(..., description="Service status")
    services: Dict[str, str] = Field(default_factory=dict, description="Individual service status")
    timestamp: str = Field(..., description="Check timestamp")
