"""
FlowBot - natural-language to flowchart generation with provider fallback.
"""

__version__ = "1.0.0"
__author__ = "FlowBot Team"

# Re-export main components for easy access
from .shared.config.settings import get_settings
from .shared.models.graph import FlowchartGraph, GraphNode, GraphEdge
from .shared.exceptions import FlowBotError, ConfigurationError
from .services.flowchart_generation import FlowchartGenerationService

__all__ = [
    "get_settings",
    "FlowchartGraph",
    "GraphNode",
    "GraphEdge",
    "FlowBotError",
    "ConfigurationError",
    "FlowchartGenerationService",
]
