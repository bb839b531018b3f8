"""
FlowBot services.
"""

from .flowchart_generation import FlowchartGenerationService

__all__ = ["FlowchartGenerationService"]
