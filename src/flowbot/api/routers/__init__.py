"""
API routers for FlowBot.
"""

from . import flowcharts, health

__all__ = ["flowcharts", "health"]
