"""
Shared components for FlowBot.

Contains common models, utilities, and infrastructure used across services:

- Flowchart graph models
- Centralized configuration management
- Shared exception hierarchy
- Infrastructure services (chat completion transport, logging, metrics)
"""

from .models import *
from .config import *
from .exceptions import *
from .infrastructure import *

__all__ = [
    # From models
    "BaseModel", "NodeKind", "Position", "NodeData",
    "GraphNode", "GraphEdge", "FlowchartGraph", "LABEL_MAX_LENGTH",

    # From config
    "Settings", "get_settings",

    # From exceptions
    "FlowBotError", "ConfigurationError", "AIError", "ValidationError",

    # From infrastructure
    "ChatCompletionClient",
    "get_logger", "setup_logging", "MetricsCollector", "get_metrics",
]
