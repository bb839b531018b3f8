"""
Shared infrastructure components for FlowBot.

Provides:
- Chat completion transport for OpenAI-compatible providers
- Logging and metrics collection
"""

from .ai.chat_client import ChatCompletionClient
from .monitoring.logger import get_logger, setup_logging
from .monitoring.metrics import MetricsCollector, get_metrics

__all__ = [
    # AI Services
    "ChatCompletionClient",

    # Monitoring
    "get_logger",
    "setup_logging",
    "MetricsCollector",
    "get_metrics",
]
