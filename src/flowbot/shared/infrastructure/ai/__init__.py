"""
AI infrastructure for FlowBot.
"""

from .chat_client import ChatCompletionClient

__all__ = [
    "ChatCompletionClient",
]
