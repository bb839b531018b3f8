"""
Common exceptions for FlowBot.
"""


class FlowBotError(Exception):
    """Base exception for all FlowBot errors."""
    pass


class ConfigurationError(FlowBotError):
    """Raised when there are configuration issues."""
    pass


class AIError(FlowBotError):
    """Raised when a text-generation provider call fails."""
    pass


class ValidationError(FlowBotError):
    """Raised when an inbound request is invalid."""
    pass
