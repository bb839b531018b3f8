"""
FlowBot API.

Provides REST access to flowchart generation with error handling,
monitoring and documentation.
"""

from .app import create_app
from .models import APIResponse, ErrorResponse, GenerateResponse

__all__ = [
    "create_app",
    "APIResponse",
    "ErrorResponse",
    "GenerateResponse",
]
