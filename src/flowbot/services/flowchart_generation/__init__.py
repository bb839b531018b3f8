"""
Flowchart Generation Service for FlowBot.

Turns a natural-language prompt into a validated flowchart through an
ordered chain of text-generation providers, with a local rule-based
generator as the last resort.
"""

from .service import FlowchartGenerationService
from .models import DiagramType, Provenance, GenerationRequest, GenerationResult
from .providers import ChatCompletionProvider, build_provider_chain
from .json_utils import LLMJsonParser
from .sanitizer import sanitize_flowchart
from .local_generator import LocalFlowchartGenerator

__all__ = [
    "FlowchartGenerationService",
    "DiagramType",
    "Provenance",
    "GenerationRequest",
    "GenerationResult",
    "ChatCompletionProvider",
    "build_provider_chain",
    "LLMJsonParser",
    "sanitize_flowchart",
    "LocalFlowchartGenerator",
]
