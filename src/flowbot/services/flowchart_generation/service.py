"""
Flowchart Generation Service implementation.

Runs the provider cascade for one request: every adapter is tried in order,
one at a time, and the first sanitized graph wins. When all of them come up
empty the local generator produces the graph, so ``generate`` cannot fail.
"""

import time
from typing import Callable, List, Optional

from ...shared import FlowchartGraph, Settings, get_logger, get_metrics, get_settings
from .local_generator import LocalFlowchartGenerator
from .models import GenerationResult, Provenance
from .providers import build_provider_chain

ProviderStep = Callable[[str, str], Optional[FlowchartGraph]]


class FlowchartGenerationService:
    """
    Service for turning prompts into flowcharts.

    Providers are plain callables with a ``name`` attribute holding their
    provenance tag, so tests can swap in stubs.
    """

    def __init__(self,
                 settings: Optional[Settings] = None,
                 providers: Optional[List[ProviderStep]] = None,
                 local_generator: Optional[LocalFlowchartGenerator] = None):
        """Initialize the service."""
        self.settings = settings or get_settings()
        self.providers = providers if providers is not None else build_provider_chain(self.settings)
        self.local_generator = local_generator or LocalFlowchartGenerator()
        self.logger = get_logger(__name__)
        self.metrics = get_metrics()

    def generate(self, prompt: str, diagram_type: str) -> GenerationResult:
        """
        Generate a flowchart, falling through providers to the local generator.

        Args:
            prompt: Natural-language description
            diagram_type: Requested diagram category

        Returns:
            The graph and the provenance tag of its producer
        """
        start_time = time.time()

        for provider in self.providers:
            name = provider.name
            self.logger.info(f"=== Trying {name} ===")

            attempt_start = time.time()
            graph = provider(prompt, diagram_type)
            self.metrics.record_provider_attempt(name, graph is not None, time.time() - attempt_start)

            if graph is not None:
                return GenerationResult(
                    graph=graph,
                    provenance=name,
                    duration_seconds=time.time() - start_time,
                )

        self.logger.info("=== Using local generation (fallback) ===")
        attempt_start = time.time()
        graph = self.local_generator.generate(prompt, diagram_type)
        self.metrics.record_provider_attempt(Provenance.LOCAL.value, True, time.time() - attempt_start)

        return GenerationResult(
            graph=graph,
            provenance=Provenance.LOCAL,
            duration_seconds=time.time() - start_time,
        )
