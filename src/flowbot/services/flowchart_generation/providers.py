"""
Provider adapters for the flowchart generation chain.

Each adapter wraps one OpenAI-compatible backend/model pair. Calling it
runs a single chat completion, extracts the JSON object from the reply and
sanitizes it. Any failure along the way yields None so the orchestrator
can move on to the next adapter.
"""

from typing import Any, Dict, List, Optional

from ...shared import (
    ChatCompletionClient, FlowchartGraph, Settings, AIError, get_logger
)
from .json_utils import LLMJsonParser
from .models import Provenance
from .prompts import build_messages
from .sanitizer import sanitize_flowchart


class ChatCompletionProvider:
    """One step of the provider chain."""

    def __init__(self,
                 name: str,
                 display_name: str,
                 base_url: str,
                 model: str,
                 api_key: Optional[str],
                 timeout_seconds: float = 30.0,
                 temperature: float = 0.3,
                 max_tokens: Optional[int] = None,
                 response_format: Optional[Dict[str, Any]] = None):
        """
        Initialize the adapter.

        Args:
            name: Provenance tag reported when this adapter succeeds
            display_name: Human-readable backend name for logs
            base_url: Backend base URL
            model: Backend model name
            api_key: Credential; None disables the adapter
            timeout_seconds: Timeout for the single request
            temperature: Sampling temperature
            max_tokens: Optional completion token cap
            response_format: Optional ``response_format`` body field
        """
        self.name = name
        self.display_name = display_name
        self.base_url = base_url
        self.model = model
        self.api_key = api_key
        self.timeout_seconds = timeout_seconds
        self.temperature = temperature
        self.max_tokens = max_tokens
        self.response_format = response_format
        self.logger = get_logger(__name__)

    @property
    def label(self) -> str:
        return f"[{self.display_name} / {self.model}]"

    @property
    def enabled(self) -> bool:
        return bool(self.api_key)

    def __call__(self, prompt: str, diagram_type: str) -> Optional[FlowchartGraph]:
        """
        Ask the backend for a flowchart.

        Returns:
            A sanitized graph, or None on any failure
        """
        if not self.enabled:
            self.logger.info(f"{self.label} API key not configured - skipping")
            return None

        self.logger.info(f"{self.label} Sending request...")

        try:
            return self._generate(prompt, diagram_type)
        except AIError as e:
            self.logger.error(f"{self.label} {e}")
            return None
        except Exception as e:
            self.logger.error(f"{self.label} Unexpected error: {e}")
            return None

    def _generate(self, prompt: str, diagram_type: str) -> Optional[FlowchartGraph]:
        client = ChatCompletionClient(self.base_url, self.api_key, self.timeout_seconds)
        content = client.complete(
            model=self.model,
            messages=build_messages(prompt, diagram_type),
            temperature=self.temperature,
            max_tokens=self.max_tokens,
            response_format=self.response_format,
        )

        self.logger.info(f"{self.label} Got response ({len(content)} chars)")

        extracted = LLMJsonParser.extract_flowchart(content)
        if extracted is None:
            self.logger.error(f"{self.label} Failed to extract JSON from response")
            self.logger.error(f"{self.label} Raw content (first 500 chars): {content[:500]!r}")
            return None

        graph = sanitize_flowchart(extracted)
        if graph is None:
            self.logger.error(f"{self.label} Validation failed for extracted data")
            return None

        self.logger.info(f"{self.label} Success - {len(graph.nodes)} nodes, {len(graph.edges)} edges")
        return graph


def build_provider_chain(settings: Settings) -> List[ChatCompletionProvider]:
    """
    Build the ordered provider chain from settings.

    Order: NVIDIA NIM primary model, NVIDIA NIM secondary model, Moonshot direct.
    """
    common = {
        'timeout_seconds': settings.provider_timeout_seconds,
        'temperature': settings.provider_temperature,
    }

    return [
        ChatCompletionProvider(
            name=Provenance.NVIDIA_NIM.value,
            display_name="NVIDIA NIM",
            base_url=settings.nvidia_nim_base_url,
            model=settings.nvidia_nim_primary_model,
            api_key=settings.nvidia_nim_api_key,
            max_tokens=settings.nvidia_nim_max_tokens,
            **common,
        ),
        ChatCompletionProvider(
            name=Provenance.KIMI_VIA_NIM.value,
            display_name="NVIDIA NIM",
            base_url=settings.nvidia_nim_base_url,
            model=settings.nvidia_nim_secondary_model,
            api_key=settings.nvidia_nim_api_key,
            max_tokens=settings.nvidia_nim_max_tokens,
            **common,
        ),
        ChatCompletionProvider(
            name=Provenance.KIMI.value,
            display_name="Kimi",
            base_url=settings.kimi_base_url,
            model=settings.kimi_model,
            api_key=settings.kimi_api_key,
            response_format={"type": "json_object"},
            **common,
        ),
    ]
