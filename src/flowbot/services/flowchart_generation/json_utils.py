"""
JSON extraction utilities for handling LLM responses.

Providers are asked for bare JSON but routinely wrap it in markdown fences
or surround it with prose. ``LLMJsonParser`` tries progressively looser
strategies and returns the first decoded object that carries both a
``nodes`` and an ``edges`` field. Structural success does not mean the
object is a valid flowchart; that is the sanitizer's job.
"""

import json
import re
from typing import Dict, Any, Iterator, Optional

from ...shared import get_logger

logger = get_logger(__name__)

FENCE_PATTERN = re.compile(r'```(?:json)?\s*\n?([\s\S]*?)```')


class LLMJsonParser:
    """Parser for pulling a flowchart object out of free-form LLM text."""

    @staticmethod
    def extract_flowchart(response_text: Any) -> Optional[Dict[str, Any]]:
        """
        Extract a candidate flowchart object with multiple fallback strategies.

        Args:
            response_text: Raw completion text from a provider

        Returns:
            Decoded dict containing ``nodes`` and ``edges``, or None when
            no strategy produced one
        """
        if not response_text or not isinstance(response_text, str):
            return None

        # Step 1: the whole response is the JSON object
        parsed = LLMJsonParser._try_parse(response_text.strip())
        if parsed is not None:
            return parsed

        # Step 2: a ```json ... ``` markdown fence
        fence_match = FENCE_PATTERN.search(response_text)
        if fence_match:
            parsed = LLMJsonParser._try_parse(fence_match.group(1).strip())
            if parsed is not None:
                logger.debug("Extracted flowchart from fenced block")
                return parsed

        # Step 3: balanced {...} regions mentioning "nodes"
        for candidate in LLMJsonParser._balanced_objects(response_text):
            if '"nodes"' not in candidate:
                continue
            parsed = LLMJsonParser._try_parse(candidate)
            if parsed is not None:
                logger.debug("Extracted flowchart from embedded object")
                return parsed

        return None

    @staticmethod
    def _try_parse(json_str: str) -> Optional[Dict[str, Any]]:
        """Decode a string and keep it only if it has the flowchart fields."""
        try:
            parsed = json.loads(json_str)
        except (ValueError, RecursionError):
            return None

        if not isinstance(parsed, dict):
            return None
        if parsed.get('nodes') is None or parsed.get('edges') is None:
            return None
        return parsed

    @staticmethod
    def _balanced_objects(text: str) -> Iterator[str]:
        """
        Yield every top-level ``{...}`` region in order.

        Depth is tracked character by character; braces inside JSON string
        literals do not count, and a stray ``}`` at depth zero is ignored.
        """
        depth = 0
        start = -1
        in_string = False
        escape_next = False

        for i, char in enumerate(text):
            if in_string:
                if escape_next:
                    escape_next = False
                elif char == '\\':
                    escape_next = True
                elif char == '"':
                    in_string = False
                continue

            if char == '"':
                # Quotes outside any object are prose
                if depth > 0:
                    in_string = True
            elif char == '{':
                if depth == 0:
                    start = i
                depth += 1
            elif char == '}' and depth > 0:
                depth -= 1
                if depth == 0:
                    yield text[start:i + 1]
