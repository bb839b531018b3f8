"""
HTTP client for OpenAI-compatible chat completion endpoints.

NVIDIA NIM and Moonshot both expose ``POST <base_url>/chat/completions``
with bearer authentication; this client wraps one such call with a timeout
and turns every transport or envelope problem into an ``AIError``.
"""

import json
import time
from concurrent.futures import ThreadPoolExecutor, TimeoutError as FutureTimeoutError
from typing import Dict, Any, Optional, List, Tuple

import requests

from ...exceptions import AIError, ConfigurationError
from ..monitoring.logger import get_logger

READ_CHUNK_SIZE = 1024


class ChatCompletionClient:
    """
    Minimal client for a single OpenAI-compatible backend.

    One instance per backend; each ``complete`` call issues exactly one
    request and never retries.
    """

    def __init__(self, base_url: str, api_key: Optional[str], timeout_seconds: float = 30.0):
        """
        Initialize the client.

        Args:
            base_url: Backend base URL, e.g. ``https://integrate.api.nvidia.com/v1``
            api_key: Bearer credential for the backend
            timeout_seconds: Deadline for one call, from sending the request to the last byte
        """
        if not api_key:
            raise ConfigurationError(f"API key required for {base_url}")

        self.base_url = base_url.rstrip('/')
        self.api_key = api_key
        self.timeout_seconds = timeout_seconds
        self.logger = get_logger(__name__)

    @property
    def endpoint(self) -> str:
        return f"{self.base_url}/chat/completions"

    def complete(self,
                 model: str,
                 messages: List[Dict[str, str]],
                 temperature: float = 0.3,
                 max_tokens: Optional[int] = None,
                 response_format: Optional[Dict[str, Any]] = None) -> str:
        """
        Request a chat completion and return the message content.

        Args:
            model: Backend model name
            messages: Chat messages (role/content dictionaries)
            temperature: Sampling temperature
            max_tokens: Optional completion token cap
            response_format: Optional ``response_format`` body field

        Returns:
            The completion text of the first choice

        Raises:
            AIError: On timeout, network failure, non-2xx status,
                undecodable body or empty content
        """
        body: Dict[str, Any] = {
            "model": model,
            "messages": messages,
            "temperature": temperature,
        }
        if max_tokens is not None:
            body["max_tokens"] = max_tokens
        if response_format is not None:
            body["response_format"] = response_format

        headers = {
            "Content-Type": "application/json",
            "Authorization": f"Bearer {self.api_key}",
        }

        self.logger.debug(f"POST {self.endpoint} (model={model})")

        # The worker may outlive a timed-out call until its next read returns
        executor = ThreadPoolExecutor(max_workers=1)
        future = executor.submit(self._post, headers, body, time.monotonic())
        try:
            status_code, ok, raw = future.result(timeout=self.timeout_seconds)
        except FutureTimeoutError as e:
            raise AIError(self._timeout_message()) from e
        finally:
            executor.shutdown(wait=False)

        if not ok:
            raise AIError(f"HTTP {status_code}: {raw[:500].decode('utf-8', 'replace')}")

        try:
            data = json.loads(raw)
        except ValueError as e:
            raise AIError(f"Response body is not JSON: {e}") from e

        content = self._extract_content(data)
        if not content:
            raise AIError("Empty response content")

        return content

    def _post(self, headers: Dict[str, str], body: Dict[str, Any], started: float) -> Tuple[int, bool, bytes]:
        """Send the request and read the streamed body; runs on the worker thread."""
        try:
            response = requests.post(
                self.endpoint,
                headers=headers,
                json=body,
                timeout=self.timeout_seconds,
                stream=True,
            )
        except requests.Timeout as e:
            raise AIError(self._timeout_message()) from e
        except requests.RequestException as e:
            raise AIError(f"Request failed: {e}") from e

        try:
            return response.status_code, response.ok, self._read_body(response, started)
        finally:
            response.close()

    def _read_body(self, response: requests.Response, started: float) -> bytes:
        """
        Read the streamed body, giving up once the whole call exceeds the timeout.

        The requests timeout bounds each individual read; this bounds the
        total time from sending the request to the last byte.
        """
        chunks = []
        try:
            for chunk in response.iter_content(chunk_size=READ_CHUNK_SIZE):
                if time.monotonic() - started > self.timeout_seconds:
                    raise AIError(self._timeout_message())
                chunks.append(chunk)
        except requests.RequestException as e:
            raise AIError(f"Request failed while reading response: {e}") from e
        return b"".join(chunks)

    def _timeout_message(self) -> str:
        return f"Request timed out ({self.timeout_seconds:g}s)"

    @staticmethod
    def _extract_content(data: Any) -> Optional[str]:
        """Pull ``choices[0].message.content`` out of the response envelope."""
        if not isinstance(data, dict):
            return None

        choices = data.get("choices")
        if not isinstance(choices, list) or not choices:
            return None

        first = choices[0]
        message = first.get("message") if isinstance(first, dict) else None
        if not isinstance(message, dict):
            return None

        content = message.get("content")
        return content if isinstance(content, str) else None
