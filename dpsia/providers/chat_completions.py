"""Shared plumbing for providers that speak the OpenAI chat completions API.

Perplexity and xAI both expose OpenAI-compatible endpoints, so they reuse the
``openai`` SDK pointed at their own base URL.
"""

import os
from typing import Any, Dict, List, Optional, Sequence, Tuple

import openai
from openai import AsyncOpenAI

from dpsia.core.errors import MissingConfigError, ProviderResponseError
from .base import ResearchProvider


class ChatCompletionsProvider(ResearchProvider):
    """Research provider backed by an OpenAI-compatible chat completions endpoint."""

    base_url: str = ""
    api_key_env: str = ""
    default_model: str = ""

    def __init__(self, api_key: Optional[str] = None, model: Optional[str] = None, base_url: Optional[str] = None):
        """
        Initialize the provider.

        Args:
            api_key: Provider API key (defaults to the provider's env var)
            model: Model name (defaults to the provider's default model)
            base_url: API endpoint override

        Raises:
            MissingConfigError: If no API key is available
        """
        api_key = api_key or os.getenv(self.api_key_env)
        if not api_key:
            raise MissingConfigError(self.api_key_env)

        self.model = model or self.default_model
        # Single attempt per search; timeouts are enforced by search()
        self.client = AsyncOpenAI(
            api_key=api_key,
            base_url=base_url or self.base_url,
            max_retries=0,
        )

    def _build_messages(self, query: str) -> List[Dict[str, str]]:
        return [{"role": "user", "content": query}]

    def _extract_sources(self, response: Any) -> List[str]:
        return []

    async def _complete(self, query: str) -> Tuple[str, Sequence[str]]:
        response = await self.client.chat.completions.create(
            model=self.model,
            messages=self._build_messages(query),
        )
        return extract_message_content(response), self._extract_sources(response)

    def _describe_error(self, error: Exception) -> str:
        if isinstance(error, openai.APIStatusError):
            body = error.response.text if error.response is not None else error.message
            return str(ProviderResponseError(self.name, error.status_code, body))
        return super()._describe_error(error)


def extract_message_content(response: Any) -> str:
    """Text of the first choice, or "" when the response has none."""
    choices = getattr(response, "choices", None) or []
    if not choices:
        return ""
    message = getattr(choices[0], "message", None)
    content = getattr(message, "content", None)
    return content if isinstance(content, str) else ""
