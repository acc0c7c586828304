"""Google Gemini provider.

Gemini answers the analytical part of the batch: broad, multi-perspective
questions about a vendor's security architecture, compliance posture and
resilience. It does not return citations.
"""

import os
from typing import Any, Optional, Sequence, Tuple

from google import genai
from google.genai import errors, types

from dpsia.core.errors import MissingConfigError, ProviderResponseError
from .base import ResearchProvider

RESEARCH_PREAMBLE = (
    "Research the following topic and provide comprehensive findings. "
    "Include specific details, dates, and verifiable facts:\n\n"
)


class GeminiProvider(ResearchProvider):
    """Google Gemini implementation of the research provider."""

    name = "Gemini"
    default_model = "gemini-2.0-flash"

    def __init__(
        self,
        api_key: Optional[str] = None,
        model: Optional[str] = None,
        temperature: float = 0.7,
        max_output_tokens: int = 4096,
    ):
        """
        Initialize Gemini provider.

        Args:
            api_key: Gemini API key (defaults to GEMINI_API_KEY, then GOOGLE_API_KEY)
            model: Model name (default: gemini-2.0-flash)
            temperature: Sampling temperature
            max_output_tokens: Cap on generated tokens

        Raises:
            MissingConfigError: If no API key is available
        """
        api_key = api_key or os.getenv("GEMINI_API_KEY") or os.getenv("GOOGLE_API_KEY")
        if not api_key:
            raise MissingConfigError("GEMINI_API_KEY")

        self.model = model or self.default_model
        self.client = genai.Client(api_key=api_key)
        self.generation_config = types.GenerateContentConfig(
            temperature=temperature,
            max_output_tokens=max_output_tokens,
        )

    async def _complete(self, query: str) -> Tuple[str, Sequence[str]]:
        response = await self.client.aio.models.generate_content(
            model=self.model,
            contents=RESEARCH_PREAMBLE + query,
            config=self.generation_config,
        )
        return extract_candidate_text(response), []

    def _describe_error(self, error: Exception) -> str:
        if isinstance(error, errors.APIError):
            return str(ProviderResponseError(self.name, error.code, error.message or ""))
        return super()._describe_error(error)


def extract_candidate_text(response: Any) -> str:
    """Text of the first part of the first candidate, or "" when absent."""
    candidates = getattr(response, "candidates", None) or []
    if not candidates:
        return ""
    content = getattr(candidates[0], "content", None)
    parts = getattr(content, "parts", None) or []
    if not parts:
        return ""
    text = getattr(parts[0], "text", None)
    return text if isinstance(text, str) else ""
