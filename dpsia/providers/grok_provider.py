"""xAI Grok provider.

Grok is used as the contrarian voice of the research batch: it is asked to
look for incidents, enforcement actions and criticism rather than marketing
claims.
"""

from typing import Dict, List

from .chat_completions import ChatCompletionsProvider

CONTRARIAN_SYSTEM_MESSAGE = (
    "You are a contrarian, fact-based security researcher. Focus on finding verifiable "
    "incidents, enforcement actions, and security concerns. Be thorough and unbiased. "
    "Cite specific dates and sources where possible."
)


class GrokProvider(ChatCompletionsProvider):
    """xAI Grok via its OpenAI-compatible chat completions API."""

    name = "Grok"
    base_url = "https://api.x.ai/v1"
    api_key_env = "XAI_API_KEY"
    default_model = "grok-3"

    def _build_messages(self, query: str) -> List[Dict[str, str]]:
        return [
            {"role": "system", "content": CONTRARIAN_SYSTEM_MESSAGE},
            {"role": "user", "content": query},
        ]
