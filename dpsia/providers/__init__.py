"""Research provider integrations."""

from typing import Literal

from .base import ResearchProvider
from .gemini_provider import GeminiProvider
from .grok_provider import GrokProvider
from .perplexity_provider import PerplexityProvider

ProviderType = Literal["perplexity", "gemini", "grok", "xai"]


def create_provider(provider_type: ProviderType, **kwargs) -> ResearchProvider:
    """
    Factory function to create the appropriate provider instance.

    Args:
        provider_type: "perplexity", "gemini", or "grok" (alias "xai")
        **kwargs: Provider-specific configuration

    Returns:
        Initialized provider instance

    Raises:
        ValueError: If provider_type is not supported
    """
    if provider_type == "perplexity":
        return PerplexityProvider(**kwargs)
    elif provider_type == "gemini":
        return GeminiProvider(**kwargs)
    elif provider_type in ("grok", "xai"):
        return GrokProvider(**kwargs)
    else:
        raise ValueError(f"Unsupported provider type: {provider_type}")


__all__ = [
    "ResearchProvider",
    "PerplexityProvider",
    "GeminiProvider",
    "GrokProvider",
    "create_provider",
    "ProviderType",
]
