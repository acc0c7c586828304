"""Tests for the provider factory."""

import pytest

from dpsia.providers import GeminiProvider, GrokProvider, PerplexityProvider, create_provider


@pytest.mark.parametrize(
    "provider_type,expected",
    [
        ("perplexity", PerplexityProvider),
        ("gemini", GeminiProvider),
        ("grok", GrokProvider),
        ("xai", GrokProvider),
    ],
)
def test_create_provider(provider_type, expected):
    provider = create_provider(provider_type, api_key="test-key")
    assert isinstance(provider, expected)


def test_create_provider_unknown_type():
    with pytest.raises(ValueError, match="Unsupported provider type"):
        create_provider("openai", api_key="test-key")


def test_provider_names_are_distinct():
    names = {create_provider(t, api_key="test-key").name for t in ("perplexity", "gemini", "grok")}
    assert names == {"Perplexity", "Gemini", "Grok"}


def test_search_and_run_share_one_default_timeout():
    import inspect

    from dpsia.config import DEFAULT_RESEARCH_TIMEOUT
    from dpsia.providers import ResearchProvider
    from dpsia.research.orchestrator import ResearchOrchestrator, execute_tasks

    defaults = [
        inspect.signature(ResearchProvider.search).parameters["timeout"].default,
        inspect.signature(execute_tasks).parameters["timeout"].default,
        inspect.signature(ResearchOrchestrator.__init__).parameters["timeout"].default,
    ]
    assert defaults == [DEFAULT_RESEARCH_TIMEOUT] * 3
