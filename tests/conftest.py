"""Pytest configuration and fixtures."""

import asyncio
from typing import Dict, Optional, Sequence, Tuple

import pytest

from dpsia.config import DEFAULT_RESEARCH_TIMEOUT, ResearchConfig
from dpsia.providers.base import ResearchProvider
from dpsia.research.types import ResearchResult


class FakeProvider(ResearchProvider):
    """Scripted provider: maps query -> (content, sources) or an exception."""

    def __init__(
        self,
        name: str,
        answers: Optional[Dict[str, Tuple[str, Sequence[str]]]] = None,
        delays: Optional[Dict[str, float]] = None,
        error: Optional[Exception] = None,
    ):
        self.name = name
        self.answers = answers or {}
        self.delays = delays or {}
        self.error = error
        self.calls = []

    async def _complete(self, query: str):
        self.calls.append(query)
        await asyncio.sleep(self.delays.get(query, 0))
        if self.error is not None:
            raise self.error
        return self.answers.get(query, (f"{self.name} findings for {query}", []))


class ExplodingProvider(ResearchProvider):
    """Provider that breaks its own contract and raises out of search()."""

    def __init__(self, name: str = "Exploding"):
        self.name = name

    async def _complete(self, query: str):
        return "", []

    async def search(self, query: str, timeout: float = DEFAULT_RESEARCH_TIMEOUT) -> ResearchResult:
        raise RuntimeError("provider crashed")


@pytest.fixture
def research_config():
    """Config with dummy keys for all three providers."""
    return ResearchConfig(
        perplexity_api_key="test-perplexity-key",
        google_api_key="test-google-key",
        xai_api_key="test-xai-key",
        timeout=5,
    )


@pytest.fixture
def mock_env(monkeypatch):
    """Mock environment variables for testing."""
    test_env = {
        "PERPLEXITY_API_KEY": "pplx-test-key",
        "GEMINI_API_KEY": "gemini-test-key",
        "XAI_API_KEY": "xai-test-key",
    }

    for key, value in test_env.items():
        monkeypatch.setenv(key, value)

    return test_env


@pytest.fixture
def fake_provider():
    """Factory for scripted providers."""
    return FakeProvider


@pytest.fixture
def exploding_provider():
    """Factory for providers whose search() raises."""
    return ExplodingProvider
