"""Tests for Perplexity provider implementation."""

import asyncio
import os
from unittest.mock import AsyncMock, patch

import httpx
import openai
import pytest

from dpsia.core.errors import MissingConfigError
from dpsia.providers.perplexity_provider import PerplexityProvider


class TestPerplexityProvider:
    """Test Perplexity provider request and response handling."""

    @pytest.fixture
    def provider(self):
        """Create provider instance for testing."""
        return PerplexityProvider(api_key="test-pplx-key")

    def test_provider_initialization(self, provider):
        """Test provider initializes with the Perplexity endpoint."""
        assert provider.name == "Perplexity"
        assert provider.model == "sonar"
        assert str(provider.client.base_url).startswith("https://api.perplexity.ai")
        assert provider.client.max_retries == 0

    def test_provider_initialization_no_api_key(self):
        """Test provider fails without API key."""
        with patch.dict(os.environ, {}, clear=True):
            with pytest.raises(MissingConfigError, match="PERPLEXITY_API_KEY"):
                PerplexityProvider(api_key=None)

    def test_provider_reads_key_from_environment(self):
        with patch.dict(os.environ, {"PERPLEXITY_API_KEY": "env-key"}, clear=True):
            provider = PerplexityProvider()
        assert provider.client.api_key == "env-key"

    @pytest.mark.asyncio
    async def test_search_returns_content_and_citations(self, provider, chat_response):
        response = chat_response(
            "Acme holds ISO 27001.",
            citations=["https://acme.example/trust", "https://iso.example/cert"],
        )

        with patch.object(provider.client.chat.completions, "create", new_callable=AsyncMock) as mock_create:
            mock_create.return_value = response
            result = await provider.search("Acme certifications", timeout=5)

        assert result.success is True
        assert result.provider == "Perplexity"
        assert result.query == "Acme certifications"
        assert result.content == "Acme holds ISO 27001."
        assert result.sources == ("https://acme.example/trust", "https://iso.example/cert")
        assert result.error is None
        assert result.duration_seconds >= 0

        kwargs = mock_create.call_args.kwargs
        assert kwargs["model"] == "sonar"
        assert kwargs["messages"] == [{"role": "user", "content": "Acme certifications"}]

    @pytest.mark.asyncio
    async def test_search_falls_back_to_search_results(self, provider, chat_response):
        response = chat_response(
            "Findings",
            citations=None,
            search_results=[{"url": "https://a.example"}, {"title": "no url"}, {"url": "https://b.example"}],
        )

        with patch.object(provider.client.chat.completions, "create", new_callable=AsyncMock) as mock_create:
            mock_create.return_value = response
            result = await provider.search("query")

        assert result.sources == ("https://a.example", "https://b.example")

    @pytest.mark.asyncio
    async def test_search_missing_fields_degrade_to_empty(self, provider, chat_response):
        response = chat_response(None)
        response.choices = []

        with patch.object(provider.client.chat.completions, "create", new_callable=AsyncMock) as mock_create:
            mock_create.return_value = response
            result = await provider.search("query")

        assert result.success is True
        assert result.content == ""
        assert result.sources == ()

    @pytest.mark.asyncio
    async def test_search_http_error_becomes_failed_result(self, provider, http_response):
        error = openai.AuthenticationError(
            "Error code: 401",
            response=http_response(401, "invalid api key"),
            body=None,
        )

        with patch.object(provider.client.chat.completions, "create", new_callable=AsyncMock) as mock_create:
            mock_create.side_effect = error
            result = await provider.search("query")

        assert result.success is False
        assert result.error == "HTTP 401: invalid api key"
        assert result.content == ""
        assert result.sources == ()

    @pytest.mark.asyncio
    async def test_search_network_error_becomes_failed_result(self, provider):
        error = openai.APIConnectionError(request=httpx.Request("POST", "https://api.perplexity.ai/chat/completions"))

        with patch.object(provider.client.chat.completions, "create", new_callable=AsyncMock) as mock_create:
            mock_create.side_effect = error
            result = await provider.search("query")

        assert result.success is False
        assert result.error

    @pytest.mark.asyncio
    async def test_search_timeout_cancels_request(self, provider):
        cancelled = asyncio.Event()

        async def slow_create(**kwargs):
            try:
                await asyncio.sleep(10)
            except asyncio.CancelledError:
                cancelled.set()
                raise

        with patch.object(provider.client.chat.completions, "create", new=slow_create):
            result = await provider.search("query", timeout=0.05)

        assert result.success is False
        assert "timed out after 0.05s" in result.error
        assert cancelled.is_set()
        assert result.duration_seconds < 5
