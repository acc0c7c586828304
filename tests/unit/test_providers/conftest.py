"""Shared fixtures for provider tests."""

from unittest.mock import MagicMock

import httpx
import pytest


@pytest.fixture
def chat_response():
    """Build a mock chat.completions.create return value."""

    def _make(content, citations=None, search_results=None):
        mock_msg = MagicMock()
        mock_msg.content = content
        mock_choice = MagicMock()
        mock_choice.message = mock_msg
        mock_resp = MagicMock()
        mock_resp.choices = [mock_choice]
        mock_resp.citations = citations
        mock_resp.search_results = search_results
        return mock_resp

    return _make


@pytest.fixture
def http_response():
    """Build an httpx response suitable for openai status errors."""

    def _make(status_code, text, url="https://api.example.com/chat/completions"):
        return httpx.Response(status_code, request=httpx.Request("POST", url), text=text)

    return _make
