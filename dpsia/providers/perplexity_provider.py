"""Perplexity Sonar provider.

Best for factual queries: Sonar searches the web for every request and
returns the URLs it relied on alongside the answer.
"""

from typing import Any, List

from .chat_completions import ChatCompletionsProvider


class PerplexityProvider(ChatCompletionsProvider):
    """Citation-backed web search via the Perplexity chat completions API."""

    name = "Perplexity"
    base_url = "https://api.perplexity.ai"
    api_key_env = "PERPLEXITY_API_KEY"
    default_model = "sonar"

    def _extract_sources(self, response: Any) -> List[str]:
        """Citation URLs from the top-level ``citations`` field.

        Newer responses may only carry ``search_results``; their URLs are used
        when ``citations`` is absent.
        """
        citations = getattr(response, "citations", None)
        if isinstance(citations, list):
            return [c for c in citations if isinstance(c, str)]

        search_results = getattr(response, "search_results", None)
        if not isinstance(search_results, list):
            return []

        urls = []
        for item in search_results:
            url = item.get("url") if isinstance(item, dict) else getattr(item, "url", None)
            if isinstance(url, str):
                urls.append(url)
        return urls
