"""Abstract base class for research providers."""

import asyncio
import logging
import time
from abc import ABC, abstractmethod
from typing import Sequence, Tuple

from dpsia.config import DEFAULT_RESEARCH_TIMEOUT
from dpsia.core.errors import ProviderTimeoutError
from dpsia.research.types import ResearchResult

logger = logging.getLogger(__name__)


class ResearchProvider(ABC):
    """
    Abstract base class for research providers.

    Subclasses implement ``_complete`` with the provider-specific request
    and response mapping. Callers only use ``search``, which bounds the call
    by a timeout and turns every failure into a failed ResearchResult.
    """

    name: str = "provider"

    @abstractmethod
    async def _complete(self, query: str) -> Tuple[str, Sequence[str]]:
        """
        Issue one request for the query.

        Args:
            query: Free-text research query

        Returns:
            Tuple of (content, sources); missing fields degrade to "" / []

        Raises:
            Any exception; ``search`` converts it into a failed result
        """
        pass

    def _describe_error(self, error: Exception) -> str:
        """Render an exception as the human-readable error of a failed result."""
        return str(error) or type(error).__name__

    async def search(self, query: str, timeout: float = DEFAULT_RESEARCH_TIMEOUT) -> ResearchResult:
        """
        Run one research query against this provider.

        The in-flight request is cancelled once ``timeout`` seconds pass.
        This method does not raise: timeouts, HTTP errors, network errors and
        malformed responses all come back as ``success=False`` results.

        Args:
            query: Free-text research query
            timeout: Seconds before the request is abandoned

        Returns:
            The normalized result for this query
        """
        start = time.monotonic()
        try:
            content, sources = await asyncio.wait_for(self._complete(query), timeout=timeout)
        except asyncio.TimeoutError:
            error = str(ProviderTimeoutError(self.name, timeout))
        except Exception as e:
            error = self._describe_error(e)
        else:
            return ResearchResult(
                provider=self.name,
                query=query,
                content=content or "",
                sources=tuple(sources or ()),
                success=True,
                duration_seconds=time.monotonic() - start,
            )

        logger.debug("%s query failed: %s", self.name, error)
        return ResearchResult.failure(self.name, query, error, time.monotonic() - start)
