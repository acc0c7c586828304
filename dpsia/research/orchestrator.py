"""Parallel multi-provider research orchestrator.

Fans the vendor's query batch out to every provider at once, waits for every
task to settle, and aggregates the outcomes. One slow or failing provider
never blocks or aborts the others: each task is bounded by its own timeout
and every task produces exactly one result.
"""

import asyncio
import logging
import time
from typing import Iterable, List, Optional, Sequence

from dpsia.config import DEFAULT_RESEARCH_TIMEOUT, ResearchConfig
from dpsia.providers import GeminiProvider, GrokProvider, PerplexityProvider, ResearchProvider
from dpsia.research.queries import generate_queries
from dpsia.research.types import AggregatedResults, QueryBatch, ResearchResult, ResearchTask

logger = logging.getLogger(__name__)


def build_tasks(providers: Iterable[ResearchProvider], query_batch: QueryBatch) -> List[ResearchTask]:
    """Flatten a query batch into tasks, provider-major then query order."""
    tasks = []
    for provider in providers:
        queries = query_batch.get(provider.name)
        if not queries:
            logger.warning("No queries generated for provider %s", provider.name)
            continue
        tasks.extend(ResearchTask(provider=provider, query=query) for query in queries)
    return tasks


async def execute_tasks(tasks: Sequence[ResearchTask], timeout: float = DEFAULT_RESEARCH_TIMEOUT) -> List[ResearchResult]:
    """
    Run every task concurrently and return one result per task.

    Results keep the order of ``tasks`` regardless of completion order.
    Exceptions escaping a provider become failed results instead of
    cancelling the batch.

    Args:
        tasks: Tasks to dispatch
        timeout: Per-task timeout in seconds

    Returns:
        Results, same length and order as ``tasks``
    """
    start = time.monotonic()
    outcomes = await asyncio.gather(
        *(task.provider.search(task.query, timeout) for task in tasks),
        return_exceptions=True,
    )

    results = []
    for task, outcome in zip(tasks, outcomes):
        if isinstance(outcome, BaseException):
            error = str(outcome) or type(outcome).__name__
            logger.warning("%s task raised unexpectedly: %s", task.provider.name, error)
            outcome = ResearchResult.failure(task.provider.name, task.query, error, time.monotonic() - start)
        elif not outcome.success:
            logger.warning("%s query failed: %s", outcome.provider, outcome.error)
        results.append(outcome)
    return results


class ResearchOrchestrator:
    """Runs the vendor research batch across a fixed set of providers."""

    def __init__(self, providers: Sequence[ResearchProvider], timeout: float = DEFAULT_RESEARCH_TIMEOUT):
        """
        Args:
            providers: One instance per provider, in dispatch order
            timeout: Per-task timeout in seconds
        """
        self.providers = list(providers)
        self.timeout = timeout

    @classmethod
    def from_config(cls, config: ResearchConfig) -> "ResearchOrchestrator":
        """Build the Perplexity, Gemini and Grok providers from config.

        Raises:
            MissingConfigError: If a provider has no API key
        """
        providers = [
            PerplexityProvider(api_key=config.perplexity_api_key, model=config.perplexity_model),
            GeminiProvider(api_key=config.google_api_key, model=config.gemini_model),
            GrokProvider(api_key=config.xai_api_key, model=config.grok_model),
        ]
        return cls(providers, timeout=config.timeout)

    async def conduct(self, vendor_name: str, services_used: Optional[str] = None) -> AggregatedResults:
        """
        Research a vendor across all providers.

        Args:
            vendor_name: Vendor display name
            services_used: Optional description of the services in scope

        Returns:
            Aggregated results; a run where every query failed is returned
            normally with ``success_count == 0``
        """
        start = time.monotonic()
        tasks = build_tasks(self.providers, generate_queries(vendor_name, services_used))
        logger.info(
            "Starting research for %s: %d queries across %d providers",
            vendor_name,
            len(tasks),
            len(self.providers),
        )

        results = await execute_tasks(tasks, self.timeout)
        aggregated = AggregatedResults.from_results(results, time.monotonic() - start)

        logger.info(
            "Research complete: %d/%d succeeded in %.1fs",
            aggregated.success_count,
            len(aggregated.results),
            aggregated.total_duration_seconds,
        )
        return aggregated


async def conduct_research(
    vendor_name: str,
    config: ResearchConfig,
    services_used: Optional[str] = None,
    timeout: Optional[float] = None,
) -> AggregatedResults:
    """
    Research a vendor with the providers described by ``config``.

    Args:
        vendor_name: Vendor display name
        config: Provider credentials and defaults
        services_used: Optional description of the services in scope
        timeout: Per-task timeout override in seconds

    Returns:
        Aggregated results for the run

    Raises:
        MissingConfigError: If a provider cannot be constructed
    """
    orchestrator = ResearchOrchestrator.from_config(config)
    if timeout is not None:
        orchestrator.timeout = timeout
    return await orchestrator.conduct(vendor_name, services_used)
