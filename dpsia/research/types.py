"""Data model for a single research run.

A run is a fixed batch of queries, flattened into one task per
(provider, query) pair. Every task yields exactly one ResearchResult and the
results of a run are summarized once, after all tasks settle, into an
AggregatedResults value.
"""

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Dict, Iterable, List, Mapping, Optional, Tuple

if TYPE_CHECKING:
    from dpsia.providers.base import ResearchProvider

# Provider name -> ordered queries for that provider
QueryBatch = Mapping[str, Tuple[str, ...]]


@dataclass(frozen=True)
class ResearchTask:
    """One query bound to the provider that will answer it."""

    provider: "ResearchProvider"
    query: str


@dataclass(frozen=True)
class ResearchResult:
    """Normalized outcome of one research task.

    Attributes:
        provider: Provider name (e.g. "Perplexity")
        query: Query text sent to the provider
        content: Extracted answer text, empty on failure
        sources: Citation URLs returned with the answer
        success: Whether the call produced an answer
        error: Human-readable failure description
        duration_seconds: Wall time spent on the call
    """

    provider: str
    query: str
    content: str = ""
    sources: Tuple[str, ...] = ()
    success: bool = False
    error: Optional[str] = None
    duration_seconds: float = 0.0

    @classmethod
    def failure(cls, provider: str, query: str, error: str, duration_seconds: float = 0.0) -> "ResearchResult":
        """Build a failed result with empty content and sources."""
        return cls(
            provider=provider,
            query=query,
            success=False,
            error=error,
            duration_seconds=duration_seconds,
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "provider": self.provider,
            "query": self.query,
            "content": self.content,
            "sources": list(self.sources),
            "success": self.success,
            "error": self.error,
            "duration_seconds": round(self.duration_seconds, 3),
        }


def dedupe_sources(results: Iterable[ResearchResult]) -> List[str]:
    """Union of sources across results, first-seen order.

    Two citations are the same source when they match after trimming and
    lowercasing; the first literal string encountered is the one kept.
    """
    seen = set()
    sources: List[str] = []
    for result in results:
        for source in result.sources:
            key = source.strip().lower()
            if key not in seen:
                seen.add(key)
                sources.append(source)
    return sources


@dataclass(frozen=True)
class AggregatedResults:
    """Summary of a finished research run.

    Construct with ``from_results``; counts are always derived from
    ``results`` so they cannot drift from the result list.
    """

    results: Tuple[ResearchResult, ...]
    total_duration_seconds: float
    providers_used: Tuple[str, ...] = ()
    all_sources: Tuple[str, ...] = ()

    @classmethod
    def from_results(cls, results: Iterable[ResearchResult], total_duration_seconds: float) -> "AggregatedResults":
        results = tuple(results)
        successful = [r for r in results if r.success]
        providers_used = tuple(dict.fromkeys(r.provider for r in successful))
        return cls(
            results=results,
            total_duration_seconds=total_duration_seconds,
            providers_used=providers_used,
            all_sources=tuple(dedupe_sources(successful)),
        )

    @property
    def success_count(self) -> int:
        return len([r for r in self.results if r.success])

    @property
    def failure_count(self) -> int:
        return len([r for r in self.results if not r.success])

    @property
    def all_failed(self) -> bool:
        """True when the run produced no successful result at all."""
        return self.success_count == 0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "results": [r.to_dict() for r in self.results],
            "total_duration_seconds": round(self.total_duration_seconds, 3),
            "providers_used": list(self.providers_used),
            "all_sources": list(self.all_sources),
            "success_count": self.success_count,
            "failure_count": self.failure_count,
        }
