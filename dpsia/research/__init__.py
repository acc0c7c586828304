"""Vendor research: query generation, parallel dispatch and aggregation.

The orchestrator is resolved lazily so that provider modules can import the
data model from this package without a circular import.
"""

from typing import TYPE_CHECKING, Any

from .formatter import PROVIDER_LABELS, format_research_for_prompt
from .queries import generate_queries, normalize_vendor_name
from .types import AggregatedResults, QueryBatch, ResearchResult, ResearchTask

if TYPE_CHECKING:
    from .orchestrator import ResearchOrchestrator, conduct_research

__all__ = [
    "AggregatedResults",
    "PROVIDER_LABELS",
    "QueryBatch",
    "ResearchOrchestrator",
    "ResearchResult",
    "ResearchTask",
    "conduct_research",
    "format_research_for_prompt",
    "generate_queries",
    "normalize_vendor_name",
]


def __getattr__(name: str) -> Any:
    """Lazily resolve orchestrator exports."""
    if name in {"ResearchOrchestrator", "conduct_research"}:
        from . import orchestrator

        return getattr(orchestrator, name)

    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
