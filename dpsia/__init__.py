"""dpsia package exports.

Keep package import lightweight by lazily importing the orchestrator and
provider SDKs.
"""

from typing import TYPE_CHECKING, Any

__version__ = "0.1.0"

if TYPE_CHECKING:
    from .config import ResearchConfig
    from .research.orchestrator import conduct_research

__all__ = ["ResearchConfig", "conduct_research", "create_provider", "format_research_for_prompt", "load_config"]


def __getattr__(name: str) -> Any:
    """Lazily resolve top-level exports."""
    if name in {"ResearchConfig", "load_config"}:
        from . import config

        return getattr(config, name)

    if name == "conduct_research":
        from .research.orchestrator import conduct_research

        return conduct_research

    if name == "format_research_for_prompt":
        from .research.formatter import format_research_for_prompt

        return format_research_for_prompt

    if name == "create_provider":
        from .providers import create_provider

        return create_provider

    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
