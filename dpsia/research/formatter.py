"""Render aggregated research as the text block fed to the synthesis prompt."""

from typing import Dict, List

from dpsia.research.types import AggregatedResults, ResearchResult

PROVIDER_LABELS = {
    "Perplexity": "Perplexity (Web Search with Citations)",
    "Gemini": "Gemini (Multi-Perspective Analysis)",
    "Grok": "Grok (Contrarian Analysis)",
}


def format_research_for_prompt(aggregated: AggregatedResults) -> str:
    """
    Format research results as one text block grouped by provider.

    Providers appear in the order they first occur in the results. Failed
    queries are listed with a failure marker; successful queries with no
    content are left out.
    """
    by_provider: Dict[str, List[ResearchResult]] = {}
    for result in aggregated.results:
        by_provider.setdefault(result.provider, []).append(result)

    sections = []
    for provider, results in by_provider.items():
        sections.append(f"### {PROVIDER_LABELS.get(provider, provider)}\n")

        for r in results:
            if r.success and r.content:
                sections.append(f"**Query:** {r.query}\n")
                sections.append(r.content)
                if r.sources:
                    sections.append("\n**Sources:**")
                    sections.extend(f"- {source}" for source in r.sources)
                sections.append("")
            elif not r.success:
                sections.append(f"**Query:** {r.query}")
                sections.append(f"*Failed: {r.error or 'unknown error'}*\n")

    return "\n".join(sections)
