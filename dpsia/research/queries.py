"""Vendor research query generator.

Builds the fixed query batch for one assessment: three queries per provider,
each written for that provider's strength.

- Perplexity: factual lookups that benefit from web citations
- Gemini: broad analytical questions
- Grok: contrarian questions looking for incidents and criticism
"""

import re
from types import MappingProxyType
from typing import Optional

from dpsia.research.types import QueryBatch

# One trailing legal-entity suffix, separated from the name by whitespace or a comma
_LEGAL_SUFFIX = re.compile(r"(?:,\s*|\s+)(Inc\.|LLC|Ltd\.?|Corp\.?|GmbH|B\.V\.)$", re.IGNORECASE)

QUERIES_PER_PROVIDER = 3


def normalize_vendor_name(vendor_name: str) -> str:
    """Strip a trailing legal-entity suffix ("Acme Corp." -> "Acme")."""
    return _LEGAL_SUFFIX.sub("", vendor_name.strip()).strip()


def generate_queries(vendor_name: str, services_used: Optional[str] = None) -> QueryBatch:
    """Generate the per-provider query batch for a vendor.

    Args:
        vendor_name: Vendor display name, legal suffix allowed
        services_used: Optional description of the services in scope; when
            given it is appended to the last query of each provider

    Returns:
        Read-only mapping of provider name to its ordered queries
    """
    name = normalize_vendor_name(vendor_name)
    services = f" {services_used.strip()}" if services_used and services_used.strip() else ""

    return MappingProxyType(
        {
            "Perplexity": (
                f"{name} security certifications ISO 27001 SOC 2 Type II 2025 2026",
                f"{name} data breach incidents security vulnerabilities CVE history",
                f"{name} GDPR compliance data processing agreement privacy policy{services}",
            ),
            "Gemini": (
                f"{name} security posture assessment encryption access controls infrastructure. "
                "Analyse their security architecture, encryption standards, and access control mechanisms.",
                f"{name} vendor risk compliance status regulatory actions enforcement. "
                "Evaluate their compliance posture across ISO 27001, SOC 2, GDPR, and any regulatory enforcement actions.",
                f"{name} service availability SLA disaster recovery redundancy architecture{services}. "
                "Assess their availability guarantees, redundancy, and disaster recovery capabilities.",
            ),
            "Grok": (
                f"{name} security incidents criticism concerns vulnerabilities 2024 2025 2026. "
                "What are the most significant security concerns, incidents, or criticisms? Be thorough and unbiased.",
                f"{name} enforcement actions fines regulatory investigations GDPR ICO FTC. "
                "Has this company faced any regulatory enforcement, fines, or investigations?",
                f"{name} alternatives comparison security weaknesses limitations{services}. "
                "What are the known security weaknesses or limitations compared to alternatives?",
            ),
        }
    )
