"""
dpsia CLI - vendor security research from the command line.

Examples:
    dpsia queries "JumpCloud, Inc." --services "Directory-as-a-Service, MDM"
    dpsia research "Acme Corp." --services "Object Storage, CDN"
    dpsia research "Acme Corp." --format json --timeout 45
"""

import asyncio
import json
import logging
from typing import Optional

import click

from dpsia import __version__
from dpsia.config import load_config
from dpsia.core.errors import ConfigurationError
from dpsia.research import format_research_for_prompt, generate_queries, normalize_vendor_name

EXIT_ALL_FAILED = 1
EXIT_CONFIG_ERROR = 2


@click.group()
@click.version_option(version=__version__, prog_name="dpsia")
def cli():
    """dpsia - parallel multi-provider vendor security research."""
    pass


@cli.command()
@click.argument("vendor")
@click.option("--services", "-s", default=None, help="Services in scope for the assessment")
def queries(vendor: str, services: Optional[str]):
    """Show the research queries generated for VENDOR."""
    click.echo(f"Vendor: {normalize_vendor_name(vendor)}")
    for provider, provider_queries in generate_queries(vendor, services).items():
        click.echo(f"\n[{provider}]")
        for i, query in enumerate(provider_queries, 1):
            click.echo(f"  {i}. {query}")


@cli.command()
@click.argument("vendor")
@click.option("--services", "-s", default=None, help="Services in scope for the assessment")
@click.option("--timeout", "-t", type=float, default=None, help="Per-query timeout in seconds")
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["text", "json"]),
    default="text",
    show_default=True,
    help="Prompt-ready text or the full aggregated results as JSON",
)
@click.option("--verbose", "-v", is_flag=True, help="Log progress to stderr")
@click.pass_context
def research(
    ctx: click.Context,
    vendor: str,
    services: Optional[str],
    timeout: Optional[float],
    output_format: str,
    verbose: bool,
):
    """Research VENDOR across Perplexity, Gemini and Grok in parallel."""
    from dpsia.research.orchestrator import conduct_research

    logging.basicConfig(
        level=logging.INFO if verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    try:
        config = load_config(timeout=timeout)
        aggregated = asyncio.run(conduct_research(vendor, config, services_used=services))
    except ConfigurationError as e:
        click.echo(f"Configuration error: {e.message}", err=True)
        ctx.exit(EXIT_CONFIG_ERROR)

    if output_format == "json":
        click.echo(json.dumps(aggregated.to_dict(), indent=2))
    else:
        click.echo(format_research_for_prompt(aggregated))

    click.echo(
        f"{aggregated.success_count}/{len(aggregated.results)} queries succeeded "
        f"({aggregated.failure_count} failed) in {aggregated.total_duration_seconds:.1f}s",
        err=True,
    )
    if aggregated.all_failed:
        click.echo("All research queries failed; synthesis should not proceed.", err=True)
        ctx.exit(EXIT_ALL_FAILED)


def main():
    """Entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
