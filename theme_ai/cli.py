"""CLI entry point: theme-ai.

Usage:
    theme-ai                      # analyze the project in the current directory
    theme-ai --path ./my-theme    # analyze another directory
    theme-ai --no-ai --json       # machine-readable report, no LLM call
"""

from __future__ import annotations

import asyncio
import json
import sys
from pathlib import Path

import click
import structlog

from theme_ai.agent import AIAdvisor, LLMClient
from theme_ai.core.config import Settings
from theme_ai.core.logging import setup_logging
from theme_ai.engines.runtime_advisor import RegistryClient
from theme_ai.exceptions import ManifestError
from theme_ai.pipeline import AnalysisReport, run_analysis
from theme_ai.report import render_report, report_to_dict

log = structlog.get_logger("theme_ai.cli")


def build_advisor(settings: Settings, enabled: bool = True) -> AIAdvisor:
    """Construct the advisor once; without a usable key it only returns a placeholder."""
    if not enabled:
        return AIAdvisor(None)
    if not settings.has_api_key:
        log.warning("agent.no_api_key", hint="set OPENAI_API_KEY to enable AI suggestions")
        return AIAdvisor(None)
    return AIAdvisor(LLMClient(api_key=settings.api_key, model=settings.model))  # type: ignore[arg-type]


async def _analyze(settings: Settings, advisor: AIAdvisor, use_registry: bool) -> AnalysisReport:
    if not use_registry:
        return await run_analysis(settings, advisor, None)
    async with RegistryClient(settings.registry_url) as registry:
        return await run_analysis(settings, advisor, registry)


@click.command()
@click.option(
    "--path",
    "project_path",
    type=click.Path(exists=True, file_okay=False),
    default=None,
    help="Project root (default: current directory)",
)
@click.option("--no-ai", is_flag=True, help="Skip the AI suggestions call")
@click.option("--no-registry", is_flag=True, help="Skip npm registry engine lookups")
@click.option("--json", "as_json", is_flag=True, help="Output the report as JSON")
@click.option("-v", "--verbose", is_flag=True, help="Verbose logging")
def main(
    project_path: str | None,
    no_ai: bool,
    no_registry: bool,
    as_json: bool,
    verbose: bool,
) -> None:
    """theme-ai: detect a frontend stack, check outdated packages, ask for upgrade advice."""
    setup_logging("DEBUG" if verbose else None)

    root = Path(project_path).resolve() if project_path else Path.cwd()
    settings = Settings.from_env(root)
    advisor = build_advisor(settings, enabled=not no_ai)

    if not as_json:
        click.echo(click.style("\nAnalyzing theme...", fg="blue", bold=True))

    try:
        report = asyncio.run(_analyze(settings, advisor, use_registry=not no_registry))
    except ManifestError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    if as_json:
        click.echo(json.dumps(report_to_dict(report), indent=2))
    else:
        render_report(report)


if __name__ == "__main__":
    main()
