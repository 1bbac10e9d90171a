"""Console and JSON rendering of an :class:`AnalysisReport`."""

from __future__ import annotations

from typing import Any

import click

from theme_ai.pipeline import AnalysisReport


def _heading(text: str, color: str = "green") -> str:
    return click.style(text, fg=color, bold=True)


def render_report(report: AnalysisReport) -> None:
    """Print the human-readable report to stdout."""
    node = click.style(report.recommendation.constraint, fg="cyan")

    click.echo("\n" + _heading("Detected Stack:"))
    if report.stack:
        for label in report.stack:
            click.echo(f"- {label}")
    else:
        click.echo("None detected.")

    click.echo("\n" + _heading("Recommended Node version based on packages:") + f" {node}")

    audit = report.audit
    if audit.status == "failed":
        click.echo(
            "\n" + click.style(f"Could not check outdated packages: {audit.error}", fg="red")
        )
    elif audit.has_outdated:
        click.echo("\n" + _heading("Outdated packages detected:", "yellow"))
        for name, entry in audit.entries.items():
            click.echo(f"- {name}: {entry.current or 'missing'} -> {entry.latest}")
    else:
        click.echo("\n" + click.style("All packages are up to date.", fg="green"))

    if report.updated_manifest_path is not None:
        click.echo(
            "\n"
            + _heading(
                f"Created {report.updated_manifest_path.name} with latest versions "
                "and engines.node ="
            )
            + f" {node}"
        )

    click.echo("\n" + _heading("AI Suggestions:", "cyan") + "\n")
    click.echo(report.advice)


def report_to_dict(report: AnalysisReport) -> dict[str, Any]:
    """JSON-serialisable view of *report* for ``--json``."""
    audit = report.audit
    return {
        "project_root": str(report.project_root),
        "stack": report.stack,
        "audit": {
            "status": audit.status,
            "error": audit.error,
            "outdated": {
                name: {
                    "current": entry.current,
                    "wanted": entry.wanted,
                    "latest": entry.latest,
                }
                for name, entry in audit.entries.items()
            },
        },
        "recommended_node": {
            "constraint": report.recommendation.constraint,
            "source": report.recommendation.source,
        },
        "updated_manifest": (
            str(report.updated_manifest_path) if report.updated_manifest_path else None
        ),
        "advice": report.advice,
    }
