"""Analysis pipeline: manifest -> stack -> audit -> recommendation -> advice.

Stages run strictly one after another and only hand data forward.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import structlog

from theme_ai.agent.advisor import AIAdvisor
from theme_ai.core.config import Settings
from theme_ai.engines.outdated_checker import AuditResult, OutdatedChecker
from theme_ai.engines.runtime_advisor import (
    Recommendation,
    RegistryClient,
    recommend_node_version,
    write_updated_manifest,
)
from theme_ai.engines.stack_detector import StackDetector
from theme_ai.manifest import Manifest, load_manifest

log = structlog.get_logger("theme_ai.pipeline")


@dataclass
class AnalysisReport:
    """Everything one run produced, ready for rendering."""

    project_root: Path
    manifest: Manifest
    stack: list[str]
    audit: AuditResult
    recommendation: Recommendation
    updated_manifest_path: Path | None
    advice: str


async def run_analysis(
    settings: Settings,
    advisor: AIAdvisor,
    registry: RegistryClient | None = None,
) -> AnalysisReport:
    """Run every stage against ``settings.project_root``.

    Raises :class:`~theme_ai.exceptions.ManifestError` if package.json is
    missing or unparsable; every other failure is folded into the report.
    """
    root = settings.project_root
    log.info("pipeline.start", root=str(root))

    manifest = load_manifest(root)
    audit = OutdatedChecker(root, settings.npm_bin).check()
    stack = StackDetector(root).detect(manifest)

    recommendation = await recommend_node_version(
        manifest, audit, registry, settings.default_node
    )
    updated_path = write_updated_manifest(root, manifest, audit, recommendation.constraint)
    advice = await advisor.advise(audit)

    log.info(
        "pipeline.done",
        stack=len(stack),
        audit=audit.status,
        outdated=len(audit.entries),
        node=recommendation.constraint,
        node_source=recommendation.source,
    )
    return AnalysisReport(
        project_root=root,
        manifest=manifest,
        stack=stack,
        audit=audit,
        recommendation=recommendation,
        updated_manifest_path=updated_path,
        advice=advice,
    )
