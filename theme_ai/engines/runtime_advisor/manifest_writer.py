"""Write package-updated.json next to the original manifest."""

from __future__ import annotations

import copy
import json
from pathlib import Path
from typing import Any

import structlog

from theme_ai.engines.outdated_checker.models import AuditResult
from theme_ai.manifest.models import Manifest

log = structlog.get_logger("theme_ai.writer")

UPDATED_MANIFEST_FILENAME = "package-updated.json"


def build_updated_manifest(
    manifest: Manifest,
    audit: AuditResult,
    node_constraint: str,
) -> dict[str, Any]:
    """Deep copy of the raw manifest with outdated versions bumped.

    A package declared in ``dependencies`` is bumped there; otherwise in
    ``devDependencies`` if declared there. ``engines.node`` is set to
    *node_constraint*, other ``engines`` keys are kept.
    """
    updated = copy.deepcopy(manifest.raw)
    deps = updated.get("dependencies")
    dev_deps = updated.get("devDependencies")

    for name, entry in audit.entries.items():
        if isinstance(deps, dict) and deps.get(name):
            deps[name] = entry.latest
        elif isinstance(dev_deps, dict) and dev_deps.get(name):
            dev_deps[name] = entry.latest

    engines = updated.get("engines")
    updated["engines"] = {**(engines if isinstance(engines, dict) else {}), "node": node_constraint}
    return updated


def write_updated_manifest(
    root: Path,
    manifest: Manifest,
    audit: AuditResult,
    node_constraint: str,
) -> Path | None:
    """Write ``package-updated.json`` when anything is outdated.

    Returns the written path, or None when there was nothing to write. The
    original ``package.json`` is never touched.
    """
    if not audit.has_outdated:
        return None

    updated = build_updated_manifest(manifest, audit, node_constraint)
    path = root / UPDATED_MANIFEST_FILENAME
    path.write_text(json.dumps(updated, indent=2, ensure_ascii=False) + "\n", encoding="utf-8")
    log.info("writer.updated_manifest", path=str(path), bumped=len(audit.entries))
    return path
