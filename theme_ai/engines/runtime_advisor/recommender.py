"""Node.js runtime recommendation.

Priority: the manifest's own ``engines.node``, then the highest ``>=``
constraint declared by the latest releases of outdated packages, then a
fixed default.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Literal

import structlog

from theme_ai.engines.outdated_checker.models import AuditResult
from theme_ai.engines.runtime_advisor.registry_client import RegistryClient
from theme_ai.exceptions import RegistryError
from theme_ai.manifest.models import Manifest

log = structlog.get_logger("theme_ai.recommender")

RecommendationSource = Literal["manifest", "registry", "default"]

_GTE_RE = re.compile(r"^>=\d")
_NON_NUMERIC_RE = re.compile(r"[^\d.]")
_LEADING_FLOAT_RE = re.compile(r"\d+(?:\.\d*)?|\.\d+")


@dataclass(frozen=True)
class Recommendation:
    constraint: str
    source: RecommendationSource


def constraint_weight(constraint: str) -> float:
    """Coarse sort weight for a version constraint.

    Drops everything but digits and dots, then reads the leading float:
    ``">=18.17.0"`` -> ``18.17``. Breaks on ranges and pre-release tags;
    good enough for an advisory value.
    """
    stripped = _NON_NUMERIC_RE.sub("", constraint)
    match = _LEADING_FLOAT_RE.match(stripped)
    return float(match.group()) if match else 0.0


def pick_highest_constraint(constraints: list[str]) -> str | None:
    """Highest ``>=N`` constraint by :func:`constraint_weight`, or None."""
    candidates = [c for c in constraints if _GTE_RE.match(c)]
    if not candidates:
        return None
    return sorted(candidates, key=constraint_weight, reverse=True)[0]


async def collect_engine_constraints(
    registry: RegistryClient,
    audit: AuditResult,
) -> list[str]:
    """Fetch ``engines.node`` for the latest release of each outdated package.

    Lookups run one after another. A failed lookup is logged and skipped.
    """
    constraints: list[str] = []
    for name, entry in audit.entries.items():
        try:
            node = await registry.get_node_engine(name, entry.latest)
        except RegistryError as exc:
            log.warning("registry.engines_unavailable", package=name, error=exc.detail)
            continue
        if node:
            constraints.append(node)
    return constraints


async def recommend_node_version(
    manifest: Manifest,
    audit: AuditResult,
    registry: RegistryClient | None,
    default: str,
) -> Recommendation:
    if manifest.node_constraint:
        return Recommendation(manifest.node_constraint, "manifest")

    if registry is not None and audit.has_outdated:
        constraints = await collect_engine_constraints(registry, audit)
        best = pick_highest_constraint(constraints)
        if best:
            return Recommendation(best, "registry")

    return Recommendation(default, "default")
