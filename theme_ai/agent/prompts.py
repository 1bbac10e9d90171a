"""Prompts for the upgrade advisor."""

from __future__ import annotations

import json

from theme_ai.engines.outdated_checker.models import AuditResult

ADVISOR_SYSTEM_PROMPT = "You are a helpful assistant for developers."


def format_advice_prompt(audit: AuditResult) -> str:
    """Build the user message embedding the outdated mapping as JSON."""
    outdated = json.dumps(audit.as_mapping(), indent=2)
    return (
        f"Given these outdated packages:\n{outdated}\n\n"
        "Suggest which files or configs to update in a frontend project "
        "(Drupal theme, Node-based). Also recommend the best Node.js LTS version."
    )
