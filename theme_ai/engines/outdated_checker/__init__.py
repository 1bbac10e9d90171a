"""Outdated checker engine — delegate staleness detection to npm."""

from theme_ai.engines.outdated_checker.checker import OutdatedChecker, parse_outdated_output
from theme_ai.engines.outdated_checker.models import AuditResult, OutdatedEntry

__all__ = ["AuditResult", "OutdatedChecker", "OutdatedEntry", "parse_outdated_output"]
