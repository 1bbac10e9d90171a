"""Data models for the outdated-dependency checker."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal

AuditStatus = Literal["up_to_date", "outdated", "failed"]


@dataclass
class OutdatedEntry:
    """One dependency that npm reports as behind its latest release."""

    name: str
    current: str | None  # None when declared but not installed
    latest: str
    wanted: str | None = None
    location: str | None = None


@dataclass
class AuditResult:
    """Outcome of one ``npm outdated`` run.

    ``failed`` is kept apart from ``up_to_date`` so a crashed audit tool is
    never reported as "nothing outdated".
    """

    status: AuditStatus
    entries: dict[str, OutdatedEntry] = field(default_factory=dict)
    error: str | None = None

    @property
    def has_outdated(self) -> bool:
        return bool(self.entries)

    def as_mapping(self) -> dict[str, dict[str, str | None]]:
        """``name -> {current, latest}``, the shape used in prompts and reports."""
        return {
            name: {"current": entry.current, "latest": entry.latest}
            for name, entry in self.entries.items()
        }
