"""Data model for a parsed package.json."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class Manifest:
    """Read-only view of a project's package.json.

    ``raw`` holds the full document; it is never mutated. Producing an
    updated variant works on a deep copy (see ``manifest_writer``).
    """

    dependencies: dict[str, str] = field(default_factory=dict)
    dev_dependencies: dict[str, str] = field(default_factory=dict)
    node_constraint: str | None = None
    scripts: dict[str, str] = field(default_factory=dict)
    raw: dict[str, Any] = field(default_factory=dict)

    def has_dependency(self, name: str) -> bool:
        """True if *name* is declared in either dependency mapping."""
        return bool(self.dependencies.get(name) or self.dev_dependencies.get(name))

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Manifest:
        engines = _mapping(data.get("engines"))
        node = engines.get("node")
        return cls(
            dependencies=_mapping(data.get("dependencies")),
            dev_dependencies=_mapping(data.get("devDependencies")),
            node_constraint=node if isinstance(node, str) and node else None,
            scripts=_mapping(data.get("scripts")),
            raw=data,
        )


def _mapping(value: Any) -> dict[str, Any]:
    return dict(value) if isinstance(value, dict) else {}
