"""Load package.json from the project root."""

from __future__ import annotations

import json
from pathlib import Path

import structlog

from theme_ai.exceptions import ManifestError
from theme_ai.manifest.models import Manifest

log = structlog.get_logger("theme_ai.manifest")

MANIFEST_FILENAME = "package.json"


def load_manifest(project_root: Path) -> Manifest:
    """Read and parse ``<project_root>/package.json``.

    Raises :class:`ManifestError` if the file is missing, unreadable, not
    valid JSON, or not a JSON object. There is no fallback: the manifest is
    a precondition for every later stage.
    """
    path = project_root / MANIFEST_FILENAME
    if not path.is_file():
        raise ManifestError(str(path), f"package.json not found in {project_root}")

    try:
        content = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise ManifestError(str(path), f"{path} is not valid UTF-8") from exc
    except OSError as exc:
        raise ManifestError(str(path), f"cannot read {path} ({exc.strerror})") from exc

    try:
        data = json.loads(content)
    except json.JSONDecodeError as exc:
        raise ManifestError(str(path), f"invalid JSON in {path} ({exc.msg})") from exc

    if not isinstance(data, dict):
        raise ManifestError(str(path), f"{path} is not a JSON object")

    manifest = Manifest.from_dict(data)
    log.debug(
        "manifest.loaded",
        path=str(path),
        dependencies=len(manifest.dependencies),
        dev_dependencies=len(manifest.dev_dependencies),
    )
    return manifest
