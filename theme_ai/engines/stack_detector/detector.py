"""Stack detection from marker files, dependencies, stylesheets and keywords."""

from __future__ import annotations

import os
from pathlib import Path

import structlog

from theme_ai.engines.stack_detector.rules import (
    CSS_FRAMEWORK_DEPENDENCIES,
    KEYWORD_RULES,
    MARKER_RULES,
    SCRIPT_EXTENSION,
    SKIP_DIRS,
    SOURCE_DIRS,
    STYLESHEET_RULES,
)
from theme_ai.manifest.models import Manifest

log = structlog.get_logger("theme_ai.detector")


def detect_markers(root: Path) -> set[str]:
    """Labels for every marker file that exists under *root*."""
    return {label for marker, label in MARKER_RULES if (root / marker).exists()}


def detect_css_frameworks(manifest: Manifest) -> set[str]:
    """Labels for CSS frameworks declared as (dev) dependencies."""
    return {
        label
        for dep, label in CSS_FRAMEWORK_DEPENDENCIES.items()
        if manifest.has_dependency(dep)
    }


def scan_for_files(root: Path, extension: str) -> list[Path]:
    """Recursively collect files ending in *extension*, skipping ``SKIP_DIRS``."""
    files: list[Path] = []
    for dirpath, dirnames, filenames in os.walk(root):
        dirnames[:] = [d for d in dirnames if d not in SKIP_DIRS]
        for name in filenames:
            if name.endswith(extension):
                files.append(Path(dirpath) / name)
    return files


def detect_stylesheets(root: Path) -> set[str]:
    return {label for ext, label in STYLESHEET_RULES if scan_for_files(root, ext)}


def match_keywords(content: str) -> set[str]:
    """Apply the keyword table to *content*.

    Plain case-sensitive substring search: ``"react"`` inside a comment or
    inside ``"preact"`` matches too.
    """
    return {label for keyword, label in KEYWORD_RULES if keyword in content}


def detect_keywords(root: Path) -> set[str]:
    """Keyword matches across top-level script files of the source dirs."""
    labels: set[str] = set()
    for dirname in SOURCE_DIRS:
        dir_path = root / dirname
        if not dir_path.is_dir():
            continue
        for entry in sorted(dir_path.iterdir()):
            if not entry.is_file() or not entry.name.endswith(SCRIPT_EXTENSION):
                continue
            try:
                content = entry.read_text(encoding="utf-8", errors="replace")
            except OSError:
                log.debug("detector.unreadable_source", path=str(entry))
                continue
            labels |= match_keywords(content)
    return labels


class StackDetector:
    """Run every detection stage over one project root."""

    def __init__(self, root: Path) -> None:
        self._root = root

    def detect(self, manifest: Manifest) -> list[str]:
        """Return the detected labels, sorted for stable output."""
        stack: set[str] = set()
        stack |= detect_markers(self._root)
        stack |= detect_css_frameworks(manifest)
        stack |= detect_stylesheets(self._root)
        stack |= detect_keywords(self._root)
        log.debug("detector.done", root=str(self._root), labels=sorted(stack))
        return sorted(stack)
