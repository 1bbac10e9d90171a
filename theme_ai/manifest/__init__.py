"""package.json loading."""

from theme_ai.manifest.loader import MANIFEST_FILENAME, load_manifest
from theme_ai.manifest.models import Manifest

__all__ = ["MANIFEST_FILENAME", "Manifest", "load_manifest"]
