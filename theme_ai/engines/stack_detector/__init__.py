"""Stack detector engine — guess build tools and frameworks from the file tree."""

from theme_ai.engines.stack_detector.detector import StackDetector, match_keywords, scan_for_files

__all__ = ["StackDetector", "match_keywords", "scan_for_files"]
