"""theme-ai: frontend stack detection and upgrade advice."""

__version__ = "0.1.0"

from theme_ai.exceptions import AuditError, ManifestError, RegistryError, ThemeAIError
from theme_ai.pipeline import AnalysisReport, run_analysis

__all__ = [
    "AnalysisReport",
    "AuditError",
    "ManifestError",
    "RegistryError",
    "ThemeAIError",
    "run_analysis",
]
