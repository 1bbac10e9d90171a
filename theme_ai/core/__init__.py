"""Configuration and logging shared by every stage."""

from theme_ai.core.config import Settings
from theme_ai.core.logging import setup_logging

__all__ = ["Settings", "setup_logging"]
