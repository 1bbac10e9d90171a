"""LLM advisory layer."""

from theme_ai.agent.advisor import FAILED_MESSAGE, SKIPPED_MESSAGE, AIAdvisor
from theme_ai.agent.llm_client import LLMClient, LLMResponse

__all__ = ["AIAdvisor", "FAILED_MESSAGE", "LLMClient", "LLMResponse", "SKIPPED_MESSAGE"]
