"""AIAdvisor — free-text upgrade advice from a chat-completion model."""

from __future__ import annotations

import structlog

from theme_ai.agent.llm_client import LLMClient
from theme_ai.agent.prompts import ADVISOR_SYSTEM_PROMPT, format_advice_prompt
from theme_ai.engines.outdated_checker.models import AuditResult

log = structlog.get_logger("theme_ai.agent")

SKIPPED_MESSAGE = "Skipping AI suggestions (no API key found)."
FAILED_MESSAGE = "Failed to fetch AI suggestions: {error}"


class AIAdvisor:
    """Ask the model for upgrade advice; never raises.

    Built without a client (no credential, or ``--no-ai``) it returns the
    skip placeholder and makes no network call.
    """

    def __init__(self, client: LLMClient | None) -> None:
        self._client = client

    @property
    def enabled(self) -> bool:
        return self._client is not None

    async def advise(self, audit: AuditResult) -> str:
        if self._client is None:
            return SKIPPED_MESSAGE

        prompt = format_advice_prompt(audit)
        try:
            resp = await self._client.create(
                system=ADVISOR_SYSTEM_PROMPT,
                messages=[{"role": "user", "content": prompt}],
            )
        except Exception as exc:
            log.warning("agent.advice_failed", model=self._client.model, error=str(exc))
            return FAILED_MESSAGE.format(error=exc)

        log.debug(
            "agent.advice_done",
            model=self._client.model,
            input_tokens=resp.input_tokens,
            output_tokens=resp.output_tokens,
            latency_ms=resp.latency_ms,
        )
        return resp.content.strip()
