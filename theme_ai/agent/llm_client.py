"""Thin async wrapper around litellm.acompletion()."""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Any

import litellm

logger = logging.getLogger(__name__)


# ── LLM Response ─────────────────────────────────────────────────────────────
@dataclass
class LLMResponse:
    """Standardised response from a single LLM call."""

    content: str = ""
    stop_reason: str = ""
    input_tokens: int = 0
    output_tokens: int = 0
    latency_ms: int = 0


# ── LLM Client ───────────────────────────────────────────────────────────────
class LLMClient:
    """Async-only wrapper around ``litellm.acompletion()``.

    Usage::

        client = LLMClient(api_key="sk-...", model="gpt-4")
        resp = await client.create(
            system="You are a helpful assistant for developers.",
            messages=[{"role": "user", "content": "..."}],
        )

    No timeout or retry is configured; litellm's defaults apply.
    """

    def __init__(self, api_key: str, model: str) -> None:
        self._api_key = api_key
        self.model = model

    async def create(
        self,
        *,
        system: str,
        messages: list[dict[str, Any]],
        model: str | None = None,
    ) -> LLMResponse:
        """Send a chat completion request and return a standardised response."""
        full_messages: list[dict[str, Any]] = [
            {"role": "system", "content": system},
            *messages,
        ]

        t0 = time.monotonic()
        raw = await litellm.acompletion(
            model=model or self.model,
            messages=full_messages,
            api_key=self._api_key,
        )
        latency_ms = int((time.monotonic() - t0) * 1000)

        choice = raw.choices[0]
        usage = getattr(raw, "usage", None)
        logger.debug("LLM call finished in %d ms", latency_ms)

        return LLMResponse(
            content=choice.message.content or "",
            stop_reason=choice.finish_reason or "",
            input_tokens=getattr(usage, "prompt_tokens", 0) or 0,
            output_tokens=getattr(usage, "completion_tokens", 0) or 0,
            latency_ms=latency_ms,
        )
