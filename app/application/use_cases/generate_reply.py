from __future__ import annotations

import logging

from app.application.ports.llm import LLMPort


class GenerateAIReplyUseCase:
    """Optional AI reply for messages no keyword rule recognised."""

    def __init__(self, llm: LLMPort | None, business_name: str, enabled: bool) -> None:
        self._llm = llm
        self._business_name = business_name
        self._enabled = enabled
        self._logger = logging.getLogger(__name__)

    @property
    def available(self) -> bool:
        return self._enabled and self._llm is not None

    def execute(self, text: str) -> str | None:
        """Return the AI reply, or None when the feature is unavailable this turn."""
        if not self.available:
            return None
        try:
            reply = self._llm.generate_reply(text=text, business_name=self._business_name)
        except Exception as e:
            self._logger.warning("AI reply unavailable, using keyword reply", extra={"reason": str(e)})
            return None
        reply = (reply or "").strip()
        return reply or None
