from __future__ import annotations

from app.application.ports.llm import LLMPort


class MockLLM(LLMPort):
    """Offline stand-in: answers nothing so the keyword fallback is always used."""

    def generate_reply(self, text: str, business_name: str) -> str:
        return ""
