from __future__ import annotations

import logging

from openai import NotFoundError, OpenAI

from app.application.exceptions import LLMModelNotFoundError, LLMUpstreamError
from app.application.ports.llm import LLMPort
from app.infrastructure.llm.prompts import build_reply_system_prompt


class OpenAILLM(LLMPort):
    """
    OpenAI-backed adapter implementing LLMPort.

    Models are tried in order. Only a "model not found" response moves on to
    the next candidate; any other provider error stops the chain.

    Raises:
        LLMModelNotFoundError: every candidate was rejected as not found
        LLMUpstreamError: networking/provider failures
    """

    def __init__(
        self,
        api_key: str,
        model_candidates: list[str],
        temperature: float = 0.3,
        client: OpenAI | None = None,
    ) -> None:
        if not model_candidates:
            raise ValueError("At least one OpenAI model candidate is required.")
        self.client = client or OpenAI(api_key=api_key)
        self._models = list(model_candidates)
        self._temperature = temperature
        self._logger = logging.getLogger(__name__)

    def generate_reply(self, text: str, business_name: str) -> str:
        for model in self._models:
            try:
                return self._call_text(model, build_reply_system_prompt(business_name), text)
            except NotFoundError:
                self._logger.warning("OpenAI model not found, trying next candidate", extra={"reason": model})
                continue
        raise LLMModelNotFoundError(f"No available OpenAI model among: {', '.join(self._models)}")

    def _call_text(self, model: str, system_prompt: str, user_text: str) -> str:
        try:
            resp = self.client.chat.completions.create(
                model=model,
                messages=[
                    {"role": "system", "content": system_prompt},
                    {"role": "user", "content": user_text},
                ],
                temperature=self._temperature,
                max_tokens=300,
            )
        except NotFoundError:
            raise
        except Exception as e:
            raise LLMUpstreamError(f"OpenAI API error: {e}") from e

        return (resp.choices[0].message.content or "").strip() if resp.choices else ""
