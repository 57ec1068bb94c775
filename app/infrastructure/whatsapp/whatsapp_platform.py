from __future__ import annotations

import logging

import httpx

from app.application.exceptions import PlatformSendError
from app.application.ports.message_platform import MessagePlatformPort, RichSendResult
from app.domain.entities.reply import InteractiveList
from app.infrastructure.whatsapp.whatsapp_client import WhatsAppClient


class WhatsAppPlatform(MessagePlatformPort):
    def __init__(self, client: WhatsAppClient) -> None:
        self._client = client
        self._logger = logging.getLogger(__name__)

    def send_text(self, recipient_id: str, text: str) -> None:
        try:
            self._client.send_text(to=recipient_id, text=text)
        except httpx.HTTPError as e:
            raise PlatformSendError(f"WhatsApp text send failed: {e}") from e

    def send_list(self, recipient_id: str, interactive: InteractiveList) -> RichSendResult:
        try:
            self._client.send_list(to=recipient_id, interactive=interactive)
        except httpx.HTTPError as e:
            self._logger.warning(
                "Interactive list send failed", extra={"conversation_id": recipient_id, "reason": str(e)}
            )
            return RichSendResult.FALLBACK_NEEDED
        return RichSendResult.SENT
