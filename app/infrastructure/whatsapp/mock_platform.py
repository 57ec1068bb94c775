from __future__ import annotations

import logging

from app.application.ports.message_platform import MessagePlatformPort, RichSendResult
from app.domain.entities.reply import InteractiveList


class MockWhatsAppPlatform(MessagePlatformPort):
    def __init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def send_text(self, recipient_id: str, text: str) -> None:
        self._logger.info("Mock send to WhatsApp", extra={"conversation_id": recipient_id, "reply_text": text})

    def send_list(self, recipient_id: str, interactive: InteractiveList) -> RichSendResult:
        self._logger.info(
            "Mock interactive list to WhatsApp",
            extra={"conversation_id": recipient_id, "reply_text": interactive.body},
        )
        return RichSendResult.SENT
