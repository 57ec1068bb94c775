from __future__ import annotations

import logging

from app.application.ports.message_platform import MessagePlatformPort, RichSendResult
from app.domain.entities.chat_event import Direction
from app.domain.entities.reply import Reply
from app.infrastructure.store.chat_history import ChatHistory


class SendReplyUseCase:
    def __init__(self, platform: MessagePlatformPort, history: ChatHistory) -> None:
        self._platform = platform
        self._history = history
        self._logger = logging.getLogger(__name__)

    def execute(self, recipient_id: str, reply: Reply) -> None:
        """
        Deliver a reply: the interactive list first when there is one, then the
        plain-text rendition if the list was rejected. A failing plain-text send
        propagates to the caller; there is no further retry.
        """
        if reply.interactive is not None:
            result = self._platform.send_list(recipient_id=recipient_id, interactive=reply.interactive)
            if result == RichSendResult.SENT:
                self._history.append(Direction.OUT, recipient_id, reply.text)
                return
            self._logger.warning(
                "Interactive list rejected, sending plain text",
                extra={"conversation_id": recipient_id, "reason": result.value},
            )

        self._platform.send_text(recipient_id=recipient_id, text=reply.text)
        self._history.append(Direction.OUT, recipient_id, reply.text)
