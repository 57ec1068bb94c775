from __future__ import annotations

import logging

from app.application.app_context import AppContext
from app.application.use_cases.business_hours import BusinessHoursGate
from app.application.use_cases.dialog_flow import DialogFlowEngine
from app.application.use_cases.send_reply import SendReplyUseCase
from app.domain.entities.chat_event import Direction
from app.domain.entities.message import Message
from app.domain.entities.reply import Reply


class HandleIncomingMessageUseCase:
    def __init__(
        self,
        context: AppContext,
        engine: DialogFlowEngine,
        business_hours: BusinessHoursGate,
        send_reply: SendReplyUseCase,
    ) -> None:
        self._context = context
        self._engine = engine
        self._business_hours = business_hours
        self._send_reply = send_reply
        self._logger = logging.getLogger(__name__)

    def handle(self, message: Message) -> Reply | None:
        """Record, answer and send. Returns the reply that was sent, if any."""
        self._context.history.append(Direction.IN, message.sender_id, message.text)

        if not self._context.bot_enabled:
            self._logger.info(
                "Bot disabled, message recorded only",
                extra={"message_id": message.id, "conversation_id": message.conversation_id},
            )
            return None

        store = self._context.store
        with store.lock(message.conversation_id):
            state = store.get_state(message.conversation_id)
            result = self._engine.process(state, message.text, selection_id=message.selection_id)
            # Committed before sending: a failed send does not roll the flow back.
            store.set_state(message.conversation_id, result.state)

        reply = self._business_hours.annotate(result.reply)

        self._logger.info(
            "Reply generated",
            extra={
                "message_id": message.id,
                "conversation_id": message.conversation_id,
                "step": result.step,
                "awaiting": result.state.awaiting.value,
                "reply_text": reply.text[:80],
            },
        )

        self._send_reply.execute(recipient_id=message.sender_id, reply=reply)
        return reply
