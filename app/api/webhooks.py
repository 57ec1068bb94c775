from __future__ import annotations

import json
import logging
from typing import Callable

from fastapi import APIRouter, Depends, HTTPException, Query, Request, Response
from fastapi.responses import PlainTextResponse
from starlette.concurrency import run_in_threadpool

from app.application.app_context import AppContext
from app.application.dto.webhook_event import WebhookEventDTO
from app.application.use_cases.handle_incoming_message import HandleIncomingMessageUseCase
from app.core.config import settings
from app.domain.entities.chat_event import Direction
from app.infrastructure.whatsapp.webhook_verify import verify_subscription
from app.wiring.dependencies import get_app_context, get_use_case_builder


router = APIRouter()
logger = logging.getLogger(__name__)


@router.get("/webhook")
def verify_webhook(
    hub_mode: str | None = Query(None, alias="hub.mode"),
    hub_verify_token: str | None = Query(None, alias="hub.verify_token"),
    hub_challenge: str | None = Query(None, alias="hub.challenge"),
):
    challenge = verify_subscription(hub_mode, hub_verify_token, hub_challenge, settings.VERIFY_TOKEN)
    if challenge is not None:
        return PlainTextResponse(challenge)
    raise HTTPException(status_code=403, detail="Verification failed")


@router.post("/webhook")
async def whatsapp_webhook(
    request: Request,
    context: AppContext = Depends(get_app_context),
    build_use_case: Callable[[], HandleIncomingMessageUseCase] = Depends(get_use_case_builder),
) -> Response:
    try:
        body = await request.body()
        try:
            payload = json.loads(body.decode("utf-8")) if body else {}
        except ValueError:
            logger.exception("Failed to parse webhook body")
            return Response(status_code=400)

        message = WebhookEventDTO.from_payload(payload).extract_message()
        if message is None:
            return Response(status_code=200)

        logger.info(
            "Webhook message received",
            extra={"message_id": message.id, "conversation_id": message.conversation_id},
        )

        try:
            use_case = build_use_case()
        except Exception as e:
            # The inbound message is audited even when the reply path cannot be built.
            context.history.append(Direction.IN, message.sender_id, message.text)
            logger.exception(
                "Failed to initialize use case",
                extra={"message_id": message.id, "conversation_id": message.conversation_id, "reason": str(e)},
            )
            return Response(status_code=200 if not context.bot_enabled else 500)

        # Handled inline: the provider gets 200 only once the reply went out.
        await run_in_threadpool(use_case.handle, message)
        return Response(status_code=200)
    except Exception as e:
        logger.exception("Error processing webhook event", extra={"reason": str(e)})
        return Response(status_code=500)
