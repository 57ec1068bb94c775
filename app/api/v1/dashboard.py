import json
import logging

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from app.api.v1.schemas import (
    ChatEventSchema,
    HistoryResponseSchema,
    PanicResponseSchema,
    StatusResponseSchema,
)
from app.application.app_context import AppContext
from app.wiring.dependencies import get_app_context

router = APIRouter()
logger = logging.getLogger(__name__)


@router.get("/status", response_model=StatusResponseSchema)
def status(ctx: AppContext = Depends(get_app_context)):
    return StatusResponseSchema(is_bot_enabled=ctx.bot_enabled)


@router.get("/history", response_model=HistoryResponseSchema)
def history(ctx: AppContext = Depends(get_app_context)):
    return HistoryResponseSchema(
        history=[ChatEventSchema.from_entity(e) for e in ctx.history.list()],
        is_bot_enabled=ctx.bot_enabled,
    )


@router.post("/panic", response_model=PanicResponseSchema)
async def panic(request: Request, ctx: AppContext = Depends(get_app_context)):
    body = await request.body()
    try:
        payload = json.loads(body.decode("utf-8")) if body else {}
    except ValueError:
        return JSONResponse(status_code=400, content={"ok": False, "error": "invalid JSON body"})

    enabled = payload.get("enabled") if isinstance(payload, dict) else None
    # bool only: 0/1 and "true" are rejected
    if not isinstance(enabled, bool):
        return JSONResponse(status_code=400, content={"ok": False, "error": "enabled must be boolean"})

    ctx.set_bot_enabled(enabled)
    logger.info("Bot switch toggled", extra={"reason": f"enabled={enabled}"})
    return PanicResponseSchema(ok=True, is_bot_enabled=ctx.bot_enabled)
