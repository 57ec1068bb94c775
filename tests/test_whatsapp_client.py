from __future__ import annotations

import json
import logging

import httpx
import pytest

from app.application.exceptions import PlatformSendError
from app.application.ports.message_platform import RichSendResult
from app.application.utils.menu_text import build_main_menu
from app.infrastructure.knowledge.menu_catalog_store import MenuCatalogStore
from app.infrastructure.whatsapp.mock_platform import MockWhatsAppPlatform
from app.infrastructure.whatsapp.webhook_verify import verify_subscription
from app.infrastructure.whatsapp.whatsapp_client import WhatsAppClient
from app.infrastructure.whatsapp.whatsapp_platform import WhatsAppPlatform
from app.main import ContextFormatter


def _platform(status_code: int = 200) -> tuple[WhatsAppPlatform, list[httpx.Request]]:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        if status_code >= 400:
            return httpx.Response(status_code, json={"error": {"code": 131009, "message": "Parameter value is not valid"}})
        return httpx.Response(200, json={"messages": [{"id": "wamid.out"}]})

    client = WhatsAppClient(
        access_token="tok",
        phone_number_id="1234567890",
        api_version="v18.0",
        http_client=httpx.Client(transport=httpx.MockTransport(handler)),
    )
    return WhatsAppPlatform(client=client), seen


def test_send_text_payload():
    platform, seen = _platform()
    platform.send_text("584121234567", "hola")

    request = seen[0]
    assert str(request.url) == "https://graph.facebook.com/v18.0/1234567890/messages"
    assert request.headers["Authorization"] == "Bearer tok"
    body = json.loads(request.content)
    assert body == {"messaging_product": "whatsapp", "to": "584121234567", "type": "text", "text": {"body": "hola"}}


def test_send_list_payload():
    platform, seen = _platform()
    menu = build_main_menu(MenuCatalogStore())

    assert platform.send_list("584121234567", menu.interactive) == RichSendResult.SENT
    body = json.loads(seen[0].content)
    assert body["type"] == "interactive"
    assert body["interactive"]["type"] == "list"
    rows = body["interactive"]["action"]["sections"][0]["rows"]
    assert [r["id"] for r in rows] == [str(i) for i in range(1, 10)]
    assert all(len(r["title"]) <= 24 for r in rows)


def test_rejected_list_asks_for_fallback():
    platform, _ = _platform(status_code=400)
    menu = build_main_menu(MenuCatalogStore())
    assert platform.send_list("584121234567", menu.interactive) == RichSendResult.FALLBACK_NEEDED


def test_rejected_text_raises():
    platform, _ = _platform(status_code=401)
    with pytest.raises(PlatformSendError):
        platform.send_text("584121234567", "hola")


def test_verify_subscription():
    assert verify_subscription("subscribe", "s3cret", "abc", "s3cret") == "abc"
    assert verify_subscription("subscribe", "s3cret", None, "s3cret") == ""
    assert verify_subscription(None, "s3cret", "abc", "s3cret") is None
    assert verify_subscription("subscribe", "nope", "abc", "s3cret") is None
    assert verify_subscription("subscribe", "", "abc", "") is None


def test_send_failure_log_renders_recipient(caplog):
    platform, _ = _platform(status_code=400)
    formatter = ContextFormatter("%(levelname)s:%(name)s:%(message)s")

    with caplog.at_level(logging.INFO):
        platform.send_list("584121234567", build_main_menu(MenuCatalogStore()).interactive)
        MockWhatsAppPlatform().send_text("584129999999", "hola")

    lines = [formatter.format(record) for record in caplog.records]
    assert any("conversation_id=584121234567" in line and "code=131009" in line for line in lines)
    assert any("conversation_id=584129999999" in line and "reply_text=hola" in line for line in lines)
