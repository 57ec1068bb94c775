from __future__ import annotations

import pytest

from app.application.ports.message_platform import RichSendResult
from app.application.use_cases.send_reply import SendReplyUseCase
from app.application.utils.menu_text import build_main_menu
from app.domain.entities.chat_event import Direction
from app.domain.entities.message import Message
from app.infrastructure.knowledge.menu_catalog_store import MenuCatalogStore
from tests.fakes import FakePlatform


def _msg(text: str, sender: str = "584121234567", selection_id: str | None = None) -> Message:
    return Message(
        id=f"wamid.{text}",
        conversation_id=sender,
        sender_id=sender,
        text=text,
        timestamp=1717430400,
        selection_id=selection_id,
    )


def test_first_message_sends_greeting_menu_as_list(use_case, context, platform):
    reply = use_case.handle(_msg("hola"))

    assert reply is not None
    assert len(platform.lists) == 1
    assert platform.texts == []
    assert context.store.get_state("584121234567").greeted is True
    directions = [e.direction for e in context.history.list()]
    assert directions == [Direction.IN, Direction.OUT]


def test_disabled_bot_records_but_does_not_answer(use_case, context, platform):
    context.set_bot_enabled(False)

    assert use_case.handle(_msg("hola")) is None
    assert platform.texts == [] and platform.lists == []
    assert [e.text for e in context.history.list()] == ["hola"]
    assert context.store.get_state("584121234567").greeted is False


def test_conversations_are_independent(use_case, context):
    use_case.handle(_msg("hola", sender="a"))
    use_case.handle(_msg("h1", sender="a"))
    use_case.handle(_msg("hola", sender="b"))

    assert context.store.get_state("a").selected_item_id == "h1"
    assert context.store.get_state("b").selected_item_id is None


def test_list_reply_selection_is_routed(use_case, context):
    use_case.handle(_msg("hola"))
    use_case.handle(_msg("Hamburguesa doble", selection_id="h2"))
    assert context.store.get_state("584121234567").selected_item_id == "h2"


def test_send_failure_keeps_committed_state(use_case, context, platform):
    use_case.handle(_msg("hola"))
    platform.fail_text = True

    with pytest.raises(RuntimeError):
        use_case.handle(_msg("h1"))

    assert context.store.get_state("584121234567").selected_item_id == "h1"
    assert [e.direction for e in context.history.list()] == [Direction.IN, Direction.OUT, Direction.IN]


def test_rich_send_falls_back_to_plain_text(context):
    platform = FakePlatform(list_result=RichSendResult.FALLBACK_NEEDED)
    sender = SendReplyUseCase(platform=platform, history=context.history)
    reply = build_main_menu(MenuCatalogStore())

    sender.execute("584121234567", reply)

    assert len(platform.lists) == 1
    assert platform.texts == [("584121234567", reply.text)]
    assert context.history.list()[-1].text == reply.text


def test_plain_text_failure_after_fallback_propagates(context):
    platform = FakePlatform(list_result=RichSendResult.FALLBACK_NEEDED, fail_text=True)
    sender = SendReplyUseCase(platform=platform, history=context.history)

    with pytest.raises(RuntimeError):
        sender.execute("584121234567", build_main_menu(MenuCatalogStore()))
    assert len(context.history) == 0
