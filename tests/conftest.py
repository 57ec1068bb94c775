from __future__ import annotations

import pytest

from app.application.app_context import AppContext
from app.application.use_cases.business_hours import BusinessHoursGate
from app.application.use_cases.dialog_flow import DialogFlowEngine
from app.application.use_cases.handle_incoming_message import HandleIncomingMessageUseCase
from app.application.use_cases.send_reply import SendReplyUseCase
from app.domain.entities.conversation_state import ConversationState
from app.infrastructure.store.chat_history import ChatHistory
from app.infrastructure.store.memory_store import MemoryConversationStore
from tests.fakes import OPEN_TIME, FakePlatform, build_engine


@pytest.fixture
def engine() -> DialogFlowEngine:
    return build_engine()


@pytest.fixture
def greeted() -> ConversationState:
    return ConversationState(greeted=True)


@pytest.fixture
def platform() -> FakePlatform:
    return FakePlatform()


@pytest.fixture
def context() -> AppContext:
    return AppContext(store=MemoryConversationStore(), history=ChatHistory(limit=200), bot_enabled=True)


@pytest.fixture
def use_case(context: AppContext, platform: FakePlatform) -> HandleIncomingMessageUseCase:
    return HandleIncomingMessageUseCase(
        context=context,
        engine=build_engine(),
        business_hours=BusinessHoursGate(timezone="America/Caracas", clock=lambda: OPEN_TIME),
        send_reply=SendReplyUseCase(platform=platform, history=context.history),
    )
