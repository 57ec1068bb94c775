from functools import lru_cache
from typing import Callable
import logging

from app.core.config import settings
from app.application.app_context import AppContext
from app.application.ports.llm import LLMPort
from app.application.ports.menu_catalog import MenuCatalogPort
from app.application.ports.message_platform import MessagePlatformPort
from app.application.use_cases.business_hours import BusinessHoursGate
from app.application.use_cases.dialog_flow import DialogFlowEngine
from app.application.use_cases.generate_reply import GenerateAIReplyUseCase
from app.application.use_cases.handle_incoming_message import HandleIncomingMessageUseCase
from app.application.use_cases.match_intent import KeywordMatcherUseCase
from app.application.use_cases.reply_variety import ReplyVarietySelector
from app.application.use_cases.send_reply import SendReplyUseCase
from app.infrastructure.knowledge.keyword_rules import FALLBACK, KEYWORD_RULES, NUMERIC_SHORTCUTS
from app.infrastructure.knowledge.menu_catalog_store import MenuCatalogStore
from app.infrastructure.llm.mock_llm import MockLLM
from app.infrastructure.llm.openai_llm import OpenAILLM
from app.infrastructure.store.chat_history import ChatHistory
from app.infrastructure.store.memory_store import MemoryConversationStore
from app.infrastructure.whatsapp.mock_platform import MockWhatsAppPlatform
from app.infrastructure.whatsapp.whatsapp_client import WhatsAppClient
from app.infrastructure.whatsapp.whatsapp_platform import WhatsAppPlatform


_app_context: AppContext | None = None


def get_app_context() -> AppContext:
    global _app_context
    if _app_context is None:
        _app_context = AppContext(
            store=MemoryConversationStore(),
            history=ChatHistory(limit=settings.CHAT_HISTORY_LIMIT),
            bot_enabled=settings.BOT_ENABLED,
        )
    return _app_context


def reset_app_context() -> None:
    """Drop all conversation state, history and the bot switch back to defaults."""
    if _app_context is not None:
        _app_context.reset()


@lru_cache
def get_llm() -> LLMPort | None:
    logger = logging.getLogger(__name__)
    if not settings.AI_ENABLED:
        return None
    if settings.AI_PROVIDER.lower() != "openai":
        logger.warning("Unsupported AI provider, AI replies disabled", extra={"reason": settings.AI_PROVIDER})
        return None
    if settings.OPENAI_API_KEY and settings.OPENAI_API_KEY.strip():
        return OpenAILLM(
            api_key=settings.OPENAI_API_KEY,
            model_candidates=settings.model_candidates(),
            temperature=settings.OPENAI_TEMPERATURE_REPLY,
        )
    if settings.ENV.lower() in {"dev", "local"}:
        logger.info("Using MockLLM (OPENAI_API_KEY missing, ENV=dev/local)")
        return MockLLM()
    return None


@lru_cache
def get_menu_catalog() -> MenuCatalogPort:
    return MenuCatalogStore()


@lru_cache
def get_message_platform() -> MessagePlatformPort:
    logger = logging.getLogger(__name__)
    logger.info(
        "WA_TOKEN present=%s len=%s",
        bool(settings.WA_TOKEN),
        len(settings.WA_TOKEN or ""),
    )
    logger.info("ENV=%s", settings.ENV)

    if not settings.WA_TOKEN or not settings.PHONE_NUMBER_ID:
        if settings.ENV.lower() in {"dev", "local"}:
            logger.info("Using MockWhatsAppPlatform (credentials missing, ENV=dev/local)")
            return MockWhatsAppPlatform()
        raise ValueError("WA_TOKEN and PHONE_NUMBER_ID are required to send WhatsApp replies.")

    logger.info("Using real WhatsAppPlatform")
    client = WhatsAppClient(
        access_token=settings.WA_TOKEN,
        phone_number_id=settings.PHONE_NUMBER_ID,
        api_version=settings.WHATSAPP_GRAPH_API_VERSION,
        base_url=settings.WHATSAPP_API_BASE_URL,
    )
    return WhatsAppPlatform(client=client)


def get_dialog_flow_engine() -> DialogFlowEngine:
    return DialogFlowEngine(
        catalog=get_menu_catalog(),
        matcher=KeywordMatcherUseCase(
            rules=KEYWORD_RULES,
            numeric_shortcuts=NUMERIC_SHORTCUTS,
            default_rule=FALLBACK,
        ),
        variety=ReplyVarietySelector(),
        business_name=settings.BUSINESS_NAME,
        payment_instructions=settings.PAYMENT_INSTRUCTIONS,
        ai_reply=GenerateAIReplyUseCase(
            llm=get_llm(),
            business_name=settings.BUSINESS_NAME,
            enabled=settings.AI_ENABLED,
        ),
    )


def get_handle_incoming_message_use_case() -> HandleIncomingMessageUseCase:
    context = get_app_context()
    return HandleIncomingMessageUseCase(
        context=context,
        engine=get_dialog_flow_engine(),
        business_hours=BusinessHoursGate(timezone=settings.BUSINESS_TIMEZONE),
        send_reply=SendReplyUseCase(platform=get_message_platform(), history=context.history),
    )


def get_use_case_builder() -> Callable[[], HandleIncomingMessageUseCase]:
    """The webhook builds the use case itself so a wiring failure can still be audited."""
    return get_handle_incoming_message_use_case
