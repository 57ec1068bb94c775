from __future__ import annotations

from dataclasses import replace

import pytest

from app.application.use_cases.dialog_flow import (
    ADDRESS_PROMPT,
    PAY_LATER_ACK,
    QUANTITY_INVALID,
    SERVICE_PROMPT,
    DialogFlowEngine,
)
from app.application.utils.greeting import ANYTHING_ELSE, HANDOFF_ACK
from app.domain.entities.conversation_state import Awaiting, ConversationState, ServiceType
from app.infrastructure.knowledge.keyword_rules import FALLBACK, GREETING
from tests.fakes import FakeLLM, build_engine


def _run(engine: DialogFlowEngine, state: ConversationState, *messages: str) -> ConversationState:
    for text in messages:
        result = engine.process(state, text)
        assert sum(result.state.awaiting_flags().values()) <= 1
        state = result.state
    return state


def test_first_contact_greets_and_ignores_content(engine):
    result = engine.process(ConversationState(), "quiero hablar con un asesor")

    assert result.step == "greeting"
    assert result.state.greeted is True
    assert result.state.handoff_requested is False
    assert "Sivetachi" in result.reply.text
    assert "Menu principal" in result.reply.text
    assert result.reply.interactive is not None


def test_same_content_after_greeting_goes_to_matcher(engine):
    state = engine.process(ConversationState(), "horario").state
    result = engine.process(state, "horario")

    assert result.step == "rule_hours"
    assert result.reply.text.endswith(ANYTHING_ELSE)


def test_full_order_flow(engine, greeted):
    result = engine.process(greeted, "h1")
    assert result.state.awaiting == Awaiting.ITEM_QUANTITY
    assert result.state.selected_item_id == "h1"

    result = engine.process(result.state, "2")
    assert result.state.awaiting == Awaiting.ITEM_EXTRAS
    assert result.state.selected_item_quantity == 2

    result = engine.process(result.state, "no")
    assert result.state.order_text == "2x Hamburguesa clasica - Bs. 6."
    assert result.state.awaiting == Awaiting.SERVICE_TYPE
    assert SERVICE_PROMPT in result.reply.text

    result = engine.process(result.state, "delivery")
    assert result.state.awaiting == Awaiting.ADDRESS
    assert result.state.service_type == ServiceType.DELIVERY
    assert result.reply.text == ADDRESS_PROMPT

    result = engine.process(result.state, "Zona X, Calle Y")
    assert result.state.awaiting == Awaiting.PAYMENT_CONFIRM
    assert result.state.address == "Zona X, Calle Y"

    result = engine.process(result.state, "si")
    assert result.step == "payment_now"
    assert result.reply.text == "Datos de pago para 2x Hamburguesa clasica - Bs. 6: Pago movil 0102. Sivetachi"
    assert result.state.is_idle
    assert not any(result.state.awaiting_flags().values())
    assert result.state.order_text == ""
    assert result.state.selected_item_id is None
    assert result.state.service_type == ServiceType.NONE
    assert result.state.greeted is True


def test_selection_id_from_interactive_list(engine, greeted):
    result = engine.process(greeted, "Pizza margarita", selection_id="p1")
    assert result.state.selected_item_id == "p1"
    assert result.state.awaiting == Awaiting.ITEM_QUANTITY


def test_extras_are_captured_verbatim(engine, greeted):
    state = _run(engine, greeted, "h2", "3")
    result = engine.process(state, "Sin cebolla, extra queso")
    assert result.state.order_text == "3x Hamburguesa doble - Bs. 9. Extras: Sin cebolla, extra queso."
    assert result.state.item_extras == "Sin cebolla, extra queso"


@pytest.mark.parametrize("bad", ["0", "21", "abc"])
def test_invalid_quantity_keeps_state(engine, greeted, bad):
    state = engine.process(greeted, "h1").state
    result = engine.process(state, bad)
    assert result.state == state
    assert result.reply.text == QUANTITY_INVALID


def test_valid_quantity_after_invalid(engine, greeted):
    state = _run(engine, greeted, "h1", "abc", "21")
    result = engine.process(state, "5")
    assert result.state.awaiting == Awaiting.ITEM_EXTRAS
    assert result.state.selected_item_quantity == 5


def test_menu_resets_any_flow(engine, greeted):
    state = _run(engine, greeted, "h1", "2")
    result = engine.process(state, "Menú")
    assert result.step == "menu_reset"
    assert result.state.is_idle
    assert result.state.selected_item_id is None
    assert result.state.selected_item_quantity == 0


def test_zero_resets_outside_quantity_slot(engine, greeted):
    state = _run(engine, greeted, "5")
    assert state.awaiting == Awaiting.ORDER_TEXT
    result = engine.process(state, "0")
    assert result.step == "menu_reset"
    assert result.state.is_idle


def test_handoff_is_sticky(engine, greeted):
    result = engine.process(greeted, "quiero hablar con un asesor")
    assert result.step == "handoff"
    assert result.state.handoff_requested is True

    state = result.state
    for text in ["menu", "0", "h1", "hola", "si"]:
        result = engine.process(state, text)
        assert result.reply.text == HANDOFF_ACK
        assert result.state == state


def test_numeric_nine_requests_handoff(engine, greeted):
    assert engine.process(greeted, "9").state.handoff_requested is True


def test_category_browse_then_free_text_order(engine, greeted):
    result = engine.process(greeted, "1")
    assert result.state.awaiting == Awaiting.ORDER_TEXT
    assert result.reply.interactive is not None
    assert "h1 - Hamburguesa clasica - Bs. 6" in result.reply.text

    result = engine.process(result.state, "  2 clasicas y 1 doble  ")
    assert result.state.order_text == "2 clasicas y 1 doble"
    assert result.state.awaiting == Awaiting.SERVICE_TYPE


def test_category_browse_then_item_code(engine, greeted):
    state = engine.process(greeted, "quiero una pizza").state
    result = engine.process(state, "P2")
    assert result.state.selected_item_id == "p2"
    assert result.state.awaiting == Awaiting.ITEM_QUANTITY


def test_service_type_reprompt_and_in_store(engine, greeted):
    state = _run(engine, greeted, "5", "una pizza margarita")
    result = engine.process(state, "no se")
    assert result.state == state
    assert result.reply.text == SERVICE_PROMPT

    result = engine.process(state, "paso a retirar")
    assert result.state.service_type == ServiceType.IN_STORE
    assert result.state.awaiting == Awaiting.PAYMENT_CONFIRM


def test_pay_later_resets(engine, greeted):
    state = _run(engine, greeted, "5", "una pizza", "para llevar")
    result = engine.process(state, "más tarde")
    assert result.reply.text == PAY_LATER_ACK
    assert result.state.is_idle


def test_payment_reprompt_keeps_state(engine, greeted):
    state = _run(engine, greeted, "5", "una pizza", "para llevar")
    result = engine.process(state, "tal vez")
    assert result.step == "payment_reprompt"
    assert result.state == state


def test_reservation_requires_detail_and_chains_to_payment(engine, greeted):
    state = engine.process(greeted, "quiero reservar").state
    assert state.awaiting == Awaiting.RESERVATION_DETAILS

    result = engine.process(state, "sab")
    assert result.step == "reservation_reprompt"
    assert result.state == state

    result = engine.process(state, "sabado 8pm, 4 personas")
    assert result.state.awaiting == Awaiting.PAYMENT_CONFIRM
    assert result.state.order_text == "Reserva: sabado 8pm, 4 personas"


def test_delivery_details_chain_skips_service_question(engine, greeted):
    state = engine.process(greeted, "hacen envio?").state
    assert state.awaiting == Awaiting.DELIVERY_DETAILS

    state = engine.process(state, "Zona Norte, calle 3").state
    assert state.awaiting == Awaiting.ORDER_TEXT
    assert state.service_type == ServiceType.DELIVERY

    state = _run(engine, state, "b2", "2", "no")
    assert state.awaiting == Awaiting.PAYMENT_CONFIRM
    assert state.address == "Zona Norte, calle 3"
    assert state.order_text == "2x Jugo natural - Bs. 3."


def test_fallback_never_repeats(engine, greeted):
    state = greeted
    replies = []
    for _ in range(20):
        result = engine.process(state, "xyz")
        assert result.step == "fallback"
        replies.append(result.reply.text)
        state = result.state
    assert all(a != b for a, b in zip(replies, replies[1:]))
    assert set(replies) <= set(FALLBACK.reply.candidates())


def test_greeting_rule_uses_variety(engine, greeted):
    result = engine.process(greeted, "buenas tardes")
    assert result.reply.text in GREETING.reply.candidates()
    assert result.state.last_reply_by_key["greeting"] == result.reply.text


def test_ai_reply_used_only_when_nothing_matched(greeted):
    llm = FakeLLM(answer="Respuesta de IA")
    engine = build_engine(llm=llm, ai_enabled=True)

    assert engine.process(greeted, "cual es el sentido de la vida").reply.text == "Respuesta de IA"
    assert engine.process(greeted, "horario").step == "rule_hours"
    assert llm.calls == ["cual es el sentido de la vida"]


def test_ai_failure_falls_back_to_keyword_reply(greeted):
    engine = build_engine(llm=FakeLLM(error=RuntimeError("boom")), ai_enabled=True)
    result = engine.process(greeted, "xyz")
    assert result.step == "fallback"
    assert result.reply.text in FALLBACK.reply.candidates()


def test_ai_disabled_never_calls_llm(greeted):
    llm = FakeLLM(answer="nope")
    engine = build_engine(llm=llm, ai_enabled=False)
    engine.process(greeted, "xyz")
    assert llm.calls == []


def test_at_most_one_awaiting_flag_over_random_walk(engine):
    inputs = ["hola", "1", "h1", "3", "no", "delivery", "Calle 5", "si", "6", "ma", "viernes 9pm 2", "no",
              "envio", "Zona Sur 12", "h3", "0", "25", "2", "extra queso", "tienda", "luego", "menu", "xyz"]
    state = ConversationState()
    for i in range(3):
        state = _run(engine, state, *inputs[i:] + inputs[:i])


def test_lost_item_resets_to_menu(engine, greeted):
    state = replace(greeted, awaiting=Awaiting.ITEM_QUANTITY, selected_item_id="zz9")
    result = engine.process(state, "2")
    assert result.step == "item_missing"
    assert result.state.is_idle
