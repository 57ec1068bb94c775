from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Callable

from app.application.ports.menu_catalog import MenuCatalogPort
from app.application.use_cases.generate_reply import GenerateAIReplyUseCase
from app.application.use_cases.match_intent import KeywordMatcherUseCase
from app.application.use_cases.reply_variety import ReplyVarietySelector
from app.application.utils.greeting import ANYTHING_ELSE, HANDOFF_ACK, build_greeting
from app.application.utils.menu_text import build_category_reply, build_main_menu
from app.application.utils.message_rules import (
    MAX_QUANTITY,
    MIN_QUANTITY,
    has_enough_detail,
    is_affirmative,
    is_negative,
    is_no_extras,
    is_reset_command,
    normalize_text,
    parse_quantity,
    wants_delivery,
    wants_in_store,
)
from app.application.utils.state_helpers import await_slot, reset_order_flow
from app.domain.entities.conversation_state import Awaiting, ConversationState, ServiceType
from app.domain.entities.keyword_rule import KeywordRule, StartAction
from app.domain.entities.menu_catalog import Item
from app.domain.entities.reply import Reply


QUANTITY_INVALID = f"Por favor indica una cantidad valida, un numero del {MIN_QUANTITY} al {MAX_QUANTITY}."
ORDER_TEXT_PROMPT = "Escribe tu pedido (producto y cantidad) o el codigo del producto, por ejemplo *h1*."
SERVICE_PROMPT = "Lo quieres por *delivery* o para *retirar en tienda*?"
ADDRESS_PROMPT = "Indica tu direccion de entrega: zona, calle y un punto de referencia."
PAYMENT_REPROMPT = "Responde *si* para recibir los datos de pago ahora o *no* para pagar al recibir."
PAY_LATER_ACK = "Perfecto, pagas al momento de la entrega o retiro. Tu pedido ya esta en preparacion. Gracias!"
RESERVATION_REPROMPT = "Para la reserva necesito fecha, hora y cantidad de personas."
DELIVERY_DETAILS_REPROMPT = "Indica tu zona y direccion para confirmar si llegamos."


@dataclass(frozen=True)
class FlowResult:
    state: ConversationState
    reply: Reply
    step: str  # transition taken, for logging and tests


def compose_order_text(quantity: int, item: Item, extras: str) -> str:
    text = f"{quantity}x {item.title} - {item.price}."
    if extras:
        text += f" Extras: {extras}."
    return text


def payment_prompt(order_text: str) -> str:
    return (
        f"Resumen: {order_text}\n"
        "Deseas pagar ahora? Responde *si* para recibir los datos de pago o *no* para pagar al recibir."
    )


class DialogFlowEngine:
    """
    Per-conversation state machine. Takes the current state and one inbound
    message and returns the next state plus the reply; never stores anything.
    """

    def __init__(
        self,
        catalog: MenuCatalogPort,
        matcher: KeywordMatcherUseCase,
        variety: ReplyVarietySelector,
        business_name: str,
        payment_instructions: str,
        ai_reply: GenerateAIReplyUseCase | None = None,
    ) -> None:
        self._catalog = catalog
        self._matcher = matcher
        self._variety = variety
        self._business_name = business_name
        self._payment_instructions = payment_instructions
        self._ai_reply = ai_reply
        self._slot_handlers: dict[Awaiting, Callable[[ConversationState, str, str], FlowResult]] = {
            Awaiting.NONE: self._on_idle,
            Awaiting.ITEM_QUANTITY: self._on_quantity,
            Awaiting.ITEM_EXTRAS: self._on_extras,
            Awaiting.ORDER_TEXT: self._on_order_text,
            Awaiting.SERVICE_TYPE: self._on_service_type,
            Awaiting.ADDRESS: self._on_address,
            Awaiting.PAYMENT_CONFIRM: self._on_payment_confirm,
            Awaiting.RESERVATION_DETAILS: self._on_reservation_details,
            Awaiting.DELIVERY_DETAILS: self._on_delivery_details,
        }

    def process(self, state: ConversationState, text: str, selection_id: str | None = None) -> FlowResult:
        raw = (text or "").strip()
        normalized = normalize_text(selection_id or text)

        # The first message only triggers the welcome; its content is not answered.
        if not state.greeted:
            reply = build_main_menu(self._catalog, intro=build_greeting(self._business_name))
            return FlowResult(replace(state, greeted=True), reply, "greeting")

        if state.handoff_requested:
            return FlowResult(state, Reply(text=HANDOFF_ACK), "handoff_ack")

        # "0" is a (wrong) answer while a quantity is pending, so only "menu" escapes there.
        if is_reset_command(normalized) and not (
            normalized == "0" and state.is_awaiting(Awaiting.ITEM_QUANTITY)
        ):
            return FlowResult(reset_order_flow(state), build_main_menu(self._catalog), "menu_reset")

        item = self._catalog.get_item(selection_id or normalized)
        if item is not None:
            return self._select_item(state, item)

        return self._slot_handlers[state.awaiting](state, normalized, raw)

    def _select_item(self, state: ConversationState, item: Item) -> FlowResult:
        new_state = await_slot(
            state,
            Awaiting.ITEM_QUANTITY,
            selected_item_id=item.id,
            selected_item_quantity=0,
            item_extras="",
            order_text="",
        )
        text = (
            f"Elegiste {item.title} ({item.price}). "
            f"Cuantas unidades quieres? Responde con un numero del {MIN_QUANTITY} al {MAX_QUANTITY}."
        )
        return FlowResult(new_state, Reply(text=text), "item_selected")

    def _selected_item(self, state: ConversationState) -> Item | None:
        if not state.selected_item_id:
            return None
        return self._catalog.get_item(state.selected_item_id)

    def _lost_item(self, state: ConversationState) -> FlowResult:
        return FlowResult(reset_order_flow(state), build_main_menu(self._catalog), "item_missing")

    def _on_quantity(self, state: ConversationState, normalized: str, raw: str) -> FlowResult:
        item = self._selected_item(state)
        if item is None:
            return self._lost_item(state)

        quantity = parse_quantity(normalized)
        if quantity is None:
            return FlowResult(state, Reply(text=QUANTITY_INVALID), "quantity_invalid")

        new_state = await_slot(state, Awaiting.ITEM_EXTRAS, selected_item_quantity=quantity)
        text = (
            f"Perfecto, {quantity}x {item.title}. "
            "Deseas agregar algun extra o nota? (por ejemplo: sin cebolla, extra queso). Si no, responde *no*."
        )
        return FlowResult(new_state, Reply(text=text), "quantity_accepted")

    def _on_extras(self, state: ConversationState, normalized: str, raw: str) -> FlowResult:
        item = self._selected_item(state)
        if item is None:
            return self._lost_item(state)

        extras = "" if is_no_extras(normalized) else raw
        order_text = compose_order_text(state.selected_item_quantity, item, extras)
        return self._order_captured(replace(state, item_extras=extras), order_text, "extras_captured")

    def _on_order_text(self, state: ConversationState, normalized: str, raw: str) -> FlowResult:
        if not raw:
            return FlowResult(state, Reply(text=ORDER_TEXT_PROMPT), "order_text_reprompt")
        return self._order_captured(state, raw, "order_text_captured")

    def _order_captured(self, state: ConversationState, order_text: str, step: str) -> FlowResult:
        # The delivery-details flow may already have collected the address.
        if state.service_type == ServiceType.DELIVERY and state.address:
            new_state = await_slot(state, Awaiting.PAYMENT_CONFIRM, order_text=order_text)
            text = f"Entrega en: {state.address}\n\n{payment_prompt(order_text)}"
            return FlowResult(new_state, Reply(text=text), step)

        new_state = await_slot(state, Awaiting.SERVICE_TYPE, order_text=order_text)
        return FlowResult(new_state, Reply(text=f"Tu pedido: {order_text}\n\n{SERVICE_PROMPT}"), step)

    def _on_service_type(self, state: ConversationState, normalized: str, raw: str) -> FlowResult:
        if wants_delivery(normalized):
            new_state = await_slot(state, Awaiting.ADDRESS, service_type=ServiceType.DELIVERY)
            return FlowResult(new_state, Reply(text=ADDRESS_PROMPT), "service_delivery")

        if wants_in_store(normalized):
            new_state = await_slot(state, Awaiting.PAYMENT_CONFIRM, service_type=ServiceType.IN_STORE)
            text = f"Listo, lo preparamos para retirar en tienda.\n\n{payment_prompt(state.order_text)}"
            return FlowResult(new_state, Reply(text=text), "service_in_store")

        return FlowResult(state, Reply(text=SERVICE_PROMPT), "service_reprompt")

    def _on_address(self, state: ConversationState, normalized: str, raw: str) -> FlowResult:
        if not raw:
            return FlowResult(state, Reply(text=ADDRESS_PROMPT), "address_reprompt")

        new_state = await_slot(state, Awaiting.PAYMENT_CONFIRM, address=raw)
        text = f"Entrega en: {raw}\n\n{payment_prompt(state.order_text)}"
        return FlowResult(new_state, Reply(text=text), "address_captured")

    def _on_payment_confirm(self, state: ConversationState, normalized: str, raw: str) -> FlowResult:
        if is_affirmative(normalized):
            text = self._render_payment_instructions(state.order_text)
            return FlowResult(reset_order_flow(state), Reply(text=text), "payment_now")

        if is_negative(normalized):
            return FlowResult(reset_order_flow(state), Reply(text=PAY_LATER_ACK), "payment_later")

        return FlowResult(state, Reply(text=PAYMENT_REPROMPT), "payment_reprompt")

    def _render_payment_instructions(self, order_text: str) -> str:
        return (
            self._payment_instructions
            .replace("{order}", order_text.rstrip("."))
            .replace("{business}", self._business_name)
        )

    def _on_reservation_details(self, state: ConversationState, normalized: str, raw: str) -> FlowResult:
        if not has_enough_detail(raw):
            return FlowResult(state, Reply(text=RESERVATION_REPROMPT), "reservation_reprompt")

        order_text = f"Reserva: {raw}"
        new_state = await_slot(state, Awaiting.PAYMENT_CONFIRM, order_text=order_text)
        text = (
            f"Reserva anotada: {raw}.\n"
            "Para confirmarla pedimos un abono. Deseas pagarlo ahora? Responde *si* o *no*."
        )
        return FlowResult(new_state, Reply(text=text), "reservation_captured")

    def _on_delivery_details(self, state: ConversationState, normalized: str, raw: str) -> FlowResult:
        if not has_enough_detail(raw):
            return FlowResult(state, Reply(text=DELIVERY_DETAILS_REPROMPT), "delivery_details_reprompt")

        new_state = await_slot(
            state,
            Awaiting.ORDER_TEXT,
            service_type=ServiceType.DELIVERY,
            address=raw,
        )
        text = f"Perfecto, si llegamos a: {raw}.\n{ORDER_TEXT_PROMPT}"
        return FlowResult(new_state, Reply(text=text), "delivery_details_captured")

    def _on_idle(self, state: ConversationState, normalized: str, raw: str) -> FlowResult:
        match = self._matcher.execute(normalized)
        rule = match.rule
        action = rule.start_action

        if action == StartAction.SHOW_MENU:
            return FlowResult(state, build_main_menu(self._catalog), "main_menu")

        if action == StartAction.BROWSE_CATEGORY:
            category = self._catalog.get_category(rule.category or "")
            if category is None:
                return FlowResult(state, build_main_menu(self._catalog), "main_menu")
            new_state = await_slot(state, Awaiting.ORDER_TEXT)
            return FlowResult(new_state, build_category_reply(category), f"browse_{category.key}")

        if action == StartAction.START_ORDER:
            return FlowResult(await_slot(state, Awaiting.ORDER_TEXT), Reply(text=ORDER_TEXT_PROMPT), "start_order")

        if not match.matched:
            ai_text = self._ai_reply.execute(raw) if self._ai_reply is not None else None
            if ai_text:
                return FlowResult(state, Reply(text=ai_text, meta={"source": "ai"}), "ai_reply")

        text, state = self._pick_reply(state, rule)

        if action == StartAction.RESERVE:
            return FlowResult(await_slot(state, Awaiting.RESERVATION_DETAILS), Reply(text=text), "start_reservation")
        if action == StartAction.DELIVERY:
            return FlowResult(await_slot(state, Awaiting.DELIVERY_DETAILS), Reply(text=text), "start_delivery")
        if action == StartAction.HANDOFF:
            return FlowResult(replace(state, handoff_requested=True), Reply(text=text), "handoff")

        if rule.ask_more:
            text = f"{text}\n\n{ANYTHING_ELSE}"
        step = "fallback" if not match.matched else f"rule_{rule.key}"
        return FlowResult(state, Reply(text=text, meta={"rule": rule.key}), step)

    def _pick_reply(self, state: ConversationState, rule: KeywordRule) -> tuple[str, ConversationState]:
        if rule.reply is None:
            return "", state
        text, memory = self._variety.select(rule.key, rule.reply.candidates(), state.last_reply_by_key)
        return text, replace(state, last_reply_by_key=memory)
