from __future__ import annotations

from dataclasses import replace

from app.domain.entities.conversation_state import Awaiting, ConversationState, ServiceType


def reset_order_flow(state: ConversationState) -> ConversationState:
    """Back to Idle: clear the pending slot and every order-in-progress field."""
    return replace(
        state,
        awaiting=Awaiting.NONE,
        selected_item_id=None,
        selected_item_quantity=0,
        item_extras="",
        order_text="",
        service_type=ServiceType.NONE,
        address="",
    )


def await_slot(state: ConversationState, slot: Awaiting, **changes) -> ConversationState:
    """Move to a new pending slot; the previous one is implicitly cleared."""
    return replace(state, awaiting=slot, **changes)
