from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class Awaiting(str, Enum):
    NONE = "none"
    ORDER_TEXT = "order_text"
    SERVICE_TYPE = "service_type"
    ADDRESS = "address"
    PAYMENT_CONFIRM = "payment_confirm"
    ITEM_QUANTITY = "item_quantity"
    ITEM_EXTRAS = "item_extras"
    RESERVATION_DETAILS = "reservation_details"
    DELIVERY_DETAILS = "delivery_details"


class ServiceType(str, Enum):
    NONE = "none"
    DELIVERY = "delivery"
    IN_STORE = "in_store"


@dataclass(frozen=True)
class ConversationState:
    greeted: bool = False
    handoff_requested: bool = False  # sticky, never cleared
    # A single slot instead of one boolean per pending input: at most one is ever pending.
    awaiting: Awaiting = Awaiting.NONE
    selected_item_id: str | None = None
    selected_item_quantity: int = 0
    item_extras: str = ""
    order_text: str = ""
    service_type: ServiceType = ServiceType.NONE
    address: str = ""
    last_reply_by_key: dict[str, str] = field(default_factory=dict)

    def is_awaiting(self, slot: Awaiting) -> bool:
        return self.awaiting == slot

    def awaiting_flags(self) -> dict[str, bool]:
        """Boolean view of the pending-input slots, keyed by slot name."""
        return {slot.value: self.awaiting == slot for slot in Awaiting if slot != Awaiting.NONE}

    @property
    def is_idle(self) -> bool:
        return self.awaiting == Awaiting.NONE
