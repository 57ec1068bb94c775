from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class StartAction(str, Enum):
    SHOW_MENU = "show_menu"
    BROWSE_CATEGORY = "browse_category"
    START_ORDER = "start_order"
    RESERVE = "reserve"
    DELIVERY = "delivery"
    HANDOFF = "handoff"


@dataclass(frozen=True)
class FixedReply:
    text: str

    def candidates(self) -> tuple[str, ...]:
        return (self.text,)


@dataclass(frozen=True)
class VariedReply:
    options: tuple[str, ...]

    def candidates(self) -> tuple[str, ...]:
        return self.options


@dataclass(frozen=True)
class KeywordRule:
    key: str
    keywords: tuple[str, ...]
    reply: FixedReply | VariedReply | None = None
    start_action: StartAction | None = None
    category: str | None = None  # for BROWSE_CATEGORY
    ask_more: bool = False  # append the "anything else?" suffix
