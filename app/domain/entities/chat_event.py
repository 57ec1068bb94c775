from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Direction(str, Enum):
    IN = "in"
    OUT = "out"


@dataclass(frozen=True)
class ChatEvent:
    id: str
    direction: Direction
    counterparty_id: str
    text: str
    timestamp: str  # ISO-8601, UTC
