from __future__ import annotations

import secrets
import threading
from collections import deque
from datetime import datetime, timezone

from app.domain.entities.chat_event import ChatEvent, Direction


class ChatHistory:
    """Bounded in-memory audit log of every inbound and outbound message."""

    def __init__(self, limit: int = 200) -> None:
        self._limit = limit
        self._events: deque[ChatEvent] = deque(maxlen=limit)
        self._lock = threading.Lock()

    @property
    def limit(self) -> int:
        return self._limit

    def append(
        self,
        direction: Direction,
        counterparty_id: str,
        text: str,
        now: datetime | None = None,
    ) -> ChatEvent:
        ts = now or datetime.now(timezone.utc)
        event = ChatEvent(
            id=f"{int(ts.timestamp() * 1000)}-{secrets.token_hex(6)}",
            direction=direction,
            counterparty_id=counterparty_id,
            text=text,
            timestamp=ts.astimezone(timezone.utc).isoformat(),
        )
        with self._lock:
            # deque(maxlen) drops the oldest entry on overflow
            self._events.append(event)
        return event

    def list(self) -> list[ChatEvent]:
        with self._lock:
            return list(self._events)

    def clear(self) -> None:
        with self._lock:
            self._events.clear()

    def __len__(self) -> int:
        return len(self._events)
