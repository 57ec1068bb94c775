from __future__ import annotations

from app.domain.entities.chat_event import Direction
from app.infrastructure.store.chat_history import ChatHistory


def test_history_is_bounded_fifo():
    history = ChatHistory(limit=200)
    for i in range(250):
        history.append(Direction.IN, "584121234567", f"msg {i}")

    events = history.list()
    assert len(events) == 200
    assert [e.text for e in events] == [f"msg {i}" for i in range(50, 250)]


def test_event_shape():
    event = ChatHistory().append(Direction.OUT, "584121234567", "hola")
    millis, _, suffix = event.id.partition("-")
    assert millis.isdigit()
    assert suffix
    assert event.direction == Direction.OUT
    assert event.timestamp.endswith("+00:00")


def test_ids_are_unique():
    history = ChatHistory()
    ids = {history.append(Direction.IN, "1", "x").id for _ in range(50)}
    assert len(ids) == 50
