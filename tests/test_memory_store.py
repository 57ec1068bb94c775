from __future__ import annotations

from dataclasses import replace

from app.domain.entities.conversation_state import ConversationState
from app.infrastructure.store.memory_store import MemoryConversationStore


def test_get_state_creates_and_memoizes():
    store = MemoryConversationStore()
    first = store.get_state("584120000001")
    assert first == ConversationState()
    assert store.get_state("584120000001") is first
    assert len(store) == 1


def test_set_state_and_reset():
    store = MemoryConversationStore()
    store.set_state("a", replace(ConversationState(), greeted=True))
    assert store.get_state("a").greeted is True

    store.reset()
    assert len(store) == 0
    assert store.get_state("a").greeted is False


def test_lock_is_per_conversation():
    store = MemoryConversationStore()
    assert store.lock("a") is store.lock("a")
    assert store.lock("a") is not store.lock("b")
    with store.lock("a"):
        assert store.lock("b").acquire(blocking=False)
        store.lock("b").release()
