from __future__ import annotations

import threading

from app.application.ports.conversation_store import ConversationStorePort
from app.domain.entities.conversation_state import ConversationState


class MemoryConversationStore(ConversationStorePort):
    """
    Process-lifetime state per conversation. Entries are never evicted, which
    is fine for a single restaurant line but grows with every new customer.
    """

    def __init__(self) -> None:
        self._states: dict[str, ConversationState] = {}
        self._locks: dict[str, threading.Lock] = {}
        self._lock_lock = threading.Lock()  # Lock for managing locks dict

    def get_state(self, conversation_id: str) -> ConversationState:
        with self._lock_lock:
            state = self._states.get(conversation_id)
            if state is None:
                state = ConversationState()
                self._states[conversation_id] = state
            return state

    def set_state(self, conversation_id: str, state: ConversationState) -> None:
        with self._lock_lock:
            self._states[conversation_id] = state

    def lock(self, conversation_id: str) -> threading.Lock:
        with self._lock_lock:
            if conversation_id not in self._locks:
                self._locks[conversation_id] = threading.Lock()
            return self._locks[conversation_id]

    def reset(self) -> None:
        with self._lock_lock:
            self._states.clear()
            self._locks.clear()

    def __len__(self) -> int:
        return len(self._states)
