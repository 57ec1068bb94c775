from __future__ import annotations

import threading

from app.application.ports.conversation_store import ConversationStorePort
from app.infrastructure.store.chat_history import ChatHistory


class AppContext:
    """
    Process-wide mutable state: conversation states, the audit log and the
    bot on/off switch. Built once in wiring and passed to whoever needs it.
    """

    def __init__(self, store: ConversationStorePort, history: ChatHistory, bot_enabled: bool = True) -> None:
        self.store = store
        self.history = history
        self._default_bot_enabled = bot_enabled
        self._bot_enabled = bot_enabled
        self._lock = threading.Lock()

    @property
    def bot_enabled(self) -> bool:
        return self._bot_enabled

    def set_bot_enabled(self, enabled: bool) -> None:
        with self._lock:
            self._bot_enabled = enabled

    def reset(self) -> None:
        self.store.reset()
        self.history.clear()
        self.set_bot_enabled(self._default_bot_enabled)
