from abc import ABC, abstractmethod
from contextlib import AbstractContextManager

from app.domain.entities.conversation_state import ConversationState


class ConversationStorePort(ABC):
    @abstractmethod
    def get_state(self, conversation_id: str) -> ConversationState:
        """Return the state for a conversation, creating a fresh one on first access."""
        raise NotImplementedError

    @abstractmethod
    def set_state(self, conversation_id: str, state: ConversationState) -> None:
        raise NotImplementedError

    @abstractmethod
    def lock(self, conversation_id: str) -> AbstractContextManager:
        """
        Mutual exclusion for one conversation.
        Callers hold it across read, process and write of that conversation's state.
        """
        raise NotImplementedError

    @abstractmethod
    def reset(self) -> None:
        raise NotImplementedError
