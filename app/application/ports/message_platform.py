from abc import ABC, abstractmethod
from enum import Enum

from app.domain.entities.reply import InteractiveList


class RichSendResult(str, Enum):
    SENT = "sent"
    FALLBACK_NEEDED = "fallback_needed"


class MessagePlatformPort(ABC):
    @abstractmethod
    def send_text(self, recipient_id: str, text: str) -> None:
        """Send a plain text message. Raises on failure."""
        raise NotImplementedError

    @abstractmethod
    def send_list(self, recipient_id: str, interactive: InteractiveList) -> RichSendResult:
        """
        Send an interactive list message.
        Never raises for a rejected send; returns FALLBACK_NEEDED so the caller
        can deliver the plain-text equivalent instead.
        """
        raise NotImplementedError
