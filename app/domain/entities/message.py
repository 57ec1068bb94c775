from dataclasses import dataclass


@dataclass(frozen=True)
class Message:
    id: str
    conversation_id: str
    sender_id: str
    text: str
    timestamp: int
    platform: str = "whatsapp"
    selection_id: str | None = None  # interactive list reply row id
