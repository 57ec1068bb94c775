from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from app.domain.entities.message import Message


def _first(value: Any) -> Any:
    if isinstance(value, list) and value:
        return value[0]
    return None


def _as_dict(value: Any) -> dict[str, Any]:
    return value if isinstance(value, dict) else {}


class WebhookEventDTO(BaseModel):
    object: Any = None
    entry: Any = Field(default_factory=list)

    @classmethod
    def from_payload(cls, payload: Any) -> WebhookEventDTO:
        """Anything that is not a JSON object becomes an empty event."""
        if not isinstance(payload, dict):
            return cls()
        return cls(object=payload.get("object"), entry=payload.get("entry"))

    def extract_message(self) -> Message | None:
        """
        First entry -> first change -> first message, or None.
        Only plain text and interactive list replies are understood; any
        level with the wrong shape yields None.
        """
        entry = _as_dict(_first(self.entry))
        change = _as_dict(_first(entry.get("changes")))
        value = _as_dict(change.get("value"))
        msg = _as_dict(_first(value.get("messages")))

        sender = msg.get("from")
        if not sender or not isinstance(sender, (str, int)):
            return None

        msg_type = msg.get("type")
        text: Any = None
        selection_id: Any = None
        if msg_type == "text":
            text = _as_dict(msg.get("text")).get("body")
        elif msg_type == "interactive":
            list_reply = _as_dict(_as_dict(msg.get("interactive")).get("list_reply"))
            selection_id = list_reply.get("id")
            text = list_reply.get("title") or selection_id

        if not text or not isinstance(text, str):
            return None
        if not isinstance(selection_id, (str, int)):
            selection_id = None

        timestamp = msg.get("timestamp")
        try:
            ts = int(timestamp) if timestamp is not None else 0
        except (TypeError, ValueError):
            ts = 0

        return Message(
            id=str(msg.get("id") or ""),
            conversation_id=str(sender),
            sender_id=str(sender),
            text=text,
            timestamp=ts,
            selection_id=str(selection_id) if selection_id else None,
        )
