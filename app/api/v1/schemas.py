from pydantic import BaseModel, ConfigDict, Field

from app.domain.entities.chat_event import ChatEvent


class ChatEventSchema(BaseModel):
    id: str
    direction: str
    phone: str
    text: str
    timestamp: str

    @staticmethod
    def from_entity(event: ChatEvent) -> "ChatEventSchema":
        return ChatEventSchema(
            id=event.id,
            direction=event.direction.value,
            phone=event.counterparty_id,
            text=event.text,
            timestamp=event.timestamp,
        )


class StatusResponseSchema(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    is_bot_enabled: bool = Field(serialization_alias="isBotEnabled")


class HistoryResponseSchema(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    history: list[ChatEventSchema] = Field(default_factory=list)
    is_bot_enabled: bool = Field(serialization_alias="isBotEnabled")


class PanicResponseSchema(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    ok: bool = True
    is_bot_enabled: bool = Field(serialization_alias="isBotEnabled")
