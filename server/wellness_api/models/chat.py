"""Chat message data models."""
from datetime import datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

Sender = Literal["user", "ai"]


class ChatMessage(BaseModel):
    """One message in the assistant conversation."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    user_id: str
    content: str
    sender: Sender
    timestamp: datetime


class ChatMessageCreate(BaseModel):
    """Request body for sending a message to the assistant."""

    content: str = Field(min_length=1, max_length=4000)

    @field_validator("content")
    @classmethod
    def not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("message must not be blank")
        return value.strip()


class ChatExchange(BaseModel):
    """A user message and the assistant reply stored for it."""

    message: ChatMessage
    reply: ChatMessage
