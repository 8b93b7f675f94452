"""Pydantic schemas for Messaging API."""

from datetime import datetime
from typing import Any

from pydantic import Field

from api.v1.schemas.common import CamelModel, SuccessEnvelope


class StartConversationRequest(CamelModel):
    """Schema for starting (or reusing) a conversation."""

    recipient_id: str | None = Field(None, description="Recipient's identity")


class SendMessageRequest(CamelModel):
    """Schema for sending a message."""

    content: str | None = Field(None, max_length=5000)


class ConversationResponse(CamelModel):
    """Schema for Conversation response."""

    id: str
    participants: list[str]
    created_at: datetime
    updated_at: datetime


class ConversationListResponse(SuccessEnvelope):
    """Schema for the caller's inbox."""

    data: list[ConversationResponse]
    meta: dict[str, Any] = Field(default_factory=dict)


class StartConversationResponse(SuccessEnvelope):
    """Schema for start-conversation response.

    ``created`` is False when an existing conversation was reused.
    """

    data: ConversationResponse
    created: bool


class MessageResponse(CamelModel):
    """Schema for Message response."""

    id: str
    conversation_id: str
    sender_id: str
    recipient_id: str
    content: str
    timestamp: datetime
    read: bool


class MessageListResponse(SuccessEnvelope):
    """Schema for a conversation's messages, oldest first."""

    data: list[MessageResponse]
    meta: dict[str, Any] = Field(default_factory=dict)


class MessageCreatedResponse(SuccessEnvelope):
    """Schema for send-message response."""

    data: MessageResponse


class UnreadCount(CamelModel):
    count: int


class UnreadCountResponse(SuccessEnvelope):
    """Schema for the unread badge count."""

    data: UnreadCount
