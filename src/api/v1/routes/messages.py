"""Messaging API routes."""

from fastapi import APIRouter, Depends, Response, status

from api.dependencies.auth import CurrentUser
from api.v1.dependencies import get_messaging_service
from api.v1.schemas.messaging import (
    ConversationListResponse,
    ConversationResponse,
    MessageCreatedResponse,
    MessageListResponse,
    MessageResponse,
    SendMessageRequest,
    StartConversationRequest,
    StartConversationResponse,
    UnreadCount,
    UnreadCountResponse,
)
from domain.entities.conversation import Conversation
from domain.entities.message import Message
from domain.services.messaging_service import MessagingService

router = APIRouter(prefix="/messages", tags=["messages"])


def _build_conversation_response(conversation: Conversation) -> ConversationResponse:
    return ConversationResponse(
        id=conversation.id,
        participants=list(conversation.participants),
        created_at=conversation.created_at,
        updated_at=conversation.updated_at,
    )


def _build_message_response(message: Message) -> MessageResponse:
    return MessageResponse(
        id=message.id,
        conversation_id=message.conversation_id,
        sender_id=message.sender_id,
        recipient_id=message.recipient_id,
        content=message.content,
        timestamp=message.timestamp,
        read=message.read,
    )


# Static paths are registered before /{conversation_id}


@router.get(
    "/conversations",
    response_model=ConversationListResponse,
    summary="List my conversations",
)
async def list_conversations(
    user: CurrentUser,
    service: MessagingService = Depends(get_messaging_service),
) -> ConversationListResponse:
    """List the caller's conversations, most recent activity first."""
    conversations = await service.list_conversations(user.uid)
    data = [_build_conversation_response(c) for c in conversations]
    return ConversationListResponse(data=data, meta={"total": len(data)})


@router.get(
    "/unread-count",
    response_model=UnreadCountResponse,
    summary="Count unread messages",
)
async def unread_count(
    user: CurrentUser,
    service: MessagingService = Depends(get_messaging_service),
) -> UnreadCountResponse:
    """Count unread messages addressed to the caller across conversations."""
    count = await service.count_unread(user.uid)
    return UnreadCountResponse(data=UnreadCount(count=count))


@router.post(
    "/new",
    response_model=StartConversationResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Start or reuse a conversation",
    responses={
        200: {"description": "Existing conversation reused"},
        201: {"description": "Conversation created"},
        400: {"description": "Missing or invalid recipient"},
    },
)
async def start_conversation(
    body: StartConversationRequest,
    user: CurrentUser,
    response: Response,
    service: MessagingService = Depends(get_messaging_service),
) -> StartConversationResponse:
    """Open a conversation with another identity. Idempotent per pair."""
    conversation, created = await service.start_conversation(user.uid, body.recipient_id)
    if not created:
        response.status_code = status.HTTP_200_OK
    return StartConversationResponse(
        data=_build_conversation_response(conversation),
        created=created,
        message=None if created else "Conversation exists",
    )


@router.get(
    "/{conversation_id}",
    response_model=MessageListResponse,
    summary="Read a conversation",
    responses={
        200: {"description": "Messages, oldest first"},
        403: {"description": "Not a participant"},
    },
)
async def get_messages(
    conversation_id: str,
    user: CurrentUser,
    service: MessagingService = Depends(get_messaging_service),
) -> MessageListResponse:
    """Fetch a conversation's messages and mark those addressed to the caller read."""
    messages = await service.get_messages(conversation_id, user.uid)
    data = [_build_message_response(m) for m in messages]
    return MessageListResponse(data=data, meta={"total": len(data)})


@router.post(
    "/{conversation_id}",
    response_model=MessageCreatedResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Send a message",
    responses={
        201: {"description": "Message sent"},
        400: {"description": "Missing content"},
        403: {"description": "Not a participant"},
    },
)
async def send_message(
    conversation_id: str,
    body: SendMessageRequest,
    user: CurrentUser,
    service: MessagingService = Depends(get_messaging_service),
) -> MessageCreatedResponse:
    """Send a message to the other participant."""
    message = await service.send_message(conversation_id, user.uid, body.content)
    return MessageCreatedResponse(data=_build_message_response(message))
