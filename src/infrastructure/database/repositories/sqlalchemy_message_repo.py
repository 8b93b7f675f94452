"""SQLAlchemy implementation of Message repository."""

from sqlalchemy import func, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from domain.entities.message import Message
from infrastructure.database.models import MessageModel


class SQLAlchemyMessageRepository:
    """SQLAlchemy implementation of IMessageRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def create(self, message: Message) -> Message:
        """Create a new message."""
        model = self._to_model(message)
        self._session.add(model)
        await self._session.flush()
        await self._session.refresh(model)
        return self._to_entity(model)

    async def list_for_conversation(self, conversation_id: str) -> list[Message]:
        """List a conversation's messages, oldest first."""
        stmt = (
            select(MessageModel)
            .where(MessageModel.conversation_id == conversation_id)
            .order_by(MessageModel.timestamp.asc(), MessageModel.id.asc())
        )
        result = await self._session.execute(stmt)
        return [self._to_entity(model) for model in result.scalars()]

    async def mark_read(self, conversation_id: str, recipient_id: str) -> int:
        """Mark unread messages addressed to recipient as read."""
        stmt = (
            update(MessageModel)
            .where(
                MessageModel.conversation_id == conversation_id,
                MessageModel.recipient_id == recipient_id,
                MessageModel.read.is_(False),
            )
            .values(read=True)
        )
        result = await self._session.execute(stmt)
        await self._session.flush()
        return result.rowcount  # type: ignore[attr-defined, no-any-return]

    async def count_unread(self, recipient_id: str) -> int:
        """Count unread messages addressed to recipient."""
        stmt = (
            select(func.count())
            .select_from(MessageModel)
            .where(
                MessageModel.recipient_id == recipient_id,
                MessageModel.read.is_(False),
            )
        )
        result = await self._session.execute(stmt)
        return int(result.scalar_one())

    def _to_entity(self, model: MessageModel) -> Message:
        """Convert ORM model to domain entity."""
        return Message(
            id=model.id,
            conversation_id=model.conversation_id,
            sender_id=model.sender_id,
            recipient_id=model.recipient_id,
            content=model.content,
            timestamp=model.timestamp,
            read=model.read,
        )

    def _to_model(self, entity: Message) -> MessageModel:
        """Convert domain entity to ORM model."""
        return MessageModel(
            id=entity.id,
            conversation_id=entity.conversation_id,
            sender_id=entity.sender_id,
            recipient_id=entity.recipient_id,
            content=entity.content,
            timestamp=entity.timestamp,
            read=entity.read,
        )
