"""SQLAlchemy implementation of Conversation repository."""

from datetime import datetime

from sqlalchemy import or_, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from domain.entities.conversation import Conversation, make_pair_key
from infrastructure.database.models import ConversationModel


class SQLAlchemyConversationRepository:
    """SQLAlchemy implementation of IConversationRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get(self, id: str) -> Conversation | None:
        """Get a conversation by ID."""
        model = await self._session.get(ConversationModel, id)
        return self._to_entity(model) if model else None

    async def get_by_participants(self, first: str, second: str) -> Conversation | None:
        """Get the conversation between two identities, in either order."""
        stmt = select(ConversationModel).where(
            ConversationModel.pair_key == make_pair_key(first, second)
        )
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        return self._to_entity(model) if model else None

    async def get_or_create(self, conversation: Conversation) -> tuple[Conversation, bool]:
        """Insert a conversation unless one exists for the same pair.

        The unique pair_key makes a concurrent insert for the same pair fail;
        that case resolves to the row that won.
        """
        existing = await self.get_by_participants(*conversation.participants)
        if existing:
            return existing, False

        model = self._to_model(conversation)
        self._session.add(model)
        try:
            await self._session.flush()
        except IntegrityError:
            await self._session.rollback()
            existing = await self.get_by_participants(*conversation.participants)
            if existing is None:
                raise
            return existing, False

        await self._session.refresh(model)
        return self._to_entity(model), True

    async def list_for_participant(self, user_id: str) -> list[Conversation]:
        """List a participant's conversations, most recently updated first."""
        stmt = (
            select(ConversationModel)
            .where(
                or_(
                    ConversationModel.first_participant_id == user_id,
                    ConversationModel.second_participant_id == user_id,
                )
            )
            .order_by(ConversationModel.updated_at.desc())
        )
        result = await self._session.execute(stmt)
        return [self._to_entity(model) for model in result.scalars()]

    async def touch(self, id: str, at: datetime) -> None:
        """Set a conversation's updated_at."""
        stmt = update(ConversationModel).where(ConversationModel.id == id).values(updated_at=at)
        await self._session.execute(stmt)
        await self._session.flush()

    def _to_entity(self, model: ConversationModel) -> Conversation:
        """Convert ORM model to domain entity."""
        return Conversation(
            id=model.id,
            participants=(model.first_participant_id, model.second_participant_id),
            created_at=model.created_at,
            updated_at=model.updated_at,
        )

    def _to_model(self, entity: Conversation) -> ConversationModel:
        """Convert domain entity to ORM model."""
        first, second = entity.participants
        return ConversationModel(
            id=entity.id,
            first_participant_id=first,
            second_participant_id=second,
            pair_key=entity.pair_key,
            created_at=entity.created_at,
            updated_at=entity.updated_at,
        )
