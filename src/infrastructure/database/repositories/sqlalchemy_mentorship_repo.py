"""SQLAlchemy implementation of MentorshipRequest repository."""

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from core.exceptions import RequestExistsError
from domain.entities.mentorship import OPEN_STATUSES, MentorshipRequest, MentorshipStatus
from infrastructure.database.models import MentorshipRequestModel


class SQLAlchemyMentorshipRepository:
    """SQLAlchemy implementation of IMentorshipRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def create(self, request: MentorshipRequest) -> MentorshipRequest:
        """Create a new request.

        A violation of the open-pair unique index means another request for
        the same mentor and student landed first.
        """
        model = self._to_model(request)
        self._session.add(model)
        try:
            await self._session.flush()
        except IntegrityError:
            await self._session.rollback()
            existing = await self.get_open_for_pair(request.mentor_id, request.student_id)
            status = existing.status.value if existing else MentorshipStatus.PENDING.value
            raise RequestExistsError(status) from None
        await self._session.refresh(model)
        return self._to_entity(model)

    async def get(self, id: str) -> MentorshipRequest | None:
        """Get a request by ID."""
        model = await self._session.get(MentorshipRequestModel, id)
        return self._to_entity(model) if model else None

    async def get_open_for_pair(
        self, mentor_id: str, student_id: str
    ) -> MentorshipRequest | None:
        """Get the pending or accepted request between a mentor and student."""
        stmt = select(MentorshipRequestModel).where(
            MentorshipRequestModel.mentor_id == mentor_id,
            MentorshipRequestModel.student_id == student_id,
            MentorshipRequestModel.status.in_([s.value for s in OPEN_STATUSES]),
        )
        result = await self._session.execute(stmt)
        model = result.scalars().first()
        return self._to_entity(model) if model else None

    async def list_for_mentor(self, mentor_id: str) -> list[MentorshipRequest]:
        """List requests addressed to a mentor, newest first."""
        stmt = (
            select(MentorshipRequestModel)
            .where(MentorshipRequestModel.mentor_id == mentor_id)
            .order_by(MentorshipRequestModel.created_at.desc())
        )
        result = await self._session.execute(stmt)
        return [self._to_entity(model) for model in result.scalars()]

    async def list_for_student(self, student_id: str) -> list[MentorshipRequest]:
        """List requests made by a student, newest first."""
        stmt = (
            select(MentorshipRequestModel)
            .where(MentorshipRequestModel.student_id == student_id)
            .order_by(MentorshipRequestModel.created_at.desc())
        )
        result = await self._session.execute(stmt)
        return [self._to_entity(model) for model in result.scalars()]

    async def save_decision(self, request: MentorshipRequest) -> MentorshipRequest:
        """Persist the request's status and updated_at as decided."""
        model = await self._session.get(MentorshipRequestModel, request.id)

        if not model:
            raise ValueError(f"Mentorship request {request.id} not found")

        model.status = request.status.value
        model.updated_at = request.updated_at

        await self._session.flush()
        return self._to_entity(model)

    def _to_entity(self, model: MentorshipRequestModel) -> MentorshipRequest:
        """Convert ORM model to domain entity."""
        return MentorshipRequest(
            id=model.id,
            mentor_id=model.mentor_id,
            student_id=model.student_id,
            area=model.area,
            message=model.message,
            status=MentorshipStatus(model.status),
            created_at=model.created_at,
            updated_at=model.updated_at,
        )

    def _to_model(self, entity: MentorshipRequest) -> MentorshipRequestModel:
        """Convert domain entity to ORM model."""
        return MentorshipRequestModel(
            id=entity.id,
            mentor_id=entity.mentor_id,
            student_id=entity.student_id,
            area=entity.area,
            message=entity.message,
            status=entity.status.value,
            created_at=entity.created_at,
            updated_at=entity.updated_at,
        )
