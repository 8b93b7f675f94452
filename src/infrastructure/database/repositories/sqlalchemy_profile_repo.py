"""SQLAlchemy implementation of Profile repository."""

from datetime import datetime
from typing import Any

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from core.exceptions import EmailTakenError, ProfileExistsError
from domain.entities.profile import ExperienceEntry, Profile
from infrastructure.database.models import ProfileModel


class SQLAlchemyProfileRepository:
    """SQLAlchemy implementation of IProfileRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def create(self, profile: Profile) -> Profile:
        """Create a new profile, mapping unique violations to domain errors."""
        model = self._to_model(profile)
        self._session.add(model)
        try:
            await self._session.flush()
        except IntegrityError:
            await self._session.rollback()
            if await self.get_by_user_id(profile.user_id):
                raise ProfileExistsError(profile.user_id) from None
            raise EmailTakenError(profile.email) from None
        await self._session.refresh(model)
        return self._to_entity(model)

    async def get_by_user_id(self, user_id: str) -> Profile | None:
        """Get a profile by its owner's identity."""
        model = await self._get_model(user_id)
        return self._to_entity(model) if model else None

    async def get_many_by_user_ids(self, user_ids: list[str]) -> dict[str, Profile]:
        """Get profiles for several identities, keyed by identity."""
        if not user_ids:
            return {}
        stmt = select(ProfileModel).where(ProfileModel.user_id.in_(user_ids))
        result = await self._session.execute(stmt)
        return {model.user_id: self._to_entity(model) for model in result.scalars()}

    async def get_by_email(self, email: str) -> Profile | None:
        """Get a profile by email."""
        stmt = select(ProfileModel).where(ProfileModel.email == email)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        return self._to_entity(model) if model else None

    async def get_mentor(self, user_id: str) -> Profile | None:
        """Get a profile only if it belongs to a mentor."""
        stmt = select(ProfileModel).where(
            ProfileModel.user_id == user_id,
            ProfileModel.is_mentor.is_(True),
        )
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        return self._to_entity(model) if model else None

    async def list_all(self, batch: str | None = None) -> list[Profile]:
        """List profiles, optionally restricted to one batch."""
        stmt = select(ProfileModel).order_by(ProfileModel.created_at)
        if batch:
            stmt = stmt.where(ProfileModel.batch == batch)
        result = await self._session.execute(stmt)
        return [self._to_entity(model) for model in result.scalars()]

    async def list_mentors(self) -> list[Profile]:
        """List all mentor profiles ordered by name."""
        stmt = (
            select(ProfileModel)
            .where(ProfileModel.is_mentor.is_(True))
            .order_by(ProfileModel.name)
        )
        result = await self._session.execute(stmt)
        return [self._to_entity(model) for model in result.scalars()]

    async def update(self, user_id: str, changes: dict[str, Any]) -> Profile | None:
        """Apply field changes to a profile."""
        model = await self._get_model(user_id)
        if not model:
            return None

        for name, value in changes.items():
            if name == "experience":
                value = [entry.to_dict() for entry in value]
            setattr(model, name, value)
        model.updated_at = datetime.utcnow()

        try:
            await self._session.flush()
        except IntegrityError:
            await self._session.rollback()
            raise EmailTakenError(str(changes.get("email"))) from None
        return self._to_entity(model)

    async def _get_model(self, user_id: str) -> ProfileModel | None:
        stmt = select(ProfileModel).where(ProfileModel.user_id == user_id)
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()

    def _to_entity(self, model: ProfileModel) -> Profile:
        """Convert ORM model to domain entity."""
        return Profile(
            id=model.id,
            user_id=model.user_id,
            name=model.name,
            email=model.email,
            photo_url=model.photo_url,
            batch=model.batch,
            graduation_year=model.graduation_year,
            degree=model.degree,
            major=model.major,
            current_job_title=model.current_job_title,
            company=model.company,
            location=model.location,
            bio=model.bio,
            linkedin=model.linkedin,
            twitter=model.twitter,
            github=model.github,
            website=model.website,
            achievements=list(model.achievements or []),
            skills=list(model.skills or []),
            experience=[ExperienceEntry(**item) for item in model.experience or []],
            is_mentor=model.is_mentor,
            mentorship_areas=list(model.mentorship_areas or []),
            created_at=model.created_at,
            updated_at=model.updated_at,
        )

    def _to_model(self, entity: Profile) -> ProfileModel:
        """Convert domain entity to ORM model."""
        return ProfileModel(
            id=entity.id,
            user_id=entity.user_id,
            name=entity.name,
            email=entity.email,
            photo_url=entity.photo_url,
            batch=entity.batch,
            graduation_year=entity.graduation_year,
            degree=entity.degree,
            major=entity.major,
            current_job_title=entity.current_job_title,
            company=entity.company,
            location=entity.location,
            bio=entity.bio,
            linkedin=entity.linkedin,
            twitter=entity.twitter,
            github=entity.github,
            website=entity.website,
            achievements=list(entity.achievements),
            skills=list(entity.skills),
            experience=[entry.to_dict() for entry in entity.experience],
            is_mentor=entity.is_mentor,
            mentorship_areas=list(entity.mentorship_areas),
            created_at=entity.created_at,
            updated_at=entity.updated_at,
        )
