"""Profile directory service layer."""

from collections import defaultdict
from collections.abc import Callable
from typing import Any

import structlog

from core.exceptions import (
    EmailTakenError,
    ProfileExistsError,
    ProfileNotFoundError,
    UnauthorizedProfileAccessError,
)
from domain.entities.profile import UNKNOWN_GROUP, ExperienceEntry, Profile
from domain.repositories.unit_of_work import IUnitOfWork

logger = structlog.get_logger()

# Fields an owner can never change through an update
IMMUTABLE_FIELDS = frozenset({"id", "user_id", "created_at", "updated_at"})


def _batch_sort_key(batch: str) -> tuple[bool, int, int, str]:
    """Numeric batches newest first, then other labels, "Unknown" last."""
    if batch == UNKNOWN_GROUP:
        return (True, 1, 0, batch)
    if batch.isdigit():
        return (False, 0, -int(batch), "")
    return (False, 1, 0, batch.lower())


def _major_sort_key(major: str) -> tuple[bool, str]:
    return (major == UNKNOWN_GROUP, major.lower())


def group_by_batch(profiles: list[Profile]) -> dict[str, list[Profile]]:
    """Group profiles by batch, batches sorted newest first."""
    groups: dict[str, list[Profile]] = defaultdict(list)
    for profile in profiles:
        groups[profile.batch_key].append(profile)
    return {key: groups[key] for key in sorted(groups, key=_batch_sort_key)}


def group_by_batch_and_major(
    profiles: list[Profile],
) -> dict[str, dict[str, list[Profile]]]:
    """Group profiles by batch, then by major within each batch."""
    grouped: dict[str, dict[str, list[Profile]]] = {}
    for batch, members in group_by_batch(profiles).items():
        majors: dict[str, list[Profile]] = defaultdict(list)
        for profile in members:
            majors[profile.major_key].append(profile)
        grouped[batch] = {key: majors[key] for key in sorted(majors, key=_major_sort_key)}
    return grouped


def _experience_entries(raw: list[Any] | None) -> list[ExperienceEntry]:
    entries = []
    for item in raw or []:
        if isinstance(item, ExperienceEntry):
            entries.append(item)
        else:
            entries.append(ExperienceEntry(**item))
    return entries


class ProfileService:
    """Service layer for the alumni/mentor directory."""

    def __init__(self, uow_factory: Callable[[], IUnitOfWork]) -> None:
        self._uow_factory = uow_factory

    async def list_profiles(self, batch: str | None = None) -> list[Profile]:
        """List all profiles, optionally only those in one batch."""
        async with self._uow_factory() as uow:
            return await uow.profiles.list_all(batch=batch)  # type: ignore[no-any-return]

    async def get_profile(self, user_id: str) -> Profile:
        """Get a profile by its owner's identity."""
        async with self._uow_factory() as uow:
            profile = await uow.profiles.get_by_user_id(user_id)
            if not profile:
                raise ProfileNotFoundError(user_id)
            return profile

    async def create_profile(
        self,
        user_id: str,
        caller_id: str,
        data: dict[str, Any],
    ) -> Profile:
        """Create the caller's own profile.

        Raises:
            UnauthorizedProfileAccessError: If user_id is not the caller.
            ProfileExistsError: If the identity already has a profile.
            EmailTakenError: If another profile uses the email.
        """
        if user_id != caller_id:
            raise UnauthorizedProfileAccessError()

        fields = {k: v for k, v in data.items() if k not in IMMUTABLE_FIELDS}
        fields["experience"] = _experience_entries(fields.get("experience"))

        async with self._uow_factory() as uow:
            if await uow.profiles.get_by_user_id(user_id):
                raise ProfileExistsError(user_id)

            if await uow.profiles.get_by_email(fields["email"]):
                raise EmailTakenError(fields["email"])

            created = await uow.profiles.create(Profile(user_id=user_id, **fields))
            await uow.commit()

        logger.info("profile_created", user_id=user_id, is_mentor=created.is_mentor)
        return created  # type: ignore[no-any-return]

    async def update_profile(
        self,
        user_id: str,
        caller_id: str,
        changes: dict[str, Any],
    ) -> Profile:
        """Apply partial changes to the caller's own profile.

        Raises:
            UnauthorizedProfileAccessError: If user_id is not the caller.
            ProfileNotFoundError: If the profile does not exist.
            EmailTakenError: If the new email belongs to another profile.
        """
        if user_id != caller_id:
            raise UnauthorizedProfileAccessError()

        changes = {k: v for k, v in changes.items() if k not in IMMUTABLE_FIELDS}
        if "experience" in changes:
            changes["experience"] = _experience_entries(changes["experience"])

        async with self._uow_factory() as uow:
            email = changes.get("email")
            if email:
                holder = await uow.profiles.get_by_email(email)
                if holder and holder.user_id != user_id:
                    raise EmailTakenError(email)

            updated = await uow.profiles.update(user_id, changes)
            if not updated:
                raise ProfileNotFoundError(user_id)
            await uow.commit()

        logger.info("profile_updated", user_id=user_id, fields=sorted(changes))
        return updated  # type: ignore[no-any-return]
