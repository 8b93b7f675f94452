"""Mentorship service layer with business logic."""

from collections.abc import Callable

import structlog

from core.exceptions import (
    InvalidStatusError,
    MentorNotFoundError,
    MissingFieldsError,
    RequestAlreadyDecidedError,
    RequestExistsError,
    RequestNotFoundError,
    UnauthorizedUpdateError,
)
from domain.entities.mentorship import (
    DECISION_STATUSES,
    MentorshipRequest,
    MentorshipRequestDetails,
    MentorshipStatus,
)
from domain.entities.identifiers import is_object_id
from domain.entities.profile import Profile
from domain.repositories.unit_of_work import IUnitOfWork

logger = structlog.get_logger()


class MentorshipService:
    """Service layer for mentor discovery and the request lifecycle."""

    def __init__(self, uow_factory: Callable[[], IUnitOfWork]) -> None:
        self._uow_factory = uow_factory

    async def list_mentors(self) -> list[Profile]:
        """Get all profiles flagged as mentors."""
        async with self._uow_factory() as uow:
            return await uow.profiles.list_mentors()  # type: ignore[no-any-return]

    async def create_request(
        self,
        student_id: str,
        mentor_id: str | None,
        area: str | None,
        message: str | None = None,
    ) -> MentorshipRequest:
        """Create a pending mentorship request from a student to a mentor.

        Args:
            student_id: Identity of the requesting student.
            mentor_id: Identity of the mentor being asked.
            area: The mentorship area requested.
            message: Optional note to the mentor.

        Returns:
            The created request, with status ``pending``.

        Raises:
            MissingFieldsError: If mentor_id or area is missing or blank.
            MentorNotFoundError: If mentor_id is not a mentor's identity.
            RequestExistsError: If a pending or accepted request already
                exists for this mentor and student.
        """
        mentor_id = (mentor_id or "").strip()
        area = (area or "").strip()
        if not mentor_id or not area:
            raise MissingFieldsError()

        async with self._uow_factory() as uow:
            mentor = await uow.profiles.get_mentor(mentor_id)
            if not mentor:
                raise MentorNotFoundError(mentor_id)

            existing = await uow.mentorship_requests.get_open_for_pair(mentor.user_id, student_id)
            if existing:
                raise RequestExistsError(existing.status.value)

            request = MentorshipRequest(
                mentor_id=mentor.user_id,
                student_id=student_id,
                area=area,
                message=message or None,
            )
            # The open-request unique index turns a concurrent duplicate
            # into RequestExistsError here as well.
            created = await uow.mentorship_requests.create(request)
            await uow.commit()

        logger.info(
            "mentorship_request_created",
            request_id=created.id,
            mentor_id=created.mentor_id,
            student_id=created.student_id,
        )
        return created

    async def list_for_mentor(self, mentor_id: str) -> list[MentorshipRequestDetails]:
        """Get requests addressed to the caller as mentor, newest first."""
        async with self._uow_factory() as uow:
            requests = await uow.mentorship_requests.list_for_mentor(mentor_id)
            return await self._with_profiles(uow, requests)

    async def list_for_student(self, student_id: str) -> list[MentorshipRequestDetails]:
        """Get requests the caller made as student, newest first."""
        async with self._uow_factory() as uow:
            requests = await uow.mentorship_requests.list_for_student(student_id)
            return await self._with_profiles(uow, requests)

    async def update_status(
        self,
        request_id: str,
        mentor_id: str,
        status: str | None,
    ) -> MentorshipRequest:
        """Accept or reject a pending request.

        Checks run in order: status value, request existence, mentor
        authority, then whether the request is still pending. Decided
        requests are terminal and cannot be flipped again.

        Raises:
            InvalidStatusError: If status is not ``accepted`` or ``rejected``.
            RequestNotFoundError: If the request does not exist.
            UnauthorizedUpdateError: If the caller is not the request's mentor.
            RequestAlreadyDecidedError: If the request is no longer pending.
        """
        try:
            new_status = MentorshipStatus(status)
        except ValueError:
            raise InvalidStatusError(status) from None
        if new_status not in DECISION_STATUSES:
            raise InvalidStatusError(status)

        async with self._uow_factory() as uow:
            request: MentorshipRequest | None = None
            if is_object_id(request_id):
                request = await uow.mentorship_requests.get(request_id)
            if not request:
                raise RequestNotFoundError(request_id)

            if request.mentor_id != mentor_id:
                raise UnauthorizedUpdateError()

            try:
                request.decide(new_status)
            except ValueError:
                raise RequestAlreadyDecidedError(request.status.value) from None

            updated = await uow.mentorship_requests.save_decision(request)
            await uow.commit()

        logger.info(
            "mentorship_request_decided",
            request_id=updated.id,
            status=updated.status.value,
        )
        return updated

    # --- Internal helpers ---

    @staticmethod
    async def _with_profiles(
        uow: IUnitOfWork, requests: list[MentorshipRequest]
    ) -> list[MentorshipRequestDetails]:
        """Resolve mentor and student profiles for a batch of requests."""
        user_ids = {r.mentor_id for r in requests} | {r.student_id for r in requests}
        profiles = await uow.profiles.get_many_by_user_ids(sorted(user_ids))
        return [
            MentorshipRequestDetails(
                request=r,
                mentor=profiles.get(r.mentor_id),
                student=profiles.get(r.student_id),
            )
            for r in requests
        ]
