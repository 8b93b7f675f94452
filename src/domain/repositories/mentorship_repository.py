"""Mentorship request repository protocol."""

from typing import Protocol

from domain.entities.mentorship import MentorshipRequest


class IMentorshipRepository(Protocol):
    """Repository interface for MentorshipRequest entities."""

    async def create(self, request: MentorshipRequest) -> MentorshipRequest:
        """Create a new request.

        Raises:
            RequestExistsError: If an open request already exists for the
                same mentor and student.
        """
        ...

    async def get(self, id: str) -> MentorshipRequest | None:
        """Get a request by ID."""
        ...

    async def get_open_for_pair(
        self, mentor_id: str, student_id: str
    ) -> MentorshipRequest | None:
        """Get the pending or accepted request between a mentor and student."""
        ...

    async def list_for_mentor(self, mentor_id: str) -> list[MentorshipRequest]:
        """List requests addressed to a mentor, newest first."""
        ...

    async def list_for_student(self, student_id: str) -> list[MentorshipRequest]:
        """List requests made by a student, newest first."""
        ...

    async def save_decision(self, request: MentorshipRequest) -> MentorshipRequest:
        """Persist the request's status and updated_at as decided."""
        ...
