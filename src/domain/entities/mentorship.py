"""Mentorship request domain entity."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import StrEnum

from domain.entities.identifiers import new_object_id
from domain.entities.profile import Profile


class MentorshipStatus(StrEnum):
    """Lifecycle status of a mentorship request.

    ``pending`` is the only non-terminal state; ``accepted`` and
    ``rejected`` are final.
    """

    PENDING = "pending"
    ACCEPTED = "accepted"
    REJECTED = "rejected"


# Statuses that block a new request for the same mentor/student pair
OPEN_STATUSES = frozenset({MentorshipStatus.PENDING, MentorshipStatus.ACCEPTED})

# Statuses a mentor may move a pending request to
DECISION_STATUSES = frozenset({MentorshipStatus.ACCEPTED, MentorshipStatus.REJECTED})


@dataclass
class MentorshipRequest:
    """A student's ask directed at a mentor.

    Both sides are stored as identities; profiles are resolved on read.
    """

    mentor_id: str
    student_id: str
    area: str
    id: str = field(default_factory=new_object_id)
    message: str | None = None
    status: MentorshipStatus = MentorshipStatus.PENDING
    created_at: datetime = field(default_factory=datetime.utcnow)
    updated_at: datetime = field(default_factory=datetime.utcnow)

    @property
    def is_open(self) -> bool:
        return self.status in OPEN_STATUSES

    @property
    def is_decided(self) -> bool:
        return self.status != MentorshipStatus.PENDING

    def decide(self, status: MentorshipStatus) -> None:
        """Move a pending request to a terminal status."""
        if status not in DECISION_STATUSES:
            raise ValueError(f"Not a decision status: {status}")
        if self.is_decided:
            raise ValueError(f"Request already {self.status}")
        self.status = status
        self.updated_at = datetime.utcnow()


@dataclass(frozen=True, slots=True)
class MentorshipRequestDetails:
    """Read-only value object: a request with both sides' profiles resolved.

    ``student`` is None when the requesting identity has no profile yet.
    """

    request: MentorshipRequest
    mentor: Profile | None
    student: Profile | None
