"""Conversation domain entity."""

from dataclasses import dataclass, field
from datetime import datetime

from domain.entities.identifiers import new_object_id


def make_pair_key(first: str, second: str) -> str:
    """Order-independent key for a pair of participants."""
    low, high = sorted((first, second))
    return f"{low}:{high}"


@dataclass
class Conversation:
    """Two-participant container for a message thread.

    Participants are kept in creation order (initiator first). Lookups use
    ``pair_key`` so the pair is treated as unordered.
    """

    participants: tuple[str, str]
    id: str = field(default_factory=new_object_id)
    created_at: datetime = field(default_factory=datetime.utcnow)
    updated_at: datetime = field(default_factory=datetime.utcnow)

    def __post_init__(self) -> None:
        if len(self.participants) != 2 or self.participants[0] == self.participants[1]:
            raise ValueError("A conversation needs exactly two distinct participants")
        self.participants = (self.participants[0], self.participants[1])

    @property
    def pair_key(self) -> str:
        return make_pair_key(*self.participants)

    def has_participant(self, user_id: str) -> bool:
        return user_id in self.participants

    def other_participant(self, user_id: str) -> str:
        """Return the participant that is not ``user_id``."""
        if not self.has_participant(user_id):
            raise ValueError(f"{user_id} is not a participant")
        first, second = self.participants
        return second if first == user_id else first
