"""Event posting domain entity."""

from dataclasses import dataclass, field
from datetime import datetime

from domain.entities.identifiers import new_object_id
from domain.entities.media import Media

# Shortest description an organizer may post
MIN_DESCRIPTION_LENGTH = 10


@dataclass
class Event:
    """A community event announced by its organizer."""

    description: str
    organizer: str
    id: str = field(default_factory=new_object_id)
    media: Media | None = None
    created_at: datetime = field(default_factory=datetime.utcnow)

    def is_organized_by(self, user_id: str) -> bool:
        return self.organizer == user_id
