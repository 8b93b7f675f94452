"""Job posting domain entity."""

from dataclasses import dataclass, field
from datetime import datetime

from domain.entities.identifiers import new_object_id
from domain.entities.media import Media


@dataclass
class Job:
    """A job opening shared with the community by one of its members."""

    description: str
    posted_by: str
    id: str = field(default_factory=new_object_id)
    media: Media | None = None
    created_at: datetime = field(default_factory=datetime.utcnow)
    updated_at: datetime = field(default_factory=datetime.utcnow)

    def is_posted_by(self, user_id: str) -> bool:
        return self.posted_by == user_id
