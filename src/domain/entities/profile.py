"""Profile domain entity."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from domain.entities.identifiers import new_object_id

UNKNOWN_GROUP = "Unknown"


@dataclass
class ExperienceEntry:
    """A single position in a profile's career history."""

    job_title: str | None = None
    company: str | None = None
    start_date: str | None = None
    end_date: str | None = None
    description: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "job_title": self.job_title,
            "company": self.company,
            "start_date": self.start_date,
            "end_date": self.end_date,
            "description": self.description,
        }


@dataclass
class Profile:
    """Domain entity for an alumni/mentor profile, keyed by identity."""

    user_id: str
    name: str
    email: str
    batch: str
    graduation_year: int
    id: str = field(default_factory=new_object_id)
    photo_url: str | None = None
    degree: str | None = None
    major: str | None = None
    current_job_title: str | None = None
    company: str | None = None
    location: str | None = None
    bio: str | None = None
    linkedin: str | None = None
    twitter: str | None = None
    github: str | None = None
    website: str | None = None
    achievements: list[str] = field(default_factory=list)
    skills: list[str] = field(default_factory=list)
    experience: list[ExperienceEntry] = field(default_factory=list)
    is_mentor: bool = False
    mentorship_areas: list[str] = field(default_factory=list)
    created_at: datetime = field(default_factory=datetime.utcnow)
    updated_at: datetime = field(default_factory=datetime.utcnow)

    def __post_init__(self) -> None:
        """Ensure updated_at is always at least as recent as created_at."""
        if self.updated_at < self.created_at:
            self.updated_at = self.created_at

    @property
    def batch_key(self) -> str:
        return self.batch or UNKNOWN_GROUP

    @property
    def major_key(self) -> str:
        return self.major or UNKNOWN_GROUP
