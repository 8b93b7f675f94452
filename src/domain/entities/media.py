"""Media attachment value object shared by job and event postings."""

from dataclasses import dataclass
from enum import StrEnum


class MediaType(StrEnum):
    """Kinds of media a posting can link to."""

    IMAGE = "image"
    VIDEO = "video"


@dataclass(frozen=True, slots=True)
class Media:
    """A link to an externally hosted image or video."""

    type: MediaType
    url: str

    @classmethod
    def from_parts(cls, type: str | None, url: str | None) -> "Media | None":
        """Build media only when both type and url are set."""
        if not type or not url:
            return None
        return cls(type=MediaType(type), url=url)
