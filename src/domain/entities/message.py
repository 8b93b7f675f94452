"""Message domain entity."""

from dataclasses import dataclass, field
from datetime import datetime

from domain.entities.identifiers import new_object_id


@dataclass
class Message:
    """A message in a conversation. Immutable apart from ``read``."""

    conversation_id: str
    sender_id: str
    recipient_id: str
    content: str
    id: str = field(default_factory=new_object_id)
    timestamp: datetime = field(default_factory=datetime.utcnow)
    read: bool = False
