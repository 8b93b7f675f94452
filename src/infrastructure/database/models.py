"""SQLAlchemy ORM models."""

from datetime import datetime
from typing import Any

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    DateTime,
    ForeignKey,
    Index,
    Integer,
    String,
    Text,
    text,
)
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column, relationship

from domain.entities.identifiers import new_object_id

ID_LENGTH = 24

# Shared by the partial unique index on open mentorship requests
OPEN_REQUEST_CLAUSE = "status IN ('pending', 'accepted')"


class Base(DeclarativeBase):
    """Base class for all ORM models."""

    pass


class ProfileModel(Base):
    """Alumni/mentor profile, one per identity."""

    __tablename__ = "profiles"

    id: Mapped[str] = mapped_column(String(ID_LENGTH), primary_key=True, default=new_object_id)
    user_id: Mapped[str] = mapped_column(String(128), nullable=False, unique=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    email: Mapped[str] = mapped_column(String(255), nullable=False, unique=True)
    photo_url: Mapped[str | None] = mapped_column(String(500))
    batch: Mapped[str] = mapped_column(String(20), nullable=False, index=True)
    graduation_year: Mapped[int] = mapped_column(Integer, nullable=False)
    degree: Mapped[str | None] = mapped_column(String(255))
    major: Mapped[str | None] = mapped_column(String(255))
    current_job_title: Mapped[str | None] = mapped_column(String(255))
    company: Mapped[str | None] = mapped_column(String(255))
    location: Mapped[str | None] = mapped_column(String(255))
    bio: Mapped[str | None] = mapped_column(Text)
    linkedin: Mapped[str | None] = mapped_column(String(500))
    twitter: Mapped[str | None] = mapped_column(String(500))
    github: Mapped[str | None] = mapped_column(String(500))
    website: Mapped[str | None] = mapped_column(String(500))
    achievements: Mapped[list[str]] = mapped_column(JSONB, default=list)
    skills: Mapped[list[str]] = mapped_column(JSONB, default=list)
    experience: Mapped[list[dict[str, Any]]] = mapped_column(JSONB, default=list)
    is_mentor: Mapped[bool] = mapped_column(Boolean, default=False, index=True)
    mentorship_areas: Mapped[list[str]] = mapped_column(JSONB, default=list)
    created_at: Mapped[datetime] = mapped_column(DateTime, default=datetime.utcnow)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime,
        default=datetime.utcnow,
        onupdate=datetime.utcnow,
    )


class MentorshipRequestModel(Base):
    """Mentorship request. Both sides reference identities, not profile rows."""

    __tablename__ = "mentorship_requests"

    id: Mapped[str] = mapped_column(String(ID_LENGTH), primary_key=True, default=new_object_id)
    mentor_id: Mapped[str] = mapped_column(String(128), nullable=False, index=True)
    student_id: Mapped[str] = mapped_column(String(128), nullable=False, index=True)
    area: Mapped[str] = mapped_column(String(255), nullable=False)
    message: Mapped[str | None] = mapped_column(Text)
    status: Mapped[str] = mapped_column(
        String(20),
        CheckConstraint("status IN ('pending', 'accepted', 'rejected')"),
        nullable=False,
        default="pending",
    )
    created_at: Mapped[datetime] = mapped_column(DateTime, default=datetime.utcnow)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime,
        default=datetime.utcnow,
        onupdate=datetime.utcnow,
    )

    __table_args__ = (
        Index(
            "uq_mentorship_requests_open_pair",
            "mentor_id",
            "student_id",
            unique=True,
            postgresql_where=text(OPEN_REQUEST_CLAUSE),
            sqlite_where=text(OPEN_REQUEST_CLAUSE),
        ),
    )


class ConversationModel(Base):
    """Two-participant conversation; pair_key is the sorted participant pair."""

    __tablename__ = "conversations"

    id: Mapped[str] = mapped_column(String(ID_LENGTH), primary_key=True, default=new_object_id)
    first_participant_id: Mapped[str] = mapped_column(String(128), nullable=False, index=True)
    second_participant_id: Mapped[str] = mapped_column(String(128), nullable=False, index=True)
    pair_key: Mapped[str] = mapped_column(String(257), nullable=False, unique=True)
    created_at: Mapped[datetime] = mapped_column(DateTime, default=datetime.utcnow)
    updated_at: Mapped[datetime] = mapped_column(DateTime, default=datetime.utcnow, index=True)

    # Relationships
    messages: Mapped[list["MessageModel"]] = relationship(
        "MessageModel",
        back_populates="conversation",
        cascade="all, delete-orphan",
    )

    __table_args__ = (
        CheckConstraint(
            "first_participant_id <> second_participant_id",
            name="ck_conversations_distinct_participants",
        ),
    )


class MessageModel(Base):
    """A message within a conversation."""

    __tablename__ = "messages"

    id: Mapped[str] = mapped_column(String(ID_LENGTH), primary_key=True, default=new_object_id)
    conversation_id: Mapped[str] = mapped_column(
        String(ID_LENGTH),
        ForeignKey("conversations.id", ondelete="CASCADE"),
        nullable=False,
    )
    sender_id: Mapped[str] = mapped_column(String(128), nullable=False)
    recipient_id: Mapped[str] = mapped_column(String(128), nullable=False)
    content: Mapped[str] = mapped_column(Text, nullable=False)
    timestamp: Mapped[datetime] = mapped_column(DateTime, default=datetime.utcnow)
    read: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)

    # Relationships
    conversation: Mapped["ConversationModel"] = relationship(
        "ConversationModel",
        back_populates="messages",
    )

    __table_args__ = (
        Index("ix_messages_conversation_timestamp", "conversation_id", "timestamp"),
        Index("ix_messages_recipient_read", "recipient_id", "read"),
    )


class JobModel(Base):
    """Job posting. Media is an optional external link split into two columns."""

    __tablename__ = "jobs"

    id: Mapped[str] = mapped_column(String(ID_LENGTH), primary_key=True, default=new_object_id)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    media_type: Mapped[str | None] = mapped_column(String(10))
    media_url: Mapped[str | None] = mapped_column(String(1000))
    posted_by: Mapped[str] = mapped_column(String(128), nullable=False, index=True)
    created_at: Mapped[datetime] = mapped_column(DateTime, default=datetime.utcnow, index=True)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime,
        default=datetime.utcnow,
        onupdate=datetime.utcnow,
    )

    __table_args__ = (
        CheckConstraint(
            "media_type IS NULL OR media_type IN ('image', 'video')",
            name="ck_jobs_media_type",
        ),
    )


class EventModel(Base):
    """Community event announced by its organizer."""

    __tablename__ = "events"

    id: Mapped[str] = mapped_column(String(ID_LENGTH), primary_key=True, default=new_object_id)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    media_type: Mapped[str | None] = mapped_column(String(10))
    media_url: Mapped[str | None] = mapped_column(String(1000))
    organizer: Mapped[str] = mapped_column(String(128), nullable=False, index=True)
    created_at: Mapped[datetime] = mapped_column(DateTime, default=datetime.utcnow, index=True)

    __table_args__ = (
        CheckConstraint(
            "media_type IS NULL OR media_type IN ('image', 'video')",
            name="ck_events_media_type",
        ),
    )
