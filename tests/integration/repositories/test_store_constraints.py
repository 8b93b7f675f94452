"""Unique-constraint paths of the SQLAlchemy repositories.

Each test lands a conflicting row past the application's read-before-write
lookup and checks the repository resolves the violation the same way the
lookup would have.
"""

import pytest
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from core.exceptions import EmailTakenError, ErrorCode, ProfileExistsError, RequestExistsError
from domain.entities.conversation import Conversation
from domain.entities.mentorship import MentorshipRequest, MentorshipStatus
from domain.entities.profile import Profile
from infrastructure.database.repositories.sqlalchemy_conversation_repo import (
    SQLAlchemyConversationRepository,
)
from infrastructure.database.repositories.sqlalchemy_mentorship_repo import (
    SQLAlchemyMentorshipRepository,
)
from infrastructure.database.repositories.sqlalchemy_profile_repo import SQLAlchemyProfileRepository

Sessions = async_sessionmaker[AsyncSession]


def _profile(user_id: str, email: str) -> Profile:
    return Profile(
        user_id=user_id,
        name=f"User {user_id}",
        email=email,
        batch="2021",
        graduation_year=2021,
    )


async def _insert_request(session_factory: Sessions, request: MentorshipRequest) -> None:
    async with session_factory() as session:
        await SQLAlchemyMentorshipRepository(session).create(request)
        await session.commit()


class TestConversationPairKey:
    @pytest.mark.asyncio
    async def test_reuses_row_that_won_the_race(
        self, session_factory: Sessions, monkeypatch: pytest.MonkeyPatch
    ):
        async with session_factory() as session:
            first, created = await SQLAlchemyConversationRepository(session).get_or_create(
                Conversation(participants=("alice", "bob"))
            )
            await session.commit()
        assert created is True

        async with session_factory() as session:
            repo = SQLAlchemyConversationRepository(session)
            lookup = repo.get_by_participants
            lookups = 0

            async def miss_first_lookup(a: str, b: str) -> Conversation | None:
                nonlocal lookups
                lookups += 1
                return None if lookups == 1 else await lookup(a, b)

            monkeypatch.setattr(repo, "get_by_participants", miss_first_lookup)

            conversation, created = await repo.get_or_create(
                Conversation(participants=("bob", "alice"))
            )

        assert created is False
        assert conversation.id == first.id
        assert conversation.participants == ("alice", "bob")
        assert lookups == 2

    @pytest.mark.asyncio
    async def test_existing_pair_is_found_before_insert(self, session_factory: Sessions):
        async with session_factory() as session:
            repo = SQLAlchemyConversationRepository(session)
            first, _ = await repo.get_or_create(Conversation(participants=("alice", "bob")))
            again, created = await repo.get_or_create(Conversation(participants=("bob", "alice")))

        assert created is False
        assert again.id == first.id


class TestOpenRequestIndex:
    @pytest.mark.asyncio
    async def test_duplicate_pending_request(self, session_factory: Sessions):
        await _insert_request(
            session_factory, MentorshipRequest(mentor_id="m", student_id="s", area="Career")
        )

        async with session_factory() as session:
            with pytest.raises(RequestExistsError) as exc_info:
                await SQLAlchemyMentorshipRepository(session).create(
                    MentorshipRequest(mentor_id="m", student_id="s", area="Research")
                )

        assert exc_info.value.error_code == ErrorCode.REQUEST_EXISTS
        assert exc_info.value.message == "Pending request exists"

    @pytest.mark.asyncio
    async def test_duplicate_of_accepted_request(self, session_factory: Sessions):
        await _insert_request(
            session_factory,
            MentorshipRequest(
                mentor_id="m", student_id="s", area="Career", status=MentorshipStatus.ACCEPTED
            ),
        )

        async with session_factory() as session:
            with pytest.raises(RequestExistsError) as exc_info:
                await SQLAlchemyMentorshipRepository(session).create(
                    MentorshipRequest(mentor_id="m", student_id="s", area="Career")
                )

        assert exc_info.value.message == "Already mentored"

    @pytest.mark.asyncio
    async def test_rejected_request_does_not_block(self, session_factory: Sessions):
        await _insert_request(
            session_factory,
            MentorshipRequest(
                mentor_id="m", student_id="s", area="Career", status=MentorshipStatus.REJECTED
            ),
        )

        async with session_factory() as session:
            created = await SQLAlchemyMentorshipRepository(session).create(
                MentorshipRequest(mentor_id="m", student_id="s", area="Career")
            )

        assert created.status == MentorshipStatus.PENDING


class TestProfileUniqueness:
    @pytest.mark.asyncio
    async def test_second_profile_for_identity(self, session_factory: Sessions):
        async with session_factory() as session:
            await SQLAlchemyProfileRepository(session).create(_profile("u1", "u1@example.com"))
            await session.commit()

        async with session_factory() as session:
            with pytest.raises(ProfileExistsError):
                await SQLAlchemyProfileRepository(session).create(
                    _profile("u1", "other@example.com")
                )

    @pytest.mark.asyncio
    async def test_email_used_by_another_identity(self, session_factory: Sessions):
        async with session_factory() as session:
            await SQLAlchemyProfileRepository(session).create(_profile("u1", "shared@example.com"))
            await session.commit()

        async with session_factory() as session:
            with pytest.raises(EmailTakenError) as exc_info:
                await SQLAlchemyProfileRepository(session).create(
                    _profile("u2", "shared@example.com")
                )

        assert exc_info.value.status_code == 409

    @pytest.mark.asyncio
    async def test_update_to_taken_email(self, session_factory: Sessions):
        async with session_factory() as session:
            repo = SQLAlchemyProfileRepository(session)
            await repo.create(_profile("u1", "u1@example.com"))
            await repo.create(_profile("u2", "u2@example.com"))
            await session.commit()

        async with session_factory() as session:
            with pytest.raises(EmailTakenError):
                await SQLAlchemyProfileRepository(session).update(
                    "u2", {"email": "u1@example.com"}
                )
