"""Pytest configuration and fixtures."""

import os
import sys
from collections.abc import AsyncGenerator, Awaitable, Callable
from pathlib import Path
from typing import Any

# Tests validate shared-secret tokens instead of Firebase ID tokens
os.environ.setdefault("AUTH_PROVIDER", "jwt")
os.environ.setdefault("JWT_SECRET_KEY", "test-secret-key")

import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.ext.compiler import compiles
from sqlalchemy.pool import StaticPool

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from domain.entities.profile import Profile
from infrastructure.auth.jwt_provider import JWTAuthProvider
from infrastructure.auth.provider import TokenUser
from infrastructure.database.models import Base
from infrastructure.database.sqlalchemy_uow import SQLAlchemyUnitOfWork


# Compile JSONB as JSON for SQLite (used in tests)
@compiles(JSONB, "sqlite")
def _compile_jsonb_sqlite(type_: Any, compiler: Any, **kw: Any) -> str:
    return "JSON"


# Test database URL (SQLite in memory, one connection shared via StaticPool)
TEST_DATABASE_URL = "sqlite+aiosqlite://"

# Fixed identities for consistency
STUDENT_ID = "student-uid-0001"
MENTOR_ID = "mentor-uid-0001"
OTHER_ID = "other-uid-0001"


@pytest.fixture
async def engine() -> AsyncGenerator[AsyncEngine, None]:
    """Create a fresh in-memory database per test."""
    engine = create_async_engine(
        TEST_DATABASE_URL,
        echo=False,
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Create session factory."""
    return async_sessionmaker(
        bind=engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )


@pytest.fixture
def uow_factory(
    session_factory: async_sessionmaker[AsyncSession],
) -> Callable[[], SQLAlchemyUnitOfWork]:
    """Create a UoW factory bound to the test database."""

    def factory() -> SQLAlchemyUnitOfWork:
        return SQLAlchemyUnitOfWork(session_factory)

    return factory


@pytest.fixture
def auth_provider() -> JWTAuthProvider:
    """Create auth provider for testing."""
    return JWTAuthProvider(
        secret_key="test-secret-key",
        algorithm="HS256",
        expire_minutes=30,
    )


@pytest.fixture
def headers_for(auth_provider: JWTAuthProvider) -> Callable[[str], dict[str, str]]:
    """Build Authorization headers carrying a valid token for an identity."""

    def build(uid: str) -> dict[str, str]:
        token = auth_provider.create_token(TokenUser(uid=uid, email=f"{uid}@example.com"))
        return {"Authorization": f"Bearer {token}"}

    return build


@pytest.fixture
def student_headers(headers_for: Callable[[str], dict[str, str]]) -> dict[str, str]:
    return headers_for(STUDENT_ID)


@pytest.fixture
def mentor_headers(headers_for: Callable[[str], dict[str, str]]) -> dict[str, str]:
    return headers_for(MENTOR_ID)


@pytest.fixture
def other_headers(headers_for: Callable[[str], dict[str, str]]) -> dict[str, str]:
    return headers_for(OTHER_ID)


@pytest.fixture
def seed_profile(
    uow_factory: Callable[[], SQLAlchemyUnitOfWork],
) -> Callable[..., Awaitable[Profile]]:
    """Insert a profile directly through the repository."""

    async def seed(user_id: str, **overrides: Any) -> Profile:
        fields: dict[str, Any] = {
            "name": f"User {user_id}",
            "email": f"{user_id}@example.com",
            "batch": "2020",
            "graduation_year": 2020,
        }
        fields.update(overrides)
        async with uow_factory() as uow:
            profile = await uow.profiles.create(Profile(user_id=user_id, **fields))
            await uow.commit()
        return profile

    return seed


@pytest.fixture
def app(
    uow_factory: Callable[[], SQLAlchemyUnitOfWork],
    session_factory: async_sessionmaker[AsyncSession],
    auth_provider: JWTAuthProvider,
) -> FastAPI:
    """
    Create the application wired to the test database.

    Auth goes through the real bearer-header dependency with a JWT provider;
    services and the health check's session use the in-memory database.
    """
    from api.dependencies.auth import get_auth_provider
    from api.v1.dependencies import (
        get_event_service,
        get_job_service,
        get_mentorship_service,
        get_messaging_service,
        get_profile_service,
    )
    from domain.services.event_service import EventService
    from domain.services.job_service import JobService
    from domain.services.mentorship_service import MentorshipService
    from domain.services.messaging_service import MessagingService
    from domain.services.profile_service import ProfileService
    from infrastructure.database.session import get_async_session
    from main import create_app

    app = create_app()

    async def override_get_async_session() -> AsyncGenerator[AsyncSession, None]:
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_auth_provider] = lambda: auth_provider
    app.dependency_overrides[get_profile_service] = lambda: ProfileService(uow_factory)
    app.dependency_overrides[get_mentorship_service] = lambda: MentorshipService(uow_factory)
    app.dependency_overrides[get_messaging_service] = lambda: MessagingService(uow_factory)
    app.dependency_overrides[get_job_service] = lambda: JobService(uow_factory)
    app.dependency_overrides[get_event_service] = lambda: EventService(uow_factory)
    app.dependency_overrides[get_async_session] = override_get_async_session
    return app


@pytest.fixture
async def client(app: FastAPI) -> AsyncGenerator[AsyncClient, None]:
    """Create async test client."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c

    app.dependency_overrides.clear()
