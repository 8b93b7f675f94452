"""Shared fixtures for unit tests."""

from typing import Any
from unittest.mock import AsyncMock

import pytest


class FakeUnitOfWork:
    """Fake Unit of Work with all 6 repository mocks for unit testing."""

    def __init__(self) -> None:
        self.profiles = AsyncMock()
        self.mentorship_requests = AsyncMock()
        self.conversations = AsyncMock()
        self.messages = AsyncMock()
        self.jobs = AsyncMock()
        self.events = AsyncMock()
        self.committed = False
        self.rolled_back = False

    async def commit(self) -> None:
        self.committed = True

    async def rollback(self) -> None:
        self.rolled_back = True

    async def __aenter__(self) -> "FakeUnitOfWork":
        return self

    async def __aexit__(self, *args: Any) -> None:
        pass


@pytest.fixture
def uow() -> FakeUnitOfWork:
    """Create a fresh FakeUnitOfWork."""
    return FakeUnitOfWork()


@pytest.fixture
def student_id() -> str:
    """Identity of a requesting student."""
    return "student-uid"


@pytest.fixture
def mentor_id() -> str:
    """Identity of a mentor (distinct from student_id)."""
    return "mentor-uid"
