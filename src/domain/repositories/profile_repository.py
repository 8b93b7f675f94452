"""Profile repository protocol."""

from typing import Any, Protocol

from domain.entities.profile import Profile


class IProfileRepository(Protocol):
    """Repository interface for Profile entities."""

    async def create(self, profile: Profile) -> Profile:
        """Create a new profile.

        Raises:
            ProfileExistsError: If the identity already has a profile.
            EmailTakenError: If the email belongs to another profile.
        """
        ...

    async def get_by_user_id(self, user_id: str) -> Profile | None:
        """Get a profile by its owner's identity."""
        ...

    async def get_many_by_user_ids(self, user_ids: list[str]) -> dict[str, Profile]:
        """Get profiles for several identities, keyed by identity."""
        ...

    async def get_by_email(self, email: str) -> Profile | None:
        """Get a profile by email."""
        ...

    async def get_mentor(self, user_id: str) -> Profile | None:
        """Get a profile only if it belongs to a mentor."""
        ...

    async def list_all(self, batch: str | None = None) -> list[Profile]:
        """List profiles, optionally restricted to one batch."""
        ...

    async def list_mentors(self) -> list[Profile]:
        """List all profiles flagged as mentors."""
        ...

    async def update(self, user_id: str, changes: dict[str, Any]) -> Profile | None:
        """Apply field changes to a profile. Returns None if not found."""
        ...
