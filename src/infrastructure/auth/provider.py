"""Authentication provider protocol."""

from dataclasses import dataclass
from typing import Optional, Protocol


@dataclass
class TokenUser:
    """Represents a verified caller extracted from a bearer token.

    ``uid`` is the identity provider's stable subject identifier and is the
    only field the domain relies on.
    """

    uid: str
    email: Optional[str] = None
    display_name: Optional[str] = None


class IAuthProvider(Protocol):
    """Protocol for identity providers."""

    async def validate_token(self, token: str) -> Optional[TokenUser]:
        """
        Validate a bearer token.

        Args:
            token: The bearer token to validate

        Returns:
            TokenUser if valid, None if invalid or expired
        """
        ...
