"""Authentication dependencies for FastAPI."""

from typing import Annotated

from fastapi import Depends, Header

from core.config import settings
from core.exceptions import AuthenticationError, ErrorCode
from infrastructure.auth.firebase_provider import FirebaseAuthProvider
from infrastructure.auth.jwt_provider import JWTAuthProvider
from infrastructure.auth.provider import IAuthProvider, TokenUser

BEARER_PREFIX = "Bearer "

# Singleton auth provider
_auth_provider: IAuthProvider | None = None


def get_auth_provider() -> IAuthProvider:
    """Get or create the configured auth provider singleton."""
    global _auth_provider
    if _auth_provider is None:
        if settings.auth_provider == "jwt":
            _auth_provider = JWTAuthProvider()
        else:
            _auth_provider = FirebaseAuthProvider()
    return _auth_provider


async def get_current_user(
    authorization: Annotated[str | None, Header()] = None,
    auth_provider: IAuthProvider = Depends(get_auth_provider),
) -> TokenUser:
    """
    Dependency to get the current authenticated user.

    Raises:
        AuthenticationError: 401 ``NO_TOKEN`` when the header is absent or not
            a bearer header, 401 ``INVALID_TOKEN_FORMAT`` when the token is
            empty, 403 ``TOKEN_INVALID`` when the provider rejects it
    """
    if not authorization or not authorization.startswith(BEARER_PREFIX):
        raise AuthenticationError(
            message="Unauthorized: No token provided",
            error_code=ErrorCode.NO_TOKEN,
        )

    token = authorization[len(BEARER_PREFIX):].strip()
    if not token:
        raise AuthenticationError(
            message="Unauthorized: Token missing",
            error_code=ErrorCode.INVALID_TOKEN_FORMAT,
        )

    user = await auth_provider.validate_token(token)

    if not user:
        raise AuthenticationError(
            message="Unauthorized: Invalid or expired token",
            error_code=ErrorCode.TOKEN_INVALID,
            status_code=403,
        )

    return user


# Type alias for convenience in route handlers
CurrentUser = Annotated[TokenUser, Depends(get_current_user)]
