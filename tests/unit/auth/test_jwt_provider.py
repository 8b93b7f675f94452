"""Unit tests for JWTAuthProvider."""

import pytest
from jose import jwt as jose_jwt

from infrastructure.auth.jwt_provider import JWTAuthProvider
from infrastructure.auth.provider import TokenUser

# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _make_hs256_token(payload: dict, secret: str = "test-secret") -> str:
    """Create an HS256-signed JWT with a given payload."""
    return jose_jwt.encode(payload, secret, algorithm="HS256")


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def hs256_provider() -> JWTAuthProvider:
    """JWTAuthProvider configured for HS256 (local/test tokens)."""
    return JWTAuthProvider(secret_key="test-secret", algorithm="HS256", expire_minutes=30)


# ---------------------------------------------------------------------------
# Tests: validate_token
# ---------------------------------------------------------------------------


class TestValidateToken:
    """validate_token returns the caller's identity or None."""

    async def test_should_round_trip_created_token(self, hs256_provider: JWTAuthProvider):
        user = TokenUser(uid="uid-1", email="a@example.com", display_name="A")

        result = await hs256_provider.validate_token(hs256_provider.create_token(user))

        assert result == user

    async def test_should_accept_token_without_email(self, hs256_provider: JWTAuthProvider):
        """Email is optional: phone and anonymous sign-ins carry only a subject."""
        token = _make_hs256_token({"sub": "uid-2", "exp": 9999999999})

        result = await hs256_provider.validate_token(token)

        assert result is not None
        assert result.uid == "uid-2"
        assert result.email is None

    async def test_should_return_none_when_token_has_no_sub_claim(
        self, hs256_provider: JWTAuthProvider
    ):
        token = _make_hs256_token({"email": "user@example.com", "exp": 9999999999})

        assert await hs256_provider.validate_token(token) is None

    async def test_should_return_none_when_token_has_empty_sub(
        self, hs256_provider: JWTAuthProvider
    ):
        token = _make_hs256_token({"sub": "", "exp": 9999999999})

        assert await hs256_provider.validate_token(token) is None

    async def test_should_return_none_for_wrong_secret(self, hs256_provider: JWTAuthProvider):
        token = _make_hs256_token({"sub": "uid-3", "exp": 9999999999}, secret="other-secret")

        assert await hs256_provider.validate_token(token) is None

    async def test_should_return_none_for_garbage(self, hs256_provider: JWTAuthProvider):
        assert await hs256_provider.validate_token("not-a-jwt") is None


# ---------------------------------------------------------------------------
# Tests: create_token
# ---------------------------------------------------------------------------


class TestCreateToken:
    def test_should_omit_missing_optional_claims(self, hs256_provider: JWTAuthProvider):
        token = hs256_provider.create_token(TokenUser(uid="uid-4"))

        claims = jose_jwt.get_unverified_claims(token)

        assert claims["sub"] == "uid-4"
        assert "email" not in claims
        assert "name" not in claims
        assert "exp" in claims

    def test_should_store_configuration(self):
        provider = JWTAuthProvider(secret_key="my-secret", algorithm="HS256", expire_minutes=15)

        assert provider._algorithm == "HS256"
        assert provider._secret_key == "my-secret"
        assert provider._expire_minutes == 15
