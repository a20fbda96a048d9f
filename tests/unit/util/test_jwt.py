"""Unit tests for JWT helpers."""

from datetime import datetime, timedelta, timezone

import jwt
import pytest

from askboard.config import AuthSettings
from askboard.util.jwt import JWTError, create_token, verify_token


class TestJWT:
    """Tests for create_token and verify_token."""

    def test_round_trip_keeps_claims(self):
        """A fresh token verifies and carries the user's claims."""
        settings = AuthSettings(jwt_secret="unit-test-secret")

        token = create_token("user-1", "a@example.com", "ADMIN", settings)
        payload = verify_token(token, settings)

        assert payload.user_id == "user-1"
        assert payload.email == "a@example.com"
        assert payload.role == "ADMIN"
        assert payload.exp > datetime.now(timezone.utc) + timedelta(days=6)

    def test_wrong_secret_is_invalid(self):
        """Tokens signed with another secret are rejected."""
        token = create_token(
            "user-1", "a@example.com", "USER", AuthSettings(jwt_secret="one")
        )

        with pytest.raises(JWTError, match="Invalid token"):
            verify_token(token, AuthSettings(jwt_secret="two"))

    def test_expired_token_is_rejected(self):
        """Expiry is enforced."""
        settings = AuthSettings(jwt_secret="unit-test-secret")
        token = jwt.encode(
            {
                "user_id": "user-1",
                "email": "a@example.com",
                "role": "USER",
                "exp": datetime.now(timezone.utc) - timedelta(minutes=1),
            },
            settings.jwt_secret,
            algorithm=settings.jwt_algorithm,
        )

        with pytest.raises(JWTError, match="Token has expired"):
            verify_token(token, settings)

    def test_missing_claims_are_invalid(self):
        """A correctly signed token without our claims is still invalid."""
        settings = AuthSettings(jwt_secret="unit-test-secret")
        token = jwt.encode(
            {"sub": "someone"}, settings.jwt_secret, algorithm=settings.jwt_algorithm
        )

        with pytest.raises(JWTError):
            verify_token(token, settings)
