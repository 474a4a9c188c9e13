"""
Unit tests for core.security module.
Tests password hashing and session token creation/validation.
"""
import datetime as dt

import jwt
import pytest

from forum.core.security import (
    ACCESS_TOKEN_EXPIRE_MINUTES,
    create_access_token,
    decode_access_token,
    hash_password,
    verify_password,
)


class TestPasswordHashing:
    """Tests for password hashing and verification."""

    def test_hash_password_returns_different_hash_each_time(self):
        """Password hashing should produce different hashes (salt included)."""
        password = "TestPassword123"
        assert hash_password(password) != hash_password(password)

    def test_hash_is_not_plain_text(self):
        password = "TestPassword123"
        hashed = hash_password(password)
        assert isinstance(hashed, str)
        assert hashed != password
        assert hashed.startswith("$argon2")

    def test_verify_password_correct_password(self):
        hashed = hash_password("TestPassword123")
        assert verify_password("TestPassword123", hashed) is True

    def test_verify_password_incorrect_password(self):
        hashed = hash_password("TestPassword123")
        assert verify_password("WrongPassword456", hashed) is False


class TestSessionTokens:
    """Tests for session token creation and validation."""

    def test_token_names_the_session(self):
        token = create_access_token("session-123")
        payload = decode_access_token(token)
        assert payload["sub"] == "session-123"

    def test_token_has_expiration(self):
        payload = decode_access_token(create_access_token("session-exp"))
        assert "iat" in payload
        assert payload["exp"] > dt.datetime.now(dt.timezone.utc).timestamp()
        diff_minutes = (payload["exp"] - payload["iat"]) / 60
        assert abs(diff_minutes - ACCESS_TOKEN_EXPIRE_MINUTES) < 1

    def test_decode_invalid_token(self):
        with pytest.raises(jwt.InvalidTokenError):
            decode_access_token("invalid.token.here")

    def test_decode_with_wrong_secret(self):
        token = create_access_token("session-secret")
        with pytest.raises(jwt.InvalidSignatureError):
            jwt.decode(token, "wrong-secret", algorithms=["HS256"])

    def test_expired_token_is_rejected(self):
        from forum.core.security import JWT_ALG, JWT_SECRET

        past = dt.datetime.now(dt.timezone.utc) - dt.timedelta(minutes=5)
        token = jwt.encode({"sub": "old", "iat": past, "exp": past}, JWT_SECRET, algorithm=JWT_ALG)
        with pytest.raises(jwt.ExpiredSignatureError):
            decode_access_token(token)
