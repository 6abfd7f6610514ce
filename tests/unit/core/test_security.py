"""
Unit Tests for Security Module.

Black box tests against the public interface of security.py.
All cryptographic operations (bcrypt, JWT) execute for real.
Only the config boundary is stubbed with real Pydantic schema objects.
"""

import time
from datetime import timedelta
from types import SimpleNamespace
from unittest.mock import patch

import pytest
from jose import jwt as jose_jwt

from notepad.core.config_schema import JwtSchema, PasswordSchema
from notepad.core.exceptions import AuthenticationError
from notepad.core.security import (
    create_access_token,
    decode_token,
    hash_password,
    issue_token,
    verify_password,
    verify_token,
)

TEST_JWT_SECRET = "test-secret-key-that-is-long-enough-for-testing-purposes"


@pytest.fixture
def jwt_config():
    """Real Pydantic JwtSchema with test values."""
    return JwtSchema(
        algorithm="HS256",
        access_token_expire_minutes=43200,
        audience="test-api",
    )


@pytest.fixture(autouse=True)
def _stub_config(jwt_config):
    """Stub the config boundary so security functions can resolve settings."""
    settings = SimpleNamespace(jwt_secret=TEST_JWT_SECRET)
    app_config = SimpleNamespace(
        security=SimpleNamespace(jwt=jwt_config, password=PasswordSchema(bcrypt_rounds=4)),
    )
    with (
        patch("notepad.core.security.get_settings", return_value=settings),
        patch("notepad.core.security.get_app_config", return_value=app_config),
    ):
        yield


# =============================================================================
# Password Hashing
# =============================================================================


class TestHashPassword:
    """Tests for password hashing, no mocks."""

    def test_returns_hash_different_from_input(self):
        result = hash_password("my-secret-password")
        assert result != "my-secret-password"

    def test_returns_bcrypt_formatted_hash(self):
        result = hash_password("password123")
        assert result.startswith("$2b$04$")

    def test_same_password_produces_different_hashes(self):
        """Bcrypt salts each hash, so two calls must differ."""
        assert hash_password("identical") != hash_password("identical")


class TestVerifyPassword:
    """Tests for password verification."""

    def test_correct_password_verifies(self):
        hashed = hash_password("correct-horse-battery-staple")
        assert verify_password("correct-horse-battery-staple", hashed) is True

    def test_wrong_password_fails(self):
        hashed = hash_password("correct-horse-battery-staple")
        assert verify_password("wrong-password", hashed) is False

    def test_round_trip_with_unicode(self):
        password = "contraseña-sécurité-пароль"
        assert verify_password(password, hash_password(password)) is True


# =============================================================================
# Tokens
# =============================================================================


class TestCreateAccessToken:
    """Tests for JWT creation and decoding."""

    def test_round_trip_preserves_payload(self):
        payload = decode_token(create_access_token({"sub": "user-42"}))
        assert payload["sub"] == "user-42"
        assert payload["type"] == "access"
        assert payload["aud"] == "test-api"

    def test_default_validity_is_thirty_days(self):
        payload = decode_token(create_access_token({"sub": "u"}))
        remaining = payload["exp"] - time.time()
        assert timedelta(days=29, hours=23).total_seconds() < remaining
        assert remaining <= timedelta(days=30).total_seconds() + 1

    def test_does_not_mutate_input_data(self):
        data = {"sub": "user-1"}
        create_access_token(data)
        assert data == {"sub": "user-1"}


class TestDecodeToken:
    """Tests for token decoding failures."""

    @pytest.mark.parametrize("token", ["not-a-jwt-token", ""])
    def test_garbage_token(self, token):
        with pytest.raises(AuthenticationError, match="token failed"):
            decode_token(token)

    def test_tampered_token(self):
        token = create_access_token({"sub": "user-1"})
        with pytest.raises(AuthenticationError):
            decode_token(token[:-4] + "XXXX")

    def test_wrong_secret(self):
        token = jose_jwt.encode(
            {"sub": "user-1", "type": "access", "aud": "test-api"},
            "a-completely-different-secret-key-value",
            algorithm="HS256",
        )
        with pytest.raises(AuthenticationError):
            decode_token(token)

    def test_expired_token(self):
        token = create_access_token({"sub": "u"}, expires_delta=timedelta(seconds=-5))
        with pytest.raises(AuthenticationError):
            decode_token(token)

    def test_wrong_audience(self):
        token = jose_jwt.encode(
            {"sub": "user-1", "type": "access", "aud": "other-api"},
            TEST_JWT_SECRET,
            algorithm="HS256",
        )
        with pytest.raises(AuthenticationError):
            decode_token(token)


class TestIssueAndVerifyToken:
    """Tests for the user id <-> token mapping."""

    def test_round_trip(self):
        assert verify_token(issue_token("user-7")) == "user-7"

    def test_rejects_non_access_token(self):
        token = jose_jwt.encode(
            {"sub": "user-1", "type": "refresh", "aud": "test-api"},
            TEST_JWT_SECRET,
            algorithm="HS256",
        )
        with pytest.raises(AuthenticationError, match="token failed"):
            verify_token(token)

    def test_rejects_token_without_subject(self):
        token = create_access_token({"role": "x"})
        with pytest.raises(AuthenticationError, match="token failed"):
            verify_token(token)
