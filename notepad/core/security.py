"""
Security Utilities.

Password hashing (bcrypt) and bearer token issuance/verification (JWT).
"""

from datetime import timedelta
from typing import Any

import bcrypt
from jose import JWTError, jwt

from notepad.core.config import get_app_config, get_settings
from notepad.core.exceptions import AuthenticationError
from notepad.core.logging import get_logger
from notepad.core.utils import utc_now

logger = get_logger(__name__)

ACCESS_TOKEN_TYPE = "access"


def hash_password(password: str) -> str:
    """Hash a password using bcrypt."""
    rounds = get_app_config().security.password.bcrypt_rounds
    password_bytes = password.encode("utf-8")
    salt = bcrypt.gensalt(rounds=rounds)
    return bcrypt.hashpw(password_bytes, salt).decode("utf-8")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a password against its hash."""
    return bcrypt.checkpw(
        plain_password.encode("utf-8"),
        hashed_password.encode("utf-8"),
    )


def create_access_token(data: dict[str, Any], expires_delta: timedelta | None = None) -> str:
    """
    Create a JWT access token.

    Args:
        data: Payload data to encode
        expires_delta: Optional custom expiration time

    Returns:
        Encoded JWT token
    """
    settings = get_settings()
    jwt_config = get_app_config().security.jwt
    to_encode = data.copy()

    if expires_delta:
        expire = utc_now() + expires_delta
    else:
        expire = utc_now() + timedelta(minutes=jwt_config.access_token_expire_minutes)

    to_encode.update({"exp": expire, "type": ACCESS_TOKEN_TYPE, "aud": jwt_config.audience})
    encoded_jwt = jwt.encode(to_encode, settings.jwt_secret, algorithm=jwt_config.algorithm)
    return encoded_jwt


def decode_token(token: str) -> dict[str, Any]:
    """
    Decode and validate a JWT token.

    Args:
        token: JWT token string

    Returns:
        Decoded token payload

    Raises:
        AuthenticationError: If token is invalid or expired
    """
    settings = get_settings()
    jwt_config = get_app_config().security.jwt
    try:
        payload = jwt.decode(
            token,
            settings.jwt_secret,
            algorithms=[jwt_config.algorithm],
            audience=jwt_config.audience,
        )
        return payload
    except JWTError as e:
        logger.warning("Token decode failed", extra={"error": str(e)})
        raise AuthenticationError("Not authorized, token failed")


def issue_token(user_id: str) -> str:
    """Issue a bearer token for a user, valid for the configured window."""
    return create_access_token({"sub": user_id})


def verify_token(token: str) -> str:
    """
    Resolve a bearer token back to the user id it was issued for.

    Raises:
        AuthenticationError: If the token is malformed, expired, not an
            access token, or carries no subject
    """
    payload = decode_token(token)

    if payload.get("type") != ACCESS_TOKEN_TYPE:
        logger.warning("Token rejected", extra={"reason": "wrong_type"})
        raise AuthenticationError("Not authorized, token failed")

    user_id = payload.get("sub")
    if not isinstance(user_id, str) or not user_id:
        logger.warning("Token rejected", extra={"reason": "missing_subject"})
        raise AuthenticationError("Not authorized, token failed")

    return user_id
