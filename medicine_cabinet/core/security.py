"""Credential storage and session tokens."""

from datetime import UTC, datetime, timedelta
from typing import Any

import bcrypt
import jwt

from medicine_cabinet.core.config import settings

BCRYPT_ROUNDS = 12

# Registration bounds, applied to the raw value (surrounding whitespace is rejected).
USERNAME_MIN_LEN = 1
PASSWORD_MIN_LEN = 10
PASSWORD_MAX_LEN = 72

# Claims every session token must carry.
REQUIRED_CLAIMS = ("sub", "userName", "exp")


def _password_bytes(plain_password: str) -> bytes:
    # bcrypt ignores everything past 72 bytes and newer releases reject longer input.
    return plain_password.encode("utf-8")[:PASSWORD_MAX_LEN]


def hash_password(plain_password: str) -> str:
    salt = bcrypt.gensalt(rounds=BCRYPT_ROUNDS)
    return bcrypt.hashpw(_password_bytes(plain_password), salt).decode("utf-8")


def verify_password(plain_password: str, hashed: str) -> bool:
    """False for a wrong password and for a stored value that is not a bcrypt hash."""
    try:
        return bcrypt.checkpw(_password_bytes(plain_password), hashed.encode("utf-8"))
    except (ValueError, TypeError):
        return False


def create_access_token(sub: str | int, user_name: str) -> str:
    """Sign a token naming the user; it expires after JWT_EXPIRE_MINUTES."""
    issued_at = datetime.now(UTC)
    claims: dict[str, Any] = {
        "sub": str(sub),
        "userName": user_name,
        "iat": issued_at,
        "exp": issued_at + timedelta(minutes=settings.JWT_EXPIRE_MINUTES),
    }
    return jwt.encode(claims, settings.JWT_SECRET.get_secret_value(), algorithm=settings.JWT_ALGORITHM)


def decode_access_token(token: str) -> dict[str, Any]:
    """
    Verify signature and expiry and return the claims.

    Raises jwt.PyJWTError (ExpiredSignatureError, MissingRequiredClaimError, ...)
    when the token cannot be trusted.
    """
    return jwt.decode(
        token,
        settings.JWT_SECRET.get_secret_value(),
        algorithms=[settings.JWT_ALGORITHM],
        options={"require": list(REQUIRED_CLAIMS)},
    )
