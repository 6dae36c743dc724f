"""Secret hashing and JWT issuing/verification for authentication."""

import base64
import hashlib
import uuid
from datetime import UTC, datetime, timedelta
from typing import Any

import bcrypt
import jwt

from app.core.config import settings

# Input validation bounds shared by request schemas and CLI scripts.
PASSWORD_MIN_LEN = 6
PASSWORD_MAX_LEN = 128
NAME_MAX_LEN = 255
NIK_MAX_LEN = 32


def _prepare_secret(secret: str) -> bytes:
    # bcrypt only reads 72 bytes; refresh JWTs are longer and share a common prefix,
    # so every secret is reduced to a fixed-length digest first.
    digest = hashlib.sha256(secret.encode("utf-8")).digest()
    return base64.b64encode(digest)


def hash_secret(secret: str, rounds: int | None = None) -> str:
    """Hash a password or refresh token for storage. Never store the plain value."""
    salt = bcrypt.gensalt(rounds=rounds or settings.BCRYPT_ROUNDS)
    return bcrypt.hashpw(_prepare_secret(secret), salt).decode("utf-8")


def verify_secret(secret: str, hashed: str | None) -> bool:
    """
    Check a plain secret against a stored hash.

    A missing or empty hash never matches; malformed hashes are a mismatch, not an error.
    """
    if not hashed:
        return False
    try:
        return bcrypt.checkpw(_prepare_secret(secret), hashed.encode("utf-8"))
    except (ValueError, TypeError):
        return False


def _encode(
    payload: dict[str, Any],
    secret: str,
    ttl: timedelta,
    now: datetime | None,
) -> str:
    issued_at = now or datetime.now(UTC)
    body = {
        **payload,
        "iat": issued_at,
        "exp": issued_at + ttl,
        "jti": uuid.uuid4().hex,
    }
    return jwt.encode(body, secret, algorithm=settings.JWT_ALGORITHM)


def create_access_token(
    claims: dict[str, Any],
    secret: str,
    ttl: timedelta,
    now: datetime | None = None,
) -> str:
    """Create a signed access token from claims (sub, email, role) plus iat, exp and jti."""
    if not claims.get("sub"):
        raise ValueError("Access token claims require a 'sub'")
    payload = dict(claims)
    payload["sub"] = str(payload["sub"])
    return _encode(payload, secret, ttl, now)


def create_refresh_token(
    subject_id: str,
    secret: str,
    ttl: timedelta,
    now: datetime | None = None,
) -> str:
    """Create a signed refresh token carrying only the subject id."""
    if not subject_id:
        raise ValueError("Refresh token requires a subject id")
    return _encode({"sub": str(subject_id)}, secret, ttl, now)


def decode_token(token: str, secret: str) -> dict[str, Any]:
    """
    Decode and validate a JWT signed with ``secret``.
    Raises jwt.PyJWTError on bad signature, expiry or a missing sub/exp claim.
    """
    return jwt.decode(
        token,
        secret,
        algorithms=[settings.JWT_ALGORITHM],
        options={"require": ["exp", "sub"]},
    )


def decode_access_token(token: str) -> dict[str, Any]:
    """Decode an access token; return payload (sub, email, role, exp, iat, jti)."""
    return decode_token(token, settings.JWT_SECRET.get_secret_value())


def decode_refresh_token(token: str) -> dict[str, Any]:
    """Decode a refresh token; return payload (sub, exp, iat, jti)."""
    return decode_token(token, settings.JWT_REFRESH_SECRET.get_secret_value())
