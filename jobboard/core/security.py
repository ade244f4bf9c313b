"""Bearer token handling.

Tokens are issued by the identity provider that fronts the job board; this
service only verifies them and reads the identity claims.
"""
from datetime import datetime, timedelta, timezone
from typing import Any
from uuid import uuid4

from jose import JWTError, jwt

from jobboard.config import settings

IDENTITY_CLAIMS = ("email", "first_name", "last_name", "profile_image_url")


def create_access_token(subject: str, expires_minutes: int = 60, **claims: Any) -> str:
    """Sign a token the same way the identity provider does (local runs, tests)."""
    expire = datetime.now(timezone.utc) + timedelta(minutes=expires_minutes)
    to_encode = {"sub": subject, "exp": expire}
    to_encode.update({k: v for k, v in claims.items() if k in IDENTITY_CLAIMS})
    return jwt.encode(to_encode, settings.secret_key, algorithm=settings.algorithm)


def decode_access_token(token: str) -> dict | None:
    """Return the verified claims, or None when the token is invalid, expired or has no subject."""
    try:
        payload = jwt.decode(token, settings.secret_key, algorithms=[settings.algorithm])
    except JWTError:
        return None
    if not payload.get("sub"):
        return None
    return payload


def generate_id() -> str:
    return str(uuid4())
