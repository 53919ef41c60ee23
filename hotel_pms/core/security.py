from __future__ import annotations

from datetime import datetime, timedelta, timezone

import bcrypt
from jose import jwt

from hotel_pms.core.config import get_settings


def hash_password(password: str) -> str:
    return bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt()).decode("utf-8")


def verify_password(password: str, password_hash: str | None) -> bool:
    if not password_hash:
        return False
    try:
        return bcrypt.checkpw(password.encode("utf-8"), password_hash.encode("utf-8"))
    except ValueError:
        # Stored value is not a bcrypt hash
        return False


def access_token_lifetime(remember_me: bool = False) -> timedelta:
    settings = get_settings()
    if remember_me:
        return timedelta(days=settings.remember_me_expire_days)
    return timedelta(minutes=settings.access_token_expire_minutes)


def create_access_token(
    subject: str,
    expires_delta: timedelta | None = None,
    extra_claims: dict | None = None,
) -> str:
    settings = get_settings()
    expire = datetime.now(timezone.utc) + (expires_delta or access_token_lifetime())
    claims = {**(extra_claims or {}), "sub": subject, "exp": expire}
    return jwt.encode(claims, settings.jwt_secret, algorithm=settings.algorithm)


def decode_access_token(token: str) -> dict:
    """Decode and verify a token; raises ``jose.JWTError`` when invalid or expired."""
    settings = get_settings()
    return jwt.decode(token, settings.jwt_secret, algorithms=[settings.algorithm])
