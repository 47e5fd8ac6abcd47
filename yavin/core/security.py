"""
Security utilities for session tokens and password hashing.
"""
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional

from jose import jwt, JWTError
from passlib.context import CryptContext

from yavin.core.config import settings

pwd_context = CryptContext(schemes=["argon2"], deprecated="auto")

SESSION_TOKEN_TYPE = "session"


def _create_token(
    subject: str,
    token_type: str,
    expires_delta: timedelta,
    extra_claims: Optional[Dict[str, Any]] = None
) -> str:
    """Internal function to create JWT tokens."""
    now = datetime.now(timezone.utc)

    payload = {
        "sub": subject,
        "iat": now,
        "exp": now + expires_delta,
        "type": token_type,
        **(extra_claims or {})
    }

    return jwt.encode(payload, settings.SECRET_KEY, algorithm=settings.ALGORITHM)


def create_session_token(user_id: str, expires_delta: Optional[timedelta] = None) -> str:
    """Create the signed token stored in the session cookie."""
    delta = expires_delta or timedelta(days=settings.SESSION_EXPIRE_DAYS)
    return _create_token(user_id, SESSION_TOKEN_TYPE, delta)


def decode_token(token: str) -> Optional[Dict[str, Any]]:
    """Decode and validate JWT token."""
    try:
        return jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.ALGORITHM])
    except JWTError:
        return None


def read_session_subject(token: Optional[str]) -> Optional[str]:
    """Return the user id carried by a session token, or None if unusable."""
    if not token:
        return None
    payload = decode_token(token)
    if not payload or payload.get("type") != SESSION_TOKEN_TYPE:
        return None
    subject = payload.get("sub")
    return subject if isinstance(subject, str) else None


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify password against hash. Unparseable hashes never verify."""
    try:
        return pwd_context.verify(plain_password, hashed_password)
    except (ValueError, TypeError):
        return False


def get_password_hash(password: str) -> str:
    """Hash a password."""
    return pwd_context.hash(password)
