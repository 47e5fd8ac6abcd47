"""
Dependency injection for FastAPI endpoints.
"""
import logging
import uuid
from typing import Optional

from fastapi import Depends, Request, Response
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from yavin.core.config import settings
from yavin.core.exceptions import AuthenticationFailed
from yavin.core.security import create_session_token, read_session_subject
from yavin.db.base import get_db
from yavin.models.user import User

logger = logging.getLogger(__name__)


def resolve_session_user(db: Session, token: Optional[str]) -> Optional[User]:
    """
    Map a session token to its user.

    Malformed, expired or unknown tokens resolve to None, as does a store
    failure during the lookup: not being logged in is a normal outcome.
    """
    subject = read_session_subject(token)
    if subject is None:
        return None
    try:
        user_id = uuid.UUID(subject)
    except ValueError:
        return None
    try:
        return db.get(User, user_id)
    except SQLAlchemyError as e:
        db.rollback()
        logger.warning(f"Session lookup failed: {e}")
        return None


def get_optional_user(request: Request, db: Session = Depends(get_db)) -> Optional[User]:
    """Current user, or None for anonymous visitors."""
    return resolve_session_user(db, request.cookies.get(settings.SESSION_COOKIE_NAME))


def get_current_user(user: Optional[User] = Depends(get_optional_user)) -> User:
    """
    Current user for endpoints that need a session.

    Raises:
        AuthenticationFailed: If there is no valid session
    """
    if user is None:
        raise AuthenticationFailed("Not logged in")
    return user


def start_session(response: Response, user_id: uuid.UUID) -> None:
    response.set_cookie(
        key=settings.SESSION_COOKIE_NAME,
        value=create_session_token(str(user_id)),
        max_age=settings.SESSION_EXPIRE_DAYS * 24 * 3600,
        httponly=True,
        secure=settings.COOKIE_SECURE,
        samesite="lax",
    )


def end_session(response: Response) -> None:
    response.delete_cookie(settings.SESSION_COOKIE_NAME)
