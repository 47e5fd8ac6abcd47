"""
Credential store: registration and login checks.
"""
import logging
from typing import Optional

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from yavin.core.exceptions import AuthenticationFailed, ConflictError, ValidationFailed
from yavin.core.security import get_password_hash, verify_password
from yavin.models.user import User

logger = logging.getLogger(__name__)

MIN_EMAIL_LENGTH = 5
MIN_PASSWORD_LENGTH = 8
INVALID_CREDENTIALS = "Invalid email or password"


def validate_email(email: str, message: str = "Invalid email address") -> str:
    """Return the trimmed email or raise if it does not look like one."""
    email = email.strip()
    if "@" not in email or len(email) < MIN_EMAIL_LENGTH:
        raise ValidationFailed(message)
    return email


def get_user_by_email(db: Session, email: str) -> Optional[User]:
    return db.execute(select(User).where(User.email == email)).scalar_one_or_none()


def register_user(db: Session, email: str, password: str, name: Optional[str] = None) -> User:
    """
    Create a new account.

    Raises:
        ValidationFailed: Malformed email or weak password
        ConflictError: Email already registered
    """
    email = validate_email(email)
    if len(password) < MIN_PASSWORD_LENGTH:
        raise ValidationFailed(f"Password must be at least {MIN_PASSWORD_LENGTH} characters")

    if get_user_by_email(db, email) is not None:
        raise ConflictError("An account with this email already exists")

    user = User(
        email=email,
        password_hash=get_password_hash(password),
        name=(name or "").strip() or None,
    )
    db.add(user)
    try:
        db.commit()
    except IntegrityError:
        # Lost a race with a concurrent registration for the same email
        db.rollback()
        raise ConflictError("An account with this email already exists")
    db.refresh(user)

    logger.info(f"Registered user {user.id}")
    return user


def authenticate(db: Session, email: str, password: str) -> User:
    """
    Check credentials.

    Unknown email and wrong password fail the same way.

    Raises:
        AuthenticationFailed: Credentials do not match an account
    """
    user = get_user_by_email(db, email.strip())
    if user is None or not verify_password(password, user.password_hash):
        raise AuthenticationFailed(INVALID_CREDENTIALS)
    return user
