"""
Authentication endpoints for registration, login and the current session.
"""
import logging
from typing import Any, Optional

from fastapi import APIRouter, Depends, Response
from sqlalchemy.orm import Session

from yavin.core.dependencies import end_session, get_optional_user, start_session
from yavin.db.base import get_db
from yavin.models.user import User
from yavin.schemas.common import Message
from yavin.schemas.progress import ProgressEntry
from yavin.schemas.user import AuthResponse, CurrentUserResponse, LoginRequest, RegisterRequest, UserPublic
from yavin.services.progress import list_progress
from yavin.services.streak import try_update_streak
from yavin.services.users import authenticate, register_user

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/register", response_model=AuthResponse)
def register(form: RegisterRequest, response: Response, db: Session = Depends(get_db)) -> Any:
    """
    Register a new user and start their session.

    Raises:
        ValidationFailed: Invalid email or weak password
        ConflictError: Email already registered
    """
    user = register_user(db, form.email, form.password, form.name)
    start_session(response, user.id)
    return AuthResponse(message="Account created successfully", user=UserPublic.model_validate(user))


@router.post("/login", response_model=AuthResponse)
def login(form: LoginRequest, response: Response, db: Session = Depends(get_db)) -> Any:
    """
    Verify credentials, record the day's activity and start a session.

    Raises:
        AuthenticationFailed: Unknown email or wrong password
    """
    user = authenticate(db, form.email, form.password)
    profile = UserPublic.model_validate(user)
    profile.streak_days = try_update_streak(db, user.id, fallback=profile.streak_days)
    start_session(response, user.id)
    logger.info(f"User {user.id} logged in (streak {profile.streak_days})")
    return AuthResponse(user=profile)


@router.post("/logout", response_model=Message)
def logout(response: Response) -> Any:
    end_session(response)
    return Message(message="Logged out successfully")


@router.get("/me", response_model=CurrentUserResponse)
def read_current_user(
    user: Optional[User] = Depends(get_optional_user),
    db: Session = Depends(get_db),
) -> Any:
    """Current session's profile and progress, or an anonymous marker."""
    if user is None:
        return CurrentUserResponse(logged_in=False)
    progress = [ProgressEntry.model_validate(record) for record in list_progress(db, user.id)]
    return CurrentUserResponse(logged_in=True, user=UserPublic.model_validate(user), progress=progress)
