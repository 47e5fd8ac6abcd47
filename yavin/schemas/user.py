"""
Pydantic schemas for accounts and sessions.
"""
import uuid
from typing import List, Optional

from pydantic import BaseModel, ConfigDict

from yavin.schemas.progress import ProgressEntry


class RegisterRequest(BaseModel):
    """Schema for account creation."""

    email: str
    password: str
    name: Optional[str] = None


class LoginRequest(BaseModel):
    """Schema for login."""

    email: str
    password: str


class UserPublic(BaseModel):
    """Profile exposed to the session owner."""

    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    email: str
    name: Optional[str] = None
    streak_days: int = 0
    total_xp: int = 0


class AuthResponse(BaseModel):
    success: bool = True
    message: Optional[str] = None
    user: UserPublic


class CurrentUserResponse(BaseModel):
    success: bool = True
    logged_in: bool
    user: Optional[UserPublic] = None
    progress: List[ProgressEntry] = []
