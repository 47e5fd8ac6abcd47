"""
User model for accounts, streaks and experience points.
"""
import uuid

from sqlalchemy import Column, Date, DateTime, Integer, String, Uuid
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from yavin.db.base import Base


class User(Base):
    """User model."""

    __tablename__ = "users"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    email = Column(String, unique=True, index=True, nullable=False)
    password_hash = Column(String, nullable=False)
    name = Column(String, nullable=True)

    streak_days = Column(Integer, nullable=False, default=0, server_default="0")
    total_xp = Column(Integer, nullable=False, default=0, server_default="0")
    last_activity_date = Column(Date, nullable=True)

    created_at = Column(DateTime(timezone=True), server_default=func.now())

    # Relationships
    progress = relationship("ProgressRecord", back_populates="user", cascade="all, delete-orphan")
    achievements = relationship("AchievementGrant", back_populates="user", cascade="all, delete-orphan")

    @property
    def display_name(self) -> str:
        """Profile name, falling back to the local part of the email."""
        return self.name or self.email.split("@", 1)[0]
