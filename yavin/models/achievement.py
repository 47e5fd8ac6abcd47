"""
Append-only record of granted badges.
"""
from sqlalchemy import Column, DateTime, ForeignKey, Integer, String, UniqueConstraint, Uuid
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from yavin.db.base import Base


class AchievementGrant(Base):
    """A badge earned by a user. Never revoked, never granted twice."""

    __tablename__ = "user_achievements"
    __table_args__ = (
        UniqueConstraint("user_id", "badge_id", name="uq_user_achievements_user_badge"),
    )

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Uuid, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    badge_id = Column(String(50), nullable=False)
    trigger = Column(String(50), nullable=True)
    earned_at = Column(DateTime(timezone=True), server_default=func.now())

    # Relationships
    user = relationship("User", back_populates="achievements")
