"""
Per-section progress ledger.
"""
from sqlalchemy import BigInteger, Boolean, Column, DateTime, ForeignKey, Integer, String, UniqueConstraint, Uuid, false
from sqlalchemy.orm import relationship

from yavin.db.base import Base


class ProgressRecord(Base):
    """Completion state and best quiz score for one user and section."""

    __tablename__ = "user_progress"
    __table_args__ = (
        UniqueConstraint("user_id", "section_id", name="uq_user_progress_user_section"),
    )

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Uuid, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    section_id = Column(String(50), nullable=False)

    completed = Column(Boolean, nullable=False, default=False, server_default=false())
    completed_at = Column(DateTime(timezone=True), nullable=True)  # set once, never cleared
    time_spent_seconds = Column(BigInteger, nullable=False, default=0, server_default="0")

    quiz_score = Column(Integer, nullable=True)  # best percentage, 0-100
    quiz_completed_at = Column(DateTime(timezone=True), nullable=True)

    # Relationships
    user = relationship("User", back_populates="progress")
