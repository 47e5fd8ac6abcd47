"""
Newsletter subscriptions and site feedback.
"""
from sqlalchemy import Boolean, Column, DateTime, ForeignKey, Integer, String, Text, Uuid, false
from sqlalchemy.sql import func

from yavin.db.base import Base


class NewsletterSubscriber(Base):
    """Newsletter subscriber."""

    __tablename__ = "newsletter_subscribers"

    id = Column(Integer, primary_key=True, index=True)
    email = Column(String, unique=True, index=True, nullable=False)
    source = Column(String(50), nullable=False, default="website")
    unsubscribed = Column(Boolean, nullable=False, default=False, server_default=false())
    subscribed_at = Column(DateTime(timezone=True), server_default=func.now())


class Feedback(Base):
    """Feedback left from any page, optionally tied to a user."""

    __tablename__ = "feedback"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Uuid, ForeignKey("users.id", ondelete="SET NULL"), nullable=True)
    name = Column(String, nullable=True)
    email = Column(String, nullable=True)
    rating = Column(Integer, nullable=False)  # 1-5
    message = Column(Text, nullable=False)
    page_url = Column(String, nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
