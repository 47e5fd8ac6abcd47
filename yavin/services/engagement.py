"""
Newsletter subscriptions and feedback.
"""
import logging
import uuid
from typing import Optional

from sqlalchemy import select
from sqlalchemy.orm import Session
from sqlalchemy.sql import func

from yavin.core.exceptions import ValidationFailed
from yavin.models.engagement import Feedback, NewsletterSubscriber
from yavin.services.users import validate_email

logger = logging.getLogger(__name__)

DEFAULT_SOURCE = "website"

SUBSCRIBED = "Thanks for subscribing! You'll receive AI insights and updates."
RESUBSCRIBED = "Welcome back! You've been re-subscribed to our newsletter."
ALREADY_SUBSCRIBED = "You're already subscribed to our newsletter!"


def subscribe(db: Session, email: str, source: Optional[str] = None) -> str:
    """
    Add or re-activate a newsletter subscription.

    Returns:
        Message to show the visitor
    """
    email = validate_email(email, "Please enter a valid email address")

    subscriber = db.execute(
        select(NewsletterSubscriber).where(NewsletterSubscriber.email == email)
    ).scalar_one_or_none()

    if subscriber is not None:
        if not subscriber.unsubscribed:
            return ALREADY_SUBSCRIBED
        subscriber.unsubscribed = False
        subscriber.subscribed_at = func.now()
        db.commit()
        return RESUBSCRIBED

    db.add(NewsletterSubscriber(email=email, source=source or DEFAULT_SOURCE))
    db.commit()
    logger.info(f"New newsletter subscriber from '{source or DEFAULT_SOURCE}'")
    return SUBSCRIBED


def submit_feedback(
    db: Session,
    rating: int,
    message: str,
    user_id: Optional[uuid.UUID] = None,
    name: Optional[str] = None,
    email: Optional[str] = None,
    page_url: Optional[str] = None,
) -> Feedback:
    if not 1 <= rating <= 5:
        raise ValidationFailed("Rating must be between 1 and 5")
    if not message.strip():
        raise ValidationFailed("Message is required")

    feedback = Feedback(
        user_id=user_id,
        name=name,
        email=email,
        rating=rating,
        message=message.strip(),
        page_url=page_url,
    )
    db.add(feedback)
    db.commit()
    db.refresh(feedback)
    return feedback
