"""
Newsletter and feedback endpoints.
"""
from typing import Any, Optional

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from yavin.core.dependencies import get_optional_user
from yavin.db.base import get_db
from yavin.models.user import User
from yavin.schemas.common import Message
from yavin.schemas.engagement import FeedbackSubmission, NewsletterSubscription
from yavin.services.engagement import submit_feedback, subscribe

router = APIRouter()


@router.post("/newsletter", response_model=Message)
def subscribe_newsletter(form: NewsletterSubscription, db: Session = Depends(get_db)) -> Any:
    return Message(message=subscribe(db, form.email, form.source))


@router.post("/feedback", response_model=Message)
def send_feedback(
    form: FeedbackSubmission,
    db: Session = Depends(get_db),
    current_user: Optional[User] = Depends(get_optional_user),
) -> Any:
    submit_feedback(
        db,
        rating=form.rating,
        message=form.message,
        user_id=current_user.id if current_user else None,
        name=form.name,
        email=form.email,
        page_url=form.page_url,
    )
    return Message(message="Thank you for your feedback!")
