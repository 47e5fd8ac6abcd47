"""
API endpoints for badges.
"""
from typing import Any, Optional

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from yavin.core.dependencies import get_current_user, get_optional_user
from yavin.db.base import get_db
from yavin.models.user import User
from yavin.schemas.badge import Badge, BadgeCatalogResponse, BadgeCheckRequest, BadgeCheckResponse
from yavin.services.badges import badge_overview, check_badges

router = APIRouter()


@router.get("", response_model=BadgeCatalogResponse)
def list_badges(
    db: Session = Depends(get_db),
    current_user: Optional[User] = Depends(get_optional_user),
) -> Any:
    earned, available = badge_overview(db, current_user.id if current_user else None)
    return BadgeCatalogResponse(
        earned=[Badge.model_validate(badge) for badge in earned],
        available=[Badge.model_validate(badge) for badge in available],
    )


@router.post("/check", response_model=BadgeCheckResponse)
def run_badge_check(
    form: Optional[BadgeCheckRequest] = None,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> Any:
    """
    Evaluate badge rules for the current user and grant any newly earned badges.
    """
    trigger = form.trigger if form else None
    granted = check_badges(db, current_user.id, trigger)
    return BadgeCheckResponse(new_badges=[Badge.model_validate(badge) for badge in granted])
