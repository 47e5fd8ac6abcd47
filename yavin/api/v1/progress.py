"""
API endpoints for section progress and quiz results.
"""
from typing import Any, Optional

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from yavin.core.dependencies import get_current_user, get_optional_user
from yavin.db.base import get_db
from yavin.models.user import User
from yavin.schemas.progress import ProgressResponse, ProgressUpdate, QuizResponse, QuizSubmission
from yavin.services.progress import record_quiz, upsert_progress

router = APIRouter()


@router.post("/progress", response_model=ProgressResponse)
def update_progress(
    form: ProgressUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> Any:
    """
    Mark a section as visited or completed.

    Section XP is awarded the first time a section is completed.
    """
    outcome = upsert_progress(db, current_user, form.section_id, form.completed, form.time_spent)
    return ProgressResponse(
        xp_earned=outcome.xp_earned,
        total_xp=outcome.total_xp,
        streak_days=outcome.streak_days,
    )


@router.post("/quiz", response_model=QuizResponse)
def submit_quiz(
    form: QuizSubmission,
    db: Session = Depends(get_db),
    current_user: Optional[User] = Depends(get_optional_user),
) -> Any:
    """
    Score a quiz. Results are only stored for logged-in users.
    """
    outcome = record_quiz(db, current_user, form.section, form.score, form.total)
    return QuizResponse.model_validate(outcome)
