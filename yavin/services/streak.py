"""
Daily activity streak tracking.
"""
import logging
import uuid
from datetime import date, datetime, timezone
from typing import Optional

from sqlalchemy import select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from yavin.models.user import User

logger = logging.getLogger(__name__)

# Compare-and-set attempts before giving up on a contended streak write
MAX_STREAK_WRITE_ATTEMPTS = 3


def utc_today() -> date:
    return datetime.now(timezone.utc).date()


def next_streak(last_activity_date: Optional[date], current_streak: int, today: date) -> int:
    """
    Compute the streak after activity on ``today``.

    Same-day activity keeps the streak, activity on the following day extends
    it, and anything else (a gap, or a last date in the future) starts over.
    """
    if last_activity_date is None:
        return 1
    days_diff = (today - last_activity_date).days
    if days_diff == 0:
        return current_streak
    if days_diff == 1:
        return current_streak + 1
    return 1


def update_user_streak(db: Session, user_id: uuid.UUID, today: Optional[date] = None) -> Optional[int]:
    """
    Record activity for ``today`` and persist the resulting streak.

    The write only lands if the row still holds the values the new streak was
    computed from; otherwise the row is re-read and the computation retried.

    Returns:
        The persisted streak, or None if the user does not exist
    """
    today = today or utc_today()

    for _ in range(MAX_STREAK_WRITE_ATTEMPTS):
        row = db.execute(
            select(User.last_activity_date, User.streak_days).where(User.id == user_id)
        ).one_or_none()
        if row is None:
            return None

        last_date, current = row.last_activity_date, row.streak_days or 0
        new_streak = next_streak(last_date, current, today)

        unchanged = (
            User.last_activity_date.is_(None) if last_date is None
            else User.last_activity_date == last_date
        )
        result = db.execute(
            update(User)
            .where(User.id == user_id, unchanged, User.streak_days == current)
            .values(streak_days=new_streak, last_activity_date=today)
            .execution_options(synchronize_session=False)
        )
        db.commit()
        if result.rowcount == 1:
            return new_streak

    logger.warning(f"Streak update for user {user_id} lost {MAX_STREAK_WRITE_ATTEMPTS} races")
    return db.execute(select(User.streak_days).where(User.id == user_id)).scalar_one_or_none()


def try_update_streak(db: Session, user_id: uuid.UUID, fallback: int, today: Optional[date] = None) -> int:
    """Best-effort streak update that degrades to ``fallback`` on store failure."""
    try:
        streak = update_user_streak(db, user_id, today)
    except SQLAlchemyError as e:
        db.rollback()
        logger.warning(f"Could not update streak for user {user_id}: {e}")
        return fallback
    return fallback if streak is None else streak
