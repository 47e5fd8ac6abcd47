"""
Progress ledger: section completion, time spent and quiz scores.
"""
import logging
import uuid
from dataclasses import dataclass
from datetime import date
from typing import List, Optional

from sqlalchemy import case, select, update
from sqlalchemy.orm import Session
from sqlalchemy.sql import func

from yavin.core.catalog import MAX_TIME_SPENT_SECONDS, PERFECT_QUIZ_BONUS_XP, SectionDefinition, get_section
from yavin.core.exceptions import InvalidSection, ValidationFailed
from yavin.db.dialect import conflict_insert
from yavin.models.progress import ProgressRecord
from yavin.models.user import User
from yavin.services.streak import try_update_streak
from yavin.services.xp import try_add_xp

logger = logging.getLogger(__name__)

PROGRESS_KEY = ["user_id", "section_id"]


@dataclass(frozen=True)
class ProgressOutcome:
    """Result of a progress update."""

    xp_earned: int
    total_xp: int
    streak_days: int


@dataclass(frozen=True)
class QuizOutcome:
    """Result of a quiz submission."""

    score: int
    total: int
    percentage: int
    bonus_xp: int
    logged_in: bool


def require_section(section_id: str) -> SectionDefinition:
    section = get_section(section_id)
    if section is None:
        raise InvalidSection(section_id)
    return section


def quiz_percentage(score: int, total: int) -> int:
    """Whole-number percentage, rounded down."""
    if total <= 0:
        raise ValidationFailed("Quiz total must be greater than zero")
    if score < 0 or score > total:
        raise ValidationFailed("Quiz score must be between 0 and the total")
    return score * 100 // total


def list_progress(db: Session, user_id: uuid.UUID) -> List[ProgressRecord]:
    return list(
        db.execute(
            select(ProgressRecord)
            .where(ProgressRecord.user_id == user_id)
            .order_by(ProgressRecord.id)
        ).scalars()
    )


def _claim_completion(db: Session, user_id: uuid.UUID, section_id: str) -> bool:
    """
    Stamp ``completed_at`` if it has never been set.

    Only one caller can win the claim for a given row, which makes the
    claim the false-to-true transition that pays out section XP.
    """
    result = db.execute(
        update(ProgressRecord)
        .where(
            ProgressRecord.user_id == user_id,
            ProgressRecord.section_id == section_id,
            ProgressRecord.completed_at.is_(None),
        )
        .values(completed_at=func.now())
        .execution_options(synchronize_session=False)
    )
    return result.rowcount == 1


def upsert_progress(
    db: Session,
    user: User,
    section_id: str,
    completed: bool,
    time_spent: Optional[int] = None,
    today: Optional[date] = None,
) -> ProgressOutcome:
    """
    Record progress on a section for a logged-in user.

    ``completed`` overwrites the stored flag, time spent is added to the
    running total and ``completed_at`` is set once. Section XP is paid only
    on the first completion.

    Raises:
        InvalidSection: Unknown section id
        ValidationFailed: Negative or oversized time spent
    """
    section = require_section(section_id)
    if time_spent is not None and time_spent < 0:
        raise ValidationFailed("Time spent cannot be negative")
    if time_spent is not None and time_spent > MAX_TIME_SPENT_SECONDS:
        raise ValidationFailed(f"Time spent cannot exceed {MAX_TIME_SPENT_SECONDS} seconds")

    user_id = user.id
    total_xp = user.total_xp or 0
    streak_days = user.streak_days or 0

    table = ProgressRecord.__table__
    stmt = conflict_insert(db, table).values(
        user_id=user_id,
        section_id=section_id,
        completed=completed,
        time_spent_seconds=time_spent or 0,
    )
    stmt = stmt.on_conflict_do_update(
        index_elements=PROGRESS_KEY,
        set_={
            "completed": stmt.excluded.completed,
            "time_spent_seconds": table.c.time_spent_seconds + stmt.excluded.time_spent_seconds,
        },
    )
    db.execute(stmt)

    newly_completed = completed and _claim_completion(db, user_id, section_id)
    db.commit()

    xp_earned = 0
    if newly_completed:
        xp_earned = section.xp_value
        total_xp = try_add_xp(db, user_id, xp_earned, fallback=total_xp)
        logger.info(f"User {user_id} completed section '{section_id}' (+{xp_earned} XP)")

    streak_days = try_update_streak(db, user_id, fallback=streak_days, today=today)

    return ProgressOutcome(xp_earned=xp_earned, total_xp=total_xp, streak_days=streak_days)


def record_quiz(
    db: Session,
    user: Optional[User],
    section_id: str,
    score: int,
    total: int,
) -> QuizOutcome:
    """
    Score a quiz submission and, for logged-in users, keep the best result.

    Every submission reaching 100% pays the perfect-score bonus. Anonymous
    submissions are scored but never stored.

    Raises:
        InvalidSection: Unknown section id
        ValidationFailed: Non-positive total or out-of-range score
    """
    require_section(section_id)
    percentage = quiz_percentage(score, total)

    if user is None:
        return QuizOutcome(score=score, total=total, percentage=percentage, bonus_xp=0, logged_in=False)

    table = ProgressRecord.__table__
    stmt = conflict_insert(db, table).values(
        user_id=user.id,
        section_id=section_id,
        quiz_score=percentage,
        quiz_completed_at=func.now(),
    )
    best_score = case(
        (table.c.quiz_score.is_(None), stmt.excluded.quiz_score),
        (stmt.excluded.quiz_score > table.c.quiz_score, stmt.excluded.quiz_score),
        else_=table.c.quiz_score,
    )
    stmt = stmt.on_conflict_do_update(
        index_elements=PROGRESS_KEY,
        set_={"quiz_score": best_score, "quiz_completed_at": func.now()},
    )
    db.execute(stmt)
    db.commit()

    bonus_xp = PERFECT_QUIZ_BONUS_XP if percentage == 100 else 0
    if bonus_xp:
        try_add_xp(db, user.id, bonus_xp, fallback=user.total_xp or 0)

    return QuizOutcome(score=score, total=total, percentage=percentage, bonus_xp=bonus_xp, logged_in=True)
