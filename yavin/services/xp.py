"""
Experience point accumulator.
"""
import logging
import uuid
from typing import Optional

from sqlalchemy import update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from yavin.models.user import User

logger = logging.getLogger(__name__)


def add_xp(db: Session, user_id: uuid.UUID, delta: int) -> Optional[int]:
    """
    Atomically add ``delta`` to a user's total XP.

    The increment happens in a single UPDATE so concurrent grants for the
    same user are never lost.

    Returns:
        The new total, or None if the user does not exist
    """
    new_total = db.execute(
        update(User)
        .where(User.id == user_id)
        .values(total_xp=User.total_xp + delta)
        .returning(User.total_xp)
        .execution_options(synchronize_session=False)
    ).scalar_one_or_none()
    db.commit()
    return new_total


def try_add_xp(db: Session, user_id: uuid.UUID, delta: int, fallback: int) -> int:
    """Best-effort ``add_xp``: on store failure log, roll back and return ``fallback``."""
    try:
        new_total = add_xp(db, user_id, delta)
    except SQLAlchemyError as e:
        db.rollback()
        logger.warning(f"Could not grant {delta} XP to user {user_id}: {e}")
        return fallback
    return fallback if new_total is None else new_total
