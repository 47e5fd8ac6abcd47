"""
Badge catalog and evaluator.

Badges are defined once as data plus a predicate over a ``BadgeState``
snapshot. ``check_badges`` evaluates every badge the user does not hold yet
and grants the ones whose predicate now holds. Grants are insert-or-ignore,
so repeated or concurrent checks never grant a badge twice.
"""
import logging
import uuid
from dataclasses import dataclass, field
from typing import Callable, FrozenSet, List, Optional, Set, Tuple

from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from yavin.core.catalog import SECTIONS
from yavin.db.dialect import conflict_insert
from yavin.models.achievement import AchievementGrant
from yavin.models.progress import ProgressRecord
from yavin.models.user import User
from yavin.services.xp import try_add_xp

logger = logging.getLogger(__name__)

PLAYGROUND_TRIGGER = "playground_run"


@dataclass(frozen=True)
class BadgeState:
    """Everything a badge predicate may look at."""

    completed_sections: FrozenSet[str] = frozenset()
    perfect_quizzes: int = 0
    streak_days: int = 0
    total_xp: int = 0
    trigger: Optional[str] = None


@dataclass(frozen=True)
class BadgeDefinition:
    """A one-time achievement."""

    id: str
    name: str
    description: str
    icon: str
    xp_reward: int
    predicate: Callable[[BadgeState], bool] = field(compare=False, repr=False)
    # Rule reads the caller-supplied trigger; only these grants record it
    uses_trigger: bool = False


def _completed(section_id: str) -> Callable[[BadgeState], bool]:
    return lambda state: section_id in state.completed_sections


# ============================================
# BADGE DEFINITIONS
# ============================================

BADGES: Tuple[BadgeDefinition, ...] = (
    BadgeDefinition("first_steps", "First Steps", "Complete your first section", "👣", 25,
                    lambda s: len(s.completed_sections) >= 1),
    BadgeDefinition("foundations_master", "Foundation Builder", "Complete the Foundations section", "🏛️", 25,
                    _completed("foundations")),
    BadgeDefinition("ml_explorer", "ML Explorer", "Complete the Machine Learning section", "🔍", 25,
                    _completed("learning")),
    BadgeDefinition("neural_navigator", "Neural Navigator", "Complete the Neural Networks section", "🧠", 25,
                    _completed("neural")),
    BadgeDefinition("deep_diver", "Deep Diver", "Complete the Deep Learning section", "🌊", 25,
                    _completed("deep")),
    BadgeDefinition("modern_maven", "Modern Maven", "Complete the Modern AI section", "🚀", 25,
                    _completed("modern")),
    BadgeDefinition("ethics_champion", "Ethics Champion", "Complete the Ethics & Society section", "⚖️", 25,
                    _completed("ethics")),
    BadgeDefinition("halfway_there", "Halfway There", "Complete four sections", "🌓", 50,
                    lambda s: len(s.completed_sections) >= 4),
    BadgeDefinition("curriculum_complete", "AI Scholar", "Complete every section", "🎓", 200,
                    lambda s: all(section.id in s.completed_sections for section in SECTIONS)),
    BadgeDefinition("quiz_ace", "Quiz Ace", "Score 100% on a quiz", "💯", 25,
                    lambda s: s.perfect_quizzes >= 1),
    BadgeDefinition("quiz_master", "Quiz Master", "Score 100% on five quizzes", "🏆", 100,
                    lambda s: s.perfect_quizzes >= 5),
    BadgeDefinition("streak_3", "On a Roll", "Learn three days in a row", "🔥", 25,
                    lambda s: s.streak_days >= 3),
    BadgeDefinition("streak_7", "Week Warrior", "Learn seven days in a row", "📅", 75,
                    lambda s: s.streak_days >= 7),
    BadgeDefinition("xp_1000", "Knowledge Seeker", "Earn 1,000 XP", "⭐", 0,
                    lambda s: s.total_xp >= 1000),
    BadgeDefinition("code_runner", "Code Runner", "Run code in the playground", "💻", 25,
                    lambda s: s.trigger == PLAYGROUND_TRIGGER, uses_trigger=True),
)

def evaluate_badges(state: BadgeState, already_granted: Set[str]) -> List[BadgeDefinition]:
    """Return the badges, in catalog order, that ``state`` newly qualifies for."""
    return [
        badge for badge in BADGES
        if badge.id not in already_granted and badge.predicate(state)
    ]


# ============================================
# STORE ACCESS
# ============================================

def granted_badge_ids(db: Session, user_id: uuid.UUID) -> Set[str]:
    return set(
        db.execute(
            select(AchievementGrant.badge_id).where(AchievementGrant.user_id == user_id)
        ).scalars()
    )


def load_badge_state(db: Session, user_id: uuid.UUID, trigger: Optional[str] = None) -> Optional[BadgeState]:
    """Snapshot the ledger and user counters, or None for an unknown user."""
    user_row = db.execute(
        select(User.streak_days, User.total_xp).where(User.id == user_id)
    ).one_or_none()
    if user_row is None:
        return None

    completed = db.execute(
        select(ProgressRecord.section_id).where(
            ProgressRecord.user_id == user_id,
            ProgressRecord.completed.is_(True),
        )
    ).scalars()
    perfect = db.execute(
        select(func.count()).select_from(ProgressRecord).where(
            ProgressRecord.user_id == user_id,
            ProgressRecord.quiz_score == 100,
        )
    ).scalar_one()

    return BadgeState(
        completed_sections=frozenset(completed),
        perfect_quizzes=perfect,
        streak_days=user_row.streak_days or 0,
        total_xp=user_row.total_xp or 0,
        trigger=trigger,
    )


def _insert_grant(db: Session, user_id: uuid.UUID, badge_id: str, trigger: Optional[str]) -> bool:
    """Insert a grant, ignoring duplicates. True if this call created it."""
    stmt = conflict_insert(db, AchievementGrant.__table__).values(
        user_id=user_id,
        badge_id=badge_id,
        trigger=trigger,
        earned_at=func.now(),
    ).on_conflict_do_nothing(index_elements=["user_id", "badge_id"])
    result = db.execute(stmt)
    db.commit()
    return result.rowcount == 1


def check_badges(db: Session, user_id: uuid.UUID, trigger: Optional[str] = None) -> List[BadgeDefinition]:
    """
    Grant every badge the user now qualifies for.

    Args:
        db: Database session
        user_id: User to evaluate
        trigger: Caller-supplied event tag for badges not derivable from stored state

    Returns:
        Badges granted by this call only
    """
    already_granted = granted_badge_ids(db, user_id)
    state = load_badge_state(db, user_id, trigger)
    if state is None:
        return []

    newly_granted: List[BadgeDefinition] = []
    for badge in evaluate_badges(state, already_granted):
        try:
            created = _insert_grant(db, user_id, badge.id, trigger if badge.uses_trigger else None)
        except SQLAlchemyError as e:
            db.rollback()
            logger.warning(f"Could not grant badge '{badge.id}' to user {user_id}: {e}")
            continue
        if not created:
            continue
        if badge.xp_reward:
            try_add_xp(db, user_id, badge.xp_reward, fallback=state.total_xp)
        logger.info(f"User {user_id} earned badge '{badge.id}'")
        newly_granted.append(badge)

    return newly_granted


def badge_overview(db: Session, user_id: Optional[uuid.UUID]) -> Tuple[List[BadgeDefinition], List[BadgeDefinition]]:
    """Split the catalog into (earned, available) for a user; anonymous users have earned nothing."""
    granted = granted_badge_ids(db, user_id) if user_id is not None else set()
    earned = [badge for badge in BADGES if badge.id in granted]
    available = [badge for badge in BADGES if badge.id not in granted]
    return earned, available
