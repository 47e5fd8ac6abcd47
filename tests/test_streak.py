"""Tests for streak computation and persistence."""

from datetime import date, timedelta
from unittest.mock import patch

from sqlalchemy import update
from sqlalchemy.exc import OperationalError

from yavin.models.user import User
from yavin.services import streak as streak_module
from yavin.services.streak import MAX_STREAK_WRITE_ATTEMPTS, next_streak, try_update_streak, update_user_streak

TODAY = date(2026, 3, 10)


class TestNextStreak:
    def test_first_activity_starts_at_one(self):
        assert next_streak(None, 0, TODAY) == 1

    def test_same_day_is_unchanged(self):
        assert next_streak(TODAY, 6, TODAY) == 6

    def test_consecutive_day_extends(self):
        assert next_streak(TODAY - timedelta(days=1), 4, TODAY) == 5

    def test_gap_resets(self):
        assert next_streak(TODAY - timedelta(days=10), 4, TODAY) == 1

    def test_future_date_resets(self):
        assert next_streak(TODAY + timedelta(days=2), 9, TODAY) == 1


class TestUpdateUserStreak:
    def test_persists_streak_and_activity_date(self, db, make_user):
        user = make_user(streak_days=4, last_activity_date=TODAY - timedelta(days=1))
        assert update_user_streak(db, user.id, TODAY) == 5

        stored = db.get(User, user.id)
        db.refresh(stored)
        assert stored.streak_days == 5
        assert stored.last_activity_date == TODAY

    def test_repeated_same_day_calls_are_idempotent(self, db, make_user):
        user = make_user(streak_days=2, last_activity_date=TODAY - timedelta(days=1))
        assert update_user_streak(db, user.id, TODAY) == 3
        assert update_user_streak(db, user.id, TODAY) == 3

    def test_first_ever_activity(self, db, make_user):
        user = make_user()
        assert update_user_streak(db, user.id, TODAY) == 1

    def test_unknown_user(self, db):
        import uuid
        assert update_user_streak(db, uuid.uuid4(), TODAY) is None


class TestConcurrentStreakWrites:
    def _racing_next_streak(self, db, user_id, races):
        """Bump the stored streak between the read and the write ``races`` times."""
        calls = []

        def racing(last_activity_date, current_streak, today):
            if len(calls) < races:
                db.execute(
                    update(User)
                    .where(User.id == user_id)
                    .values(streak_days=current_streak + 10)
                    .execution_options(synchronize_session=False)
                )
            calls.append(current_streak)
            return next_streak(last_activity_date, current_streak, today)

        return racing, calls

    def test_retries_after_losing_a_race(self, db, make_user):
        user = make_user(streak_days=2, last_activity_date=TODAY - timedelta(days=1))
        racing, calls = self._racing_next_streak(db, user.id, races=1)

        with patch.object(streak_module, "next_streak", side_effect=racing):
            assert update_user_streak(db, user.id, TODAY) == 13

        assert calls == [2, 12]
        db.expire_all()
        assert db.get(User, user.id).last_activity_date == TODAY

    def test_gives_up_after_repeated_races(self, db, make_user):
        yesterday = TODAY - timedelta(days=1)
        user = make_user(streak_days=2, last_activity_date=yesterday)
        racing, calls = self._racing_next_streak(db, user.id, races=MAX_STREAK_WRITE_ATTEMPTS)

        with patch.object(streak_module, "next_streak", side_effect=racing):
            assert update_user_streak(db, user.id, TODAY) == 32

        assert calls == [2, 12, 22]
        db.expire_all()
        assert db.get(User, user.id).last_activity_date == yesterday


class TestTryUpdateStreak:
    def test_store_failure_returns_fallback(self, db, make_user):
        user = make_user(streak_days=4, last_activity_date=TODAY - timedelta(days=1))
        failure = OperationalError("UPDATE users", {}, Exception("db down"))

        with patch.object(streak_module, "update_user_streak", side_effect=failure):
            assert try_update_streak(db, user.id, fallback=4, today=TODAY) == 4

        db.expire_all()
        assert db.get(User, user.id).streak_days == 4
