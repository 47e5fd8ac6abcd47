"""Tests for the progress ledger."""

from datetime import date, timedelta
from unittest.mock import patch

import pytest
from sqlalchemy.exc import OperationalError

from yavin.core.catalog import MAX_TIME_SPENT_SECONDS
from yavin.core.exceptions import InvalidSection, ValidationFailed
from yavin.models.user import User
from yavin.services import streak as streak_module
from yavin.services import xp as xp_module
from yavin.services.progress import list_progress, quiz_percentage, record_quiz, upsert_progress

TODAY = date(2026, 3, 10)


def _reload(db, user):
    db.expire_all()
    return db.get(User, user.id)


class TestUpsertProgress:
    def test_first_completion_awards_section_xp(self, db, make_user):
        user = make_user()
        outcome = upsert_progress(db, user, "foundations", True, 300, today=TODAY)

        assert outcome.xp_earned == 100
        assert outcome.total_xp == 100
        assert outcome.streak_days == 1

    def test_repeat_completion_awards_nothing(self, db, make_user):
        user = make_user()
        upsert_progress(db, user, "deep", True, today=TODAY)
        second = upsert_progress(db, _reload(db, user), "deep", True, today=TODAY)

        assert second.xp_earned == 0
        assert second.total_xp == 200
        assert _reload(db, user).total_xp == 200

    def test_time_spent_accumulates(self, db, make_user):
        user = make_user()
        upsert_progress(db, user, "neural", False, 120, today=TODAY)
        upsert_progress(db, _reload(db, user), "neural", False, 60, today=TODAY)
        upsert_progress(db, _reload(db, user), "neural", False, None, today=TODAY)

        [record] = list_progress(db, user.id)
        assert record.time_spent_seconds == 180
        assert record.completed is False
        assert record.completed_at is None

    def test_completed_at_survives_uncompleting(self, db, make_user):
        user = make_user()
        upsert_progress(db, user, "ethics", True, today=TODAY)
        [record] = list_progress(db, user.id)
        first_stamp = record.completed_at
        assert first_stamp is not None

        upsert_progress(db, _reload(db, user), "ethics", False, today=TODAY)
        db.expire_all()
        [record] = list_progress(db, user.id)
        assert record.completed is False
        assert record.completed_at == first_stamp

    def test_recompleting_after_uncompleting_pays_once(self, db, make_user):
        user = make_user()
        upsert_progress(db, user, "ethics", True, today=TODAY)
        upsert_progress(db, _reload(db, user), "ethics", False, today=TODAY)
        outcome = upsert_progress(db, _reload(db, user), "ethics", True, today=TODAY)

        assert outcome.xp_earned == 0
        assert _reload(db, user).total_xp == 100

    def test_updates_streak_without_completion(self, db, make_user):
        user = make_user(streak_days=4, last_activity_date=TODAY - timedelta(days=1))
        outcome = upsert_progress(db, user, "modern", False, 30, today=TODAY)

        assert outcome.xp_earned == 0
        assert outcome.streak_days == 5

    def test_rejects_unknown_section(self, db, make_user):
        user = make_user()
        with pytest.raises(InvalidSection) as exc_info:
            upsert_progress(db, user, "alchemy", True)
        assert exc_info.value.code == "INVALID_SECTION"
        assert list_progress(db, user.id) == []

    def test_rejects_negative_time(self, db, make_user):
        user = make_user()
        with pytest.raises(ValidationFailed):
            upsert_progress(db, user, "learning", False, -5)

    def test_rejects_oversized_time(self, db, make_user):
        user = make_user()
        with pytest.raises(ValidationFailed):
            upsert_progress(db, user, "learning", False, MAX_TIME_SPENT_SECONDS + 1)
        assert list_progress(db, user.id) == []


class TestSideWriteFailures:
    def test_xp_failure_keeps_completion_and_reports_old_total(self, db, make_user):
        user = make_user(total_xp=40)
        failure = OperationalError("UPDATE users", {}, Exception("db down"))

        with patch.object(xp_module, "add_xp", side_effect=failure):
            outcome = upsert_progress(db, user, "foundations", True, today=TODAY)

        assert outcome.xp_earned == 100
        assert outcome.total_xp == 40
        assert outcome.streak_days == 1
        [record] = list_progress(db, user.id)
        assert record.completed is True
        assert _reload(db, user).total_xp == 40

    def test_streak_failure_reports_old_streak(self, db, make_user):
        user = make_user(streak_days=4, last_activity_date=TODAY - timedelta(days=1))
        failure = OperationalError("UPDATE users", {}, Exception("db down"))

        with patch.object(streak_module, "update_user_streak", side_effect=failure):
            outcome = upsert_progress(db, user, "neural", True, today=TODAY)

        assert outcome.streak_days == 4
        assert outcome.total_xp == 150
        assert _reload(db, user).streak_days == 4


class TestQuizPercentage:
    def test_rounds_down(self):
        assert quiz_percentage(2, 3) == 66

    def test_perfect(self):
        assert quiz_percentage(10, 10) == 100

    @pytest.mark.parametrize("score,total", [(1, 0), (0, -4), (-1, 5), (6, 5)])
    def test_rejects_invalid_input(self, score, total):
        with pytest.raises(ValidationFailed):
            quiz_percentage(score, total)


class TestRecordQuiz:
    def test_keeps_best_score(self, db, make_user):
        user = make_user()
        for score in (7, 9, 4, 8):
            record_quiz(db, _reload(db, user), "learning", score, 10)

        db.expire_all()
        [record] = list_progress(db, user.id)
        assert record.quiz_score == 90
        assert record.quiz_completed_at is not None

    def test_perfect_score_bonus_every_time(self, db, make_user):
        user = make_user()
        first = record_quiz(db, user, "foundations", 10, 10)
        second = record_quiz(db, _reload(db, user), "foundations", 5, 5)

        assert first.bonus_xp == 50
        assert second.bonus_xp == 50
        assert _reload(db, user).total_xp == 100

    def test_imperfect_score_has_no_bonus(self, db, make_user):
        user = make_user()
        outcome = record_quiz(db, user, "neural", 9, 10)
        assert outcome.percentage == 90
        assert outcome.bonus_xp == 0
        assert _reload(db, user).total_xp == 0

    def test_quiz_does_not_complete_section(self, db, make_user):
        user = make_user()
        record_quiz(db, user, "deep", 3, 4)
        [record] = list_progress(db, user.id)
        assert record.completed is False
        assert record.quiz_score == 75

    def test_anonymous_submission_is_scored_not_stored(self, db):
        outcome = record_quiz(db, None, "foundations", 10, 10)
        assert outcome.percentage == 100
        assert outcome.bonus_xp == 0
        assert outcome.logged_in is False

    def test_anonymous_invalid_total_rejected(self, db):
        with pytest.raises(ValidationFailed):
            record_quiz(db, None, "foundations", 1, 0)
