"""Tests for passwords, session tokens and session resolution."""

import uuid
from datetime import timedelta

from yavin.core.dependencies import resolve_session_user
from yavin.core.security import (
    create_session_token,
    get_password_hash,
    read_session_subject,
    verify_password,
)


class TestPasswords:
    def test_hash_and_verify(self):
        hashed = get_password_hash("longpass1")
        assert hashed != "longpass1"
        assert verify_password("longpass1", hashed)
        assert not verify_password("wrongpass", hashed)

    def test_garbage_hash_never_verifies(self):
        assert verify_password("longpass1", "not-a-hash") is False


class TestSessionTokens:
    def test_round_trip(self):
        user_id = str(uuid.uuid4())
        assert read_session_subject(create_session_token(user_id)) == user_id

    def test_expired_token(self):
        token = create_session_token("someone", expires_delta=timedelta(seconds=-5))
        assert read_session_subject(token) is None

    def test_malformed_token(self):
        assert read_session_subject("garbage") is None
        assert read_session_subject(None) is None


class TestResolveSessionUser:
    def test_known_user(self, db, make_user):
        user = make_user()
        resolved = resolve_session_user(db, create_session_token(str(user.id)))
        assert resolved is not None
        assert resolved.email == "learner@example.com"

    def test_unknown_user_is_anonymous(self, db):
        assert resolve_session_user(db, create_session_token(str(uuid.uuid4()))) is None

    def test_non_uuid_subject_is_anonymous(self, db):
        assert resolve_session_user(db, create_session_token("not-a-uuid")) is None

    def test_malformed_token_is_anonymous(self, db):
        assert resolve_session_user(db, "garbage") is None
