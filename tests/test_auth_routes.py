"""Route tests for registration, login and sessions."""

from datetime import date
from unittest.mock import patch

from sqlalchemy.exc import OperationalError

from yavin.core.config import settings
from yavin.services import streak as streak_module

API = settings.API_V1_PREFIX


class TestRegister:
    def test_register_starts_session(self, client):
        response = client.post(f"{API}/auth/register", json={"email": "a@b.co", "password": "longpass1"})
        assert response.status_code == 200
        body = response.json()
        assert body["success"] is True
        assert body["user"]["email"] == "a@b.co"
        assert settings.SESSION_COOKIE_NAME in response.cookies

        me = client.get(f"{API}/auth/me").json()
        assert me["logged_in"] is True
        assert me["user"]["total_xp"] == 0
        assert me["progress"] == []

    def test_invalid_email(self, client):
        response = client.post(f"{API}/auth/register", json={"email": "a@b", "password": "longpass1"})
        assert response.status_code == 400
        assert response.json() == {"success": False, "error": "Invalid email address", "code": "VALIDATION_ERROR"}

    def test_weak_password(self, client):
        response = client.post(f"{API}/auth/register", json={"email": "a@b.co", "password": "short"})
        assert response.status_code == 400
        assert "at least 8" in response.json()["error"]

    def test_duplicate_email(self, client):
        client.post(f"{API}/auth/register", json={"email": "a@b.co", "password": "longpass1"})
        response = client.post(f"{API}/auth/register", json={"email": "a@b.co", "password": "otherpass"})
        assert response.status_code == 409
        assert response.json()["code"] == "CONFLICT"

    def test_missing_field_is_bad_request(self, client):
        response = client.post(f"{API}/auth/register", json={"email": "a@b.co"})
        assert response.status_code == 400
        assert response.json()["success"] is False


class TestLogin:
    def test_login_updates_streak(self, client, make_user):
        make_user(email="ada@example.com")
        response = client.post(f"{API}/auth/login", json={"email": "ada@example.com", "password": "longpass1"})
        assert response.status_code == 200
        assert response.json()["user"]["streak_days"] == 1
        assert client.get(f"{API}/auth/me").json()["logged_in"] is True

    def test_wrong_password_and_unknown_email_look_the_same(self, client, make_user):
        make_user(email="ada@example.com")
        wrong = client.post(f"{API}/auth/login", json={"email": "ada@example.com", "password": "nope-nope"})
        unknown = client.post(f"{API}/auth/login", json={"email": "who@example.com", "password": "longpass1"})
        assert wrong.status_code == unknown.status_code == 401
        assert wrong.json() == unknown.json()
        assert wrong.json()["error"] == "Invalid email or password"

    def test_streak_failure_does_not_block_login(self, client, make_user):
        make_user(email="ada@example.com", streak_days=6, last_activity_date=date(2026, 3, 1))
        failure = OperationalError("UPDATE users", {}, Exception("db down"))

        with patch.object(streak_module, "update_user_streak", side_effect=failure):
            response = client.post(f"{API}/auth/login", json={"email": "ada@example.com", "password": "longpass1"})

        assert response.status_code == 200
        assert response.json()["user"]["streak_days"] == 6
        assert client.get(f"{API}/auth/me").json()["logged_in"] is True


class TestLogout:
    def test_logout_ends_session(self, logged_in_client):
        response = logged_in_client.post(f"{API}/auth/logout")
        assert response.status_code == 200
        assert response.json()["success"] is True
        assert logged_in_client.get(f"{API}/auth/me").json() == {
            "success": True,
            "logged_in": False,
            "user": None,
            "progress": [],
        }


class TestAnonymous:
    def test_me_without_session(self, client):
        assert client.get(f"{API}/auth/me").json()["logged_in"] is False

    def test_progress_requires_session(self, client):
        response = client.post(f"{API}/progress", json={"section_id": "foundations", "completed": True})
        assert response.status_code == 401
        assert response.json()["code"] == "UNAUTHORIZED"

    def test_certificate_requires_session(self, client):
        assert client.get(f"{API}/certificate").status_code == 401

    def test_badge_check_requires_session(self, client):
        assert client.post(f"{API}/badges/check", json={}).status_code == 401
