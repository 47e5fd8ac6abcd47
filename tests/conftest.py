"""Shared fixtures: in-memory SQLite database and an app client."""

import os

os.environ["DATABASE_URL"] = "sqlite://"
os.environ["OPENAI_API_KEY"] = ""
os.environ.setdefault("SECRET_KEY", "test-secret-key")

import pytest
from fastapi.testclient import TestClient

from yavin.core.security import get_password_hash
from yavin.db.base import SessionLocal, engine
from yavin.main import app
from yavin.models import Base, User

DEFAULT_PASSWORD = "longpass1"


@pytest.fixture(autouse=True)
def fresh_schema():
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield


@pytest.fixture
def db():
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client():
    return TestClient(app)


@pytest.fixture
def make_user(db):
    def _make(email="learner@example.com", password=DEFAULT_PASSWORD, name=None, **fields):
        user = User(email=email, password_hash=get_password_hash(password), name=name, **fields)
        db.add(user)
        db.commit()
        db.refresh(user)
        return user

    return _make


@pytest.fixture
def logged_in_client(client):
    response = client.post(
        "/api/v1/auth/register",
        json={"email": "a@b.co", "password": DEFAULT_PASSWORD, "name": "Ada"},
    )
    assert response.status_code == 200
    return client
