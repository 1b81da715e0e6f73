"""
Shared fixtures: an in-memory SQLite database per test and a TestClient
wired to it through the ``get_db`` dependency.
"""

import os

os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("SECRET_KEY", "test-secret-key")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from blogapp.api import deps
from blogapp.db.base import Base
from blogapp.db.session import build_engine
from blogapp.main import app

from tests.utils import API


@pytest.fixture
def db_engine():
    engine = build_engine("sqlite://", poolclass=StaticPool)
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def session_factory(db_engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=db_engine)


@pytest.fixture
def db_session(session_factory):
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client(session_factory):
    def override_get_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[deps.get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def make_user(client):
    """Register and log in a user; returns ``(user_id, auth_headers)``."""
    def _make_user(email, password="secret123", name="Test User"):
        response = client.post(f"{API}/users/signup", json={
            "email": email, "name": name, "password": password,
        })
        assert response.status_code == 201, response.text
        user_id = response.json()["id"]
        response = client.post(f"{API}/users/login", json={"email": email, "password": password})
        assert response.status_code == 200, response.text
        token = response.json()["access_token"]
        return user_id, {"Authorization": f"Bearer {token}"}
    return _make_user


@pytest.fixture
def make_post(client):
    def _make_post(headers, title="Title", brief="Brief", content="Body", media_urls=None):
        response = client.post(f"{API}/blogs/", headers=headers, json={
            "title": title,
            "brief": brief,
            "content": content,
            "media_urls": media_urls or [],
        })
        assert response.status_code == 201, response.text
        return response.json()
    return _make_post
