# backend/tests/conftest.py
import json
from types import SimpleNamespace

import pytest
from unittest.mock import MagicMock
from fastapi.testclient import TestClient
from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from gmassist.main import app
from gmassist.database import get_db, _enable_sqlite_foreign_keys
from gmassist.models import Base
from gmassist.services.ai_service import AIService, get_ai_service


@pytest.fixture
def db_session():
    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    event.listen(engine, "connect", _enable_sqlite_foreign_keys)
    Base.metadata.create_all(bind=engine)
    TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def mock_openai_client():
    """Mock OpenAI SDK client for the AI endpoints."""
    return MagicMock()


@pytest.fixture
def ai_reply(mock_openai_client):
    """Set the next chat completion returned by the mock client."""
    def set_reply(payload):
        content = payload if payload is None or isinstance(payload, str) else json.dumps(payload)
        mock_openai_client.chat.completions.create.return_value = SimpleNamespace(
            choices=[SimpleNamespace(message=SimpleNamespace(content=content))]
        )
    return set_reply


@pytest.fixture
def client(db_session, mock_openai_client):
    def override_get_db():
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db

    def override_get_ai_service():
        return AIService(client=mock_openai_client, model="test-model")

    app.dependency_overrides[get_ai_service] = override_get_ai_service
    app.state.metrics.clear()

    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


def register_and_login(client, username, password="testpassword123"):
    client.post(
        "/api/auth/register",
        json={"username": username, "password": password},
    )
    response = client.post(
        "/api/auth/login",
        json={"username": username, "password": password},
    )
    token = response.json()["access_token"]
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def auth_headers(client):
    return register_and_login(client, "gamemaster")


@pytest.fixture
def other_headers(client):
    """A second user, for ownership checks."""
    return register_and_login(client, "intruder")


@pytest.fixture
def scenario(client, auth_headers):
    """A scenario without the default regions"""
    response = client.post(
        "/api/scenarios?seedDefaults=false",
        headers=auth_headers,
        json={
            "title": "Trade Wars",
            "mainIdea": "Conflict over water rights in a desert city",
        },
    )
    return response.json()


@pytest.fixture
def game_session(client, auth_headers):
    response = client.post(
        "/api/sessions",
        headers=auth_headers,
        json={"name": "Session One", "creatorMode": "road"},
    )
    return response.json()
