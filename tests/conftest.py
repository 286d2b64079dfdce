# tests/conftest.py
import pytest
import requests
from fastapi.testclient import TestClient

from app.config import Settings, get_settings
from app.main import app
from app.services import gemini
from tests.fakes import TEST_KEY, FakeResponse, FakeSession, reply_with


@pytest.fixture
def settings() -> Settings:
    return Settings(api_key=TEST_KEY)


@pytest.fixture
def fake_session() -> FakeSession:
    return FakeSession(FakeResponse(200, reply_with("hello")))


@pytest.fixture
def client(settings, fake_session):
    app.dependency_overrides[get_settings] = lambda: settings
    app.dependency_overrides[gemini.get_http_session] = lambda: fake_session
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
def connection_refused() -> requests.ConnectionError:
    return requests.ConnectionError("[Errno 111] Connection refused")
