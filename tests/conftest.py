"""
Pytest fixtures for Wellness Journal tests.
"""
import json
import sys
from pathlib import Path

import httpx
import pytest
from dotenv import load_dotenv

# Ensure src/ is on sys.path so tests can import mood_insights.
ROOT = Path(__file__).resolve().parent.parent
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

# Load environment variables
load_dotenv()

from server.wellness_api.database import DatabaseManager, get_db  # noqa: E402
from server.wellness_api.services.auth import AuthService  # noqa: E402
from server.wellness_api.services.gemini import GenerativeTextClient, get_text_client  # noqa: E402


# ============================================================================
# Generative text API fakes
# ============================================================================

class FakeGemini:
    """
    Records prompts sent to the text API and answers with a canned reply.

    Set ``status_code`` to simulate API errors, ``raise_error`` to simulate
    a transport failure, or ``raw_response`` to answer 200 with an arbitrary
    body (a str is sent as-is, anything else as JSON).
    """

    def __init__(self, reply: str = "", status_code: int = 200):
        self.reply = reply
        self.status_code = status_code
        self.raise_error = None
        self.raw_response = None
        self.requests = []

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.raise_error is not None:
            raise self.raise_error
        if self.status_code != 200:
            return httpx.Response(self.status_code, text="quota exceeded")
        if isinstance(self.raw_response, str):
            return httpx.Response(200, text=self.raw_response)
        if self.raw_response is not None:
            return httpx.Response(200, json=self.raw_response)
        return httpx.Response(
            200,
            json={"candidates": [{"content": {"parts": [{"text": self.reply}]}}]},
        )

    @property
    def prompts(self) -> list:
        return [
            json.loads(request.content)["contents"][0]["parts"][0]["text"]
            for request in self.requests
        ]

    def client(self, api_key: str = "test-key") -> GenerativeTextClient:
        return GenerativeTextClient(
            api_key=api_key,
            model="gemini-test",
            base_url="https://gemini.test/v1beta",
            transport=httpx.MockTransport(self.handler),
        )


SAMPLE_REPLY = """SUMMARY: You have logged mostly positive moods this week, with calmer evenings after walks.
RECOMMENDATIONS:
1. Keep taking a short walk after dinner.
2. Write down one thing that went well each night.
3. Go to bed at the same time on weekends."""


@pytest.fixture
def fake_gemini():
    """Text API fake answering with a well-formed summary reply."""
    return FakeGemini(reply=SAMPLE_REPLY)


# ============================================================================
# Database fixtures
# ============================================================================

@pytest.fixture
def db(tmp_path):
    """Fresh SQLite database in a temporary directory."""
    return DatabaseManager(db_path=str(tmp_path / "wellness.db"))


@pytest.fixture
def auth_service(db):
    return AuthService(db)


@pytest.fixture
def session(auth_service):
    """A signed-up user's session."""
    return auth_service.sign_up(
        email="ada@example.com",
        password="s3cret-pass",
        name="Ada",
        location="London",
    )


@pytest.fixture
def other_session(auth_service):
    return auth_service.sign_up(email="grace@example.com", password="another-pass", name="Grace")


# ============================================================================
# API fixtures
# ============================================================================

@pytest.fixture
def client(db, fake_gemini):
    """FastAPI TestClient bound to the temporary database and fake text API."""
    from fastapi.testclient import TestClient
    from server.wellness_api.main import app

    app.dependency_overrides[get_db] = lambda: db
    app.dependency_overrides[get_text_client] = lambda: fake_gemini.client()
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def auth_headers(client):
    """Sign up through the API and return bearer headers."""
    response = client.post(
        "/api/auth/signup",
        json={"name": "Ada", "email": "ada@example.com", "password": "s3cret-pass"},
    )
    assert response.status_code == 201, response.text
    return {"Authorization": f"Bearer {response.json()['accessToken']}"}
