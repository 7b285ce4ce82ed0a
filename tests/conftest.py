import httpx
import pytest
from fastapi.testclient import TestClient

from calmchat.config import Settings
from calmchat.main import create_app


class FakeProvider:
    """Stands in for the Gemini endpoint; records every request it sees."""

    def __init__(self, payload=None, status_code=200):
        self.payload = payload
        self.status_code = status_code
        self.requests = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return httpx.Response(self.status_code, json=self.payload)


@pytest.fixture
def provider():
    return FakeProvider(payload={"candidates": [{"content": [{"text": "Take a deep breath."}]}]})


@pytest.fixture
def settings():
    return Settings(api_key="test-key", model="gemini-test")


@pytest.fixture
def client(settings, provider):
    app = create_app(settings, transport=httpx.MockTransport(provider))
    return TestClient(app)


@pytest.fixture
def keyless_client(provider):
    app = create_app(Settings(api_key=None), transport=httpx.MockTransport(provider))
    return TestClient(app)
