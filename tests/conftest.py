import httpx
import pytest
from fastapi.testclient import TestClient

from funfact_relay.funfact import get_transport
from funfact_relay.main import app


class FakeGemini:
    """Stands in for the upstream: records requests, replays a canned reply."""

    def __init__(self):
        self.requests = []
        self.status_code = 200
        self.json = {"candidates": []}
        self.content = None
        self.exc = None

    def reply_text(self, text):
        self.json = {"candidates": [{"content": {"parts": [{"text": text}]}}]}

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.exc is not None:
            raise self.exc
        if self.content is not None:
            return httpx.Response(self.status_code, content=self.content)
        return httpx.Response(self.status_code, json=self.json)


@pytest.fixture()
def gemini():
    return FakeGemini()


@pytest.fixture()
def api_key(monkeypatch):
    monkeypatch.setenv("API_KEY", "test-key")
    return "test-key"


@pytest.fixture()
def client(gemini):
    app.dependency_overrides[get_transport] = lambda: httpx.MockTransport(gemini.handler)
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()
