from contextlib import contextmanager
from types import SimpleNamespace

import pytest
from fastapi.testclient import TestClient
from google.api_core import exceptions as api_exceptions

from app.main import app
from app.services import dialogflow_client, llm_openai
from app.settings import Settings, get_settings


@pytest.fixture
def settings():
    return Settings(
        DIALOGFLOW_PROJECT_ID="test-project",
        GOOGLE_CREDENTIALS_JSON="",
        OPENAI_API_KEY="sk-test",
    )


class FakeSessionsClient:
    """Imita SessionsClient.detect_intent y guarda los requests recibidos."""

    def __init__(self, display_name="", fulfillment_text="", error=None):
        self.display_name = display_name
        self.fulfillment_text = fulfillment_text
        self.error = error
        self.requests = []
        self.closed = False

    def detect_intent(self, request):
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        return SimpleNamespace(
            query_result=SimpleNamespace(
                intent=SimpleNamespace(display_name=self.display_name),
                fulfillment_text=self.fulfillment_text,
            )
        )


class FakeCompletion:
    def __init__(self, reply="", error=None):
        self.reply = reply
        self.error = error
        self.prompts = []

    def __call__(self, prompt, settings):
        self.prompts.append(prompt)
        if self.error is not None:
            raise self.error
        return self.reply


@pytest.fixture
def fake_dialogflow(monkeypatch):
    fake = FakeSessionsClient()

    @contextmanager
    def _open(settings):
        try:
            yield fake
        finally:
            fake.closed = True

    monkeypatch.setattr(dialogflow_client, "open_sessions_client", _open)
    return fake


@pytest.fixture
def fake_completion(monkeypatch):
    fake = FakeCompletion(reply="Here is a joke.")
    monkeypatch.setattr(llm_openai, "complete_chat", fake)
    return fake


@pytest.fixture
def client(settings):
    app.dependency_overrides[get_settings] = lambda: settings
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
def detect_error():
    return api_exceptions.ServiceUnavailable("dialogflow down")
