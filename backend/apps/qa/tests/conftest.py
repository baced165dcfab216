import json
import sys
from pathlib import Path

import httpx
import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

# Make 'apps' importable when running from the repository root
project_root = Path(__file__).parent.parent.parent.parent
sys.path.insert(0, str(project_root))

from apps.core.config import OpenAIConfig  # noqa: E402
from apps.qa.cache import LatestQAStore  # noqa: E402
from apps.qa.pipeline import QAPipeline  # noqa: E402
from apps.qa.providers import AnswerClient, TranscriptionClient  # noqa: E402
from apps.qa.router import get_pipeline, get_store, router  # noqa: E402


class FakeOpenAI:
    """Records provider requests and answers them from canned responses."""

    def __init__(self):
        self.requests: list[httpx.Request] = []
        # (status, body) pairs or an exception to raise; dict bodies are sent as JSON
        self.transcription = (200, {"text": "hello"})
        self.completion = (200, {"choices": [{"message": {"role": "assistant", "content": "world"}}]})

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if request.url.path.endswith("/audio/transcriptions"):
            return self._respond(self.transcription)
        if request.url.path.endswith("/chat/completions"):
            return self._respond(self.completion)
        return httpx.Response(404)

    @staticmethod
    def _respond(canned) -> httpx.Response:
        if isinstance(canned, Exception):
            raise canned
        status, body = canned
        if isinstance(body, bytes):
            return httpx.Response(status, content=body)
        return httpx.Response(status, json=body)

    def paths(self) -> list[str]:
        return [r.url.path for r in self.requests]

    def chat_body(self) -> dict:
        chat = [r for r in self.requests if r.url.path.endswith("/chat/completions")]
        return json.loads(chat[-1].content)


@pytest.fixture
def openai_config():
    return OpenAIConfig(OPENAI_API_KEY="sk-test", OPENAI_BASE_URL="https://api.openai.test/v1")


@pytest.fixture
def fake_openai():
    return FakeOpenAI()


@pytest.fixture
def transport(fake_openai):
    return httpx.MockTransport(fake_openai.handler)


@pytest.fixture
def store():
    return LatestQAStore()


@pytest.fixture
def make_client(openai_config, transport, store):
    """Build a TestClient whose pipeline talks to the fake provider."""

    def _make(api_key: str | None = "sk-test") -> TestClient:
        app = FastAPI()
        app.include_router(router)
        app.dependency_overrides[get_store] = lambda: store
        app.dependency_overrides[get_pipeline] = lambda: QAPipeline(
            api_key=api_key,
            transcriber=TranscriptionClient(openai_config, transport=transport),
            answerer=AnswerClient(openai_config, transport=transport),
            store=store,
        )
        return TestClient(app)

    return _make


@pytest.fixture
def audio_file():
    return {"audio": ("clip.webm", b"\x1aE\xdf\xa3fake-webm", "audio/webm")}
