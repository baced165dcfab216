"""Speech-to-text and chat-completion provider clients.

Both clients make exactly one request per call and authenticate with a
bearer credential supplied by the caller.
"""
import logging
from typing import Any

import httpx

from apps.core.config import OpenAIConfig
from apps.qa.errors import ProviderError
from apps.qa.models import AudioPayload

logger = logging.getLogger(__name__)

NO_TRANSCRIPT = "No transcript generated."
NO_ANSWER = "No answer."


def error_detail(response: httpx.Response) -> str:
    """Provider error message from the JSON body, else the HTTP reason phrase."""
    try:
        body = response.json()
    except ValueError:
        body = None
    error = body.get("error") if isinstance(body, dict) else None
    message = error.get("message") if isinstance(error, dict) else None
    return message or response.reason_phrase


def first_choice_content(data: Any) -> str | None:
    try:
        content = data["choices"][0]["message"]["content"]
    except (KeyError, IndexError, TypeError):
        return None
    return content if isinstance(content, str) else None


class OpenAIClient:
    """Base for clients talking to an OpenAI-compatible HTTP API."""

    stage: str = ""

    def __init__(self, config: OpenAIConfig, transport: httpx.AsyncBaseTransport | None = None) -> None:
        self.config = config
        self.transport = transport

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            base_url=self.config.base_url,
            timeout=self.config.timeout,
            transport=self.transport,
        )

    def _check(self, response: httpx.Response) -> None:
        if response.is_success:
            return
        detail = error_detail(response)
        logger.error(f"{self.stage} provider returned {response.status_code}: {response.text[:500]}")
        raise ProviderError(self.stage, response.status_code, detail)


class TranscriptionClient(OpenAIClient):
    stage = "transcription"

    async def transcribe(self, payload: AudioPayload, api_key: str) -> str:
        """Send audio to the transcription endpoint and return its text."""
        logger.info("Sending audio to Whisper API...")
        async with self._client() as client:
            response = await client.post(
                "/audio/transcriptions",
                headers={"Authorization": f"Bearer {api_key}"},
                files={"file": (payload.filename, payload.content, payload.content_type)},
                data={"model": self.config.transcription_model},
            )
        self._check(response)

        data = response.json()
        text = data.get("text") if isinstance(data, dict) else None
        transcript = text if isinstance(text, str) and text else NO_TRANSCRIPT
        logger.info(f"Transcript received: {transcript}")
        return transcript


class AnswerClient(OpenAIClient):
    stage = "answer"

    async def answer(self, transcript: str, api_key: str) -> str:
        """Send the transcript as a single user message and return the reply."""
        logger.info("Sending transcript to GPT API...")
        async with self._client() as client:
            response = await client.post(
                "/chat/completions",
                headers={"Authorization": f"Bearer {api_key}"},
                json={
                    "model": self.config.chat_model,
                    "messages": [{"role": "user", "content": transcript}],
                },
            )
        self._check(response)

        answer = first_choice_content(response.json()) or NO_ANSWER
        logger.info(f"AI answer received: {answer}")
        return answer
