"""Transcribe-and-answer pipeline."""
import logging

from fastapi import UploadFile

from apps.qa.cache import LatestQAStore
from apps.qa.errors import ConfigError, QAError, UnexpectedError
from apps.qa.intake import read_upload
from apps.qa.models import QAResult
from apps.qa.providers import AnswerClient, TranscriptionClient

logger = logging.getLogger(__name__)


class QAPipeline:
    """Runs upload -> transcription -> answer -> cache update for one request."""

    def __init__(
        self,
        api_key: str | None,
        transcriber: TranscriptionClient,
        answerer: AnswerClient,
        store: LatestQAStore,
    ) -> None:
        self.api_key = api_key
        self.transcriber = transcriber
        self.answerer = answerer
        self.store = store

    async def run(self, upload: UploadFile | str | None) -> QAResult:
        """Process one upload.

        Raises a ``QAError`` subclass on every failure. The store is only
        written once both provider calls have succeeded.
        """
        if not self.api_key:
            logger.error("OpenAI API Key is not configured in environment variables.")
            raise ConfigError()

        try:
            payload = await read_upload(upload)
            transcript = await self.transcriber.transcribe(payload, self.api_key)
            answer = await self.answerer.answer(transcript, self.api_key)
            result = QAResult(transcript=transcript, answer=answer)
        except QAError:
            raise
        except Exception as e:
            logger.exception("Caught server-side error")
            raise UnexpectedError() from e

        self.store.set(result)
        return result
