"""QA Data Models."""
from dataclasses import dataclass

from pydantic import BaseModel, ConfigDict

DEFAULT_FILENAME = "audio.webm"


@dataclass(frozen=True)
class AudioPayload:
    content: bytes
    content_type: str
    filename: str = DEFAULT_FILENAME


class QAResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    transcript: str
    answer: str


class ErrorResponse(BaseModel):
    error: str
