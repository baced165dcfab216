"""Error taxonomy for the transcribe-and-answer flow.

Every error carries the HTTP status and the message returned to the caller
as ``{"error": message}``.
"""


class QAError(Exception):
    status_code: int = 500
    message: str = "Internal server error during processing."

    def __init__(self, message: str | None = None, status_code: int | None = None):
        if message is not None:
            self.message = message
        if status_code is not None:
            self.status_code = status_code
        super().__init__(self.message)


class ConfigError(QAError):
    status_code = 500
    message = "Server error: OpenAI API Key not configured."


class MissingInput(QAError):
    status_code = 400
    message = "No audio file provided."


class UnexpectedError(QAError):
    status_code = 500
    message = "Internal server error during processing."


STAGE_LABELS = {
    "transcription": "Whisper API error",
    "answer": "GPT API error",
}


class ProviderError(QAError):
    """Non-success response from an upstream provider."""

    def __init__(self, stage: str, status: int, detail: str):
        self.stage = stage
        self.detail = detail
        super().__init__(f"{STAGE_LABELS[stage]}: {detail}", status)
