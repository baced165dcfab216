"""In-memory slot for the most recent QA result."""
from apps.qa.models import QAResult

NO_RESULT = QAResult(transcript="No transcript yet.", answer="No AI answer yet.")


class LatestQAStore:
    """Holds the last completed result; the last writer wins."""

    def __init__(self) -> None:
        self._latest: QAResult = NO_RESULT

    def get(self) -> QAResult:
        return self._latest

    def set(self, result: QAResult) -> None:
        self._latest = result
