"""Upload intake."""
import logging

from starlette.datastructures import UploadFile

from apps.qa.errors import MissingInput
from apps.qa.models import DEFAULT_FILENAME, AudioPayload

logger = logging.getLogger(__name__)


async def read_upload(upload: UploadFile | str | None) -> AudioPayload:
    """Buffer the uploaded file fully in memory.

    A plain form value in place of a file counts as no upload. The bytes are
    forwarded as-is; no format or size checks are made.
    """
    # FastAPI hands over the starlette UploadFile, not its own subclass
    if not isinstance(upload, UploadFile):
        logger.error("No audio file provided in the request.")
        raise MissingInput()

    content = await upload.read()
    return AudioPayload(
        content=content,
        content_type=upload.content_type or "application/octet-stream",
        filename=upload.filename or DEFAULT_FILENAME,
    )
