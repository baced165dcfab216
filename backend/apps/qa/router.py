"""QA API Router."""
from fastapi import APIRouter, Depends, File, UploadFile
from fastapi.responses import JSONResponse

from apps.core.config import Settings, settings
from apps.qa.cache import LatestQAStore
from apps.qa.errors import QAError
from apps.qa.models import ErrorResponse, QAResult
from apps.qa.pipeline import QAPipeline
from apps.qa.providers import AnswerClient, TranscriptionClient

router = APIRouter(tags=["QA"])

# Singleton
_store: LatestQAStore | None = None


def get_settings() -> Settings:
    return settings


def get_store() -> LatestQAStore:
    global _store
    _store = _store or LatestQAStore()
    return _store


def get_pipeline(
    config: Settings = Depends(get_settings),
    store: LatestQAStore = Depends(get_store),
) -> QAPipeline:
    return QAPipeline(
        api_key=config.openai_api_key(),
        transcriber=TranscriptionClient(config.openai),
        answerer=AnswerClient(config.openai),
        store=store,
    )


@router.post(
    "/transcribe-and-answer",
    response_model=QAResult,
    responses={
        400: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
        "default": {"model": ErrorResponse, "description": "Provider error status passed through"},
    },
)
async def transcribe_and_answer(
    audio: UploadFile | str | None = File(None),
    pipeline: QAPipeline = Depends(get_pipeline),
):
    try:
        return await pipeline.run(audio)
    except QAError as e:
        return JSONResponse(status_code=e.status_code, content={"error": e.message})


@router.get("/latest-qa", response_model=QAResult)
async def latest_qa(store: LatestQAStore = Depends(get_store)):
    return store.get()
