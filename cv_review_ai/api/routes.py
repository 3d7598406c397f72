"""HTTP endpoints: POST /analyze (CV review) and /health smoke-test routes."""

from typing import Optional

from fastapi import APIRouter, Depends, File, Request, UploadFile

from cv_review_ai.config import MAX_UPLOAD_BYTES
from cv_review_ai.cv_pipeline.pipeline import run_cv_review
from cv_review_ai.schemas.document import UploadedDocument
from cv_review_ai.schemas.envelope import FileInfo
from cv_review_ai.services.llm_client import TextGenerationClient
from cv_review_ai.services.response_formatter import error_envelope, success_envelope, to_response
from cv_review_ai.utils.exceptions import CVReviewError, FileTooLarge, MissingFile
from cv_review_ai.utils.logger import get_logger

logger = get_logger(__name__)

router = APIRouter(tags=["CV Review"])


def get_llm_client(request: Request) -> TextGenerationClient:
    """Client injected by the app factory (app.state.llm_client)."""
    return request.app.state.llm_client


async def _read_upload(file: Optional[UploadFile]) -> UploadedDocument:
    if file is None or not file.filename:
        raise MissingFile()
    content = await file.read()
    if len(content) > MAX_UPLOAD_BYTES:
        raise FileTooLarge()
    return UploadedDocument(
        name=file.filename,
        mime_type=file.content_type or "",
        size_bytes=len(content),
        raw_content=content,
    )


@router.post("/analyze")
async def analyze_cv(
    file: Optional[UploadFile] = File(None),
    client: TextGenerationClient = Depends(get_llm_client),
):
    """
    Review an uploaded CV.

    Always answers with a ResponseEnvelope: 200 on success, 400 for client or
    content problems, 500 for parse or upstream failures.
    """
    try:
        document = await _read_upload(file)
        logger.info("[API] Received CV upload: %s (%s, %s bytes)", document.name, document.mime_type, document.size_bytes)
        feedback = await run_cv_review(document, client)
        file_info = FileInfo(name=document.name, type=document.mime_type, size=document.size_bytes)
        envelope, status_code = success_envelope(file_info, feedback)
    except CVReviewError as e:
        if e.status_code >= 500:
            logger.error("[API] CV review failed: %s", e.message)
        else:
            logger.warning("[API] CV review rejected: %s", e.message)
        envelope, status_code = error_envelope(e)
    except Exception as e:
        logger.exception("[API] Unexpected error during CV review: %s", e)
        envelope, status_code = error_envelope(e)
    return to_response(envelope, status_code)


@router.get("/health")
async def health_get():
    return {"message": "API endpoint working"}


@router.post("/health")
async def health_post():
    return {"message": "POST received"}
