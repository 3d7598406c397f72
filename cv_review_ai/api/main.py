"""
FastAPI Application

HTTP API server for CV upload and AI review.
"""

from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

from cv_review_ai.api.routes import router
from cv_review_ai.config import CORS_ORIGINS
from cv_review_ai.services.llm_client import TextGenerationClient, build_default_client
from cv_review_ai.services.response_formatter import error_envelope, to_response
from cv_review_ai.utils.exceptions import MissingFile
from cv_review_ai.utils.logger import configure_logging, get_logger

logger = get_logger(__name__)


async def _invalid_request_handler(request: Request, exc: RequestValidationError):
    """The only request field is `file`; anything FastAPI cannot bind as an upload means no file."""
    logger.warning("[API] Rejected malformed request to %s: %s", request.url.path, exc.errors())
    return to_response(*error_envelope(MissingFile()))


def create_app(llm_client: Optional[TextGenerationClient] = None) -> FastAPI:
    """Build the API. Pass llm_client to substitute the generation backend (e.g. in tests)."""
    configure_logging()
    app = FastAPI(
        title="CV Review API",
        description="Upload a CV (PDF) and receive structured AI feedback",
        version="1.0.0",
    )
    app.add_middleware(
        CORSMiddleware,
        allow_origins=CORS_ORIGINS,
        allow_methods=["GET", "POST"],
        allow_headers=["*"],
    )
    app.add_exception_handler(RequestValidationError, _invalid_request_handler)
    app.state.llm_client = llm_client if llm_client is not None else build_default_client()
    app.include_router(router)
    logger.info("CV Review API ready (CORS origins: %s)", ", ".join(CORS_ORIGINS) or "none")
    return app


app = create_app()
