"""HTTP client used by the Streamlit UI to call POST /analyze."""

from typing import Optional

import httpx
from pydantic import ValidationError

from cv_review_ai.config import API_BASE_URL, HTTP_TIMEOUT_SECONDS, PDF_MIME_TYPE
from cv_review_ai.schemas.envelope import ResponseEnvelope
from cv_review_ai.utils.logger import get_logger

logger = get_logger(__name__)


class AnalysisRequestError(Exception):
    """The /analyze call itself failed (network error or unreadable body)."""


def analyze_cv(
    content: bytes,
    filename: str,
    mime_type: str = PDF_MIME_TYPE,
    base_url: str = API_BASE_URL,
    transport: Optional[httpx.BaseTransport] = None,
) -> ResponseEnvelope:
    """
    Upload one file and return the parsed envelope, whatever the HTTP status.
    Raises AnalysisRequestError when no envelope can be obtained.
    """
    url = f"{base_url.rstrip('/')}/analyze"
    try:
        with httpx.Client(timeout=HTTP_TIMEOUT_SECONDS, transport=transport) as client:
            response = client.post(url, files={"file": (filename, content, mime_type)})
    except httpx.HTTPError as e:
        logger.warning("Request to %s failed: %s", url, e)
        raise AnalysisRequestError(f"Could not reach the analysis service: {e}") from e

    try:
        envelope = ResponseEnvelope.model_validate(response.json())
    except (ValueError, ValidationError) as e:
        logger.warning("Unreadable response from %s (HTTP %s): %s", url, response.status_code, e)
        raise AnalysisRequestError(f"Unexpected response from the analysis service (HTTP {response.status_code})") from e
    logger.info("Analysis response: HTTP %s success=%s", response.status_code, envelope.success)
    return envelope
