"""Map pipeline outcomes to (ResponseEnvelope, HTTP status). No side effects."""

from typing import Tuple

from fastapi.responses import JSONResponse

from cv_review_ai.schemas.envelope import FileInfo, ResponseEnvelope
from cv_review_ai.schemas.feedback import Feedback
from cv_review_ai.utils.exceptions import CVReviewError, UpstreamParseError

FALLBACK_ERROR_MESSAGE = "Failed to process request"


def success_envelope(file_info: FileInfo, feedback: Feedback) -> Tuple[ResponseEnvelope, int]:
    return ResponseEnvelope(success=True, file_info=file_info, feedback=feedback), 200


def error_envelope(exc: BaseException) -> Tuple[ResponseEnvelope, int]:
    """
    Taxonomy errors keep their own status (400 client/content, 500 upstream);
    parse failures also carry the raw model text. Anything else is a 500 with
    the exception message.
    """
    if isinstance(exc, UpstreamParseError):
        envelope = ResponseEnvelope(success=False, error=exc.message, raw_response=exc.raw_response)
        return envelope, exc.status_code
    if isinstance(exc, CVReviewError):
        return ResponseEnvelope(success=False, error=exc.message), exc.status_code
    message = str(exc) or FALLBACK_ERROR_MESSAGE
    return ResponseEnvelope(success=False, error=message), 500


def to_response(envelope: ResponseEnvelope, status_code: int) -> JSONResponse:
    return JSONResponse(content=envelope.to_wire(), status_code=status_code)
