"""Error taxonomy for the CV review pipeline.

Every error carries the HTTP status the /analyze endpoint answers with and the
user-facing message shown in the envelope.
"""

from typing import Optional


class CVReviewError(Exception):
    """Base exception for CV review errors."""

    status_code: int = 500
    default_message: str = "Failed to process request"

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ClientInputError(CVReviewError):
    """Problem with the upload itself (missing, wrong type, too large)."""

    status_code = 400
    default_message = "Invalid upload"


class MissingFile(ClientInputError):
    default_message = "No file uploaded"


class FileTooLarge(ClientInputError):
    default_message = "File size must be less than 5MB"


class UnsupportedFileType(ClientInputError):
    default_message = "Please upload a PDF file"


class ContentError(CVReviewError):
    """The upload was readable but its content cannot be reviewed."""

    status_code = 400
    default_message = "Unsupported document content"


class EmptyContent(ContentError):
    default_message = "No text content found in file"


class NotACV(ContentError):
    default_message = "Uploaded document does not appear to be a CV/resume"


class UpstreamParseError(CVReviewError):
    """Generation output is not valid JSON or does not match the feedback schema."""

    status_code = 500
    default_message = "Failed to parse AI response"

    def __init__(self, message: Optional[str] = None, raw_response: str = ""):
        super().__init__(message)
        self.raw_response = raw_response


class UpstreamCallError(CVReviewError):
    """Extraction or LLM call failed."""

    status_code = 500
