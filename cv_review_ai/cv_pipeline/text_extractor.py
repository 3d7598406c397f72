"""Extract raw text from an uploaded CV. In-memory only.

PDFs go through pdfplumber's text layer verbatim: no OCR, no layout
reconstruction, no cleaning. Scanned PDFs therefore yield an empty string.
"""

from io import BytesIO

import pdfplumber

from cv_review_ai.config import PDF_MIME_TYPE
from cv_review_ai.schemas.document import UploadedDocument
from cv_review_ai.utils.logger import get_logger

logger = get_logger(__name__)


def _extract_pdf(file_bytes: bytes) -> str:
    """Concatenate the text layer of every page. Corrupt PDFs raise."""
    with pdfplumber.open(BytesIO(file_bytes)) as pdf:
        parts = []
        for page in pdf.pages:
            ptext = page.extract_text()
            if ptext:
                parts.append(ptext)
        logger.info("PDF text layer: pages=%s with_text=%s", len(pdf.pages), len(parts))
        return "\n".join(parts)


def extract_text(document: UploadedDocument) -> str:
    """
    Convert an uploaded document into plain text, dispatching on its declared MIME type.
    application/pdf -> PDF text layer; anything else is read as UTF-8 text.
    """
    if document.mime_type == PDF_MIME_TYPE:
        text = _extract_pdf(document.raw_content)
    else:
        text = document.raw_content.decode("utf-8", errors="replace")
    logger.info("Extracted %s chars from %s (%s)", len(text), document.name, document.mime_type or "unknown")
    return text
