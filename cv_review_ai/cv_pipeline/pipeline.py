"""CV review pipeline: extract -> validate -> analyze, strictly in sequence."""

from cv_review_ai.cv_pipeline.cv_validator import validate_cv
from cv_review_ai.cv_pipeline.feedback_generator import generate_feedback
from cv_review_ai.cv_pipeline.text_extractor import extract_text
from cv_review_ai.schemas.document import UploadedDocument
from cv_review_ai.schemas.feedback import Feedback
from cv_review_ai.services.llm_client import TextGenerationClient
from cv_review_ai.utils.exceptions import EmptyContent, NotACV
from cv_review_ai.utils.logger import get_logger

logger = get_logger(__name__)


async def run_cv_review(document: UploadedDocument, client: TextGenerationClient) -> Feedback:
    """
    Run the full review for one uploaded document.
    Raises EmptyContent before any LLM call when the text is blank, and NotACV
    before the (more expensive) generation call when the classifier says no.
    """
    text = extract_text(document)
    if not text.strip():
        raise EmptyContent()

    if not await validate_cv(client, text):
        raise NotACV()

    return await generate_feedback(client, text)
