"""CV check: one cheap, deterministic classification call before the full review."""

from cv_review_ai.config import VALIDATION_MAX_TOKENS, VALIDATION_MODEL, VALIDATION_TEMPERATURE
from cv_review_ai.services.llm_client import TextGenerationClient
from cv_review_ai.utils.logger import get_logger

logger = get_logger(__name__)

CV_VALIDATION_PROMPT = """Determine if this is a CV/resume. Reply only with "true" or "false":

{cv_text}"""


def is_affirmative(reply: str) -> bool:
    """True iff the reply contains "true" (case-insensitive). Anything else, empty included, is a rejection."""
    return "true" in (reply or "").lower()


async def validate_cv(client: TextGenerationClient, cv_text: str) -> bool:
    """Ask the classifier whether the text is a CV. The full text is sent, untruncated."""
    reply = await client.complete(
        CV_VALIDATION_PROMPT.format(cv_text=cv_text),
        model=VALIDATION_MODEL,
        max_tokens=VALIDATION_MAX_TOKENS,
        temperature=VALIDATION_TEMPERATURE,
    )
    verdict = is_affirmative(reply)
    logger.info("CV validation: reply=%r is_cv=%s", (reply or "")[:20], verdict)
    return verdict
