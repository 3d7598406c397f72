"""LLM-based CV review: prompt, call, strict JSON parse and schema validation."""

import json

from pydantic import ValidationError

from cv_review_ai.config import ANALYSIS_MAX_TOKENS, ANALYSIS_MODEL, ANALYSIS_TEMPERATURE
from cv_review_ai.schemas.feedback import Feedback
from cv_review_ai.services.llm_client import TextGenerationClient
from cv_review_ai.utils.exceptions import UpstreamParseError
from cv_review_ai.utils.logger import get_logger

logger = get_logger(__name__)

FEEDBACK_SCHEMA = """{
  "summary": {
    "score": "one of: Outstanding/Good/Average/Needs Work",
    "keyStrengths": ["strength1", "strength2", ...]
  },
  "detailedReview": {
    "sectionName": {
      "title": "section title",
      "strengths": ["strength1", "strength2", ...],
      "improvements": ["improvement1", "improvement2", ...]
    },
    "atsOptimization": {
      "title": "ATS Optimization",
      "strengths": ["strength1", ...],
      "improvements": ["improvement1", ...],
      "keywordScore": "score such as 7/10",
      "missingKeywords": ["keyword1", "keyword2", ...]
    }
  },
  "priorityActions": [
    {
      "id": 1,
      "title": "action title",
      "example": {
        "before": "example before",
        "after": "example after"
      }
    },
    {
      "id": 2,
      "title": "action title",
      "bullets": ["bullet1", "bullet2", ...]
    }
  ]
}"""


def build_feedback_prompt(cv_text: str) -> str:
    return f"""Analyze this CV and provide detailed feedback in JSON format. You must return ONLY raw JSON - no markdown, no code blocks, no explanations.

CV Content:
{cv_text}

Analyze the CV and return a JSON object that strictly matches this structure (extra fields not allowed):

{FEEDBACK_SCHEMA}

Each priority action has either an "example" (before/after rewrite) or "bullets", never both.
Only the "atsOptimization" section has "keywordScore" and "missingKeywords"."""


def parse_feedback(raw: str) -> Feedback:
    """
    Parse the model reply as-is (no markdown stripping) and validate it against Feedback.
    Syntax errors and structural mismatches both raise UpstreamParseError carrying the raw text.
    """
    try:
        data = json.loads(raw)
    except (json.JSONDecodeError, TypeError) as e:
        logger.error("JSON parse error (%s); raw response: %s", e, raw)
        raise UpstreamParseError(raw_response=raw) from e
    try:
        return Feedback.model_validate(data)
    except ValidationError as e:
        logger.error("Feedback schema validation failed: %s; raw response: %s", e, raw)
        raise UpstreamParseError(raw_response=raw) from e


async def generate_feedback(client: TextGenerationClient, cv_text: str) -> Feedback:
    """Request the structured review for already-validated CV text."""
    raw = await client.complete(
        build_feedback_prompt(cv_text),
        model=ANALYSIS_MODEL,
        max_tokens=ANALYSIS_MAX_TOKENS,
        temperature=ANALYSIS_TEMPERATURE,
    )
    feedback = parse_feedback(raw)
    logger.info(
        "Feedback generated: score=%s sections=%s actions=%s",
        feedback.summary.score,
        len(feedback.detailed_review),
        len(feedback.priority_actions),
    )
    return feedback
