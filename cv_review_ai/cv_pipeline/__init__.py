"""CV review pipeline: text extraction (PDF/plain text), CV check, LLM feedback."""

from .cv_validator import validate_cv
from .feedback_generator import generate_feedback, parse_feedback
from .pipeline import run_cv_review
from .text_extractor import extract_text

__all__ = ["run_cv_review", "extract_text", "validate_cv", "generate_feedback", "parse_feedback"]
