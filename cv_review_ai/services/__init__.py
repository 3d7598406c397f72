"""Service exports."""

from .api_client import AnalysisRequestError, analyze_cv
from .llm_client import OpenAITextClient, TextGenerationClient, build_default_client
from .response_formatter import error_envelope, success_envelope, to_response

__all__ = [
    "AnalysisRequestError",
    "analyze_cv",
    "OpenAITextClient",
    "TextGenerationClient",
    "build_default_client",
    "error_envelope",
    "success_envelope",
    "to_response",
]
