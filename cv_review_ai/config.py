"""Configuration loaded from environment variables."""

import os
from pathlib import Path

from dotenv import load_dotenv

# Load .env: try package dir then project root
_base = Path(__file__).resolve().parent
for _env_path in (_base / ".env", _base.parent / ".env"):
    if load_dotenv(_env_path):
        break
load_dotenv()  # also allow process env

# API keys – never hardcode
OPENAI_API_KEY: str = os.getenv("OPENAI_API_KEY", "")
OPENAI_BASE_URL: str = os.getenv("OPENAI_BASE_URL", "")  # optional OpenAI-compatible endpoint

# Models: a cheap classifier for the CV check, a stronger one for the review
VALIDATION_MODEL: str = os.getenv("VALIDATION_MODEL", "gpt-4o-mini")
ANALYSIS_MODEL: str = os.getenv("ANALYSIS_MODEL", "gpt-4o")

# Token budgets / sampling
VALIDATION_MAX_TOKENS: int = 10
VALIDATION_TEMPERATURE: float = 0.0
ANALYSIS_MAX_TOKENS: int = int(os.getenv("ANALYSIS_MAX_TOKENS", "1000"))
ANALYSIS_TEMPERATURE: float = 0.2

# Upload constraints (shared by the UI and the /analyze endpoint)
MAX_UPLOAD_BYTES: int = 5 * 1024 * 1024
PDF_MIME_TYPE: str = "application/pdf"
ALLOWED_UPLOAD_MIME_TYPES: tuple = (PDF_MIME_TYPE,)

# HTTP server
API_HOST: str = os.getenv("API_HOST", "127.0.0.1")
API_PORT: int = int(os.getenv("API_PORT", "8000"))
CORS_ORIGINS: list = [
    o.strip().rstrip("/")
    for o in os.getenv("CORS_ORIGINS", "http://localhost:8501,http://127.0.0.1:8501").split(",")
    if o.strip()
]

# UI -> API
API_BASE_URL: str = os.getenv("API_BASE_URL", f"http://{API_HOST}:{API_PORT}")
HTTP_TIMEOUT_SECONDS: float = float(os.getenv("HTTP_TIMEOUT_SECONDS", "120"))

LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()
