"""Logging setup for CV Review AI.

All module loggers live under the ``cv_review_ai`` namespace and share one
stdout handler installed by configure_logging().
"""

import logging
import sys
from typing import Optional

from cv_review_ai.config import LOG_LEVEL

ROOT_LOGGER_NAME = "cv_review_ai"
LOG_FORMAT = "%(asctime)s | %(name)s | %(levelname)s | %(message)s"

# Per-request chatter from the HTTP stack; the pipeline logs its own summary
_NOISY_LOGGERS = ("httpx", "httpcore", "openai", "uvicorn.access", "pdfminer")


def configure_logging(level: Optional[str] = None) -> logging.Logger:
    """Install the package handler once; safe to call from both the API and the Streamlit page."""
    root = logging.getLogger(ROOT_LOGGER_NAME)
    root.setLevel(getattr(logging, (level or LOG_LEVEL).upper(), logging.INFO))
    if not root.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
        root.addHandler(handler)
        root.propagate = False
        for noisy in _NOISY_LOGGERS:
            logging.getLogger(noisy).setLevel(logging.WARNING)
    return root


def get_logger(name: str) -> logging.Logger:
    """Logger for a module, nested under the package logger (``__name__`` already is)."""
    if name != ROOT_LOGGER_NAME and not name.startswith(ROOT_LOGGER_NAME + "."):
        name = f"{ROOT_LOGGER_NAME}.{name}"
    return logging.getLogger(name)
