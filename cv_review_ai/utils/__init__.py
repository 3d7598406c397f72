"""Utility exports."""

from .exceptions import (
    ClientInputError,
    ContentError,
    CVReviewError,
    EmptyContent,
    FileTooLarge,
    MissingFile,
    NotACV,
    UnsupportedFileType,
    UpstreamCallError,
    UpstreamParseError,
)
from .logger import get_logger

__all__ = [
    "get_logger",
    "CVReviewError",
    "ClientInputError",
    "ContentError",
    "EmptyContent",
    "FileTooLarge",
    "MissingFile",
    "NotACV",
    "UnsupportedFileType",
    "UpstreamCallError",
    "UpstreamParseError",
]
