"""Schema exports."""

from .document import UploadedDocument
from .envelope import FileInfo, ResponseEnvelope
from .feedback import (
    ATS_SECTION_KEY,
    BeforeAfter,
    BulletAction,
    ExampleAction,
    Feedback,
    ReviewSection,
    Summary,
)

__all__ = [
    "UploadedDocument",
    "FileInfo",
    "ResponseEnvelope",
    "ATS_SECTION_KEY",
    "BeforeAfter",
    "BulletAction",
    "ExampleAction",
    "Feedback",
    "ReviewSection",
    "Summary",
]
