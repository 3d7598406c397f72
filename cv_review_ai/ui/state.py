"""Explicit state machine behind the Streamlit review page.

Idle -> FileSelected -> Loading -> Success | Error, and back to FileSelected
when the user replaces the file (or Idle when they clear it). States are
immutable; each transition returns a new ReviewState, so a Loading state can
never still show the previous feedback.
"""

from dataclasses import dataclass, replace
from enum import Enum
from typing import Optional

from cv_review_ai.config import ALLOWED_UPLOAD_MIME_TYPES, MAX_UPLOAD_BYTES
from cv_review_ai.schemas.envelope import ResponseEnvelope
from cv_review_ai.schemas.feedback import Feedback
from cv_review_ai.utils.exceptions import FileTooLarge, UnsupportedFileType

DEFAULT_ANALYSIS_ERROR = "Failed to analyze CV"


class ViewPhase(str, Enum):
    IDLE = "idle"
    FILE_SELECTED = "file_selected"
    LOADING = "loading"
    SUCCESS = "success"
    ERROR = "error"


class InvalidTransition(Exception):
    """Raised when an action is not allowed in the current phase."""


@dataclass(frozen=True)
class SelectedFile:
    name: str
    mime_type: str
    size: int
    content: bytes = b""

    @property
    def size_mb(self) -> float:
        return self.size / 1024 / 1024


@dataclass(frozen=True)
class ReviewState:
    phase: ViewPhase = ViewPhase.IDLE
    file: Optional[SelectedFile] = None
    feedback: Optional[Feedback] = None
    error: Optional[str] = None
    raw_response: Optional[str] = None


def check_local_constraints(mime_type: str, size: int) -> Optional[str]:
    """Client-side upload checks. Returns the user-facing message, or None when the file is acceptable."""
    if mime_type not in ALLOWED_UPLOAD_MIME_TYPES:
        return UnsupportedFileType().message
    if size > MAX_UPLOAD_BYTES:
        return FileTooLarge().message
    return None


def select_file(state: ReviewState, name: str, mime_type: str, size: int, content: bytes = b"") -> ReviewState:
    """Select or replace the file. Constraint violations go to Error without keeping the file."""
    if state.phase == ViewPhase.LOADING:
        raise InvalidTransition("Cannot select a file while an analysis is running")
    problem = check_local_constraints(mime_type, size)
    if problem:
        return ReviewState(phase=ViewPhase.ERROR, error=problem)
    return ReviewState(
        phase=ViewPhase.FILE_SELECTED,
        file=SelectedFile(name=name, mime_type=mime_type, size=size, content=content),
    )


def can_submit(state: ReviewState) -> bool:
    return state.file is not None and state.phase != ViewPhase.LOADING


def start_loading(state: ReviewState) -> ReviewState:
    """Submit the selected file. Previous feedback and error are discarded."""
    if not can_submit(state):
        raise InvalidTransition(f"Cannot submit from phase {state.phase.value} without a selected file")
    return ReviewState(phase=ViewPhase.LOADING, file=state.file)


def _require_loading(state: ReviewState) -> None:
    if state.phase != ViewPhase.LOADING:
        raise InvalidTransition(f"No analysis in flight (phase {state.phase.value})")


def receive_envelope(state: ReviewState, envelope: ResponseEnvelope) -> ReviewState:
    """Loading -> Success when the envelope carries feedback, else Loading -> Error."""
    _require_loading(state)
    if envelope.success and envelope.feedback is not None:
        return replace(state, phase=ViewPhase.SUCCESS, feedback=envelope.feedback)
    return replace(
        state,
        phase=ViewPhase.ERROR,
        error=envelope.error or DEFAULT_ANALYSIS_ERROR,
        raw_response=envelope.raw_response,
    )


def fail(state: ReviewState, message: str) -> ReviewState:
    """Loading -> Error when the network call itself raised."""
    _require_loading(state)
    return replace(state, phase=ViewPhase.ERROR, error=message or DEFAULT_ANALYSIS_ERROR)


def clear(state: ReviewState) -> ReviewState:
    """Drop the file and any results."""
    if state.phase == ViewPhase.LOADING:
        raise InvalidTransition("Cannot clear while an analysis is running")
    return ReviewState()
