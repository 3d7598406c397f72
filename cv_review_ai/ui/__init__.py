"""UI state for the Streamlit review page."""

from .state import (
    InvalidTransition,
    ReviewState,
    SelectedFile,
    ViewPhase,
    check_local_constraints,
    clear,
    fail,
    receive_envelope,
    select_file,
    start_loading,
)

__all__ = [
    "InvalidTransition",
    "ReviewState",
    "SelectedFile",
    "ViewPhase",
    "check_local_constraints",
    "clear",
    "fail",
    "receive_envelope",
    "select_file",
    "start_loading",
]
