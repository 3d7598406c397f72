"""
CV Review Assistant – Streamlit frontend.
No business logic in layout; state transitions live in ui.state, the HTTP call in services.api_client.
"""

from typing import Callable, List, Optional

import streamlit as st

from cv_review_ai.config import API_BASE_URL, MAX_UPLOAD_BYTES
from cv_review_ai.schemas.feedback import (
    ATS_SECTION_KEY,
    BulletAction,
    ExampleAction,
    Feedback,
    ReviewSection,
)
from cv_review_ai.services.api_client import AnalysisRequestError, analyze_cv
from cv_review_ai.ui.state import (
    ReviewState,
    ViewPhase,
    can_submit,
    clear,
    fail,
    receive_envelope,
    select_file,
    start_loading,
)
from cv_review_ai.utils.logger import configure_logging, get_logger

logger = get_logger(__name__)

STATE_KEY = "review_state"
UPLOAD_ID_KEY = "upload_id"
UPLOADER_NONCE_KEY = "uploader_nonce"


def _get_state() -> ReviewState:
    return st.session_state.get(STATE_KEY) or ReviewState()


def _set_state(state: ReviewState) -> None:
    st.session_state[STATE_KEY] = state


def _sync_upload(uploaded) -> None:
    """Translate file_uploader changes into select/clear transitions (once per distinct upload)."""
    upload_id: Optional[str] = None
    if uploaded is not None:
        upload_id = f"{uploaded.name}:{uploaded.size}:{getattr(uploaded, 'file_id', '')}"
    if upload_id == st.session_state.get(UPLOAD_ID_KEY):
        return
    st.session_state[UPLOAD_ID_KEY] = upload_id
    if uploaded is None:
        _set_state(clear(_get_state()))
        return
    _set_state(
        select_file(
            _get_state(),
            name=uploaded.name,
            mime_type=uploaded.type or "",
            size=uploaded.size,
            content=uploaded.getvalue(),
        )
    )


def _run_analysis() -> None:
    """FileSelected -> Loading -> Success | Error. One request at a time (blocking rerun)."""
    state = start_loading(_get_state())
    _set_state(state)
    with st.spinner("Analyzing your CV..."):
        try:
            envelope = analyze_cv(state.file.content, state.file.name, state.file.mime_type)
            state = receive_envelope(state, envelope)
        except AnalysisRequestError as e:
            state = fail(state, str(e))
    _set_state(state)


def _render_list(items: List[str], show: Callable, icon: str) -> None:
    for item in items:
        show(item, icon=icon)


def _render_section(key: str, section: ReviewSection) -> None:
    with st.expander(section.title, expanded=False):
        st.markdown("**Strengths**")
        _render_list(section.strengths, st.success, "✅")
        st.markdown("**Areas for Improvement**")
        _render_list(section.improvements, st.warning, "⚠️")
        if key == ATS_SECTION_KEY:
            st.divider()
            extra = {
                "Keyword Score": section.keyword_score or "—",
                "Missing Keywords": ", ".join(section.missing_keywords or []) or "—",
            }
            for label, value in extra.items():
                col_k, col_v = st.columns([1, 2])
                col_k.caption(f"{label}:")
                col_v.markdown(f"**{value}**")


def _render_action_card(action) -> None:
    with st.container(border=True):
        st.markdown(f"#### {action.id}. {action.title}")
        if isinstance(action, ExampleAction):
            st.caption("Before:")
            st.markdown(f"> \"{action.example.before}\"")
            st.caption("After:")
            st.markdown(f":green[\"{action.example.after}\"]")
        elif isinstance(action, BulletAction):
            st.markdown("\n".join(f"- {b}" for b in action.bullets))


def _render_feedback(feedback: Feedback) -> None:
    st.subheader("🏆 Overall Assessment")
    col_score, col_strengths = st.columns(2)
    with col_score:
        st.metric("Score", feedback.summary.score)
    with col_strengths:
        st.caption("Key Strengths")
        for strength in feedback.summary.key_strengths:
            st.markdown(f"✅ {strength}")

    st.divider()
    st.subheader("Detailed Review")
    for key, section in feedback.detailed_review.items():
        _render_section(key, section)

    st.divider()
    st.subheader("Priority Actions")
    actions = feedback.priority_actions
    for i in range(0, len(actions), 2):
        cols = st.columns(2)
        for col, action in zip(cols, actions[i:i + 2]):
            with col:
                _render_action_card(action)


def render_layout() -> None:
    """Streamlit page layout; transitions and network calls go through ui.state / services."""
    configure_logging()
    st.set_page_config(page_title="CV Review Assistant", layout="centered")
    st.title("CV Review Assistant")
    st.markdown("*Get instant, AI-powered feedback on your CV*")
    st.divider()

    # A rerun triggered mid-request leaves a stale Loading state behind
    if _get_state().phase == ViewPhase.LOADING:
        _set_state(fail(_get_state(), "Analysis was interrupted. Please try again."))

    nonce = st.session_state.setdefault(UPLOADER_NONCE_KEY, 0)
    uploaded = st.file_uploader(
        "Drag and drop your CV here, or browse",
        type=["pdf"],
        key=f"cv_upload_{nonce}",
        help=f"Please upload a PDF file (max {MAX_UPLOAD_BYTES // (1024 * 1024)}MB)",
    )
    _sync_upload(uploaded)
    state = _get_state()

    if state.file is not None:
        col_file, col_clear = st.columns([4, 1])
        with col_file:
            st.markdown(f"📄 **{state.file.name}**")
            st.caption(f"{state.file.size_mb:.2f} MB")
        with col_clear:
            if st.button("Remove", key="clear_btn"):
                _set_state(clear(state))
                st.session_state[UPLOADER_NONCE_KEY] = nonce + 1
                st.session_state[UPLOAD_ID_KEY] = None
                st.rerun()

    if st.button("Analyze CV", type="primary", key="analyze_btn", disabled=not can_submit(state)):
        _run_analysis()
        state = _get_state()

    if state.phase == ViewPhase.ERROR and state.error:
        st.error(state.error)
        if state.raw_response is not None:
            with st.expander("Raw AI response"):
                st.code(state.raw_response)
    elif state.phase == ViewPhase.SUCCESS and state.feedback is not None:
        _render_feedback(state.feedback)
    elif state.phase == ViewPhase.IDLE:
        st.info(f"Upload a PDF CV, then click **Analyze CV**. Requests go to {API_BASE_URL}.")


if __name__ == "__main__":
    render_layout()
