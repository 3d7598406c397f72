from pathlib import Path

import pytest
from streamlit.testing.v1 import AppTest

from cv_review_ai.schemas.feedback import Feedback
from cv_review_ai.ui.state import ReviewState, ViewPhase

APP_PATH = str(Path(__file__).resolve().parents[1] / "cv_review_ai" / "app.py")


def _run_with_state(state: ReviewState) -> AppTest:
    at = AppTest.from_file(APP_PATH)
    at.session_state["review_state"] = state
    at.run(timeout=30)
    assert not at.exception
    return at


@pytest.fixture
def success_page(sample_feedback):
    state = ReviewState(phase=ViewPhase.SUCCESS, feedback=Feedback.model_validate(sample_feedback))
    return _run_with_state(state)


def test_review_sections_are_collapsed_expanders(success_page):
    expanders = {e.label: e for e in success_page.expander}
    assert list(expanders) == ["ATS Optimization", "Work Experience"]
    assert not any(e.proto.expanded for e in expanders.values())


def test_strengths_and_improvements_use_separate_affordances(success_page):
    assert [s.value for s in success_page.success] == ["Standard section headings", "Reverse chronological order"]
    assert [w.value for w in success_page.warning] == ["Add role-specific keywords", "Start bullets with action verbs"]


def test_keyword_rows_only_for_ats_section(success_page):
    captions = [c.value for c in success_page.caption]
    assert captions.count("Keyword Score:") == 1
    assert captions.count("Missing Keywords:") == 1
    markdown = [m.value for m in success_page.markdown]
    assert "**7/10**" in markdown
    assert "**Kubernetes, CI/CD**" in markdown


def test_summary_shows_score(success_page):
    assert success_page.metric[0].value == "Good"


def test_action_cards_show_example_or_bullets(success_page):
    captions = [c.value for c in success_page.caption]
    markdown = [m.value for m in success_page.markdown]
    assert captions.count("Before:") == 1 and captions.count("After:") == 1
    assert '> "Worked on the billing system"' in markdown
    assert "- Keep it to three lines\n- Lead with your target role" in markdown


def test_bullet_only_actions_render_no_before_after(sample_feedback):
    sample_feedback["priorityActions"] = [sample_feedback["priorityActions"][1]]
    state = ReviewState(phase=ViewPhase.SUCCESS, feedback=Feedback.model_validate(sample_feedback))
    at = _run_with_state(state)
    captions = [c.value for c in at.caption]
    assert "Before:" not in captions and "After:" not in captions


def test_parse_failure_shows_banner_and_raw_response():
    raw = "```json {\"summary\": {}}```"
    state = ReviewState(phase=ViewPhase.ERROR, error="Failed to parse AI response", raw_response=raw)
    at = _run_with_state(state)
    assert [e.value for e in at.error] == ["Failed to parse AI response"]
    assert [e.label for e in at.expander] == ["Raw AI response"]
    assert at.code[0].value == raw


def test_plain_error_has_no_raw_response_panel():
    state = ReviewState(phase=ViewPhase.ERROR, error="Uploaded document does not appear to be a CV/resume")
    at = _run_with_state(state)
    assert [e.value for e in at.error] == ["Uploaded document does not appear to be a CV/resume"]
    assert len(at.expander) == 0
    assert len(at.success) == 0
