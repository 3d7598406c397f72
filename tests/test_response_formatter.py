import pytest

from cv_review_ai.schemas.envelope import FileInfo
from cv_review_ai.schemas.feedback import Feedback
from cv_review_ai.services.response_formatter import error_envelope, success_envelope, to_response
from cv_review_ai.utils.exceptions import (
    EmptyContent,
    MissingFile,
    NotACV,
    UpstreamCallError,
    UpstreamParseError,
)


def test_success_envelope(sample_feedback):
    info = FileInfo(name="resume.pdf", type="application/pdf", size=1234)
    envelope, status = success_envelope(info, Feedback.model_validate(sample_feedback))
    assert status == 200
    assert envelope.to_wire() == {
        "success": True,
        "fileInfo": {"name": "resume.pdf", "type": "application/pdf", "size": 1234},
        "feedback": sample_feedback,
    }


@pytest.mark.parametrize(
    "exc, status, message",
    [
        (MissingFile(), 400, "No file uploaded"),
        (EmptyContent(), 400, "No text content found in file"),
        (NotACV(), 400, "Uploaded document does not appear to be a CV/resume"),
        (UpstreamCallError("quota exceeded"), 500, "quota exceeded"),
        (KeyError("boom"), 500, "'boom'"),
        (RuntimeError(), 500, "Failed to process request"),
    ],
)
def test_error_envelope_status_and_message(exc, status, message):
    envelope, code = error_envelope(exc)
    assert code == status
    assert envelope.to_wire() == {"success": False, "error": message}


def test_parse_error_keeps_raw_response():
    envelope, code = error_envelope(UpstreamParseError(raw_response="not json"))
    assert code == 500
    assert envelope.to_wire() == {
        "success": False,
        "error": "Failed to parse AI response",
        "rawResponse": "not json",
    }


def test_envelope_is_frozen():
    envelope, _ = error_envelope(NotACV())
    with pytest.raises(Exception):
        envelope.success = True


def test_to_response_serializes_wire_names():
    response = to_response(*error_envelope(UpstreamParseError(raw_response="")))
    assert response.status_code == 500
    assert b'"rawResponse":""' in response.body
