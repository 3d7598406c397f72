import copy
import json
from typing import List, Optional

import pytest
from fastapi.testclient import TestClient

from cv_review_ai.api.main import create_app
from cv_review_ai.config import ANALYSIS_MODEL, VALIDATION_MODEL

SAMPLE_FEEDBACK = {
    "summary": {
        "score": "Good",
        "keyStrengths": ["Clear structure", "Quantified achievements"],
    },
    "detailedReview": {
        "atsOptimization": {
            "title": "ATS Optimization",
            "strengths": ["Standard section headings"],
            "improvements": ["Add role-specific keywords"],
            "keywordScore": "7/10",
            "missingKeywords": ["Kubernetes", "CI/CD"],
        },
        "experience": {
            "title": "Work Experience",
            "strengths": ["Reverse chronological order"],
            "improvements": ["Start bullets with action verbs"],
        },
    },
    "priorityActions": [
        {
            "id": 1,
            "title": "Quantify impact",
            "example": {
                "before": "Worked on the billing system",
                "after": "Cut billing errors by 30% by rewriting invoice reconciliation",
            },
        },
        {
            "id": 2,
            "title": "Tighten the summary",
            "bullets": ["Keep it to three lines", "Lead with your target role"],
        },
    ],
}

CV_TEXT = "Jane Doe\nSenior Software Engineer\nExperience: ACME Corp 2018-2024\nSkills: Python, SQL"


class FakeLLMClient:
    """Records every completion request; answers by model name."""

    def __init__(self, validation_reply: str = "true", analysis_reply: Optional[str] = None):
        self.validation_reply = validation_reply
        self.analysis_reply = analysis_reply if analysis_reply is not None else json.dumps(SAMPLE_FEEDBACK)
        self.calls: List[dict] = []

    async def complete(self, prompt, *, model, max_tokens, temperature):
        self.calls.append({"prompt": prompt, "model": model, "max_tokens": max_tokens, "temperature": temperature})
        if model == VALIDATION_MODEL and max_tokens < 100:
            return self.validation_reply
        assert model == ANALYSIS_MODEL
        return self.analysis_reply

    @property
    def validation_calls(self):
        return [c for c in self.calls if c["max_tokens"] < 100]

    @property
    def analysis_calls(self):
        return [c for c in self.calls if c["max_tokens"] >= 100]


@pytest.fixture
def sample_feedback():
    return copy.deepcopy(SAMPLE_FEEDBACK)


@pytest.fixture
def fake_llm():
    return FakeLLMClient()


@pytest.fixture
def client(fake_llm):
    app = create_app(llm_client=fake_llm)
    with TestClient(app) as c:
        yield c


class FakePage:
    def __init__(self, text):
        self._text = text

    def extract_text(self):
        return self._text


class FakePDF:
    def __init__(self, page_texts):
        self.pages = [FakePage(t) for t in page_texts]

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        return False


@pytest.fixture
def fake_pdf(monkeypatch):
    """Replace pdfplumber.open; call with the page texts the next PDF should yield."""
    from cv_review_ai.cv_pipeline import text_extractor

    def install(page_texts):
        opened = []

        def fake_open(stream):
            opened.append(stream.read())
            return FakePDF(page_texts)

        monkeypatch.setattr(text_extractor.pdfplumber, "open", fake_open)
        return opened

    return install
