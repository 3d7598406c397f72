"""Structured CV feedback returned by the analysis model.

Wire names are camelCase (the JSON the model is asked to produce and the JSON
the UI consumes); attributes are snake_case. Every model forbids unknown
fields so that a parseable but structurally wrong reply is rejected.
"""

from typing import Annotated, Any, Dict, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Discriminator, Field, Tag, model_validator

Score = Literal["Outstanding", "Good", "Average", "Needs Work"]

ATS_SECTION_KEY = "atsOptimization"


class _WireModel(BaseModel):
    model_config = ConfigDict(extra="forbid", populate_by_name=True, frozen=True)

    def to_wire(self) -> Dict[str, Any]:
        """Dump using wire names, omitting absent optionals."""
        return self.model_dump(by_alias=True, exclude_none=True)


class Summary(_WireModel):
    """Overall verdict."""

    score: Score = Field(..., description="Outstanding / Good / Average / Needs Work")
    key_strengths: List[str] = Field(..., alias="keyStrengths")


class ReviewSection(_WireModel):
    """One section of the detailed review (e.g. atsOptimization, experience)."""

    title: str
    strengths: List[str]
    improvements: List[str]
    keyword_score: Optional[str] = Field(default=None, alias="keywordScore")
    missing_keywords: Optional[List[str]] = Field(default=None, alias="missingKeywords")


class BeforeAfter(_WireModel):
    before: str
    after: str


def _is_absent(value: Any) -> bool:
    return value is None or value == [] or value == {}


def _drop_unused_variant_key(data: Any, key: str) -> Any:
    """Treat a null/empty value for the other variant's key as not sent."""
    if isinstance(data, dict) and key in data and _is_absent(data[key]):
        data = {k: v for k, v in data.items() if k != key}
    return data


class ExampleAction(_WireModel):
    """Priority action illustrated with a before/after rewrite."""

    id: int
    title: str
    example: BeforeAfter

    @model_validator(mode="before")
    @classmethod
    def _strip_empty_bullets(cls, data: Any) -> Any:
        return _drop_unused_variant_key(data, "bullets")

    @property
    def kind(self) -> str:
        return "example"


class BulletAction(_WireModel):
    """Priority action described as a list of bullet points."""

    id: int
    title: str
    bullets: List[str] = Field(..., min_length=1)

    @model_validator(mode="before")
    @classmethod
    def _strip_empty_example(cls, data: Any) -> Any:
        return _drop_unused_variant_key(data, "example")

    @property
    def kind(self) -> str:
        return "bullets"


def _action_kind(value: Any) -> str:
    if isinstance(value, dict):
        return "bullets" if _is_absent(value.get("example")) else "example"
    return getattr(value, "kind", "bullets")


PriorityAction = Annotated[
    Union[
        Annotated[ExampleAction, Tag("example")],
        Annotated[BulletAction, Tag("bullets")],
    ],
    Discriminator(_action_kind),
]


class Feedback(_WireModel):
    """Full CV review: summary, per-section review and priority actions."""

    summary: Summary
    detailed_review: Dict[str, ReviewSection] = Field(..., alias="detailedReview")
    priority_actions: List[PriorityAction] = Field(..., alias="priorityActions")
