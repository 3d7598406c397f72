"""Uniform success/error response envelope returned by /analyze."""

from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field

from cv_review_ai.schemas.feedback import Feedback


class FileInfo(BaseModel):
    """Metadata of the uploaded file echoed back on success."""

    model_config = ConfigDict(frozen=True)

    name: str
    type: str
    size: int


class ResponseEnvelope(BaseModel):
    """Constructed once per request and never mutated afterwards."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    success: bool
    error: Optional[str] = None
    file_info: Optional[FileInfo] = Field(default=None, alias="fileInfo")
    feedback: Optional[Feedback] = None
    raw_response: Optional[str] = Field(default=None, alias="rawResponse")

    def to_wire(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_none=True)
