"""Uploaded document schema (in-memory only, never persisted)."""

from pydantic import BaseModel, ConfigDict, Field


class UploadedDocument(BaseModel):
    """File received by the Intake Handler for a single request."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Original filename")
    mime_type: str = Field(default="", description="Declared MIME type of the upload")
    size_bytes: int = Field(..., ge=0, description="Size of raw_content in bytes")
    raw_content: bytes = Field(default=b"", repr=False)
