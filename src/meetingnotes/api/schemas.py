"""Pydantic schemas for API request/response models."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class SummaryResponse(BaseModel):
    """Response schema for a summary. Serialized with camelCase keys."""

    model_config = ConfigDict(
        from_attributes=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    id: str
    title: str
    original_transcript: str
    custom_instructions: str
    generated_summary: str
    edited_summary: str
    created_at: datetime
    updated_at: datetime


class RenderedSummaryResponse(BaseModel):
    """Edited summary rendered to HTML, with its word count."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: str
    html: str
    word_count: int


class SummaryUpdateRequest(BaseModel):
    """Request body for PATCH /api/summaries/{id}. Unknown keys are ignored."""

    model_config = ConfigDict(extra="ignore")

    edited_summary: str | None = Field(default=None, alias="editedSummary")


class ErrorResponse(BaseModel):
    """Error payload returned for every failed request."""

    message: str
    errors: list[dict] | None = None
