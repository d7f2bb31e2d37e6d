"""Summary API endpoints."""

import logging
from typing import Annotated

from fastapi import APIRouter, File, Form, UploadFile

from meetingnotes.api.dependencies import SettingsDep, SummarizerDep, SummaryStoreDep
from meetingnotes.api.schemas import (
    ErrorResponse,
    RenderedSummaryResponse,
    SummaryResponse,
    SummaryUpdateRequest,
)
from meetingnotes.domain.summary import NewSummary, SummaryUpdate
from meetingnotes.errors import NotFoundError
from meetingnotes.services.markdown import count_words, markdown_to_html
from meetingnotes.services.transcripts import read_transcript

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/summaries",
    tags=["summaries"],
    responses={
        400: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
)


@router.post(
    "/generate",
    response_model=SummaryResponse,
    responses={413: {"model": ErrorResponse}},
)
async def generate_summary(
    store: SummaryStoreDep,
    summarizer: SummarizerDep,
    settings: SettingsDep,
    transcript: Annotated[UploadFile | None, File()] = None,
    custom_instructions: Annotated[str, Form(alias="customInstructions")] = "",
    title: Annotated[str, Form()] = "",
) -> SummaryResponse:
    """Upload a transcript, summarize it and store the result."""
    text = await read_transcript(transcript, settings)

    # The store is only touched once generation has succeeded
    generated = await summarizer.generate(text, custom_instructions)

    summary = await store.create(
        NewSummary.from_generation(
            transcript=text,
            generated_summary=generated,
            custom_instructions=custom_instructions,
            title=title,
        )
    )
    return SummaryResponse.model_validate(summary)


@router.get("", response_model=list[SummaryResponse])
async def list_summaries(store: SummaryStoreDep) -> list[SummaryResponse]:
    """List all summaries, newest first."""
    summaries = await store.get_all()
    return [SummaryResponse.model_validate(s) for s in summaries]


@router.get(
    "/{summary_id}",
    response_model=SummaryResponse,
    responses={404: {"model": ErrorResponse}},
)
async def get_summary(summary_id: str, store: SummaryStoreDep) -> SummaryResponse:
    """Get a single summary by ID."""
    summary = await store.get_by_id(summary_id)
    if not summary:
        raise NotFoundError("Summary not found")
    return SummaryResponse.model_validate(summary)


@router.get(
    "/{summary_id}/rendered",
    response_model=RenderedSummaryResponse,
    responses={404: {"model": ErrorResponse}},
)
async def render_summary(summary_id: str, store: SummaryStoreDep) -> RenderedSummaryResponse:
    """Render the edited summary as HTML for the editor."""
    summary = await store.get_by_id(summary_id)
    if not summary:
        raise NotFoundError("Summary not found")

    html = markdown_to_html(summary.edited_summary)
    return RenderedSummaryResponse(id=summary.id, html=html, word_count=count_words(html))


@router.patch(
    "/{summary_id}",
    response_model=SummaryResponse,
    responses={404: {"model": ErrorResponse}},
)
async def update_summary(
    summary_id: str,
    body: SummaryUpdateRequest,
    store: SummaryStoreDep,
) -> SummaryResponse:
    """Save the user's edits to a summary."""
    changes = SummaryUpdate()
    if "edited_summary" in body.model_fields_set:
        # An explicit null clears the edited text
        changes.edited_summary = body.edited_summary or ""

    summary = await store.update(summary_id, changes)
    if not summary:
        raise NotFoundError("Summary not found")
    return SummaryResponse.model_validate(summary)
