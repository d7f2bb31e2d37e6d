"""Summary domain entity."""

from dataclasses import dataclass
from datetime import date, datetime


@dataclass
class NewSummary:
    """Fields supplied by the caller when a summary is created."""

    title: str
    original_transcript: str
    custom_instructions: str
    generated_summary: str
    edited_summary: str

    @classmethod
    def from_generation(
        cls,
        transcript: str,
        generated_summary: str,
        custom_instructions: str | None = None,
        title: str | None = None,
        today: date | None = None,
    ) -> "NewSummary":
        """Build a new summary; the edited text starts as the generated text."""
        return cls(
            title=title if title and title.strip() else default_title(today),
            original_transcript=transcript,
            custom_instructions=custom_instructions or "",
            generated_summary=generated_summary,
            edited_summary=generated_summary,
        )


@dataclass
class SummaryUpdate:
    """Mutable fields of a summary. None means "leave unchanged"."""

    edited_summary: str | None = None


@dataclass
class Summary:
    """A transcript paired with its AI-generated and user-edited summary."""

    id: str
    title: str
    original_transcript: str
    custom_instructions: str
    generated_summary: str
    edited_summary: str
    created_at: datetime
    updated_at: datetime


def default_title(today: date | None = None) -> str:
    """Date-stamped title used when the client does not supply one."""
    today = today or date.today()
    return f"Summary - {today.month}/{today.day}/{today.year}"
