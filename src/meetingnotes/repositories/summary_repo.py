"""Summary storage: abstract interface plus the in-memory implementation."""

import asyncio
import logging
import uuid
from abc import ABC, abstractmethod
from dataclasses import replace
from datetime import UTC, datetime, timedelta

from meetingnotes.domain.summary import NewSummary, Summary, SummaryUpdate

logger = logging.getLogger(__name__)


class SummaryStore(ABC):
    """Storage interface for Summary records.

    Implementations return copies, so callers never hold a reference into
    the store's own state.
    """

    @abstractmethod
    async def create(self, data: NewSummary) -> Summary:
        """Store a new summary with a fresh id and timestamps."""

    @abstractmethod
    async def get_all(self) -> list[Summary]:
        """Return all summaries, most recently created first."""

    @abstractmethod
    async def get_by_id(self, summary_id: str) -> Summary | None:
        """Get a summary by its ID."""

    @abstractmethod
    async def update(self, summary_id: str, changes: SummaryUpdate) -> Summary | None:
        """Apply mutable-field changes. Returns None if the ID is unknown."""

    @abstractmethod
    async def count(self) -> int:
        """Get total summary count."""


class InMemorySummaryRepository(SummaryStore):
    """Process-local summary store backed by a dict.

    All access goes through an asyncio.Lock so read-modify-write updates to
    the same id never interleave. Data is lost when the process exits.
    """

    def __init__(self) -> None:
        """Initialize an empty store."""
        self._summaries: dict[str, Summary] = {}
        self._lock = asyncio.Lock()
        self._last_timestamp: datetime | None = None

    def _now(self) -> datetime:
        """Strictly increasing UTC timestamp. Caller must hold the lock."""
        now = datetime.now(UTC)
        if self._last_timestamp is not None and now <= self._last_timestamp:
            now = self._last_timestamp + timedelta(microseconds=1)
        self._last_timestamp = now
        return now

    async def create(self, data: NewSummary) -> Summary:
        """Store a new summary with a fresh id and timestamps."""
        async with self._lock:
            summary_id = str(uuid.uuid4())
            while summary_id in self._summaries:
                summary_id = str(uuid.uuid4())

            now = self._now()
            summary = Summary(
                id=summary_id,
                title=data.title,
                original_transcript=data.original_transcript,
                custom_instructions=data.custom_instructions,
                generated_summary=data.generated_summary,
                edited_summary=data.edited_summary,
                created_at=now,
                updated_at=now,
            )
            self._summaries[summary_id] = summary

        logger.info(f"Created summary {summary_id}")
        return replace(summary)

    async def get_all(self) -> list[Summary]:
        """Return a snapshot of all summaries, newest first."""
        async with self._lock:
            summaries = [replace(s) for s in self._summaries.values()]
        return sorted(summaries, key=lambda s: s.created_at, reverse=True)

    async def get_by_id(self, summary_id: str) -> Summary | None:
        """Get a summary by its ID."""
        async with self._lock:
            summary = self._summaries.get(summary_id)
            return replace(summary) if summary else None

    async def update(self, summary_id: str, changes: SummaryUpdate) -> Summary | None:
        """Merge the edited summary onto an existing record and bump updated_at."""
        async with self._lock:
            existing = self._summaries.get(summary_id)
            if existing is None:
                return None

            edited = existing.edited_summary
            if changes.edited_summary is not None:
                edited = changes.edited_summary

            updated = replace(existing, edited_summary=edited, updated_at=self._now())
            self._summaries[summary_id] = updated

        logger.info(f"Updated summary {summary_id}")
        return replace(updated)

    async def count(self) -> int:
        """Get total summary count."""
        async with self._lock:
            return len(self._summaries)


_summary_store: InMemorySummaryRepository | None = None


def get_summary_store() -> InMemorySummaryRepository:
    """Get or create the process-wide summary store."""
    global _summary_store
    if _summary_store is None:
        _summary_store = InMemorySummaryRepository()
    return _summary_store
