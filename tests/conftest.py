"""Pytest configuration and fixtures."""

from collections.abc import AsyncGenerator
from unittest.mock import AsyncMock, MagicMock

import pytest
from httpx import ASGITransport, AsyncClient

from meetingnotes.api.dependencies import get_app_settings, get_store, get_summarizer_service
from meetingnotes.config import Settings
from meetingnotes.main import app
from meetingnotes.repositories.summary_repo import InMemorySummaryRepository
from meetingnotes.services.summarizer import SummarizerService

GENERATED_TEXT = "## Summary\n- Alice proposed shipping v2.\n- Bob agreed."


@pytest.fixture
def settings(tmp_path) -> Settings:
    """Settings isolated from the environment and any .env file."""
    return Settings(_env_file=None, groq_api_key="test-key", static_dir=str(tmp_path / "public"))


@pytest.fixture
def store() -> InMemorySummaryRepository:
    """Fresh in-memory store per test."""
    return InMemorySummaryRepository()


@pytest.fixture
def summarizer() -> MagicMock:
    """Summarizer stand-in that returns canned text."""
    mock = MagicMock(spec=SummarizerService)
    mock.generate = AsyncMock(return_value=GENERATED_TEXT)
    return mock


@pytest.fixture
async def client(settings, store, summarizer) -> AsyncGenerator[AsyncClient, None]:
    """Create async test client wired to the test store and summarizer."""
    app.dependency_overrides[get_app_settings] = lambda: settings
    app.dependency_overrides[get_store] = lambda: store
    app.dependency_overrides[get_summarizer_service] = lambda: summarizer

    transport = ASGITransport(app=app, raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client

    app.dependency_overrides.clear()


@pytest.fixture
def generated_text() -> str:
    """Text the summarizer fixture returns."""
    return GENERATED_TEXT
