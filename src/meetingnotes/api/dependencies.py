"""FastAPI dependency injection providers."""

from typing import Annotated

from fastapi import Depends

from meetingnotes.config import Settings, get_settings
from meetingnotes.repositories.summary_repo import SummaryStore, get_summary_store
from meetingnotes.services.summarizer import SummarizerService, get_summarizer


def get_store() -> SummaryStore:
    """Provide the summary store."""
    return get_summary_store()


def get_summarizer_service() -> SummarizerService:
    """Provide the summarizer service."""
    return get_summarizer()


def get_app_settings() -> Settings:
    """Provide application settings."""
    return get_settings()


# Type aliases for commonly used dependencies
SummaryStoreDep = Annotated[SummaryStore, Depends(get_store)]
SummarizerDep = Annotated[SummarizerService, Depends(get_summarizer_service)]
SettingsDep = Annotated[Settings, Depends(get_app_settings)]
