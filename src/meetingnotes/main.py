"""FastAPI application entry point."""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.responses import JSONResponse

from meetingnotes.api.dependencies import SummaryStoreDep
from meetingnotes.api.errors import register_exception_handlers
from meetingnotes.api.middleware import RequestSizeLimitMiddleware
from meetingnotes.api.router import router as api_router
from meetingnotes.api.web.spa import router as web_router
from meetingnotes.config import get_settings

settings = get_settings()

# Configure logging
logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan handler for startup/shutdown."""
    logger.info("Starting MeetingNotes application...")
    logger.info(f"Environment: {settings.environment}")
    if not settings.groq_api_key:
        logger.warning("GROQ_API_KEY not set; summary generation will fail until it is")

    yield

    # Summaries live in memory only
    logger.info("Shutting down MeetingNotes application...")


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    docs_kwargs = {}
    if settings.is_production:
        docs_kwargs = {"docs_url": None, "redoc_url": None, "openapi_url": None}

    app = FastAPI(
        title="MeetingNotes",
        description="AI-powered meeting transcript summaries",
        version="0.1.0",
        lifespan=lifespan,
        **docs_kwargs,
    )

    register_exception_handlers(app)
    app.add_middleware(RequestSizeLimitMiddleware)

    # Include routers
    app.include_router(api_router)

    @app.get("/health")
    async def health_check(store: SummaryStoreDep) -> JSONResponse:
        """Lightweight health check."""
        return JSONResponse({"status": "healthy", "summaries": await store.count()})

    # Catch-all SPA fallback goes last
    app.include_router(web_router)

    return app


# Create app instance
app = create_app()
