"""API router aggregator."""

from fastapi import APIRouter

from meetingnotes.api.summaries import router as summaries_router

router = APIRouter(prefix="/api")
router.include_router(summaries_router)
