"""Top-level API router — aggregates all endpoint routers at the service root."""

from fastapi import APIRouter

from minicini.presentation.api.endpoints.health import router as health_router
from minicini.presentation.api.endpoints.movies import router as movies_router

router = APIRouter()
router.include_router(health_router)
router.include_router(movies_router)
