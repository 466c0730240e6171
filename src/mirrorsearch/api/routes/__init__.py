"""API route modules."""

from mirrorsearch.api.routes.health import router as health_router
from mirrorsearch.api.routes.search import router as search_router

__all__ = [
    "health_router",
    "search_router",
]
