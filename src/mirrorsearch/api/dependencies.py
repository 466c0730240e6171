"""FastAPI dependency injection."""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends, HTTPException, Request

from mirrorsearch.client import MirrorSearchClient
from mirrorsearch.config import MirrorSearchSettings


async def get_app_settings(request: Request) -> MirrorSearchSettings:
    """Get the settings the application was created with."""
    return request.app.state.settings


async def get_search_client(request: Request) -> MirrorSearchClient:
    """Get the search client from app state."""
    client = getattr(request.app.state, "search_client", None)
    if client is None:
        raise HTTPException(status_code=503, detail="Search client not initialized")
    return client


# Type aliases for cleaner dependency injection
Settings = Annotated[MirrorSearchSettings, Depends(get_app_settings)]
SearchClient = Annotated[MirrorSearchClient, Depends(get_search_client)]
