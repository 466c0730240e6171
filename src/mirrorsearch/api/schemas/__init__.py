"""API schema definitions."""

from mirrorsearch.api.schemas.base import APIBaseSchema
from mirrorsearch.api.schemas.responses import (
    CandidateResponse,
    DetectionResponse,
    HealthResponse,
    LookupResponse,
    SearchResponse,
)

__all__ = [
    # Base
    "APIBaseSchema",
    # Responses
    "CandidateResponse",
    "DetectionResponse",
    "HealthResponse",
    "LookupResponse",
    "SearchResponse",
]
