"""API response schemas."""

from __future__ import annotations

from typing import Any, Literal

from pydantic import Field

from mirrorsearch.api.schemas.base import APIBaseSchema
from mirrorsearch.core.types import Channel, Grammar


class HealthResponse(APIBaseSchema):
    """Health check response."""

    status: Literal["healthy", "degraded", "unhealthy"]
    version: str
    default_network: str
    networks: list[str]


class LookupResponse(APIBaseSchema):
    """One lookup that was issued."""

    channel: Channel
    key: str


class SearchResponse(APIBaseSchema):
    """Merged result of one search."""

    searched_id: str
    network: str
    found: bool
    account: dict[str, Any] | None = None
    accounts_with_key: list[dict[str, Any]] = Field(default_factory=list)
    transactions: list[dict[str, Any]] = Field(default_factory=list)
    token_info: dict[str, Any] | None = None
    topic: dict[str, Any] | None = None
    contract: dict[str, Any] | None = None
    block: dict[str, Any] | None = None
    ethereum_address: str | None = None
    error_count: int = 0
    lookups: list[LookupResponse] = Field(default_factory=list)
    total_duration_ms: float


class CandidateResponse(APIBaseSchema):
    """One interpretation of a query."""

    kind: str = Field(..., description="Candidate variant, e.g. NumericId or EvmAddress")
    grammar: Grammar
    value: str = Field(..., description="Normalized form of the candidate")


class DetectionResponse(APIBaseSchema):
    """Response for query detection."""

    query: str
    network: str
    grammar: Grammar | None = None
    candidates: list[CandidateResponse]
    ethereum_address: str | None = None
    lookups: list[LookupResponse]
