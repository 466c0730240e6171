"""Search endpoints."""

from __future__ import annotations

import time

from fastapi import APIRouter, HTTPException, Query

from mirrorsearch.api.dependencies import SearchClient
from mirrorsearch.api.schemas import (
    CandidateResponse,
    DetectionResponse,
    LookupResponse,
    SearchResponse,
)
from mirrorsearch.core.exceptions import UnknownNetworkError
from mirrorsearch.core.models import MirrorRecord
from mirrorsearch.detection.classifier import ChannelClassifier
from mirrorsearch.detection.identifier import (
    Alias,
    EvmAddress,
    NumericId,
    ParsedIdentifier,
    PlainText,
    TransactionIdentifier,
)

router = APIRouter(prefix="/search", tags=["search"])


def _record(record: MirrorRecord | None) -> dict | None:
    return record.to_dict() if record is not None else None


def _describe_candidate(candidate: ParsedIdentifier) -> CandidateResponse:
    """Convert a decoded candidate to API response."""
    if isinstance(candidate, NumericId):
        value = str(candidate.entity_id)
    elif isinstance(candidate, TransactionIdentifier):
        value = str(candidate.transaction_id)
    elif isinstance(candidate, (Alias, PlainText)):
        value = candidate.text
    elif isinstance(candidate, EvmAddress):
        value = candidate.text
    else:
        value = candidate.hex

    return CandidateResponse(
        kind=type(candidate).__name__,
        grammar=candidate.grammar,
        value=value,
    )


@router.get(
    "",
    response_model=SearchResponse,
    operation_id="search",
    summary="Resolve a search string",
    description=(
        "Decode an entity id, transaction id, hash, alias, EVM address or public key "
        "and look it up on the network's mirror node."
    ),
)
async def search(
    client: SearchClient,
    q: str = Query(..., min_length=1, max_length=500, description="Search string"),
    network: str | None = Query(None, max_length=64, description="Network name"),
) -> SearchResponse:
    """Resolve a search string against one network."""
    start_time = time.monotonic()

    try:
        entry = client.settings.get_network(network)
        result = await client.search(q, entry.name)
    except UnknownNetworkError as e:
        raise HTTPException(status_code=400, detail=e.message) from e

    return SearchResponse(
        searched_id=q,
        network=entry.name,
        found=result.found,
        account=_record(result.account),
        accounts_with_key=[r.to_dict() for r in result.accounts_with_key],
        transactions=[r.to_dict() for r in result.transactions],
        token_info=_record(result.token_info),
        topic=_record(result.topic),
        contract=_record(result.contract),
        block=_record(result.block),
        ethereum_address=result.ethereum_address,
        error_count=result.error_count,
        lookups=[LookupResponse(channel=lookup.channel, key=lookup.key) for lookup in result.lookups],
        total_duration_ms=(time.monotonic() - start_time) * 1000,
    )


@router.get(
    "/detect",
    response_model=DetectionResponse,
    operation_id="detectQuery",
    summary="Detect query shape",
    description="Show how a search string decodes and which lookups it would issue, without issuing them.",
)
async def detect_query(
    client: SearchClient,
    q: str = Query(..., min_length=1, max_length=500, description="Search string"),
    network: str | None = Query(None, max_length=64, description="Network name"),
) -> DetectionResponse:
    """Decode a search string without looking it up."""
    try:
        entry = client.settings.get_network(network)
    except UnknownNetworkError as e:
        raise HTTPException(status_code=400, detail=e.message) from e

    candidates = client.detect(q, entry.name)
    lookups = ChannelClassifier().plan(candidates)

    return DetectionResponse(
        query=q,
        network=entry.name,
        grammar=candidates.primary_grammar,
        candidates=[_describe_candidate(c) for c in candidates],
        ethereum_address=candidates.ethereum_address,
        lookups=[LookupResponse(channel=lookup.channel, key=lookup.key) for lookup in lookups],
    )
