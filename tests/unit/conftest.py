"""Unit test fixtures with HTTP mocking."""

from __future__ import annotations

from typing import Any, AsyncIterator

import pytest
import respx
from httpx import Response

from mirrorsearch.config import MirrorSearchSettings
from mirrorsearch.resolution.base import MirrorNodeConfig
from mirrorsearch.resolution.registry import ResolverRegistry

# ============================================================================
# HTTP Mocking Fixtures
# ============================================================================


@pytest.fixture
def respx_mock():
    """Provide a respx mock router for HTTP mocking.

    Use this when you need fine-grained control over mocked responses.
    The mock is automatically started and stopped by respx.
    """
    with respx.mock(assert_all_called=False) as router:
        yield router


@pytest.fixture
def mirror_node(respx_mock, samples, mirror_url):
    """
    A mainnet mirror node that knows every sample entity.

    Any request not matching a sample answers 404, the way the real service
    answers unknown ids.
    """
    base = mirror_url
    routes: list[tuple[str, dict[str, Any]]] = [
        # Accounts
        (f"/accounts/{samples.account_id}", samples.account),
        (f"/accounts/{samples.alias}", samples.account),
        (f"/accounts/{samples.account_address}", samples.account),
        (f"/accounts?account.publickey={samples.public_key}&limit=2", samples.accounts),
        (f"/accounts?account.publickey={samples.ecdsa_public_key}&limit=2", samples.accounts),
        # Transactions
        (f"/transactions/{samples.transaction_id}", samples.transactions),
        (f"/transactions/{samples.transaction_hash}", samples.transactions),
        (f"/transactions?timestamp={samples.consensus_timestamp}", samples.transactions),
        (f"/contracts/results/{samples.evm_hash}", samples.contract_result),
        # Blocks
        (f"/blocks/{samples.block_hash}", samples.block),
        (f"/blocks/{samples.block_hash_prefix}", samples.block),
        # Tokens and topics
        (f"/tokens/{samples.token_id}", samples.token),
        (f"/topics/{samples.topic_id}", samples.topic),
        # Contracts
        (f"/contracts/{samples.contract_id}", samples.contract),
        (f"/contracts/{samples.contract_address[2:]}", samples.contract),
    ]
    for path, body in routes:
        respx_mock.get(base + path).mock(return_value=mock_json_response(body))

    # The service rejects a short address on the contracts endpoint
    respx_mock.get(f"{base}/contracts/000000{samples.short_hex}").mock(
        return_value=mock_error_response(400, "Invalid parameter: contractid")
    )

    respx_mock.route().mock(return_value=mock_error_response(404, "Not found"))
    return respx_mock


def requested_urls(router) -> list[str]:
    """URLs of every request the router saw, in send order."""
    return [str(call.request.url) for call in router.calls]


@pytest.fixture
def issued(mirror_url):
    """Factory returning the paths (relative to the API root) of every call made."""

    def _issued(router) -> list[str]:
        return [url.removeprefix(mirror_url) for url in requested_urls(router)]

    return _issued


# ============================================================================
# Resolver Configuration Fixtures
# ============================================================================


@pytest.fixture
def mirror_config(settings: MirrorSearchSettings) -> MirrorNodeConfig:
    """Resolver config pointed at the mainnet mirror node."""
    return MirrorNodeConfig.from_settings(settings, settings.get_network("mainnet"))


@pytest.fixture
async def registry(settings: MirrorSearchSettings) -> AsyncIterator[ResolverRegistry]:
    """A mainnet resolver registry, closed after the test."""
    registry = ResolverRegistry.for_network(settings, "mainnet")
    yield registry
    await registry.close_all()


# ============================================================================
# Mock Response Helpers
# ============================================================================


def mock_json_response(data: Any, status_code: int = 200) -> Response:
    """Create a mock JSON response."""
    return Response(
        status_code=status_code,
        json=data,
        headers={"Content-Type": "application/json"},
    )


def mock_error_response(status_code: int, message: str = "Error") -> Response:
    """Create a mock error response in the mirror node's error envelope."""
    return Response(
        status_code=status_code,
        json={"_status": {"messages": [{"message": message}]}},
        headers={"Content-Type": "application/json"},
    )


