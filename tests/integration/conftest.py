"""Integration test fixtures: the assembled application over a mocked mirror node."""

from __future__ import annotations

from typing import AsyncIterator

import pytest
import respx
from httpx import ASGITransport, AsyncClient, Response

from mirrorsearch.api import create_app
from mirrorsearch.client import MirrorSearchClient

# ============================================================================
# Mirror Node Fixtures
# ============================================================================


@pytest.fixture
def mirror_node(samples, mirror_url):
    """
    A mainnet mirror node that knows the sample account, contract and transaction.

    Everything else answers 404.
    """
    with respx.mock(assert_all_called=False) as router:
        router.get(f"{mirror_url}/accounts/{samples.account_id}").mock(
            return_value=Response(200, json=samples.account)
        )
        router.get(f"{mirror_url}/accounts/{samples.account_address}").mock(
            return_value=Response(200, json=samples.account)
        )
        router.get(f"{mirror_url}/contracts/{samples.contract_id}").mock(
            return_value=Response(200, json=samples.contract)
        )
        router.get(f"{mirror_url}/transactions/{samples.transaction_id}").mock(
            return_value=Response(200, json=samples.transactions)
        )
        router.route().mock(return_value=Response(404))
        yield router


# ============================================================================
# FastAPI Test Client Fixtures
# ============================================================================


@pytest.fixture
async def test_app(settings):
    """
    Create the application with an open search client.

    ASGITransport does not run the lifespan, so the client is opened here
    the way the lifespan would open it.
    """
    app = create_app(settings)

    async with MirrorSearchClient(settings) as client:
        app.state.search_client = client
        yield app


@pytest.fixture
async def test_client(test_app) -> AsyncIterator[AsyncClient]:
    """Create async HTTP test client."""
    transport = ASGITransport(app=test_app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest.fixture
async def bare_client(settings) -> AsyncIterator[AsyncClient]:
    """Test client for an application whose search client was never started."""
    transport = ASGITransport(app=create_app(settings))
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
