"""Main library client for standalone usage."""

from __future__ import annotations

import logging

from mirrorsearch.config import MirrorSearchSettings
from mirrorsearch.core.exceptions import NotFoundError
from mirrorsearch.core.models import Account
from mirrorsearch.detection.identifier import CandidateSet, IdentifierDetector
from mirrorsearch.resolution.registry import ResolverRegistry
from mirrorsearch.resolution.search import ResolutionResult, SearchRequest

logger = logging.getLogger(__name__)


class MirrorSearchClient:
    """
    Main client for the mirrorsearch library.

    Resolves search strings against mirror nodes without requiring the web
    server. HTTP connections are pooled per network for the lifetime of the
    client.

    Usage:
        async with MirrorSearchClient() as client:
            # Entity id, fans out to account, contract, token and topic
            result = await client.search("0.0.730631")

            # EVM address on another network
            result = await client.search("0x00000000000000000000000000000000000b2607", "testnet")

            # What a query decodes to, without any lookup
            candidates = client.detect("0.0.730631-vfmkw")

    Settings are loaded from environment variables or can be passed explicitly.
    """

    def __init__(self, settings: MirrorSearchSettings | None = None) -> None:
        """
        Initialize the client.

        Args:
            settings: Application settings. If not provided, loaded from environment.
        """
        self._settings = settings or MirrorSearchSettings()
        self._registries: dict[str, ResolverRegistry] = {}
        self._opened = False

    @property
    def settings(self) -> MirrorSearchSettings:
        return self._settings

    async def __aenter__(self) -> MirrorSearchClient:
        """Initialize resources on context entry."""
        self._opened = True
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Clean up resources on context exit."""
        await self.close()

    async def close(self) -> None:
        """Close all resources."""
        for registry in self._registries.values():
            await registry.close_all()
        self._registries.clear()
        self._opened = False

    def _ensure_initialized(self) -> None:
        """Ensure client is initialized."""
        if not self._opened:
            raise RuntimeError(
                "Client not initialized. Use 'async with MirrorSearchClient() as client:'"
            )

    def registry(self, network: str | None = None) -> ResolverRegistry:
        """
        Get the resolver registry for a network, creating it on first use.

        Raises:
            UnknownNetworkError: If the network is not configured
        """
        name = self._settings.get_network(network).name
        if name not in self._registries:
            logger.debug(f"Creating resolver registry for {name}")
            self._registries[name] = ResolverRegistry.for_network(self._settings, name)
        return self._registries[name]

    async def search(self, query: str, network: str | None = None) -> ResolutionResult:
        """
        Resolve a search string.

        Args:
            query: Entity id, transaction id, hash, alias, EVM address or public key
            network: Network name (default network if not provided)

        Returns:
            The merged result of every lookup the query routed to
        """
        self._ensure_initialized()
        request = SearchRequest(
            query,
            network,
            registry=self.registry(network),
            settings=self._settings,
        )
        return await request.run()

    async def get_account(self, query: str, network: str | None = None) -> Account:
        """
        Resolve a query that must designate an account.

        Raises:
            NotFoundError: If no account matches
        """
        result = await self.search(query, network)
        if result.account is not None:
            return result.account
        if result.accounts_with_key:
            return result.accounts_with_key[0]
        raise NotFoundError(f"No account found for {query!r}", {"network": network})

    def detect(self, query: str, network: str | None = None) -> CandidateSet:
        """
        Decode a query without issuing any lookup.

        Args:
            query: The input string to analyze
            network: Network whose ledger id validates checksums

        Returns:
            Candidates of the winning grammar
        """
        entry = self._settings.get_network(network)
        return IdentifierDetector(entry.ledger_id).detect(query)


# Convenience function for one-off searches
async def search(
    query: str,
    network: str | None = None,
    *,
    settings: MirrorSearchSettings | None = None,
) -> ResolutionResult:
    """
    Resolve a search string (convenience function).

    For multiple searches, use MirrorSearchClient for better performance.
    """
    async with MirrorSearchClient(settings) as client:
        return await client.search(query, network)
