"""Tests for ResolverRegistry."""

from __future__ import annotations

import pytest
from httpx import Response

from mirrorsearch.core.exceptions import UnknownNetworkError
from mirrorsearch.core.types import Channel
from mirrorsearch.resolution.base import MirrorNodeConfig
from mirrorsearch.resolution.channels import AccountResolver, TokenResolver
from mirrorsearch.resolution.registry import ResolverRegistry



class TestResolverRegistry:
    """Tests for resolver registration and lookup."""

    async def test_for_network_covers_every_channel(self, registry):
        """A network registry should serve every channel."""
        assert sorted(registry.channels) == sorted(Channel)

    async def test_for_network_points_at_network(self, settings):
        """Every resolver should talk to the selected network."""
        registry = ResolverRegistry.for_network(settings, "testnet")

        assert registry.network.name == "testnet"
        assert registry.network.ledger_id == "01"
        assert registry.get(Channel.TOKEN).config.api_url == "https://testnet.mirrornode.hedera.com/api/v1"

    def test_for_network_default(self, settings):
        """Without a name the default network is used."""
        assert ResolverRegistry.for_network(settings).network.name == "mainnet"

    def test_for_unknown_network(self, settings):
        """Unknown networks should be rejected."""
        with pytest.raises(UnknownNetworkError) as exc_info:
            ResolverRegistry.for_network(settings, "devnet")

        assert exc_info.value.known == ["mainnet", "testnet", "previewnet"]

    def test_get_missing(self):
        """Asking for an unregistered channel should raise KeyError."""
        registry = ResolverRegistry()

        with pytest.raises(KeyError, match="topic"):
            registry.get(Channel.TOPIC)

    def test_register_replaces(self, mirror_config):
        """Registering a channel twice keeps the latest resolver."""
        registry = ResolverRegistry()
        first = TokenResolver(mirror_config)
        second = TokenResolver(MirrorNodeConfig(base_url="https://other.example.com"))

        registry.register(first)
        registry.register(second)

        assert registry.get(Channel.TOKEN) is second
        assert registry.channels == [Channel.TOKEN]

    async def test_close_all(self, mirror_config, respx_mock):
        """close_all should close every open client."""
        respx_mock.route().mock(return_value=Response(404))
        registry = ResolverRegistry()
        resolver = AccountResolver(mirror_config)
        registry.register(resolver)

        await resolver.lookup("0.0.1")
        assert resolver._client is not None

        await registry.close_all()
        assert resolver._client is None
