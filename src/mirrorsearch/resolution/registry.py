"""Resolver registry for managing and creating channel resolver instances."""

from __future__ import annotations

from typing import TYPE_CHECKING

from mirrorsearch.core.types import Channel
from mirrorsearch.resolution.base import AbstractChannelResolver, MirrorNodeConfig
from mirrorsearch.resolution.channels import RESOLVER_CLASSES

if TYPE_CHECKING:
    from mirrorsearch.config import MirrorSearchSettings, NetworkEntry


class ResolverRegistry:
    """
    Factory for creating and managing resolver instances.

    One registry serves one network: every resolver in it talks to the same
    mirror node, and they share nothing but configuration.
    """

    def __init__(self, network: "NetworkEntry | None" = None) -> None:
        self.network = network
        self._resolvers: dict[Channel, AbstractChannelResolver] = {}

    @property
    def channels(self) -> list[Channel]:
        return list(self._resolvers)

    def register(self, resolver: AbstractChannelResolver) -> None:
        """Register a resolver, replacing any previous one for its channel."""
        self._resolvers[resolver.channel] = resolver

    def get(self, channel: Channel) -> AbstractChannelResolver:
        """
        Get the resolver for a channel.

        Raises:
            KeyError: If no resolver is registered for the channel
        """
        try:
            return self._resolvers[channel]
        except KeyError:
            raise KeyError(f"No resolver registered for channel: {channel}") from None

    @classmethod
    def for_network(
        cls,
        settings: "MirrorSearchSettings",
        network: str | None = None,
    ) -> "ResolverRegistry":
        """
        Create a registry with every channel resolver pointed at one network.

        Raises:
            UnknownNetworkError: If the network is not configured
        """
        entry = settings.get_network(network)
        config = MirrorNodeConfig.from_settings(settings, entry)

        registry = cls(entry)
        for resolver_class in RESOLVER_CLASSES:
            registry.register(resolver_class(config))
        return registry

    async def close_all(self) -> None:
        """Close all registered resolvers."""
        for resolver in self._resolvers.values():
            await resolver.close()
