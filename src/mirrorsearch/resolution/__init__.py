"""Resolution layer for looking up identifiers on a mirror node."""

from mirrorsearch.resolution.base import (
    AbstractChannelResolver,
    ChannelOutcome,
    MirrorNodeConfig,
)
from mirrorsearch.resolution.registry import ResolverRegistry
from mirrorsearch.resolution.search import RawQuery, ResolutionResult, SearchRequest

__all__ = [
    # Base
    "AbstractChannelResolver",
    "ChannelOutcome",
    "MirrorNodeConfig",
    # Registry
    "ResolverRegistry",
    # Search
    "RawQuery",
    "ResolutionResult",
    "SearchRequest",
]
