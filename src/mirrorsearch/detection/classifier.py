"""Routing of decoded identifiers to mirror node lookup channels.

The routing table below is the single place that decides which channels a
query shape is plausible for. Adding a grammar or an entity kind means adding
a row, not new control flow.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable

from mirrorsearch.core.types import Channel
from mirrorsearch.detection.identifier import (
    COMPRESSED_KEY_LENGTH,
    HASH_LENGTH,
    LEDGER_HASH_LENGTH,
    Alias,
    Base64Blob,
    CandidateSet,
    EvmAddress,
    HexBlob,
    NumericId,
    TransactionIdentifier,
)


@dataclass(frozen=True)
class Lookup:
    """One concrete request: a channel and the key to look up."""

    channel: Channel
    key: str

    def __str__(self) -> str:
        return f"{self.channel.value}:{self.key}"


def _always(candidate: Any) -> bool:
    return True


@dataclass(frozen=True)
class Route:
    """Routing table row: which channels a candidate variant is tried against."""

    variant: type
    channels: tuple[Channel, ...]
    key: Callable[[Any], str]
    when: Callable[[Any], bool] = _always

    def matches(self, candidate: Any) -> bool:
        return isinstance(candidate, self.variant) and self.when(candidate)


ROUTES: tuple[Route, ...] = (
    # A numeric triple is valid for all four entity kinds; only the network disambiguates
    Route(
        NumericId,
        (Channel.ACCOUNT, Channel.CONTRACT, Channel.TOKEN, Channel.TOPIC),
        key=lambda c: str(c.entity_id),
    ),
    Route(
        TransactionIdentifier,
        (Channel.TRANSACTION,),
        key=lambda c: str(c.transaction_id),
    ),
    Route(
        Alias,
        (Channel.ACCOUNT,),
        key=lambda c: c.text,
    ),
    Route(
        EvmAddress,
        (Channel.ACCOUNT, Channel.CONTRACT),
        key=lambda c: c.hex,
    ),
    # Tokens are only addressable by id, so only long-zero addresses reach them
    Route(
        EvmAddress,
        (Channel.TOKEN,),
        key=lambda c: str(c.entity_id),
        when=lambda c: c.entity_id is not None,
    ),
    Route(
        HexBlob,
        (Channel.CONTRACT_RESULT_BY_HASH, Channel.BLOCK, Channel.ACCOUNTS_BY_PUBLIC_KEY),
        key=lambda c: c.hex,
        when=lambda c: len(c.data) == HASH_LENGTH,
    ),
    Route(
        HexBlob,
        (Channel.ACCOUNTS_BY_PUBLIC_KEY,),
        key=lambda c: c.hex,
        when=lambda c: len(c.data) == COMPRESSED_KEY_LENGTH,
    ),
    Route(
        HexBlob,
        (Channel.TRANSACTION, Channel.BLOCK),
        key=lambda c: c.hex,
        when=lambda c: len(c.data) == LEDGER_HASH_LENGTH,
    ),
    Route(
        Base64Blob,
        (Channel.TRANSACTION, Channel.BLOCK),
        key=lambda c: c.hex,
        when=lambda c: len(c.data) == LEDGER_HASH_LENGTH,
    ),
)


class ChannelClassifier:
    """Maps a candidate set to the ordered lookups worth issuing."""

    def __init__(self, routes: tuple[Route, ...] = ROUTES) -> None:
        self._routes = routes

    def plan(self, candidates: CandidateSet) -> list[Lookup]:
        """
        Build the lookups for the winning grammar of ``candidates``.

        Lookups follow routing table order and are de-duplicated. An empty
        list means the query matched no grammar.
        """
        routed = candidates.primary()
        lookups: list[Lookup] = []
        for route in self._routes:
            for candidate in routed:
                if route.matches(candidate):
                    key = route.key(candidate)
                    lookups.extend(Lookup(channel, key) for channel in route.channels)
        return list(dict.fromkeys(lookups))
