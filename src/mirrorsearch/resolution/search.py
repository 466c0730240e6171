"""Search request orchestration: decode, route, look up concurrently, merge."""

from __future__ import annotations

import asyncio
import logging
import time
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from mirrorsearch.config import get_settings
from mirrorsearch.core.exceptions import ValidationError
from mirrorsearch.core.models import Account, Block, Contract, Token, Topic, Transaction
from mirrorsearch.core.types import Channel, OutcomeStatus
from mirrorsearch.detection.classifier import ChannelClassifier, Lookup
from mirrorsearch.detection.identifier import CandidateSet, IdentifierDetector
from mirrorsearch.resolution.base import ChannelOutcome
from mirrorsearch.resolution.registry import ResolverRegistry

if TYPE_CHECKING:
    from mirrorsearch.config import MirrorSearchSettings

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RawQuery:
    """User-typed search text and the network it targets."""

    text: str
    network: str

    def __post_init__(self) -> None:
        if not isinstance(self.text, str):
            raise ValidationError(
                "Query text must be a string",
                {"type": type(self.text).__name__},
            )
        if not isinstance(self.network, str) or not self.network.strip():
            raise ValidationError("Network name must be a non-empty string")


@dataclass
class ResolutionResult:
    """
    Everything one search run found.

    Each slot is filled at most once per run, by the first successful
    outcome in plan order. Not-found outcomes leave no trace; failed
    outcomes only increment ``error_count``.
    """

    account: Account | None = None
    accounts_with_key: list[Account] = field(default_factory=list)
    transactions: list[Transaction] = field(default_factory=list)
    token_info: Token | None = None
    topic: Topic | None = None
    contract: Contract | None = None
    block: Block | None = None
    ethereum_address: str | None = None
    error_count: int = 0
    lookups: list[Lookup] = field(default_factory=list)

    def record_error(self) -> None:
        self.error_count += 1

    @property
    def found(self) -> bool:
        """Whether any slot was populated."""
        return bool(
            self.account
            or self.accounts_with_key
            or self.transactions
            or self.token_info
            or self.topic
            or self.contract
            or self.block
        )

    def apply(self, outcome: ChannelOutcome) -> None:
        """Merge one outcome into the result."""
        self.lookups.append(Lookup(outcome.channel, outcome.key))

        if outcome.failed:
            self.record_error()
            return
        if not outcome.success:
            return

        channel = outcome.channel
        if channel == Channel.ACCOUNT:
            if self.account is None:
                self.account = outcome.first
        elif channel == Channel.ACCOUNTS_BY_PUBLIC_KEY:
            if not self.accounts_with_key:
                self.accounts_with_key = list(outcome.records)
        elif channel == Channel.CONTRACT:
            if self.contract is None:
                self.contract = outcome.first
        elif channel == Channel.TOKEN:
            if self.token_info is None:
                self.token_info = outcome.first
        elif channel == Channel.TOPIC:
            if self.topic is None:
                self.topic = outcome.first
        elif channel in (Channel.TRANSACTION, Channel.TRANSACTION_BY_TIMESTAMP):
            if not self.transactions:
                self.transactions = list(outcome.records)
        elif channel == Channel.BLOCK:
            if self.block is None:
                self.block = outcome.first
        # A contract result has no slot of its own; its transaction comes from the follow-up lookup


class SearchRequest:
    """
    One search of one query against one network.

    Features:
    - Every routed lookup runs concurrently
    - A found contract result triggers one transaction lookup by timestamp
    - Business failures never raise; they are counted in ``error_count``
    """

    def __init__(
        self,
        query: RawQuery | str,
        network: str | None = None,
        *,
        registry: ResolverRegistry | None = None,
        settings: "MirrorSearchSettings | None" = None,
    ) -> None:
        """
        Args:
            query: The search text, or a prepared RawQuery
            network: Target network when ``query`` is a string; defaults to
                the configured default network
            registry: Resolvers to use; when omitted, one is created for the
                network on each run and closed afterwards
            settings: Settings to use instead of the cached environment settings

        Raises:
            ValidationError: If the query is malformed
            UnknownNetworkError: If the network is not configured
        """
        self.settings = settings or get_settings()

        if isinstance(query, RawQuery):
            self.query = query
        else:
            self.query = RawQuery(text=query, network=network or self.settings.default_network)

        self._network = self.settings.get_network(self.query.network)
        if registry is not None and registry.network is not None and registry.network.name != self._network.name:
            raise ValidationError(
                f"Registry serves {registry.network.name!r}, not {self._network.name!r}",
            )

        self._registry = registry
        self._detector = IdentifierDetector(self._network.ledger_id)
        self._classifier = ChannelClassifier()
        self.result = ResolutionResult()

    @property
    def searched_id(self) -> str:
        return self.query.text

    @property
    def network(self) -> str:
        return self._network.name

    def candidates(self) -> CandidateSet:
        """Candidates of the winning grammar for this query."""
        return self._detector.detect(self.query.text)

    async def run(self) -> ResolutionResult:
        """
        Execute the search.

        Each call starts from an empty result, so running a request twice
        issues the same lookups and produces an equal result.
        """
        start = time.monotonic()
        routed = self.candidates()
        lookups = self._classifier.plan(routed)
        result = ResolutionResult(ethereum_address=routed.ethereum_address)

        logger.debug(f"Query {self.query.text!r} on {self.network}: {routed!r}, {len(lookups)} lookups")

        if lookups:
            registry = self._registry or ResolverRegistry.for_network(self.settings, self.network)
            try:
                outcome_groups = await asyncio.gather(
                    *(self._run_lookup(registry, lookup) for lookup in lookups)
                )
            finally:
                if self._registry is None:
                    await registry.close_all()

            # Apply in plan order so the result does not depend on completion order
            for outcomes in outcome_groups:
                for outcome in outcomes:
                    result.apply(outcome)

        self.result = result
        duration_ms = (time.monotonic() - start) * 1000
        logger.info(
            f"Search {self.query.text!r} on {self.network}: "
            f"{len(result.lookups)} lookups, found={result.found}, "
            f"errors={result.error_count} ({duration_ms:.0f}ms)"
        )
        return result

    async def _run_lookup(
        self,
        registry: ResolverRegistry,
        lookup: Lookup,
    ) -> list[ChannelOutcome]:
        """Run one planned lookup, plus its dependent follow-up if it has one."""
        outcome = await self._try_lookup(registry, lookup)
        if lookup.channel != Channel.CONTRACT_RESULT_BY_HASH or not outcome.success:
            return [outcome]

        # The originating transaction is only reachable through the result's timestamp
        follow_up = Lookup(Channel.TRANSACTION_BY_TIMESTAMP, outcome.first.timestamp)
        return [outcome, await self._try_lookup(registry, follow_up)]

    async def _try_lookup(
        self,
        registry: ResolverRegistry,
        lookup: Lookup,
    ) -> ChannelOutcome[Any]:
        """Try a single lookup with error handling."""
        try:
            outcome = await registry.get(lookup.channel).lookup(lookup.key)
        except Exception as e:
            logger.exception(f"Lookup {lookup} failed: {e}")
            return ChannelOutcome(
                status=OutcomeStatus.ERROR,
                channel=lookup.channel,
                key=lookup.key,
                error_message=str(e),
            )

        logger.debug(f"Lookup {lookup}: {outcome.status} ({outcome.duration_ms:.0f}ms)")
        return outcome
