"""Transaction resolvers."""

from __future__ import annotations

from typing import Any, ClassVar

from mirrorsearch.core.models import MirrorRecord, Transaction
from mirrorsearch.core.types import Channel
from mirrorsearch.resolution.base import AbstractChannelResolver


class TransactionResolver(AbstractChannelResolver[Transaction]):
    """
    Transactions by transaction id or 48-byte transaction hash.

    One id can match several transactions (the user transaction and its
    child or scheduled transactions); they are kept in service order.
    """

    CHANNEL: ClassVar[Channel] = Channel.TRANSACTION
    RECORD_TYPE: ClassVar[type[MirrorRecord]] = Transaction
    RESULTS_KEY: ClassVar[str | None] = "transactions"

    def build_request(self, key: str) -> tuple[str, dict[str, Any] | None]:
        return f"/transactions/{key}", None


class TransactionByTimestampResolver(AbstractChannelResolver[Transaction]):
    """Transactions at an exact consensus timestamp (``seconds.nanos``)."""

    CHANNEL: ClassVar[Channel] = Channel.TRANSACTION_BY_TIMESTAMP
    RECORD_TYPE: ClassVar[type[MirrorRecord]] = Transaction
    RESULTS_KEY: ClassVar[str | None] = "transactions"

    def build_request(self, key: str) -> tuple[str, dict[str, Any] | None]:
        return "/transactions", {"timestamp": key}
