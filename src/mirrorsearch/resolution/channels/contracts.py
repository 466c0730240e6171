"""Contract resolvers."""

from __future__ import annotations

from typing import Any, ClassVar

from mirrorsearch.core.codec import decode_hex, strip_hex_prefix
from mirrorsearch.core.identifiers import EVM_ADDRESS_LENGTH
from mirrorsearch.core.models import Contract, ContractResult, MirrorRecord
from mirrorsearch.core.types import Channel
from mirrorsearch.resolution.base import AbstractChannelResolver


class ContractResolver(AbstractChannelResolver[Contract]):
    """Contract lookup by entity id or EVM address."""

    CHANNEL: ClassVar[Channel] = Channel.CONTRACT
    RECORD_TYPE: ClassVar[type[MirrorRecord]] = Contract

    def build_request(self, key: str) -> tuple[str, dict[str, Any] | None]:
        data = decode_hex(key)
        if data is not None and len(data) == EVM_ADDRESS_LENGTH:
            # Mixed-case (EIP-55) and 0x-prefixed forms address the same contract
            key = strip_hex_prefix(key)
        return f"/contracts/{key}", None


class ContractResultResolver(AbstractChannelResolver[ContractResult]):
    """Contract call result by 32-byte EVM transaction hash."""

    CHANNEL: ClassVar[Channel] = Channel.CONTRACT_RESULT_BY_HASH
    RECORD_TYPE: ClassVar[type[MirrorRecord]] = ContractResult

    def build_request(self, key: str) -> tuple[str, dict[str, Any] | None]:
        return f"/contracts/results/{strip_hex_prefix(key)}", None
