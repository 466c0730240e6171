"""Block resolver."""

from __future__ import annotations

from typing import Any, ClassVar

from mirrorsearch.core.codec import strip_hex_prefix
from mirrorsearch.core.models import Block, MirrorRecord
from mirrorsearch.core.types import Channel
from mirrorsearch.resolution.base import AbstractChannelResolver


class BlockResolver(AbstractChannelResolver[Block]):
    """Block by full 48-byte hash or by its 32-byte prefix."""

    CHANNEL: ClassVar[Channel] = Channel.BLOCK
    RECORD_TYPE: ClassVar[type[MirrorRecord]] = Block

    def build_request(self, key: str) -> tuple[str, dict[str, Any] | None]:
        return f"/blocks/{strip_hex_prefix(key)}", None
