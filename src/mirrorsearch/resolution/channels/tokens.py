"""Token resolver."""

from __future__ import annotations

from typing import Any, ClassVar

from mirrorsearch.core.models import MirrorRecord, Token
from mirrorsearch.core.types import Channel
from mirrorsearch.resolution.base import AbstractChannelResolver


class TokenResolver(AbstractChannelResolver[Token]):
    CHANNEL: ClassVar[Channel] = Channel.TOKEN
    RECORD_TYPE: ClassVar[type[MirrorRecord]] = Token

    def build_request(self, key: str) -> tuple[str, dict[str, Any] | None]:
        return f"/tokens/{key}", None
