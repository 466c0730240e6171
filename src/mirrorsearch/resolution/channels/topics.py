"""Topic resolver."""

from __future__ import annotations

from typing import Any, ClassVar

from mirrorsearch.core.models import MirrorRecord, Topic
from mirrorsearch.core.types import Channel
from mirrorsearch.resolution.base import AbstractChannelResolver


class TopicResolver(AbstractChannelResolver[Topic]):
    CHANNEL: ClassVar[Channel] = Channel.TOPIC
    RECORD_TYPE: ClassVar[type[MirrorRecord]] = Topic

    def build_request(self, key: str) -> tuple[str, dict[str, Any] | None]:
        return f"/topics/{key}", None
