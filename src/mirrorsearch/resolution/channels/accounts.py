"""Account resolvers: by id, alias or EVM address, and by public key."""

from __future__ import annotations

from typing import Any, ClassVar

from mirrorsearch.core.models import Account, MirrorRecord
from mirrorsearch.core.types import Channel
from mirrorsearch.resolution.base import AbstractChannelResolver


class AccountResolver(AbstractChannelResolver[Account]):
    """
    Single account lookup.

    The mirror node accepts an entity id, a base-32 alias or a bare 40-hex
    EVM address on the same path.
    """

    CHANNEL: ClassVar[Channel] = Channel.ACCOUNT
    RECORD_TYPE: ClassVar[type[MirrorRecord]] = Account

    def build_request(self, key: str) -> tuple[str, dict[str, Any] | None]:
        return f"/accounts/{key}", None


class AccountsByPublicKeyResolver(AbstractChannelResolver[Account]):
    """Accounts whose key matches a public key, first page only."""

    CHANNEL: ClassVar[Channel] = Channel.ACCOUNTS_BY_PUBLIC_KEY
    RECORD_TYPE: ClassVar[type[MirrorRecord]] = Account
    RESULTS_KEY: ClassVar[str | None] = "accounts"

    def build_request(self, key: str) -> tuple[str, dict[str, Any] | None]:
        return "/accounts", {
            "account.publickey": key,
            "limit": self.config.public_key_lookup_limit,
        }
