"""Domain models for mirror node resource representations.

Only the fields the resolution engine and its callers rely on are declared;
everything else the service returns is preserved as extra attributes.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class MirrorRecord(BaseModel):
    """Base class for all mirror node records."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    def to_dict(self) -> dict[str, Any]:
        """Return the record as the service sent it, including extra fields."""
        return self.model_dump(by_alias=True, exclude_none=True)


class Key(MirrorRecord):
    """Public key attached to an account, contract or token."""

    key_type: str | None = Field(default=None, alias="_type", description="ED25519, ECDSA_SECP256K1, ...")
    key: str = Field(..., description="Hex-encoded key")


class Balance(MirrorRecord):
    """Balance snapshot of an account."""

    balance: int | None = Field(default=None, description="Balance in tinybars")
    timestamp: str | None = None
    tokens: list[dict[str, Any]] = Field(default_factory=list)


class Account(MirrorRecord):
    """Account record."""

    account: str = Field(..., description="Account id (shard.realm.num)")
    alias: str | None = Field(default=None, description="Base-32 alias")
    evm_address: str | None = None
    key: Key | None = None
    balance: Balance | None = None
    deleted: bool | None = None
    memo: str | None = None
    created_timestamp: str | None = None


class Contract(MirrorRecord):
    """Smart contract record."""

    contract_id: str = Field(..., description="Contract id (shard.realm.num)")
    evm_address: str | None = None
    admin_key: Key | None = None
    file_id: str | None = None
    memo: str | None = None
    created_timestamp: str | None = None
    deleted: bool | None = None


class ContractResult(MirrorRecord):
    """Result of a contract call, looked up by EVM transaction hash."""

    hash: str = Field(..., description="EVM transaction hash")
    timestamp: str = Field(..., description="Consensus timestamp of the originating transaction")
    contract_id: str | None = None
    from_address: str | None = Field(default=None, alias="from")
    to_address: str | None = Field(default=None, alias="to")
    result: str | None = None
    status: str | None = None


class Token(MirrorRecord):
    """Fungible or non-fungible token record."""

    token_id: str = Field(..., description="Token id (shard.realm.num)")
    name: str | None = None
    symbol: str | None = None
    type: str | None = None
    decimals: str | int | None = None
    total_supply: str | int | None = None
    treasury_account_id: str | None = None


class Topic(MirrorRecord):
    """Consensus topic record."""

    topic_id: str = Field(..., description="Topic id (shard.realm.num)")
    memo: str | None = None
    admin_key: Key | None = None
    submit_key: Key | None = None
    created_timestamp: str | None = None
    deleted: bool | None = None


class Transaction(MirrorRecord):
    """Transaction record; one transaction id may map to several records."""

    transaction_id: str = Field(..., description="Transaction id (payer-seconds-nanos)")
    consensus_timestamp: str = Field(..., description="Consensus timestamp (seconds.nanos)")
    transaction_hash: str | None = Field(default=None, description="Base-64 transaction hash")
    name: str | None = Field(default=None, description="Transaction type, e.g. CRYPTOTRANSFER")
    result: str | None = None
    charged_tx_fee: int | None = None
    memo_base64: str | None = None
    nonce: int | None = None
    scheduled: bool | None = None


class Block(MirrorRecord):
    """Record file (block) record."""

    number: int = Field(..., description="Block number")
    hash: str = Field(..., description="0x-prefixed block hash")
    previous_hash: str | None = None
    count: int | None = Field(default=None, description="Number of transactions in the block")
    timestamp: dict[str, str | None] | None = None
    name: str | None = None
    gas_used: int | None = None
