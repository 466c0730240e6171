"""Shared test fixtures for all tests."""

from __future__ import annotations

import base64
from dataclasses import dataclass
from typing import Any

import pytest

from mirrorsearch.config import MirrorSearchSettings, NetworkEntry
from mirrorsearch.core.codec import encode_base32_alias
from mirrorsearch.core.identifiers import EntityId

MAINNET_URL = "https://mainnet-public.mirrornode.hedera.com"
TESTNET_URL = "https://testnet.mirrornode.hedera.com"

# Hex strings are spelled out in 16-digit chunks so their lengths are easy to check
PUBLIC_KEY = "".join(["aa2f7b3e759f4531", "ec2e7941afa449e6", "a6e610efb52adae8", "9f9cfdc0d4d1e9f0"])
ECDSA_KEY = "02" + "".join(["3c4a7e5f0d1b2c9a", "8e7f6d5c4b3a2918", "0f1e2d3c4b5a6978", "8796a5b4c3d2e1f0"])
EVM_HASH = "".join(["d2c3f6a3b4e5c6d7", "e8f9a0b1c2d3e4f5", "a6b7c8d9e0f1a2b3", "c4d5e6f7a8b9c0d1"])
BLOCK_HASH = "".join(
    [
        "b0f4fb8e8b1a0a4c",
        "d3e5c7a9b1f2e3d4",
        "c5b6a7f8e9d0c1b2",
        "a3f4e5d6c7b8a9f0",
        "e1d2c3b4a5f6e7d8",
        "c9b0a1f2e3d4c5b6",
    ]
)
TRANSACTION_HASH_BYTES = bytes(range(48))


@dataclass(frozen=True)
class MirrorSamples:
    """Sample mirror node responses and the identifiers that reach them."""

    account_id: str = "0.0.730631"
    contract_id: str = "0.0.749775"
    token_id: str = "0.0.29662956"
    topic_id: str = "0.0.120438"
    transaction_id: str = "0.0.29624024-1646025139-152901498"
    consensus_timestamp: str = "1646025151.667604000"
    public_key: str = PUBLIC_KEY
    ecdsa_public_key: str = ECDSA_KEY
    evm_hash: str = EVM_HASH
    block_hash: str = BLOCK_HASH
    transaction_hash_bytes: bytes = TRANSACTION_HASH_BYTES
    # 17 bytes: too short for an address, so it is read as an alias and a zero-extended address
    short_hex: str = "0102030405060708090102030405060708"
    short_hex_alias: str = "AEBAGBAFAYDQQCIBAIBQIBIGA4EA"

    @property
    def alias(self) -> str:
        # ED25519 key alias: protobuf Key header followed by the raw key
        return encode_base32_alias(bytes.fromhex("1220" + self.public_key))

    @property
    def account_address(self) -> str:
        return EntityId.parse(self.account_id).to_evm_address()

    @property
    def contract_address(self) -> str:
        return "0x" + EntityId.parse(self.contract_id).to_evm_address()

    @property
    def token_address(self) -> str:
        return EntityId.parse(self.token_id).to_evm_address()

    @property
    def transaction_hash(self) -> str:
        """Hex form of the transaction hash, as typed in the search box."""
        return self.transaction_hash_bytes.hex()

    @property
    def transaction_hash_base64(self) -> str:
        return base64.b64encode(self.transaction_hash_bytes).decode("ascii")

    @property
    def block_hash_prefix(self) -> str:
        return self.block_hash[:64]

    # ------------------------------------------------------------------
    # Response bodies
    # ------------------------------------------------------------------

    @property
    def account(self) -> dict[str, Any]:
        return {
            "account": self.account_id,
            "alias": self.alias,
            "evm_address": "0x" + self.account_address,
            "key": {"_type": "ED25519", "key": self.public_key},
            "balance": {
                "balance": 2342647909,
                "timestamp": "1646025139.152901498",
                "tokens": [],
            },
            "deleted": False,
            "memo": "",
            "created_timestamp": "1644416155.117478800",
            "auto_renew_period": 7776000,
        }

    @property
    def accounts(self) -> dict[str, Any]:
        return {"accounts": [self.account], "links": {"next": None}}

    @property
    def contract(self) -> dict[str, Any]:
        return {
            "contract_id": self.contract_id,
            "evm_address": self.contract_address,
            "admin_key": {"_type": "ProtobufEncoded", "key": "7b2231222c2232222c2233227d"},
            "file_id": "0.0.749773",
            "memo": "Mirror Node acceptance test",
            "created_timestamp": "1646025151.667604000",
            "deleted": False,
        }

    @property
    def contract_result(self) -> dict[str, Any]:
        return {
            "hash": "0x" + self.evm_hash,
            "timestamp": self.consensus_timestamp,
            "contract_id": self.contract_id,
            "from": "0x" + self.account_address,
            "to": self.contract_address,
            "result": "SUCCESS",
            "status": "0x1",
            "gas_used": 80000,
        }

    @property
    def token(self) -> dict[str, Any]:
        return {
            "token_id": self.token_id,
            "name": "23423",
            "symbol": "QmVGABnvpbPwLcfG4iuW2JSzY8MLkALhd54bdPAbJxoEkB",
            "type": "NON_FUNGIBLE_UNIQUE",
            "decimals": "0",
            "total_supply": "1",
            "treasury_account_id": "0.0.29624024",
        }

    @property
    def topic(self) -> dict[str, Any]:
        return {
            "topic_id": self.topic_id,
            "memo": "Mirror Node acceptance test",
            "admin_key": {"_type": "ED25519", "key": self.public_key},
            "submit_key": None,
            "created_timestamp": "1647033467.542637000",
            "deleted": False,
        }

    @property
    def transaction(self) -> dict[str, Any]:
        return {
            "transaction_id": self.transaction_id,
            "consensus_timestamp": self.consensus_timestamp,
            "transaction_hash": self.transaction_hash_base64,
            "name": "CRYPTOTRANSFER",
            "result": "SUCCESS",
            "charged_tx_fee": 470065,
            "memo_base64": "",
            "nonce": 0,
            "scheduled": False,
            "transfers": [
                {"account": "0.0.29624024", "amount": -470065},
                {"account": "0.0.98", "amount": 470065},
            ],
        }

    @property
    def transactions(self) -> dict[str, Any]:
        return {"transactions": [self.transaction], "links": {"next": None}}

    @property
    def block(self) -> dict[str, Any]:
        return {
            "number": 25175998,
            "hash": "0x" + self.block_hash,
            "previous_hash": "0x" + "ab" * 48,
            "count": 3,
            "timestamp": {"from": "1646025151.667604000", "to": "1646025153.000000000"},
            "name": "2022-02-28T05_12_31.667604000Z.rcd",
            "gas_used": 0,
            "hapi_version": "0.22.0",
        }


# ============================================================================
# Sample Data Fixtures
# ============================================================================


@pytest.fixture
def samples() -> MirrorSamples:
    """Sample identifiers and mirror node response bodies."""
    return MirrorSamples()


# ============================================================================
# Settings Fixtures
# ============================================================================


@pytest.fixture
def networks() -> list[NetworkEntry]:
    """The three public networks."""
    return [
        NetworkEntry(name="mainnet", mirror_node_url=MAINNET_URL, ledger_id="00"),
        NetworkEntry(name="testnet", mirror_node_url=TESTNET_URL, ledger_id="01"),
        NetworkEntry(
            name="previewnet",
            mirror_node_url="https://previewnet.mirrornode.hedera.com",
            ledger_id="02",
        ),
    ]


@pytest.fixture
def settings(networks: list[NetworkEntry]) -> MirrorSearchSettings:
    """Settings independent of the environment."""
    return MirrorSearchSettings(
        networks=networks,
        default_network="mainnet",
        api_prefix="/api/v1",
        request_timeout=5.0,
        public_key_lookup_limit=2,
        user_agent="mirrorsearch-tests",
        log_level="DEBUG",
    )


@pytest.fixture
def mirror_url() -> str:
    """REST API root of the mainnet mirror node."""
    return f"{MAINNET_URL}/api/v1"
