"""Core types, models, and identifier codecs."""

from .codec import (
    decode_base32_alias,
    decode_base64,
    decode_hex,
    encode_base32_alias,
    entity_id_from_evm_address,
    normalize_to_evm_address,
    parse_numeric_id,
    parse_transaction_id,
    strip_hex_prefix,
)
from .exceptions import (
    LookupFailedError,
    LookupTimeoutError,
    MirrorSearchError,
    NotFoundError,
    ServiceUnavailableError,
    UnknownNetworkError,
    ValidationError,
)
from .identifiers import EntityId, TransactionId
from .models import (
    Account,
    Balance,
    Block,
    Contract,
    ContractResult,
    Key,
    MirrorRecord,
    Token,
    Topic,
    Transaction,
)
from .types import GRAMMAR_PRECEDENCE, Channel, Grammar, OutcomeStatus

__all__ = [
    # Types
    "Channel",
    "GRAMMAR_PRECEDENCE",
    "Grammar",
    "OutcomeStatus",
    # Identifiers
    "EntityId",
    "TransactionId",
    # Codec
    "decode_base32_alias",
    "decode_base64",
    "decode_hex",
    "encode_base32_alias",
    "entity_id_from_evm_address",
    "normalize_to_evm_address",
    "parse_numeric_id",
    "parse_transaction_id",
    "strip_hex_prefix",
    # Models
    "Account",
    "Balance",
    "Block",
    "Contract",
    "ContractResult",
    "Key",
    "MirrorRecord",
    "Token",
    "Topic",
    "Transaction",
    # Exceptions
    "LookupFailedError",
    "LookupTimeoutError",
    "MirrorSearchError",
    "NotFoundError",
    "ServiceUnavailableError",
    "UnknownNetworkError",
    "ValidationError",
]
