"""Candidate decoding of search queries against every identifier grammar."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, TypeVar, Union

from mirrorsearch.core.codec import (
    decode_base32_alias,
    decode_base64,
    decode_hex,
    encode_base32_alias,
    entity_id_from_evm_address,
    normalize_to_evm_address,
    parse_numeric_id,
    parse_transaction_id,
)
from mirrorsearch.core.identifiers import EVM_ADDRESS_LENGTH, EntityId, TransactionId
from mirrorsearch.core.types import GRAMMAR_PRECEDENCE, Grammar

# EVM transaction hash, ED25519 public key, or a block hash prefix
HASH_LENGTH = 32
# SHA-384 transaction hash or full block hash
LEDGER_HASH_LENGTH = 48
# Compressed ECDSA secp256k1 public key; also read as a hex alias
COMPRESSED_KEY_LENGTH = 33

# Hex blobs of these lengths have a dedicated meaning; any other length is read as an alias
_FIXED_HEX_LENGTHS = frozenset({EVM_ADDRESS_LENGTH, HASH_LENGTH, LEDGER_HASH_LENGTH})


@dataclass(frozen=True)
class NumericId:
    entity_id: EntityId
    grammar: Grammar = Grammar.NUMERIC_ID


@dataclass(frozen=True)
class TransactionIdentifier:
    transaction_id: TransactionId
    grammar: Grammar = Grammar.TRANSACTION_ID


@dataclass(frozen=True)
class Alias:
    """Base-32 alias text, typed directly or re-encoded from hex."""

    text: str
    grammar: Grammar = Grammar.BASE32_ALIAS


@dataclass(frozen=True)
class EvmAddress:
    """20-byte EVM address, possibly zero-extended from a shorter hex blob."""

    address: bytes
    grammar: Grammar = Grammar.HEX

    @property
    def hex(self) -> str:
        return self.address.hex()

    @property
    def text(self) -> str:
        return "0x" + self.address.hex()

    @property
    def entity_id(self) -> EntityId | None:
        """Entity id for long-zero addresses."""
        return entity_id_from_evm_address(self.address)


@dataclass(frozen=True)
class HexBlob:
    data: bytes
    grammar: Grammar = Grammar.HEX

    @property
    def hex(self) -> str:
        return self.data.hex()


@dataclass(frozen=True)
class Base64Blob:
    data: bytes
    grammar: Grammar = Grammar.BASE64

    @property
    def hex(self) -> str:
        return self.data.hex()


@dataclass(frozen=True)
class PlainText:
    text: str
    grammar: Grammar = Grammar.PLAIN_TEXT


ParsedIdentifier = Union[
    NumericId,
    TransactionIdentifier,
    Alias,
    EvmAddress,
    HexBlob,
    Base64Blob,
    PlainText,
]

ParsedT = TypeVar("ParsedT")


@dataclass(frozen=True)
class CandidateSet:
    """
    Every interpretation of one query string.

    A query may decode under several grammars at once (a 64-digit hex string
    is also valid base-64). All of them are kept; ``primary()`` narrows the
    set to the grammar that wins under ``GRAMMAR_PRECEDENCE``.
    """

    query: str
    candidates: tuple[ParsedIdentifier, ...] = ()

    def __iter__(self) -> Iterator[ParsedIdentifier]:
        return iter(self.candidates)

    def __len__(self) -> int:
        return len(self.candidates)

    @property
    def grammars(self) -> tuple[Grammar, ...]:
        """Grammars present in the set, in precedence order."""
        present = {c.grammar for c in self.candidates}
        return tuple(g for g in GRAMMAR_PRECEDENCE if g in present)

    @property
    def primary_grammar(self) -> Grammar | None:
        grammars = self.grammars
        return grammars[0] if grammars else None

    def for_grammar(self, grammar: Grammar) -> CandidateSet:
        return CandidateSet(
            query=self.query,
            candidates=tuple(c for c in self.candidates if c.grammar == grammar),
        )

    def primary(self) -> CandidateSet:
        """Candidates of the winning grammar only."""
        grammar = self.primary_grammar
        if grammar is None:
            return self
        return self.for_grammar(grammar)

    def of_type(self, variant: type[ParsedT]) -> list[ParsedT]:
        return [c for c in self.candidates if isinstance(c, variant)]

    @property
    def ethereum_address(self) -> str | None:
        """Normalized address of the first EVM address candidate, if any."""
        addresses = self.of_type(EvmAddress)
        return addresses[0].text if addresses else None

    def __repr__(self) -> str:
        grammars = ", ".join(g.value for g in self.grammars)
        return f"CandidateSet(query={self.query!r}, grammars=[{grammars}], count={len(self)})"


class IdentifierDetector:
    """Decodes a query string against every identifier grammar."""

    def __init__(self, ledger_id: str | None = None, *, auto_complete: bool = True) -> None:
        """
        Args:
            ledger_id: Hex ledger id used to verify entity id checksums. Without
                one, ids carrying a checksum are rejected.
            auto_complete: Accept ``num`` and ``realm.num`` as ``0.0.num`` and ``0.realm.num``.
        """
        self.ledger_id = ledger_id
        self.auto_complete = auto_complete

    def detect(self, query: str) -> CandidateSet:
        """Return the candidates that will be routed: those of the winning grammar."""
        return self.detect_all(query).primary()

    def detect_all(self, query: str) -> CandidateSet:
        """
        Return every interpretation of the input, in decode order.

        Nothing is discarded here; precedence is applied by ``CandidateSet.primary``.
        """
        text = query.strip()
        if not text:
            return CandidateSet(query=query)

        candidates: list[ParsedIdentifier] = []
        candidates.extend(self._try_numeric_id(text))
        candidates.extend(self._try_transaction_id(text))
        candidates.extend(self._try_hex(text))
        candidates.extend(self._try_base32_alias(text))
        candidates.extend(self._try_base64(text))

        if not candidates:
            candidates.append(PlainText(text=text))

        return CandidateSet(query=query, candidates=tuple(candidates))

    def _try_numeric_id(self, text: str) -> list[ParsedIdentifier]:
        entity_id = parse_numeric_id(text, self.ledger_id, auto_complete=self.auto_complete)
        if entity_id is None:
            return []
        return [NumericId(entity_id=entity_id)]

    def _try_transaction_id(self, text: str) -> list[ParsedIdentifier]:
        transaction_id = parse_transaction_id(text, self.ledger_id)
        if transaction_id is None:
            return []
        return [TransactionIdentifier(transaction_id=transaction_id)]

    def _try_hex(self, text: str) -> list[ParsedIdentifier]:
        """Hex is the most ambiguous grammar: one blob may yield up to three candidates."""
        data = decode_hex(text)
        if data is None:
            return []

        results: list[ParsedIdentifier] = []
        if len(data) not in _FIXED_HEX_LENGTHS:
            # An alias expressed in hex; alias lookups are issued first
            results.append(Alias(text=encode_base32_alias(data), grammar=Grammar.HEX))
        if normalize_to_evm_address(data) is not None:
            results.append(EvmAddress(address=bytes(EVM_ADDRESS_LENGTH - len(data)) + data))
        results.append(HexBlob(data=data))
        return results

    def _try_base32_alias(self, text: str) -> list[ParsedIdentifier]:
        if decode_base32_alias(text) is None:
            return []
        return [Alias(text=text)]

    def _try_base64(self, text: str) -> list[ParsedIdentifier]:
        data = decode_base64(text)
        if data is None:
            return []
        return [Base64Blob(data=data)]
