"""Pure parsing and formatting functions for identifier grammars.

Every decoder here is total: malformed input yields ``None`` rather than an
exception, so callers can try each grammar against any query string.
"""

from __future__ import annotations

import base64
import binascii
import re

from .identifiers import EVM_ADDRESS_LENGTH, EntityId, TransactionId

HEX_PATTERN = re.compile(r"^(?:0[xX])?([0-9a-fA-F]+)$")
BASE32_PATTERN = re.compile(r"^[A-Z2-7]+$")
BASE64_PATTERN = re.compile(r"^[A-Za-z0-9+/\-_]+={0,2}$")

# Unpadded base-32 text lengths that map to a whole number of bytes
_BASE32_VALID_REMAINDERS = frozenset({0, 2, 4, 5, 7})


def parse_numeric_id(
    text: str,
    ledger_id: str | None = None,
    *,
    auto_complete: bool = True,
) -> EntityId | None:
    """
    Parse ``shard.realm.num`` or ``shard.realm.num-checksum``.

    A checksum is only accepted when it matches the one computed for
    ``ledger_id``; otherwise the text is not a numeric id at all.
    """
    try:
        return EntityId.parse(text, ledger_id, auto_complete=auto_complete)
    except ValueError:
        return None


def parse_transaction_id(text: str, ledger_id: str | None = None) -> TransactionId | None:
    """Parse ``shard.realm.num-seconds[-nanos]`` or ``shard.realm.num@seconds[.nanos]``."""
    try:
        return TransactionId.parse(text, ledger_id)
    except ValueError:
        return None


def decode_hex(text: str) -> bytes | None:
    """Decode hex digits with an optional ``0x`` prefix."""
    match = HEX_PATTERN.match(text)
    if match is None:
        return None
    digits = match.group(1)
    if len(digits) % 2:
        return None
    return bytes.fromhex(digits)


def strip_hex_prefix(text: str) -> str:
    """Canonical hex form: no ``0x`` prefix, lower case."""
    text = text.strip()
    if text[:2].lower() == "0x":
        text = text[2:]
    return text.lower()


def decode_base32_alias(text: str) -> bytes | None:
    """Decode an unpadded RFC 4648 base-32 alias."""
    if not BASE32_PATTERN.match(text):
        return None
    if len(text) % 8 not in _BASE32_VALID_REMAINDERS:
        return None
    padded = text + "=" * (-len(text) % 8)
    try:
        return base64.b32decode(padded)
    except binascii.Error:
        return None


def encode_base32_alias(data: bytes) -> str:
    """Encode bytes as unpadded base-32 alias text."""
    return base64.b32encode(data).decode("ascii").rstrip("=")


def decode_base64(text: str) -> bytes | None:
    """Decode standard or URL-safe base-64; padding must be correct."""
    if not BASE64_PATTERN.match(text) or len(text) % 4:
        return None
    standard = text.replace("-", "+").replace("_", "/")
    try:
        return base64.b64decode(standard, validate=True)
    except binascii.Error:
        return None


def normalize_to_evm_address(data: bytes) -> str | None:
    """
    Zero-extend ``data`` on the left to 20 bytes.

    Returns the ``0x``-prefixed address, or ``None`` when ``data`` is longer
    than an address. No hashing is involved.
    """
    if len(data) > EVM_ADDRESS_LENGTH:
        return None
    padded = bytes(EVM_ADDRESS_LENGTH - len(data)) + data
    return "0x" + padded.hex()


def entity_id_from_evm_address(address: bytes) -> EntityId | None:
    """Entity id of a long-zero address, ``None`` for any other address."""
    try:
        return EntityId.from_evm_address(address)
    except ValueError:
        return None
