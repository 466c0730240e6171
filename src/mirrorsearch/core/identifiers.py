"""Identifier value objects with validation and normalization."""

from __future__ import annotations

import re
from typing import ClassVar

from pydantic import BaseModel, ConfigDict, Field

MAX_SHARD = 2**31 - 1
MAX_LONG = 2**63 - 1

EVM_ADDRESS_LENGTH = 20
_LONG_ZERO_PREFIX_LENGTH = 12


class EntityId(BaseModel):
    """Ledger entity identifier in ``shard.realm.num`` form."""

    model_config = ConfigDict(frozen=True)

    shard: int = Field(..., ge=0, le=MAX_SHARD)
    realm: int = Field(..., ge=0, le=MAX_LONG)
    num: int = Field(..., ge=0, le=MAX_LONG)
    checksum: str | None = Field(default=None, description="HIP-15 checksum as typed by the user")

    PATTERN: ClassVar[re.Pattern[str]] = re.compile(
        r"^(\d+)\.(\d+)\.(\d+)(?:-([a-z]{5}))?$",
        re.IGNORECASE | re.ASCII,
    )
    # "num" or "realm.num"; no leading zeros so hex-looking digit runs are not swallowed
    PARTIAL_PATTERN: ClassVar[re.Pattern[str]] = re.compile(
        r"^(?:(0|[1-9]\d*)\.)?(0|[1-9]\d*)$",
        re.ASCII,
    )

    @classmethod
    def parse(
        cls,
        value: str,
        ledger_id: str | None = None,
        *,
        auto_complete: bool = False,
    ) -> EntityId:
        """
        Parse an entity id, validating its checksum if one is present.

        Raises:
            ValueError: If the text is not an entity id or the checksum does not match.
        """
        value = value.strip()

        if match := cls.PATTERN.match(value):
            shard, realm, num, checksum = match.groups()
            entity = cls(shard=int(shard), realm=int(realm), num=int(num))
            if checksum is None:
                return entity
            checksum = checksum.lower()
            if ledger_id is None:
                raise ValueError(f"Cannot verify checksum without a ledger id: {value}")
            if entity.compute_checksum(ledger_id) != checksum:
                raise ValueError(f"Invalid entity id checksum: {value}")
            return entity.model_copy(update={"checksum": checksum})

        if auto_complete and (match := cls.PARTIAL_PATTERN.match(value)):
            realm, num = match.groups()
            return cls(shard=0, realm=int(realm or 0), num=int(num))

        raise ValueError(f"Invalid entity id format: {value}")

    def compute_checksum(self, ledger_id: str) -> str:
        """Compute the HIP-15 checksum of this id for the given hex ledger id."""
        address = str(self)
        digits = [10 if c == "." else int(c) for c in address]
        ledger_bytes = bytes.fromhex(ledger_id + "00" * 6)

        p3 = 26**3
        p5 = 26**5
        m = 1_000_003
        w = 31

        sd0 = sd1 = sd = 0
        for i, digit in enumerate(digits):
            sd = (w * sd + digit) % p3
            if i % 2 == 0:
                sd0 = (sd0 + digit) % 11
            else:
                sd1 = (sd1 + digit) % 11

        sh = 0
        for byte in ledger_bytes:
            sh = (w * sh + byte) % p5

        c = ((((len(address) % 5) * 11 + sd0) * 11 + sd1) * p3 + sd + sh) % p5
        cp = (c * m) % p5

        letters = []
        for _ in range(5):
            letters.append(chr(ord("a") + cp % 26))
            cp //= 26
        return "".join(reversed(letters))

    def to_evm_address(self) -> str:
        """Return the long-zero EVM address (40 hex digits, no prefix)."""
        return (
            self.shard.to_bytes(4, "big")
            + self.realm.to_bytes(8, "big")
            + self.num.to_bytes(8, "big")
        ).hex()

    @classmethod
    def from_evm_address(cls, address: bytes) -> EntityId:
        """
        Decode a long-zero EVM address.

        Raises:
            ValueError: If the address is not 20 bytes or not in long-zero form.
        """
        if len(address) != EVM_ADDRESS_LENGTH:
            raise ValueError(f"EVM address must be {EVM_ADDRESS_LENGTH} bytes, got {len(address)}")
        if any(address[:_LONG_ZERO_PREFIX_LENGTH]):
            raise ValueError(f"Not a long-zero address: 0x{address.hex()}")
        return cls(
            shard=int.from_bytes(address[0:4], "big"),
            realm=int.from_bytes(address[4:12], "big"),
            num=int.from_bytes(address[12:20], "big"),
        )

    def __str__(self) -> str:
        return f"{self.shard}.{self.realm}.{self.num}"


class TransactionId(BaseModel):
    """Transaction id: payer account plus valid-start timestamp."""

    model_config = ConfigDict(frozen=True)

    payer: EntityId
    seconds: int = Field(..., ge=0, le=MAX_LONG)
    nanos: int = Field(default=0, ge=0, le=999_999_999)

    # 0.0.123-1646025139-152901498 (nanos optional)
    DASH_PATTERN: ClassVar[re.Pattern[str]] = re.compile(
        r"^(\d+\.\d+\.\d+(?:-[a-z]{5})?)-(\d+)(?:-(\d{1,9}))?$",
        re.IGNORECASE | re.ASCII,
    )
    # 0.0.123@1646025139.152901498 (fraction optional)
    AT_PATTERN: ClassVar[re.Pattern[str]] = re.compile(
        r"^(\d+\.\d+\.\d+(?:-[a-z]{5})?)@(\d+)(?:\.(\d{1,9}))?$",
        re.IGNORECASE | re.ASCII,
    )

    @classmethod
    def parse(cls, value: str, ledger_id: str | None = None) -> TransactionId:
        """
        Parse a transaction id in dash or ``@`` form.

        Raises:
            ValueError: If the text is not a transaction id.
        """
        value = value.strip()

        if match := cls.DASH_PATTERN.match(value):
            payer, seconds, nanos = match.groups()
            nanos_value = int(nanos) if nanos else 0
        elif match := cls.AT_PATTERN.match(value):
            payer, seconds, fraction = match.groups()
            # Decimal fraction of a second
            nanos_value = int(fraction.ljust(9, "0")) if fraction else 0
        else:
            raise ValueError(f"Invalid transaction id format: {value}")

        return cls(
            payer=EntityId.parse(payer, ledger_id),
            seconds=int(seconds),
            nanos=nanos_value,
        )

    def __str__(self) -> str:
        return f"{self.payer}-{self.seconds}-{self.nanos:09d}"
