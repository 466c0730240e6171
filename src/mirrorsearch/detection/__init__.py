"""Query decoding and channel routing."""

from .classifier import ROUTES, ChannelClassifier, Lookup, Route
from .identifier import (
    Alias,
    Base64Blob,
    CandidateSet,
    EvmAddress,
    HexBlob,
    IdentifierDetector,
    NumericId,
    ParsedIdentifier,
    PlainText,
    TransactionIdentifier,
)

__all__ = [
    "Alias",
    "Base64Blob",
    "CandidateSet",
    "ChannelClassifier",
    "EvmAddress",
    "HexBlob",
    "IdentifierDetector",
    "Lookup",
    "NumericId",
    "ParsedIdentifier",
    "PlainText",
    "ROUTES",
    "Route",
    "TransactionIdentifier",
]
