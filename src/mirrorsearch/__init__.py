"""Mirrorsearch - identifier resolution for ledger explorer search."""

from mirrorsearch.client import MirrorSearchClient, search
from mirrorsearch.core.models import Account, Block, Contract, Token, Topic, Transaction
from mirrorsearch.core.types import Channel, Grammar, OutcomeStatus
from mirrorsearch.resolution.search import RawQuery, ResolutionResult, SearchRequest

__version__ = "0.1.0"
__all__ = [
    # Client
    "MirrorSearchClient",
    "search",
    # Types
    "Channel",
    "Grammar",
    "OutcomeStatus",
    # Models
    "Account",
    "Block",
    "Contract",
    "Token",
    "Topic",
    "Transaction",
    # Results
    "RawQuery",
    "ResolutionResult",
    "SearchRequest",
    # Version
    "__version__",
]
