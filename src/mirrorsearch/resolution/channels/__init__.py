"""Mirror node resolvers, one per lookup channel."""

from .accounts import AccountResolver, AccountsByPublicKeyResolver
from .blocks import BlockResolver
from .contracts import ContractResolver, ContractResultResolver
from .tokens import TokenResolver
from .topics import TopicResolver
from .transactions import TransactionByTimestampResolver, TransactionResolver

# Every channel has exactly one resolver class
RESOLVER_CLASSES = (
    AccountResolver,
    AccountsByPublicKeyResolver,
    ContractResolver,
    ContractResultResolver,
    TokenResolver,
    TopicResolver,
    TransactionResolver,
    TransactionByTimestampResolver,
    BlockResolver,
)

__all__ = [
    "AccountResolver",
    "AccountsByPublicKeyResolver",
    "BlockResolver",
    "ContractResolver",
    "ContractResultResolver",
    "RESOLVER_CLASSES",
    "TokenResolver",
    "TopicResolver",
    "TransactionByTimestampResolver",
    "TransactionResolver",
]
