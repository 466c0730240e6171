"""Core enums and type definitions."""

from enum import StrEnum


class Channel(StrEnum):
    """Lookup endpoint categories the resolution engine may query."""

    ACCOUNT = "account"
    ACCOUNTS_BY_PUBLIC_KEY = "accounts_by_public_key"
    CONTRACT = "contract"
    CONTRACT_RESULT_BY_HASH = "contract_result_by_hash"
    TOKEN = "token"
    TOPIC = "topic"
    TRANSACTION = "transaction"
    TRANSACTION_BY_TIMESTAMP = "transaction_by_timestamp"
    BLOCK = "block"


class Grammar(StrEnum):
    """Textual identifier grammars, in precedence order."""

    NUMERIC_ID = "numeric_id"
    TRANSACTION_ID = "transaction_id"
    HEX = "hex"
    BASE32_ALIAS = "base32_alias"
    BASE64 = "base64"
    PLAIN_TEXT = "plain_text"


# When a query decodes under several grammars, the first one listed here wins
GRAMMAR_PRECEDENCE: tuple[Grammar, ...] = tuple(Grammar)


class OutcomeStatus(StrEnum):
    """Status of a single channel lookup."""

    SUCCESS = "success"
    NOT_FOUND = "not_found"
    ERROR = "error"
    TIMEOUT = "timeout"
