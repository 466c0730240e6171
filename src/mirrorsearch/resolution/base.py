"""Abstract channel resolver with HTTP client management and outcome mapping."""

from __future__ import annotations

import logging
import time
from abc import ABC, abstractmethod
from contextlib import asynccontextmanager
from typing import TYPE_CHECKING, Any, AsyncIterator, ClassVar, Generic, TypeVar

import httpx
from pydantic import BaseModel, Field

from mirrorsearch.core.exceptions import LookupTimeoutError, ServiceUnavailableError
from mirrorsearch.core.models import MirrorRecord
from mirrorsearch.core.types import Channel, OutcomeStatus

if TYPE_CHECKING:
    from mirrorsearch.config import MirrorSearchSettings, NetworkEntry

logger = logging.getLogger(__name__)

RecordT = TypeVar("RecordT", bound=MirrorRecord)


class MirrorNodeConfig(BaseModel):
    """Connection settings for one network's mirror node."""

    base_url: str
    api_prefix: str = "/api/v1"
    timeout: float = 10.0
    user_agent: str = "mirrorsearch/0.1"
    public_key_lookup_limit: int = 2

    @property
    def api_url(self) -> str:
        return self.base_url.rstrip("/") + "/" + self.api_prefix.strip("/")

    @classmethod
    def from_settings(
        cls,
        settings: "MirrorSearchSettings",
        network: "NetworkEntry",
    ) -> "MirrorNodeConfig":
        return cls(
            base_url=network.mirror_node_url,
            api_prefix=settings.api_prefix,
            timeout=settings.request_timeout,
            user_agent=settings.user_agent,
            public_key_lookup_limit=settings.public_key_lookup_limit,
        )


class ChannelOutcome(BaseModel, Generic[RecordT]):
    """Result of a single channel lookup."""

    status: OutcomeStatus
    channel: Channel
    key: str
    records: list[Any] = Field(default_factory=list)
    error_message: str | None = None
    duration_ms: float = 0.0

    @property
    def success(self) -> bool:
        return self.status == OutcomeStatus.SUCCESS and len(self.records) > 0

    @property
    def not_found(self) -> bool:
        return self.status == OutcomeStatus.NOT_FOUND

    @property
    def failed(self) -> bool:
        """Whether the lookup counts towards the error tally."""
        return self.status in (OutcomeStatus.ERROR, OutcomeStatus.TIMEOUT)

    @property
    def first(self) -> Any | None:
        return self.records[0] if self.records else None


class AbstractChannelResolver(ABC, Generic[RecordT]):
    """
    Abstract base class for all channel resolvers.

    Provides:
    - HTTP client management with connection pooling
    - One GET per lookup, no retries
    - Mapping of every response or failure to a ChannelOutcome
    """

    # Class-level configuration (to be overridden by subclasses)
    CHANNEL: ClassVar[Channel]
    RECORD_TYPE: ClassVar[type[MirrorRecord]]
    # Envelope field holding the record list; None for single-object endpoints
    RESULTS_KEY: ClassVar[str | None] = None

    # The mirror node answers 400 for keys it cannot parse for this entity kind
    NOT_FOUND_STATUS_CODES: ClassVar[frozenset[int]] = frozenset({400, 404})

    def __init__(self, config: MirrorNodeConfig) -> None:
        self.config = config
        self._client: httpx.AsyncClient | None = None

    @property
    def channel(self) -> Channel:
        """The channel this resolver serves."""
        return self.CHANNEL

    @asynccontextmanager
    async def _get_client(self) -> AsyncIterator[httpx.AsyncClient]:
        """Get or create HTTP client with proper lifecycle."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                base_url=self.config.api_url,
                timeout=httpx.Timeout(self.config.timeout),
                headers=self._get_default_headers(),
                follow_redirects=True,
            )

        try:
            yield self._client
        except httpx.TimeoutException as e:
            raise LookupTimeoutError(
                message=f"Timed out: {e}",
                channel=self.channel.value,
            ) from e
        except httpx.HTTPError as e:
            raise ServiceUnavailableError(
                message=f"HTTP error: {e}",
                channel=self.channel.value,
            ) from e

    def _get_default_headers(self) -> dict[str, str]:
        """Get default headers for requests."""
        return {
            "User-Agent": self.config.user_agent,
            "Accept": "application/json",
        }

    async def close(self) -> None:
        """Close the HTTP client."""
        if self._client and not self._client.is_closed:
            await self._client.aclose()
            self._client = None

    async def _make_request(
        self,
        method: str,
        url: str,
        **kwargs: Any,
    ) -> httpx.Response:
        async with self._get_client() as client:
            return await client.request(method, url, **kwargs)

    # Abstract methods
    @abstractmethod
    def build_request(self, key: str) -> tuple[str, dict[str, Any] | None]:
        """
        Build the request for a lookup key.

        Args:
            key: The lookup key produced by the routing table

        Returns:
            Path relative to the API prefix, and query parameters (or None)
        """
        ...

    def parse_response(self, data: Any) -> list[RecordT]:
        """
        Decode a response body into records.

        Raises:
            ValueError: If the body does not have the expected shape
        """
        if not isinstance(data, dict):
            raise ValueError(f"Unexpected response body: {type(data).__name__}")

        if self.RESULTS_KEY is None:
            items = [data] if data else []
        else:
            items = data.get(self.RESULTS_KEY) or []
            if not isinstance(items, list):
                raise ValueError(f"Expected a list under {self.RESULTS_KEY!r}")

        return [self.RECORD_TYPE.model_validate(item) for item in items]  # type: ignore[misc]

    async def lookup(self, key: str) -> ChannelOutcome[RecordT]:
        """
        Issue the lookup for ``key`` and classify what came back.

        Transport failures and malformed bodies become error or timeout
        outcomes. Only programming errors escape.
        """
        start = time.monotonic()
        path, params = self.build_request(key)

        try:
            response = await self._make_request("GET", path, params=params)
            duration_ms = (time.monotonic() - start) * 1000

            if response.status_code in self.NOT_FOUND_STATUS_CODES:
                return self._outcome(OutcomeStatus.NOT_FOUND, key, duration_ms=duration_ms)

            if not response.is_success:
                logger.warning(f"{self.channel} lookup for {key!r} returned HTTP {response.status_code}")
                return self._outcome(
                    OutcomeStatus.ERROR,
                    key,
                    error_message=f"HTTP {response.status_code}",
                    duration_ms=duration_ms,
                )

            records = self.parse_response(response.json())

            return self._outcome(
                OutcomeStatus.SUCCESS if records else OutcomeStatus.NOT_FOUND,
                key,
                records=records,
                duration_ms=duration_ms,
            )

        except LookupTimeoutError as e:
            logger.warning(f"{self.channel} lookup for {key!r} timed out")
            return self._outcome(
                OutcomeStatus.TIMEOUT,
                key,
                error_message=e.message,
                duration_ms=(time.monotonic() - start) * 1000,
            )
        except ServiceUnavailableError as e:
            logger.warning(f"{self.channel} lookup for {key!r} failed: {e.message}")
            return self._outcome(
                OutcomeStatus.ERROR,
                key,
                error_message=e.message,
                duration_ms=(time.monotonic() - start) * 1000,
            )
        except ValueError as e:
            # Undecodable JSON or a body that fails model validation
            logger.warning(f"{self.channel} lookup for {key!r} returned a malformed body: {e}")
            return self._outcome(
                OutcomeStatus.ERROR,
                key,
                error_message=f"Malformed response: {e}",
                duration_ms=(time.monotonic() - start) * 1000,
            )

    def _outcome(
        self,
        status: OutcomeStatus,
        key: str,
        **kwargs: Any,
    ) -> ChannelOutcome[RecordT]:
        return ChannelOutcome(status=status, channel=self.channel, key=key, **kwargs)

    async def __aenter__(self) -> "AbstractChannelResolver[RecordT]":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()
