"""Custom exception hierarchy for mirrorsearch."""

from typing import Any


class MirrorSearchError(Exception):
    """Base exception for all mirrorsearch errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ValidationError(MirrorSearchError):
    """Invalid arguments supplied by the caller."""

    pass


class UnknownNetworkError(ValidationError):
    """The requested network is not configured."""

    def __init__(
        self,
        network: str,
        known: list[str] | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(f"Unknown network: {network!r}", details)
        self.network = network
        self.known = known or []


class LookupFailedError(MirrorSearchError):
    """A lookup against the mirror node could not be completed."""

    pass


class ServiceUnavailableError(LookupFailedError):
    """The mirror node could not be reached or answered unexpectedly."""

    def __init__(
        self,
        message: str,
        channel: str,
        status_code: int | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, details)
        self.channel = channel
        self.status_code = status_code


class LookupTimeoutError(ServiceUnavailableError):
    """The transport timed out before the mirror node answered."""

    pass


class NotFoundError(MirrorSearchError):
    """Resource not found."""

    pass
