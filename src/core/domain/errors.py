"""Failure taxonomy of the client.

Why exceptions:
- A coroutine "rejects" by raising when awaited, so per-call failures travel
  through the same channel as the result.
- A single base (`WoWAPIError`) lets callers catch everything from the
  package in one clause.
"""

from __future__ import annotations


class WoWAPIError(Exception):
    """Base class for every error raised by the client."""


class ConfigurationError(WoWAPIError, ValueError):
    """Invalid construction parameters (missing key, unknown region...)."""


class RequestFailure(WoWAPIError):
    """A single API call did not produce a result."""

    status_code: int | None = None


class ApiFailure(RequestFailure):
    """The remote service answered with a non-2xx status."""

    def __init__(self, status_code: int, reason: str | None = None) -> None:
        self.status_code = status_code
        self.reason = reason
        message = f"HTTP {status_code}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class MalformedResponseError(ApiFailure):
    """Locally generated failure for a body the client cannot use."""

    def __init__(self, reason: str) -> None:
        super().__init__(500, reason)


class TransportFault(RequestFailure):
    """The request never completed (timeout, DNS, refused connection...)."""

    def __init__(self, error: Exception) -> None:
        self.error = error
        super().__init__(f"{type(error).__name__}: {error}" if str(error) else type(error).__name__)


MALFORMED_AUCTION_RESPONSE = "Malformed auction response"
MALFORMED_RESPONSE_BODY = "Malformed response body"
