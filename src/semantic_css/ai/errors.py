"""Error hierarchy for the AI class-conversion client."""
from __future__ import annotations

from typing import Any


class AIError(Exception):
    """Base error for all AI fallback errors."""

    retryable = False

    def __init__(self, message: str, *, cause: Exception | None = None) -> None:
        super().__init__(message)
        self.cause = cause


class ProviderError(AIError):
    """Error returned by the completion API."""

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        retryable: bool = False,
        raw: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message, cause=cause)
        self.status_code = status_code
        self.retryable = retryable
        self.raw = raw


# ---------------------------------------------------------------------------
# Specific provider errors
# ---------------------------------------------------------------------------


class AuthenticationError(ProviderError):
    """The API key was rejected."""

    def __init__(self, message: str, **kwargs: Any) -> None:
        kwargs.setdefault("retryable", False)
        super().__init__(message, **kwargs)


class InvalidRequestError(ProviderError):
    """The request was malformed or named an unknown model."""

    def __init__(self, message: str, **kwargs: Any) -> None:
        kwargs.setdefault("retryable", False)
        super().__init__(message, **kwargs)


class RateLimitError(ProviderError):
    """Rate limit exceeded."""

    def __init__(self, message: str, **kwargs: Any) -> None:
        kwargs.setdefault("retryable", True)
        super().__init__(message, **kwargs)


class ServerError(ProviderError):
    """Server-side error from the provider."""

    def __init__(self, message: str, **kwargs: Any) -> None:
        kwargs.setdefault("retryable", True)
        super().__init__(message, **kwargs)


# ---------------------------------------------------------------------------
# Non-provider errors
# ---------------------------------------------------------------------------


class ConfigurationError(AIError):
    """The client is missing required settings such as an API key."""


class NetworkError(AIError):
    """A network-level error occurred."""

    retryable = True


class RequestTimeoutError(AIError):
    """A request timed out."""

    retryable = True


class ResponseParseError(AIError):
    """The completion did not contain a usable property list."""


# ---------------------------------------------------------------------------
# Helper
# ---------------------------------------------------------------------------


def error_from_status_code(
    status_code: int,
    message: str,
    *,
    raw: dict[str, Any] | None = None,
) -> ProviderError:
    """Map HTTP status code to the appropriate error type."""
    common = dict(status_code=status_code, raw=raw)

    if status_code in (400, 404, 422):
        return InvalidRequestError(message, **common)
    if status_code in (401, 403):
        return AuthenticationError(message, **common)
    if status_code == 429:
        return RateLimitError(message, **common)
    if 500 <= status_code <= 599:
        return ServerError(message, **common)

    return ProviderError(message, retryable=True, **common)
