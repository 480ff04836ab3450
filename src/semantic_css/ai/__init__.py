"""AI fallback for utility classes outside the built-in mapping tables."""

from semantic_css.ai.client import AIClient
from semantic_css.ai.errors import (
    AIError,
    AuthenticationError,
    ConfigurationError,
    InvalidRequestError,
    NetworkError,
    ProviderError,
    RateLimitError,
    RequestTimeoutError,
    ResponseParseError,
    ServerError,
)
from semantic_css.ai.fallback import CachedAIResolver

__all__ = [
    "AIClient",
    "AIError",
    "AuthenticationError",
    "CachedAIResolver",
    "ConfigurationError",
    "InvalidRequestError",
    "NetworkError",
    "ProviderError",
    "RateLimitError",
    "RequestTimeoutError",
    "ResponseParseError",
    "ServerError",
]
