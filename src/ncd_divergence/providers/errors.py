"""Error hierarchy for response providers.

These errors belong to the text-fetching layer only.  The divergence engine
never raises or sees them; it only ever receives two resolved strings.
"""

from __future__ import annotations

__all__ = [
    "ProviderAPIError",
    "ProviderError",
    "ProviderNetworkError",
    "ProviderParseError",
    "ProviderTimeout",
]


class ProviderError(Exception):
    """Base class for every failure while obtaining a response."""


class ProviderNetworkError(ProviderError):
    """The endpoint could not be reached (DNS, refused connection, reset)."""


class ProviderTimeout(ProviderError):
    """The request did not complete within ``LLMConfig.timeout_secs``."""


class ProviderAPIError(ProviderError):
    """The endpoint answered with a non-success status, or refused the request.

    Attributes:
        status_code: HTTP status of the response, or None when the request
            was rejected before being sent (e.g. a missing API key).
    """

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class ProviderParseError(ProviderError):
    """The response payload was malformed or carried no text."""
