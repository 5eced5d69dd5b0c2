"""Errors raised while talking to the upstream problemset API."""


class UpstreamError(Exception):
    """Base class; ``cause`` holds the underlying exception."""

    def __init__(self, message: str, cause: Exception | None = None):
        super().__init__(message)
        self.cause = cause


class FetchError(UpstreamError):
    """Transport failure or non-2xx response."""


class DecodeError(UpstreamError):
    """Body was not JSON or did not match the expected envelope."""
