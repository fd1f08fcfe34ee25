"""Upstream error taxonomy - closed set of failure kinds."""

from enum import StrEnum


class ErrorKind(StrEnum):
    """Every upstream failure maps to exactly one of these."""

    UPSTREAM_UNAVAILABLE = "UPSTREAM_UNAVAILABLE"
    UPSTREAM_NOT_FOUND = "UPSTREAM_NOT_FOUND"
    UNEXPECTED_FAILURE = "UNEXPECTED_FAILURE"


class UpstreamError(Exception):
    """Base upstream error."""

    kind = ErrorKind.UNEXPECTED_FAILURE

    def __init__(self, message: str = "Upstream error", status_code: int | None = None):
        self.message = message
        self.status_code = status_code
        super().__init__(self.message)


class UpstreamUnavailable(UpstreamError):
    """Rate-limited, forbidden, or no HTTP response at all. Retryable by the caller."""

    kind = ErrorKind.UPSTREAM_UNAVAILABLE

    def __init__(self, message: str = "Upstream unavailable", status_code: int | None = None):
        super().__init__(message, status_code)


class UpstreamNotFound(UpstreamError):
    """Resource absent. Fetchers treat it as end-of-data, never as a failure."""

    kind = ErrorKind.UPSTREAM_NOT_FOUND

    def __init__(self, message: str = "Upstream resource not found", status_code: int | None = 404):
        super().__init__(message, status_code)


def classify_error(exc: BaseException) -> ErrorKind:
    """Map any exception onto the closed ErrorKind set."""
    if isinstance(exc, UpstreamError):
        return exc.kind
    return ErrorKind.UNEXPECTED_FAILURE
