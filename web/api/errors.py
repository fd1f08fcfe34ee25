"""API error mapping - upstream error kinds to HTTP responses."""

from pydantic import BaseModel

from wca_client import ErrorKind, classify_error


class ErrorResponse(BaseModel):
    """Error body."""

    error: str
    details: str


# Not-found never escapes the fetchers; reaching here means something broke
STATUS_BY_KIND = {
    ErrorKind.UPSTREAM_UNAVAILABLE: 502,
    ErrorKind.UPSTREAM_NOT_FOUND: 500,
    ErrorKind.UNEXPECTED_FAILURE: 500,
}

MESSAGE_BY_KIND = {
    ErrorKind.UPSTREAM_UNAVAILABLE: "Upstream results source unavailable or rate-limited",
    ErrorKind.UPSTREAM_NOT_FOUND: "Internal server error",
    ErrorKind.UNEXPECTED_FAILURE: "Internal server error",
}


def error_response(exc: BaseException) -> tuple[int, ErrorResponse]:
    """Status code and body for an exception raised while serving a request."""
    kind = classify_error(exc)
    details = getattr(exc, "message", None) or str(exc) or type(exc).__name__
    return STATUS_BY_KIND[kind], ErrorResponse(error=MESSAGE_BY_KIND[kind], details=details)
