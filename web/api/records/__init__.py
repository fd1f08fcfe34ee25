"""Records API."""

from web.api.records.views import get_health, get_swiss_prs, to_response

__all__ = [
    "get_swiss_prs",
    "get_health",
    "to_response",
]
