"""Services package - service class exports."""

from app.services.records import RecordsService

__all__ = [
    "RecordsService",
]
