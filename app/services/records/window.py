"""Rolling lookback window."""

from datetime import datetime, timedelta, timezone

from app.models.records import DateWindow
from settings import LOOKBACK_DAYS


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def compute_window(now: datetime, lookback_days: int = LOOKBACK_DAYS) -> DateWindow:
    """Inclusive [now - lookback_days, now] window, truncated to UTC calendar days.

    Naive datetimes are taken as UTC. Never cached: the window must track real
    time even while the data behind it is served from cache.
    """
    if now.tzinfo is not None:
        now = now.astimezone(timezone.utc)
    end = now.date()
    return DateWindow(start=end - timedelta(days=lookback_days), end=end)
