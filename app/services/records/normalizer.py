"""Record normalization - many upstream shapes into one NormalizedRecord."""

from collections.abc import Callable, Sequence
from datetime import date, datetime
from typing import Any

from app.models.records import (
    UNKNOWN_EVENT_ID,
    UNKNOWN_EVENT_NAME,
    UNKNOWN_NAME,
    UNKNOWN_WCA_ID,
    NormalizedRecord,
)
from app.services.records.events import event_name, format_result

Accessor = Callable[[dict], Any]


def field(*keys: str) -> Accessor:
    """Accessor for a (possibly nested) scalar; containers count as absent."""

    def get(raw: dict) -> Any:
        value: Any = raw
        for key in keys:
            if not isinstance(value, dict):
                return None
            value = value.get(key)
        if isinstance(value, (dict, list, tuple, set)):
            return None
        return value

    return get


NAME_FIELDS = (
    field("name"),
    field("personName"),
    field("person_name"),
    field("person", "name"),
    field("competitor", "name"),
)
WCA_ID_FIELDS = (
    field("wcaId"),
    field("wca_id"),
    field("personId"),
    field("person_id"),
    field("person", "wca_id"),
    field("person", "id"),
)
EVENT_ID_FIELDS = (
    field("eventId"),
    field("event_id"),
    field("event", "id"),
    field("event"),
)
EVENT_NAME_FIELDS = (
    field("eventName"),
    field("event_name"),
    field("event", "name"),
)
SINGLE_FIELDS = (
    field("single"),
    field("best"),
    field("single", "best"),
)
AVERAGE_FIELDS = (
    field("average"),
    field("average", "best"),
)
DATE_FIELDS = (
    field("date"),
    field("competitionDate"),
    field("competition_date"),
    field("start_date"),
    field("date", "from"),
    field("competition", "start_date"),
)
COUNTRY_FIELDS = (
    field("countryIso2"),
    field("country_iso2"),
    field("personCountryId"),
    field("country_id"),
    field("country"),
    field("country", "iso2"),
    field("person", "country_iso2"),
)


def _present(value: Any) -> bool:
    if value is None or isinstance(value, bool):
        return False
    if isinstance(value, str):
        return bool(value.strip())
    return True


def first_value(raw: dict, accessors: Sequence[Accessor]) -> Any:
    """First present, non-empty value across accessors, else None."""
    for accessor in accessors:
        value = accessor(raw)
        if _present(value):
            return value.strip() if isinstance(value, str) else value
    return None


def first_text(raw: dict, accessors: Sequence[Accessor], default: str) -> str:
    value = first_value(raw, accessors)
    return default if value is None else str(value)


def parse_iso_date(value: Any) -> str | None:
    """ISO calendar date ("YYYY-MM-DD") from a date, datetime or ISO string."""
    if isinstance(value, datetime):
        return value.date().isoformat()
    if isinstance(value, date):
        return value.isoformat()
    if isinstance(value, str):
        try:
            return date.fromisoformat(value.strip()[:10]).isoformat()
        except ValueError:
            return None
    return None


def first_date(raw: dict, accessors: Sequence[Accessor] = DATE_FIELDS) -> str | None:
    """First alias that parses as a calendar date."""
    for accessor in accessors:
        parsed = parse_iso_date(accessor(raw))
        if parsed:
            return parsed
    return None


def result_text(raw: dict, accessors: Sequence[Accessor], event_id: str | None, average: bool) -> str | None:
    value = first_value(raw, accessors)
    if value is None:
        return None
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    if isinstance(value, int):
        return format_result(value, event_id, average=average)
    return str(value)


def country_of(raw: dict) -> str | None:
    value = first_value(raw, COUNTRY_FIELDS)
    return str(value).upper() if value is not None else None


def normalize(raw: dict, fallback_date: date | str | None = None) -> NormalizedRecord:
    """Map an upstream result into a NormalizedRecord. Never raises.

    fallback_date overrides any per-result date (used when the resource has
    none, e.g. results inheriting their competition's date).
    """
    if not isinstance(raw, dict):
        raw = {}

    event_id = first_value(raw, EVENT_ID_FIELDS)
    event_id = str(event_id) if event_id is not None else None

    record_date = parse_iso_date(fallback_date) if fallback_date is not None else None
    if record_date is None:
        record_date = first_date(raw)

    return NormalizedRecord(
        name=first_text(raw, NAME_FIELDS, UNKNOWN_NAME),
        wca_id=first_text(raw, WCA_ID_FIELDS, UNKNOWN_WCA_ID),
        event_id=event_id or UNKNOWN_EVENT_ID,
        event_name=first_text(raw, EVENT_NAME_FIELDS, event_name(event_id) or UNKNOWN_EVENT_NAME),
        single=result_text(raw, SINGLE_FIELDS, event_id, average=False),
        average=result_text(raw, AVERAGE_FIELDS, event_id, average=True),
        date=record_date,
    )
