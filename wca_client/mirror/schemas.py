"""Static mirror schemas - competitions index."""

from datetime import date

from loguru import logger
from pydantic import BaseModel, Field, ValidationError


class CompetitionSchema(BaseModel):
    """Competition entry from the paginated competitions index."""

    id: str
    name: str = ""
    start_date: date | None = Field(alias="startDate", default=None)
    country: str | None = None

    class Config:
        populate_by_name = True

    @classmethod
    def from_raw(cls, raw: dict) -> "CompetitionSchema":
        """Build from either index shape ({date: {from}} or {start_date})."""
        start = raw.get("start_date") or raw.get("startDate")
        if not start and isinstance(raw.get("date"), dict):
            start = raw["date"].get("from")
        country = raw.get("country") or raw.get("country_iso2")
        return cls(
            id=str(raw.get("id") or ""),
            name=raw.get("name") or "",
            start_date=str(start)[:10] if start else None,
            country=country if isinstance(country, str) else None,
        )


def parse_competitions(items: list) -> list[CompetitionSchema]:
    """Parse index rows, skipping malformed ones."""
    competitions = []
    for raw in items:
        try:
            competition = CompetitionSchema.from_raw(raw)
        except (ValidationError, AttributeError) as e:
            logger.warning("Skipping malformed competition: {}", e)
            continue
        if competition.id:
            competitions.append(competition)
    return competitions
