"""Static JSON mirror client."""

from wca_client.mirror.client import MirrorClient
from wca_client.mirror.schemas import CompetitionSchema, parse_competitions

__all__ = [
    "MirrorClient",
    "CompetitionSchema",
    "parse_competitions",
]
