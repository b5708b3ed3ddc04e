"""Static configuration: data sources, team names and engine limits."""

from .limits import (
    MAX_PLAYER_MINUTES,
    MIN_PLAYER_MINUTES,
    TEAM_MINUTE_LIMIT,
    max_upload_bytes,
)
from .sources import DataSource, SourceSchema, get_schema, iter_schemas
from .teams import NBA_TEAM_NAMES

__all__ = [
    "DataSource",
    "SourceSchema",
    "get_schema",
    "iter_schemas",
    "NBA_TEAM_NAMES",
    "TEAM_MINUTE_LIMIT",
    "MIN_PLAYER_MINUTES",
    "MAX_PLAYER_MINUTES",
    "max_upload_bytes",
]
