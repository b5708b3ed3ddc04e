"""Column schemas for the supported projection sources."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Dict, Iterable, Mapping, Tuple, Union


class DataSource(str, Enum):
    ETR = "ETR"
    UA = "UA"


STAT_FIELDS: Tuple[str, ...] = (
    "points",
    "rebounds",
    "assists",
    "steals",
    "blocks",
    "turnovers",
    "threepointers",
)
NUMERIC_FIELDS: Tuple[str, ...] = ("minutes",) + STAT_FIELDS
TEXT_FIELDS: Tuple[str, ...] = ("player", "position", "team", "opponent")

# Three-pointers are optional everywhere and default to zero.
_REQUIRED_FIELDS: Tuple[str, ...] = TEXT_FIELDS + tuple(
    field for field in NUMERIC_FIELDS if field != "threepointers"
)

_BASE_ALIASES: Dict[str, Tuple[str, ...]] = {
    "player": ("player", "name"),
    "position": ("position", "pos"),
    "team": ("team",),
    "opponent": ("opponent", "opp"),
    "minutes": ("minutes", "min"),
    "points": ("points", "pts"),
    "rebounds": ("rebounds", "reb"),
    "assists": ("assists", "ast"),
    "steals": ("steals", "stl"),
    "blocks": ("blocks", "blk"),
    "turnovers": ("turnovers", "to"),
    "threepointers": ("threepointers", "3pm"),
}


@dataclass(frozen=True)
class SourceSchema:
    source: DataSource
    field_aliases: Mapping[str, Tuple[str, ...]]
    required_fields: Tuple[str, ...]

    def accepted_names(self, field: str) -> Tuple[str, ...]:
        """Header names accepted for ``field``, canonical name first."""

        return self.field_aliases.get(field, (field,))


def _schema(source: DataSource, aliases: Mapping[str, Tuple[str, ...]]) -> SourceSchema:
    return SourceSchema(
        source=source,
        field_aliases=MappingProxyType(dict(aliases)),
        required_fields=_REQUIRED_FIELDS,
    )


_SOURCE_SCHEMAS: Mapping[DataSource, SourceSchema] = MappingProxyType(
    {
        DataSource.ETR: _schema(DataSource.ETR, _BASE_ALIASES),
        DataSource.UA: _schema(DataSource.UA, _BASE_ALIASES),
    }
)


def iter_schemas() -> Iterable[SourceSchema]:
    """Return an iterator of all configured source schemas."""

    return _SOURCE_SCHEMAS.values()


def get_schema(source: Union[DataSource, str]) -> SourceSchema:
    """Fetch the schema for a source tag, raising KeyError if unknown."""

    if isinstance(source, DataSource):
        key = source
    else:
        try:
            key = DataSource(str(source).strip().upper())
        except ValueError:
            raise KeyError(f"No schema configured for source={source!r}") from None
    if key not in _SOURCE_SCHEMAS:
        raise KeyError(f"No schema configured for source={source!r}")
    return _SOURCE_SCHEMAS[key]
