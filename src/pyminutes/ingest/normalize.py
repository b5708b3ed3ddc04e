"""Map source-specific CSV rows onto the canonical player schema."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional

from pyminutes.config import NBA_TEAM_NAMES, SourceSchema
from pyminutes.config.sources import NUMERIC_FIELDS
from pyminutes.models import PlayerRecord, Stats


def normalize_header(name: Optional[str]) -> str:
    return (name or "").strip().lower()


def _cell_text(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, (list, tuple)):
        return ""
    return str(value).strip()


def normalize_row_keys(row: Mapping[Optional[str], Any]) -> Dict[str, str]:
    """Lower-case and trim header names; cells become stripped strings.

    Overflow cells (stored by ``csv.DictReader`` under ``None``) are dropped.
    """

    normalized: Dict[str, str] = {}
    for key, value in row.items():
        if key is None:
            continue
        header = normalize_header(key)
        if header and header not in normalized:
            normalized[header] = _cell_text(value)
    return normalized


def parse_number(value: Any) -> Optional[float]:
    """Parse a numeric cell, returning None for blank, malformed or non-finite input."""

    text = _cell_text(value)
    if not text:
        return None
    try:
        number = float(text)
    except ValueError:
        return None
    if not math.isfinite(number):
        return None
    return number


def normalize_team_name(team: Any, *, team_names: Mapping[str, str] = NBA_TEAM_NAMES) -> str:
    """Expand a franchise abbreviation, otherwise title-case each word. Never raises."""

    text = _cell_text(team)
    full_name = team_names.get(text.upper())
    if full_name:
        return full_name
    return " ".join(word[:1].upper() + word[1:].lower() for word in text.split(" "))


@dataclass(frozen=True)
class SchemaNormalizer:
    """Resolves one source's column aliases and builds player records."""

    schema: SourceSchema
    team_names: Mapping[str, str] = field(default_factory=lambda: NBA_TEAM_NAMES)

    def resolve(self, row: Mapping[str, str]) -> Dict[str, str]:
        """Pick the first non-blank accepted column for every canonical field."""

        resolved: Dict[str, str] = {}
        for canonical, names in self.schema.field_aliases.items():
            value = ""
            for name in names:
                candidate = _cell_text(row.get(name))
                if candidate:
                    value = candidate
                    break
            resolved[canonical] = value
        return resolved

    def team_name(self, team: Any) -> str:
        return normalize_team_name(team, team_names=self.team_names)

    def to_record(self, resolved: Mapping[str, str]) -> PlayerRecord:
        numbers = {name: parse_number(resolved.get(name)) or 0.0 for name in NUMERIC_FIELDS}
        stats = Stats(
            points=numbers["points"],
            rebounds=numbers["rebounds"],
            assists=numbers["assists"],
            steals=numbers["steals"],
            blocks=numbers["blocks"],
            turnovers=numbers["turnovers"],
            three_pointers=numbers["threepointers"],
        )
        return PlayerRecord.from_projection(
            name=resolved.get("player", ""),
            position=resolved.get("position", ""),
            team=self.team_name(resolved.get("team", "")),
            opponent=self.team_name(resolved.get("opponent", "")),
            minutes=numbers["minutes"],
            stats=stats,
        )
