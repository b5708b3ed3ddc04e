"""Per-game stat lines tracked for every player."""

from __future__ import annotations

import math
from typing import Tuple

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict


STAT_CATEGORIES: Tuple[str, ...] = (
    "points",
    "rebounds",
    "assists",
    "steals",
    "blocks",
    "turnovers",
    "three_pointers",
)

STAT_LABELS = {
    "points": "PTS",
    "rebounds": "REB",
    "assists": "AST",
    "steals": "STL",
    "blocks": "BLK",
    "turnovers": "TOV",
    "three_pointers": "3PM",
}


def round_stat(value: float) -> float:
    """Round half-up to one decimal place."""

    return math.floor(value * 10 + 0.5) / 10


def format_stat(value: float) -> str:
    rounded = round_stat(value)
    if rounded == int(rounded):
        return str(int(rounded))
    return f"{rounded:.1f}"


class Stats(BaseModel):
    """Projected production in the seven tracked categories."""

    points: float = Field(default=0.0, ge=0.0)
    rebounds: float = Field(default=0.0, ge=0.0)
    assists: float = Field(default=0.0, ge=0.0)
    steals: float = Field(default=0.0, ge=0.0)
    blocks: float = Field(default=0.0, ge=0.0)
    turnovers: float = Field(default=0.0, ge=0.0)
    three_pointers: float = Field(default=0.0, ge=0.0)

    model_config = ConfigDict(frozen=True)

    @classmethod
    def zero(cls) -> "Stats":
        return cls()

    def scaled(self, factor: float) -> "Stats":
        return Stats(**{name: getattr(self, name) * factor for name in STAT_CATEGORIES})

    def rounded(self) -> "Stats":
        """Copy rounded for display; stored values keep full precision."""

        return Stats(**{name: round_stat(getattr(self, name)) for name in STAT_CATEGORIES})

    def minus(self, other: "Stats") -> "StatDeltas":
        return StatDeltas(
            **{name: getattr(self, name) - getattr(other, name) for name in STAT_CATEGORIES}
        )

    def __add__(self, other: "Stats") -> "Stats":
        if not isinstance(other, Stats):
            return NotImplemented
        return Stats(
            **{name: getattr(self, name) + getattr(other, name) for name in STAT_CATEGORIES}
        )


class StatDeltas(BaseModel):
    """Signed per-category change between two stat lines."""

    points: float = 0.0
    rebounds: float = 0.0
    assists: float = 0.0
    steals: float = 0.0
    blocks: float = 0.0
    turnovers: float = 0.0
    three_pointers: float = 0.0

    model_config = ConfigDict(frozen=True)

    def rounded(self) -> "StatDeltas":
        return StatDeltas(
            **{name: round_stat(getattr(self, name)) for name in STAT_CATEGORIES}
        )
