"""Player projection record with its ingestion baseline."""

from __future__ import annotations

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict

from .stats import StatDeltas, Stats


class PlayerRecord(BaseModel):
    """Normalized player projection.

    ``original_minutes``/``original_stats`` are captured at ingestion and never
    change. ``minutes``/``stats`` only move together through :meth:`with_minutes`.
    """

    name: str = Field(..., min_length=1)
    position: str
    team: str
    opponent: str
    minutes: float = Field(..., ge=0.0)
    stats: Stats
    original_minutes: float = Field(..., ge=0.0)
    original_stats: Stats

    model_config = ConfigDict(frozen=True)

    @classmethod
    def from_projection(
        cls,
        *,
        name: str,
        position: str,
        team: str,
        opponent: str,
        minutes: float,
        stats: Stats,
    ) -> "PlayerRecord":
        return cls(
            name=name,
            position=position,
            team=team,
            opponent=opponent,
            minutes=minutes,
            stats=stats,
            original_minutes=minutes,
            original_stats=stats,
        )

    def with_minutes(self, minutes: float) -> "PlayerRecord":
        """Return a copy at ``minutes`` with stats rescaled from the baseline."""

        from pyminutes.minutes.scaling import scale_stats

        stats = scale_stats(self.original_stats, self.original_minutes, minutes)
        return self.model_copy(update={"minutes": float(minutes), "stats": stats})

    def reset(self) -> "PlayerRecord":
        return self.model_copy(
            update={"minutes": self.original_minutes, "stats": self.original_stats}
        )

    def differences(self) -> StatDeltas:
        return self.stats.minus(self.original_stats)

    @property
    def minutes_difference(self) -> float:
        return self.minutes - self.original_minutes
