"""Rescale projected stats when a player's minutes change."""

from __future__ import annotations

import math

from pyminutes.models.stats import Stats


def scale_stats(original_stats: Stats, original_minutes: float, new_minutes: float) -> Stats:
    """Scale every category linearly by ``new_minutes / original_minutes``.

    A player projected at zero minutes has no per-minute rate, so the result is
    all zeros for any ``new_minutes``. The returned value is never rounded;
    round with :meth:`Stats.rounded` at display time.
    """

    if not math.isfinite(new_minutes) or not math.isfinite(original_minutes):
        raise ValueError(f"minutes must be finite, got {original_minutes} -> {new_minutes}")
    if new_minutes < 0:
        raise ValueError(f"minutes must be non-negative, got {new_minutes}")
    if original_minutes < 0:
        raise ValueError(f"original minutes must be non-negative, got {original_minutes}")
    if original_minutes == 0:
        return Stats.zero()
    return original_stats.scaled(new_minutes / original_minutes)
