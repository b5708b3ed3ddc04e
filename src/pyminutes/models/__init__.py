"""Canonical models shared across ingestion and minute adjustment."""

from .player import PlayerRecord
from .stats import STAT_CATEGORIES, STAT_LABELS, StatDeltas, Stats, format_stat, round_stat

__all__ = [
    "PlayerRecord",
    "Stats",
    "StatDeltas",
    "STAT_CATEGORIES",
    "STAT_LABELS",
    "round_stat",
    "format_stat",
]
