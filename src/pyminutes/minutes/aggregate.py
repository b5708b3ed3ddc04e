"""Team-level folds over player records."""

from __future__ import annotations

from collections import defaultdict
from dataclasses import dataclass
from typing import Dict, Iterable, List, Sequence

from pyminutes.models import PlayerRecord, StatDeltas, Stats


@dataclass(frozen=True)
class TeamMinutes:
    current: float
    original: float
    difference: float


def team_totals(players: Iterable[PlayerRecord]) -> Stats:
    total = Stats.zero()
    for player in players:
        total = total + player.stats
    return total


def baseline_team_totals(players: Iterable[PlayerRecord]) -> Stats:
    total = Stats.zero()
    for player in players:
        total = total + player.original_stats
    return total


def stat_differences(current: Stats, original: Stats) -> StatDeltas:
    return current.minus(original)


def team_minutes(players: Sequence[PlayerRecord]) -> TeamMinutes:
    current = sum(player.minutes for player in players)
    original = sum(player.original_minutes for player in players)
    return TeamMinutes(current=current, original=original, difference=current - original)


def team_total_minutes(players: Iterable[PlayerRecord], team: str) -> float:
    return sum(player.minutes for player in players if player.team == team)


def group_by_team(players: Iterable[PlayerRecord]) -> Dict[str, List[PlayerRecord]]:
    """Group records by team, keeping input order within each team."""

    grouped: Dict[str, List[PlayerRecord]] = defaultdict(list)
    for player in players:
        grouped[player.team].append(player)
    return dict(grouped)


def list_teams(players: Iterable[PlayerRecord]) -> List[str]:
    return sorted({player.team for player in players})
