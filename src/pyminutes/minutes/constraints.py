"""Per-player and team-wide minute budget checks."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence

from pyminutes.config import MAX_PLAYER_MINUTES, MIN_PLAYER_MINUTES, TEAM_MINUTE_LIMIT
from pyminutes.models import PlayerRecord


logger = logging.getLogger(__name__)

# Absorbs float noise from summing fractional minutes.
_TOLERANCE = 1e-9


@dataclass(frozen=True)
class TeamMinutesValidation:
    is_valid: bool
    total_minutes: float
    minutes_difference: float
    player_errors: List[str] = field(default_factory=list)


@dataclass(frozen=True)
class MinuteValidationResult:
    is_valid: bool
    error: Optional[str] = None


@dataclass(frozen=True)
class AdjustmentOutcome:
    """Result of a single edit; ``players`` is the snapshot to keep either way."""

    players: List[PlayerRecord]
    validation: MinuteValidationResult

    @property
    def applied(self) -> bool:
        return self.validation.is_valid


def _fmt(value: float) -> str:
    return f"{value:g}"


def _team_players(players: Sequence[PlayerRecord], team: str) -> List[PlayerRecord]:
    return [player for player in players if player.team == team]


def validate_team_minutes(players: Sequence[PlayerRecord], team: str) -> TeamMinutesValidation:
    """Check every player of ``team`` is in range and the team uses exactly 240 minutes."""

    errors: List[str] = []
    total = 0.0
    for player in _team_players(players, team):
        if not math.isfinite(player.minutes):
            errors.append(f"{player.name}: Minutes must be a number")
        elif player.minutes < MIN_PLAYER_MINUTES:
            errors.append(f"{player.name}: Minutes cannot be less than {MIN_PLAYER_MINUTES}")
        elif player.minutes > MAX_PLAYER_MINUTES:
            errors.append(f"{player.name}: Minutes cannot exceed {MAX_PLAYER_MINUTES}")
        total += player.minutes

    difference = TEAM_MINUTE_LIMIT - total
    if not abs(difference) <= _TOLERANCE:
        errors.append(
            f"Team Total: Team minutes must equal {TEAM_MINUTE_LIMIT} (current: {_fmt(total)})"
        )
    else:
        difference = 0.0

    return TeamMinutesValidation(
        is_valid=not errors,
        total_minutes=total,
        minutes_difference=difference,
        player_errors=errors,
    )


def validate_adjustment(
    current_minutes: float,
    proposed_minutes: float,
    team_total_excluding_player: float,
) -> MinuteValidationResult:
    """Check a single proposed edit.

    The team may stay under 240 while edits are in progress; only exceeding it is
    rejected here. Exact balance is checked by :func:`validate_team_minutes`.
    """

    if not math.isfinite(proposed_minutes):
        return MinuteValidationResult(False, "Minutes must be a number")
    if proposed_minutes < MIN_PLAYER_MINUTES:
        return MinuteValidationResult(False, f"Minutes cannot be less than {MIN_PLAYER_MINUTES}")
    if proposed_minutes > MAX_PLAYER_MINUTES:
        return MinuteValidationResult(False, f"Minutes cannot exceed {MAX_PLAYER_MINUTES}")

    new_total = team_total_excluding_player + proposed_minutes
    if new_total > TEAM_MINUTE_LIMIT + _TOLERANCE:
        logger.debug(
            "Rejected %s -> %s minutes: team total would be %s",
            _fmt(current_minutes),
            _fmt(proposed_minutes),
            _fmt(new_total),
        )
        return MinuteValidationResult(
            False,
            f"Adjustment would exceed team limit of {TEAM_MINUTE_LIMIT} minutes "
            f"(new total: {_fmt(new_total)})",
        )
    return MinuteValidationResult(True)


def _find_player(
    players: Sequence[PlayerRecord], name: str, team: Optional[str]
) -> Optional[int]:
    for index, player in enumerate(players):
        if player.name == name and (team is None or player.team == team):
            return index
    return None


def adjust_player_minutes(
    players: Sequence[PlayerRecord],
    name: str,
    proposed_minutes: float,
    *,
    team: Optional[str] = None,
) -> AdjustmentOutcome:
    """Validate and apply one minute edit, returning the next player snapshot."""

    index = _find_player(players, name, team)
    if index is None:
        return AdjustmentOutcome(list(players), MinuteValidationResult(False, "Player not found"))

    player = players[index]
    excluding = sum(
        other.minutes
        for i, other in enumerate(players)
        if other.team == player.team and i != index
    )
    validation = validate_adjustment(player.minutes, proposed_minutes, excluding)
    if not validation.is_valid:
        return AdjustmentOutcome(list(players), validation)

    updated = list(players)
    updated[index] = player.with_minutes(proposed_minutes)
    return AdjustmentOutcome(updated, validation)


def reset_team_minutes(players: Sequence[PlayerRecord], team: str) -> List[PlayerRecord]:
    return [player.reset() if player.team == team else player for player in players]


def suggest_minute_distribution(
    players: Sequence[PlayerRecord],
    team: str,
    target_minutes: float = TEAM_MINUTE_LIMIT,
) -> Dict[str, float]:
    """Greedy redistribution toward ``target_minutes``.

    Highest-minute players absorb the change first, each clamped to [0, 48].
    Returns only the players whose minutes would change. This is a heuristic,
    not an optimizer.
    """

    team_players = _team_players(players, team)
    remaining = target_minutes - sum(player.minutes for player in team_players)
    if abs(remaining) <= _TOLERANCE:
        return {}

    suggestions: Dict[str, float] = {}
    for player in sorted(team_players, key=lambda p: p.minutes, reverse=True):
        if abs(remaining) <= _TOLERANCE:
            break
        if remaining > 0:
            room = MAX_PLAYER_MINUTES - player.minutes
            step = min(remaining, room)
        else:
            room = player.minutes - MIN_PLAYER_MINUTES
            step = -min(-remaining, room)
        if room <= 0:
            continue
        suggestions[player.name] = player.minutes + step
        remaining -= step
    return suggestions
