"""Minute reallocation: stat scaling, budget checks and team aggregation."""

from .aggregate import (
    TeamMinutes,
    baseline_team_totals,
    group_by_team,
    list_teams,
    stat_differences,
    team_minutes,
    team_total_minutes,
    team_totals,
)
from .constraints import (
    AdjustmentOutcome,
    MinuteValidationResult,
    TeamMinutesValidation,
    adjust_player_minutes,
    reset_team_minutes,
    suggest_minute_distribution,
    validate_adjustment,
    validate_team_minutes,
)
from .scaling import scale_stats

__all__ = [
    "scale_stats",
    "AdjustmentOutcome",
    "MinuteValidationResult",
    "TeamMinutesValidation",
    "adjust_player_minutes",
    "reset_team_minutes",
    "suggest_minute_distribution",
    "validate_adjustment",
    "validate_team_minutes",
    "TeamMinutes",
    "baseline_team_totals",
    "group_by_team",
    "list_teams",
    "stat_differences",
    "team_minutes",
    "team_total_minutes",
    "team_totals",
]
