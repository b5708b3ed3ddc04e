"""Builders for player records used across tests."""

from __future__ import annotations

from pyminutes.models import PlayerRecord, Stats


def make_player(
    name: str,
    minutes: float,
    *,
    team: str = "Boston Celtics",
    points: float = 10.0,
    rebounds: float = 4.0,
    assists: float = 3.0,
    steals: float = 1.0,
    blocks: float = 0.5,
    turnovers: float = 1.5,
    three_pointers: float = 2.0,
) -> PlayerRecord:
    return PlayerRecord.from_projection(
        name=name,
        position="G",
        team=team,
        opponent="Miami Heat",
        minutes=minutes,
        stats=Stats(
            points=points,
            rebounds=rebounds,
            assists=assists,
            steals=steals,
            blocks=blocks,
            turnovers=turnovers,
            three_pointers=three_pointers,
        ),
    )


