from __future__ import annotations

import pytest

from pyminutes.models import PlayerRecord

from .factories import make_player


@pytest.fixture
def rotation() -> list[PlayerRecord]:
    """Eight-man Boston rotation summing to 240 plus one Miami player."""

    minutes = [36, 34, 32, 30, 30, 28, 26, 24]
    players = [make_player(f"Player {i}", m) for i, m in enumerate(minutes, start=1)]
    players.append(make_player("Other Guy", 30, team="Miami Heat"))
    return players
