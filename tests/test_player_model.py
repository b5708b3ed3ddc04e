import pytest
from pydantic import ValidationError

from pyminutes.models import STAT_CATEGORIES, STAT_LABELS, PlayerRecord, Stats, format_stat, round_stat

from .factories import make_player


def test_player_record_is_frozen():
    record = make_player("Test Player", 30)

    assert record.minutes == 30
    assert record.original_minutes == 30
    assert record.stats == record.original_stats

    with pytest.raises((TypeError, ValidationError)):
        record.minutes = 40  # type: ignore[misc]


def test_player_record_requires_name():
    with pytest.raises(ValidationError):
        PlayerRecord.from_projection(
            name="", position="G", team="Boston Celtics", opponent="Miami Heat", minutes=10, stats=Stats()
        )


def test_stats_reject_negative_values():
    with pytest.raises(ValidationError):
        Stats(points=-1.0)


def test_with_minutes_rescales_from_baseline_and_keeps_original():
    record = make_player("Scaler", 30, points=21.0)

    edited = record.with_minutes(20)
    again = edited.with_minutes(40)

    assert edited.stats.points == pytest.approx(14.0)
    assert again.stats.points == pytest.approx(28.0)
    assert again.original_minutes == 30
    assert again.original_stats == record.original_stats
    assert record.minutes == 30


def test_reset_and_differences():
    record = make_player("Delta", 30, points=21.0).with_minutes(36)

    assert record.minutes_difference == pytest.approx(6)
    assert record.differences().points == pytest.approx(4.2)
    restored = record.reset()
    assert restored.minutes == 30
    assert restored.stats == restored.original_stats


def test_record_round_trips_through_json():
    record = make_player("Json", 25.5).with_minutes(31)

    restored = PlayerRecord.model_validate(record.model_dump(mode="json"))
    assert restored == record


def test_round_and_format_stat():
    assert round_stat(2.25) == pytest.approx(2.3)
    assert round_stat(-0.25) == pytest.approx(-0.2)
    assert format_stat(12.0) == "12"
    assert format_stat(12.04) == "12"
    assert format_stat(3.46) == "3.5"


def test_rounded_is_presentation_only():
    stats = Stats(points=10.0 / 3)

    assert stats.rounded().points == pytest.approx(3.3)
    assert stats.points == pytest.approx(3.3333333)


def test_stat_labels_cover_every_category():
    assert set(STAT_LABELS) == set(STAT_CATEGORIES)
    assert STAT_LABELS["three_pointers"] == "3PM"
