import pytest

from pyminutes.config import NBA_TEAM_NAMES, get_schema
from pyminutes.ingest import SchemaNormalizer, normalize_team_name
from pyminutes.ingest.normalize import normalize_row_keys, parse_number


def test_team_table_has_every_franchise():
    assert len(NBA_TEAM_NAMES) == 30
    with pytest.raises(TypeError):
        NBA_TEAM_NAMES["SEA"] = "Seattle SuperSonics"  # type: ignore[index]


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("LAC", "LA Clippers"),
        ("gsw", "Golden State Warriors"),
        ("boston celtics", "Boston Celtics"),
        ("NEW YORK knicks", "New York Knicks"),
        ("", ""),
        (None, ""),
    ],
)
def test_normalize_team_name(raw, expected):
    assert normalize_team_name(raw) == expected


def test_normalize_team_name_uses_injected_table():
    assert normalize_team_name("SEA", team_names={"SEA": "Seattle SuperSonics"}) == "Seattle SuperSonics"


def test_normalize_row_keys_lowercases_and_drops_overflow():
    row = normalize_row_keys({" Player ": " A. Player ", "PTS": "20", None: ["extra"], "Blank": None})
    assert row == {"player": "A. Player", "pts": "20", "blank": ""}


def test_resolve_prefers_canonical_then_alias():
    normalizer = SchemaNormalizer(get_schema("ETR"))
    resolved = normalizer.resolve({"name": "Alias Name", "pts": "12", "points": "", "min": "0", "3pm": "1.5"})

    assert resolved["player"] == "Alias Name"
    assert resolved["points"] == "12"
    assert resolved["minutes"] == "0"
    assert resolved["threepointers"] == "1.5"
    assert resolved["rebounds"] == ""


def test_to_record_defaults_missing_numbers_to_zero():
    normalizer = SchemaNormalizer(get_schema("UA"))
    record = normalizer.to_record(
        {
            "player": "A. Player",
            "position": "G",
            "team": "LAC",
            "opponent": "phx",
            "minutes": "30",
            "points": "20",
        }
    )

    assert record.team == "LA Clippers"
    assert record.opponent == "Phoenix Suns"
    assert record.stats.points == 20
    assert record.stats.three_pointers == 0
    assert record.original_minutes == 30


@pytest.mark.parametrize("raw", ["", "abc", "nan", "inf", None])
def test_parse_number_rejects_non_finite(raw):
    assert parse_number(raw) is None


def test_parse_number_accepts_numbers():
    assert parse_number(" 31.5 ") == 31.5
    assert parse_number(12) == 12.0
