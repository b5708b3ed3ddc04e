import pytest

from pyminutes.config import DataSource, get_schema, iter_schemas, max_upload_bytes


def test_get_schema_accepts_lowercase_tag():
    schema = get_schema("etr")
    assert schema.source is DataSource.ETR
    assert schema.accepted_names("minutes") == ("minutes", "min")


def test_three_pointers_not_required():
    for schema in iter_schemas():
        assert "threepointers" not in schema.required_fields
        assert schema.required_fields == (
            "player",
            "position",
            "team",
            "opponent",
            "minutes",
            "points",
            "rebounds",
            "assists",
            "steals",
            "blocks",
            "turnovers",
        )


def test_get_schema_missing_raises():
    with pytest.raises(KeyError):
        get_schema("NUMBERFIRE")


def test_max_upload_bytes_env_override(monkeypatch):
    monkeypatch.delenv("PYMINUTES_MAX_UPLOAD_BYTES", raising=False)
    assert max_upload_bytes() == 5 * 1024 * 1024

    monkeypatch.setenv("PYMINUTES_MAX_UPLOAD_BYTES", "1024")
    assert max_upload_bytes() == 1024

    monkeypatch.setenv("PYMINUTES_MAX_UPLOAD_BYTES", "lots")
    assert max_upload_bytes() == 5 * 1024 * 1024
