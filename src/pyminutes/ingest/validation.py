"""File, header and row checks gating projection ingestion.

Each check is independent and returns a result object instead of raising; the
pipeline in :mod:`pyminutes.ingest.projections` decides which failures abort.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Mapping, Optional, Tuple, Union

from pyminutes.config import MAX_PLAYER_MINUTES, DataSource, get_schema, max_upload_bytes
from pyminutes.config.sources import NUMERIC_FIELDS

from .files import ProjectionFile
from .normalize import normalize_header, parse_number


class RowErrorKind(str, Enum):
    MISSING_FIELD = "MissingField"
    INVALID_NUMERIC = "InvalidNumeric"
    MINUTES_OUT_OF_RANGE = "MinutesOutOfRange"


@dataclass(frozen=True)
class FileValidationResult:
    is_valid: bool
    error: Optional[str] = None


@dataclass(frozen=True)
class HeaderValidationResult:
    is_valid: bool
    missing: Tuple[str, ...] = ()

    @property
    def error(self) -> Optional[str]:
        if not self.missing:
            return None
        return f"Missing required headers: {', '.join(self.missing)}"


@dataclass(frozen=True)
class RowValidationResult:
    is_valid: bool
    kind: Optional[RowErrorKind] = None
    error: Optional[str] = None


_VALID_ROW = RowValidationResult(True)


def validate_file(upload: ProjectionFile) -> FileValidationResult:
    if not upload.name.lower().endswith(".csv"):
        return FileValidationResult(False, "Please upload a CSV file")
    if upload.size == 0:
        return FileValidationResult(False, "File is empty")
    limit = max_upload_bytes()
    if upload.size > limit:
        return FileValidationResult(
            False, f"File size exceeds {limit / (1024 * 1024):g}MB limit"
        )
    return FileValidationResult(True)


def validate_headers(
    headers: Iterable[str], source: Union[DataSource, str]
) -> HeaderValidationResult:
    """Report every required column with none of its accepted names present."""

    schema = get_schema(source)
    present = {normalize_header(header) for header in headers}
    missing = tuple(
        field
        for field in schema.required_fields
        if not any(name in present for name in schema.accepted_names(field))
    )
    return HeaderValidationResult(is_valid=not missing, missing=missing)


def validate_row(row: Mapping[str, str], source: Union[DataSource, str]) -> RowValidationResult:
    """Check one resolved row (canonical field name to raw cell text)."""

    schema = get_schema(source)
    for field in schema.required_fields:
        if not (row.get(field) or "").strip():
            return RowValidationResult(
                False, RowErrorKind.MISSING_FIELD, f"Missing required field: {field}"
            )

    for field in NUMERIC_FIELDS:
        raw = (row.get(field) or "").strip()
        if not raw:
            continue
        value = parse_number(raw)
        if value is None or value < 0:
            return RowValidationResult(
                False, RowErrorKind.INVALID_NUMERIC, f"Invalid numeric value for {field}: {raw}"
            )

    minutes = parse_number(row.get("minutes"))
    if minutes is not None and minutes > MAX_PLAYER_MINUTES:
        return RowValidationResult(
            False,
            RowErrorKind.MINUTES_OUT_OF_RANGE,
            f"Invalid minutes value: {minutes:g} (must be <= {MAX_PLAYER_MINUTES})",
        )
    return _VALID_ROW
