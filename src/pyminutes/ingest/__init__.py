"""Input adapters that normalize raw projection data."""

from .errors import (
    EmptyResultError,
    IngestionError,
    IngestionErrorKind,
    InvalidFileError,
    MissingHeadersError,
    ParseFailureError,
)
from .files import ProjectionFile
from .normalize import SchemaNormalizer, normalize_team_name
from .projections import IngestionResult, ingest_path, ingest_projections, parse_csv
from .validation import (
    FileValidationResult,
    HeaderValidationResult,
    RowErrorKind,
    RowValidationResult,
    validate_file,
    validate_headers,
    validate_row,
)

__all__ = [
    "EmptyResultError",
    "IngestionError",
    "IngestionErrorKind",
    "InvalidFileError",
    "MissingHeadersError",
    "ParseFailureError",
    "ProjectionFile",
    "SchemaNormalizer",
    "normalize_team_name",
    "IngestionResult",
    "ingest_path",
    "ingest_projections",
    "parse_csv",
    "FileValidationResult",
    "HeaderValidationResult",
    "RowErrorKind",
    "RowValidationResult",
    "validate_file",
    "validate_headers",
    "validate_row",
]
