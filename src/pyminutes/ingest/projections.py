"""Load projection CSVs into canonical player records."""

from __future__ import annotations

import csv
import io
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Mapping, Optional, Tuple, Union

from pyminutes.config import DataSource, NBA_TEAM_NAMES, get_schema
from pyminutes.models import PlayerRecord

from .errors import EmptyResultError, InvalidFileError, MissingHeadersError, ParseFailureError
from .files import ProjectionFile
from .normalize import SchemaNormalizer, normalize_header, normalize_row_keys
from .validation import validate_file, validate_headers, validate_row


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class IngestionResult:
    """Players that survived row validation plus one message per rejected row."""

    source: DataSource
    players: List[PlayerRecord]
    errors: List[str] = field(default_factory=list)


def parse_csv(text: str) -> Tuple[List[str], List[Dict[str, str]]]:
    """Tokenize CSV text into normalized headers and rows.

    Rows whose cells are all blank are skipped. Raises ParseFailureError on
    malformed CSV syntax.
    """

    try:
        reader = csv.DictReader(io.StringIO(text, newline=""), strict=True)
        headers = [normalize_header(name) for name in (reader.fieldnames or [])]
        rows = []
        for raw in reader:
            row = normalize_row_keys(raw)
            if any(row.values()):
                rows.append(row)
    except csv.Error as exc:
        raise ParseFailureError(f"Failed to parse CSV: {exc}") from exc
    return [header for header in headers if header], rows


def ingest_projections(
    upload: ProjectionFile,
    source: Union[DataSource, str],
    *,
    team_names: Optional[Mapping[str, str]] = None,
) -> IngestionResult:
    """Validate, parse and normalize one projection file for ``source``.

    File, parse and header failures raise before any row is processed. Row
    failures are collected as ``Row <n>: <reason>`` (1-based) and the row is
    skipped. Raises EmptyResultError when no row survives.
    """

    schema = get_schema(source)
    normalizer = SchemaNormalizer(schema, team_names if team_names is not None else NBA_TEAM_NAMES)

    file_check = validate_file(upload)
    if not file_check.is_valid:
        logger.warning("Rejected %s: %s", upload.name, file_check.error)
        raise InvalidFileError(file_check.error or "Invalid file")

    try:
        text = upload.text()
    except UnicodeDecodeError as exc:
        logger.warning("Rejected %s: not UTF-8 text", upload.name)
        raise ParseFailureError("Failed to parse CSV: file is not UTF-8 text") from exc

    headers, rows = parse_csv(text)

    header_check = validate_headers(headers, schema.source)
    if not header_check.is_valid:
        logger.warning("Rejected %s: missing headers %s", upload.name, ", ".join(header_check.missing))
        raise MissingHeadersError(header_check.missing)

    if not rows:
        raise EmptyResultError("No data found in file")

    players: List[PlayerRecord] = []
    errors: List[str] = []
    for index, row in enumerate(rows, start=1):
        resolved = normalizer.resolve(row)
        row_check = validate_row(resolved, schema.source)
        if not row_check.is_valid:
            logger.debug("Skipping row %d of %s: %s", index, upload.name, row_check.error)
            errors.append(f"Row {index}: {row_check.error}")
            continue
        players.append(normalizer.to_record(resolved))

    if not players:
        logger.warning("Rejected %s: all %d rows invalid", upload.name, len(rows))
        raise EmptyResultError("No valid data found in file")

    logger.info(
        "Ingested %d players from %s (%s source, %d rows rejected)",
        len(players),
        upload.name,
        schema.source.value,
        len(errors),
    )
    return IngestionResult(source=schema.source, players=players, errors=errors)


def ingest_path(
    path: Path,
    source: Union[DataSource, str],
    *,
    team_names: Optional[Mapping[str, str]] = None,
) -> IngestionResult:
    return ingest_projections(ProjectionFile.from_path(path), source, team_names=team_names)
