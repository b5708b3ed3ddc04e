"""Failures that abort ingestion of a projection file."""

from __future__ import annotations

from enum import Enum
from typing import Iterable


class IngestionErrorKind(str, Enum):
    INVALID_FILE = "InvalidFile"
    PARSE_FAILURE = "ParseFailure"
    MISSING_HEADERS = "MissingHeaders"
    EMPTY_RESULT = "EmptyResult"


class IngestionError(Exception):
    kind: IngestionErrorKind

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidFileError(IngestionError):
    kind = IngestionErrorKind.INVALID_FILE


class ParseFailureError(IngestionError):
    kind = IngestionErrorKind.PARSE_FAILURE


class MissingHeadersError(IngestionError):
    kind = IngestionErrorKind.MISSING_HEADERS

    def __init__(self, missing: Iterable[str]):
        self.missing = tuple(missing)
        super().__init__(f"Missing required headers: {', '.join(self.missing)}")


class EmptyResultError(IngestionError):
    kind = IngestionErrorKind.EMPTY_RESULT
