"""Minute budget and upload limits."""

from __future__ import annotations

import logging
import os


logger = logging.getLogger(__name__)

TEAM_MINUTE_LIMIT = 240
MIN_PLAYER_MINUTES = 0
MAX_PLAYER_MINUTES = 48

_MAX_UPLOAD_ENV = "PYMINUTES_MAX_UPLOAD_BYTES"
_MAX_UPLOAD_DEFAULT = 5 * 1024 * 1024


def _env_int(name: str, default: int, *, min_value: int | None = None) -> int:
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        value = int(raw)
    except ValueError:
        logger.warning("Invalid int for %s: %s; using default %d", name, raw, default)
        return default
    if min_value is not None:
        value = max(min_value, value)
    return value


def max_upload_bytes() -> int:
    """Largest projection file accepted, in bytes."""

    return _env_int(_MAX_UPLOAD_ENV, _MAX_UPLOAD_DEFAULT, min_value=1)
