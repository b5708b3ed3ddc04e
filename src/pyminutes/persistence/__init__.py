"""SQLite-backed key-value store for player lists and dashboard selections."""

from __future__ import annotations

import json
import logging
import os
import sqlite3
import tempfile
from dataclasses import asdict, dataclass
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Iterable, List, Optional, Union

from pydantic import ValidationError

from pyminutes.config import DataSource, get_schema
from pyminutes.models import PlayerRecord


logger = logging.getLogger(__name__)

_DB_ENV = "PYMINUTES_DB_PATH"

PLAYERS_KEY = "players"
SELECTED_TEAM_KEY = "selectedTeam"
DATA_SOURCE_KEY = "dataSource"
FILE_STATUS_KEY = "fileStatus"
SHOW_DIFFERENCES_KEY = "showDifferences"


@dataclass
class FileStatus:
    is_uploading: bool = False
    error: Optional[str] = None
    last_update: Optional[str] = None

    @classmethod
    def succeeded(cls, when: Optional[datetime] = None) -> "FileStatus":
        when = when or datetime.now(timezone.utc)
        return cls(is_uploading=False, error=None, last_update=when.isoformat())

    @classmethod
    def failed(cls, error: str) -> "FileStatus":
        return cls(is_uploading=False, error=error, last_update=None)


def _source_key(source: Union[DataSource, str]) -> str:
    return get_schema(source).source.value


class StateStore:
    """Opaque put/get storage consumed by the dashboard layer."""

    def __init__(self, db_path: Path | str):
        self._use_uri = False
        env_db = os.getenv(_DB_ENV)
        if env_db:
            if env_db.startswith("file:"):
                self.db_path = env_db
                self._use_uri = True
            else:
                self.db_path = Path(env_db)
        elif isinstance(db_path, str) and db_path.startswith("file:"):
            self.db_path = db_path
            self._use_uri = True
        else:
            self.db_path = Path(db_path)
        self._ensure_schema()

    def _connect(self) -> sqlite3.Connection:
        if isinstance(self.db_path, Path):
            self.db_path.parent.mkdir(parents=True, exist_ok=True)
            try:
                conn = sqlite3.connect(self.db_path)
            except sqlite3.OperationalError:
                fallback_dir = Path(tempfile.gettempdir()) / "pyminutes-runtime"
                fallback_dir.mkdir(parents=True, exist_ok=True)
                fallback = fallback_dir / "pyminutes.sqlite"
                logger.warning("Cannot open %s; falling back to %s", self.db_path, fallback)
                conn = sqlite3.connect(fallback)
                self.db_path = fallback
                self._create_schema(conn)
        else:
            conn = sqlite3.connect(self.db_path, uri=self._use_uri)
        conn.row_factory = sqlite3.Row
        return conn

    def _ensure_schema(self) -> None:
        with self._connect() as conn:
            self._create_schema(conn)

    def _create_schema(self, conn: sqlite3.Connection) -> None:
        conn.execute(
            """
            CREATE TABLE IF NOT EXISTS state (
                key TEXT PRIMARY KEY,
                value_json TEXT NOT NULL,
                updated_at TEXT NOT NULL
            )
            """
        )
        conn.commit()

    def put(self, key: str, value: Any) -> None:
        now = datetime.now(timezone.utc).isoformat()
        with self._connect() as conn:
            conn.execute(
                """
                INSERT INTO state (key, value_json, updated_at) VALUES (?, ?, ?)
                ON CONFLICT(key) DO UPDATE SET
                    value_json = excluded.value_json,
                    updated_at = excluded.updated_at
                """,
                (key, json.dumps(value), now),
            )
            conn.commit()

    def get(self, key: str, default: Any = None) -> Any:
        with self._connect() as conn:
            row = conn.execute("SELECT value_json FROM state WHERE key = ?", (key,)).fetchone()
        if row is None:
            return default
        try:
            return json.loads(row["value_json"])
        except json.JSONDecodeError:
            logger.warning("Discarding unreadable value stored under %s", key)
            return default

    def delete(self, key: str) -> None:
        with self._connect() as conn:
            conn.execute("DELETE FROM state WHERE key = ?", (key,))
            conn.commit()

    def clear(self) -> None:
        with self._connect() as conn:
            conn.execute("DELETE FROM state")
            conn.commit()

    def save_players(self, source: Union[DataSource, str], players: Iterable[PlayerRecord]) -> None:
        """Replace the stored player list for ``source``."""

        payload = [player.model_dump(mode="json") for player in players]
        self.put(f"{PLAYERS_KEY}:{_source_key(source)}", payload)

    def load_players(self, source: Union[DataSource, str]) -> List[PlayerRecord]:
        payload = self.get(f"{PLAYERS_KEY}:{_source_key(source)}", [])
        try:
            return [PlayerRecord.model_validate(item) for item in payload]
        except (TypeError, ValidationError) as exc:
            logger.warning("Discarding stored players for %s: %s", source, exc)
            return []

    def save_selected_team(self, team: Optional[str]) -> None:
        self.put(SELECTED_TEAM_KEY, team or None)

    def load_selected_team(self) -> Optional[str]:
        return self.get(SELECTED_TEAM_KEY) or None

    def save_data_source(self, source: Union[DataSource, str]) -> None:
        self.put(DATA_SOURCE_KEY, _source_key(source))

    def load_data_source(self) -> Optional[DataSource]:
        raw = self.get(DATA_SOURCE_KEY)
        if raw is None:
            return None
        try:
            return DataSource(raw)
        except ValueError:
            logger.warning("Ignoring unknown stored data source %r", raw)
            return None

    def save_show_differences(self, show: bool) -> None:
        self.put(SHOW_DIFFERENCES_KEY, bool(show))

    def load_show_differences(self) -> bool:
        return bool(self.get(SHOW_DIFFERENCES_KEY, False))

    def _file_statuses(self) -> dict:
        statuses = self.get(FILE_STATUS_KEY, {})
        if not isinstance(statuses, dict):
            logger.warning("Discarding unreadable file statuses: %r", statuses)
            return {}
        return statuses

    def save_file_status(self, source: Union[DataSource, str], status: FileStatus) -> None:
        statuses = self._file_statuses()
        statuses[_source_key(source)] = asdict(status)
        self.put(FILE_STATUS_KEY, statuses)

    def load_file_status(self, source: Union[DataSource, str]) -> FileStatus:
        statuses = self._file_statuses()
        data = statuses.get(_source_key(source))
        if not isinstance(data, dict) or not data:
            return FileStatus()
        return FileStatus(
            is_uploading=bool(data.get("is_uploading", False)),
            error=data.get("error"),
            last_update=data.get("last_update"),
        )
