"""SQLite implementation of StateStore for production persistence."""

import json
import sqlite3
from pathlib import Path

from slack_app.resources.types import MANIFEST_KIND, TOKEN_KIND, ManifestRecord, TokenRecord
from slack_app.state.abc import StateEntry, StateStore


class SQLiteStateStore(StateStore):
    """SQLite implementation of StateStore.

    Each record is stored as a JSON document in a single `resources` table
    keyed by (kind, name).

    Attributes:
        db_path: Path to the SQLite database file
    """

    def __init__(self, db_path: Path) -> None:
        """Initialize with database path and create schema if needed.

        Args:
            db_path: Path to the SQLite database file
        """
        self._db_path = db_path
        self._ensure_schema()

    def _ensure_schema(self) -> None:
        """Create the resources table if it doesn't exist."""
        if not self._db_path.parent.exists():
            self._db_path.parent.mkdir(parents=True)

        with sqlite3.connect(self._db_path) as conn:
            conn.execute("""
                CREATE TABLE IF NOT EXISTS resources (
                    kind TEXT NOT NULL,
                    name TEXT NOT NULL,
                    data TEXT NOT NULL,
                    PRIMARY KEY (kind, name)
                )
            """)
            conn.commit()

    def _get_connection(self) -> sqlite3.Connection:
        return sqlite3.connect(self._db_path)

    def _get(self, kind: str, name: str) -> dict | None:
        with self._get_connection() as conn:
            cursor = conn.execute(
                "SELECT data FROM resources WHERE kind = ? AND name = ?",
                (kind, name),
            )
            row = cursor.fetchone()
        if row is None:
            return None
        return json.loads(row[0])

    def _put(self, kind: str, name: str, data: dict) -> None:
        with self._get_connection() as conn:
            conn.execute(
                """
                INSERT INTO resources (kind, name, data)
                VALUES (?, ?, ?)
                ON CONFLICT(kind, name) DO UPDATE SET data = excluded.data
                """,
                (kind, name, json.dumps(data)),
            )
            conn.commit()

    def _remove(self, kind: str, name: str) -> None:
        with self._get_connection() as conn:
            conn.execute("DELETE FROM resources WHERE kind = ? AND name = ?", (kind, name))
            conn.commit()

    def get_manifest(self, name: str) -> ManifestRecord | None:
        data = self._get(MANIFEST_KIND, name)
        if data is None:
            return None
        return ManifestRecord.from_dict(data)

    def put_manifest(self, name: str, record: ManifestRecord) -> None:
        self._put(MANIFEST_KIND, name, record.to_dict())

    def remove_manifest(self, name: str) -> None:
        self._remove(MANIFEST_KIND, name)

    def get_token(self, name: str) -> TokenRecord | None:
        data = self._get(TOKEN_KIND, name)
        if data is None:
            return None
        return TokenRecord.from_dict(data)

    def put_token(self, name: str, record: TokenRecord) -> None:
        self._put(TOKEN_KIND, name, record.to_dict())

    def remove_token(self, name: str) -> None:
        self._remove(TOKEN_KIND, name)

    def list_entries(self) -> list[StateEntry]:
        with self._get_connection() as conn:
            cursor = conn.execute("SELECT kind, name, data FROM resources ORDER BY kind, name")
            rows = cursor.fetchall()

        entries: list[StateEntry] = []
        for kind, name, data in rows:
            parsed = json.loads(data)
            record: ManifestRecord | TokenRecord
            if kind == MANIFEST_KIND:
                record = ManifestRecord.from_dict(parsed)
            else:
                record = TokenRecord.from_dict(parsed)
            entries.append(StateEntry(kind=kind, name=name, record=record))
        return entries
