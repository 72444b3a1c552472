"""Local key-value persistence.

Records are stored as JSON text in a single ``kv_store`` table of a SQLite
file.  Reads never raise: a missing record or a record that cannot be decoded
yields the caller's fallback, and :class:`LoadResult` tells the two cases
apart.  Writes are best effort; failures are logged and reported through the
return value only.
"""

from __future__ import annotations

import json
import logging
import sqlite3
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from trainer import DEFAULT_DB_PATH

LOADED = "loaded"
MISSING = "missing"
FALLBACK = "fallback"

_SCHEMA = """
CREATE TABLE IF NOT EXISTS kv_store (
    key TEXT PRIMARY KEY,
    value TEXT NOT NULL,
    updated_at TEXT NOT NULL DEFAULT CURRENT_TIMESTAMP
)
"""


@dataclass(frozen=True)
class LoadResult:
    """Outcome of :meth:`KeyValueStore.load`.

    ``status`` is ``"loaded"`` when stored data was decoded, ``"missing"``
    when nothing was stored yet and ``"fallback"`` when stored data was
    unreadable and ``value`` is the fallback instead.
    """

    value: Any
    status: str

    @property
    def used_fallback(self) -> bool:
        return self.status != LOADED


class KeyValueStore:
    """JSON values stored by key in a SQLite database."""

    def __init__(self, db_path: Path = DEFAULT_DB_PATH) -> None:
        self.db_path = Path(db_path)

    def _connect(self) -> sqlite3.Connection:
        self.db_path.parent.mkdir(parents=True, exist_ok=True)
        conn = sqlite3.connect(str(self.db_path))
        conn.execute(_SCHEMA)
        return conn

    def load(self, key: str, fallback: Any = None) -> LoadResult:
        """Return the value stored under ``key`` or ``fallback``."""

        try:
            with self._connect() as conn:
                row = conn.execute(
                    "SELECT value FROM kv_store WHERE key = ?", (key,)
                ).fetchone()
        except (sqlite3.Error, OSError):
            logging.exception("Could not read '%s' from %s", key, self.db_path)
            return LoadResult(fallback, FALLBACK)
        if row is None or not row[0]:
            return LoadResult(fallback, MISSING)
        try:
            return LoadResult(json.loads(row[0]), LOADED)
        except ValueError:
            logging.warning("Discarding unreadable record '%s'", key)
            return LoadResult(fallback, FALLBACK)

    def save(self, key: str, value: Any) -> bool:
        """Store ``value`` under ``key``; return ``False`` if it failed."""

        try:
            payload = json.dumps(value)
            with self._connect() as conn:
                conn.execute(
                    """
                    INSERT INTO kv_store (key, value, updated_at)
                    VALUES (?, ?, CURRENT_TIMESTAMP)
                    ON CONFLICT(key) DO UPDATE SET
                        value = excluded.value,
                        updated_at = excluded.updated_at
                    """,
                    (key, payload),
                )
        except (TypeError, ValueError, sqlite3.Error, OSError):
            logging.exception("Could not save '%s' to %s", key, self.db_path)
            return False
        return True

    def delete(self, key: str) -> bool:
        """Remove ``key``; return ``False`` if the store was unavailable."""

        try:
            with self._connect() as conn:
                conn.execute("DELETE FROM kv_store WHERE key = ?", (key,))
        except (sqlite3.Error, OSError):
            logging.exception("Could not delete '%s' from %s", key, self.db_path)
            return False
        return True

    def keys(self, prefix: str = "") -> list[str]:
        """Return stored keys starting with ``prefix``."""

        try:
            with self._connect() as conn:
                rows = conn.execute(
                    "SELECT key FROM kv_store WHERE key LIKE ? ESCAPE '\\' ORDER BY key",
                    (_like_prefix(prefix),),
                ).fetchall()
        except (sqlite3.Error, OSError):
            logging.exception("Could not list keys in %s", self.db_path)
            return []
        return [r[0] for r in rows]


def _like_prefix(prefix: str) -> str:
    escaped = prefix.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
    return escaped + "%"
