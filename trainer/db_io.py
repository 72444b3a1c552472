"""Import and export helpers for the training store."""
from __future__ import annotations

from pathlib import Path
import json
import shutil
import sqlite3
import time
import logging
from typing import Any, Dict, List, Tuple

from trainer import DEFAULT_DB_PATH

# Directory where store backups are written before an import.
BACKUP_DIR = Path(__file__).resolve().parents[1] / "backups"

# Tables expected to exist in any valid store file.
REQUIRED_TABLES = ["kv_store"]


def store_to_json(db_path: Path) -> Dict[str, Any]:
    """Return every stored record of ``db_path`` decoded from JSON.

    Records that cannot be decoded are kept as their raw text so an export
    never loses data.
    """
    result: Dict[str, Any] = {}
    with sqlite3.connect(str(db_path)) as conn:
        rows = conn.execute("SELECT key, value FROM kv_store ORDER BY key").fetchall()
    for key, value in rows:
        try:
            result[key] = json.loads(value)
        except ValueError:
            result[key] = value
    return result


def export_database(db_path: Path = DEFAULT_DB_PATH, dest_dir: Path | None = None) -> Path:
    """Copy ``db_path`` into ``dest_dir`` and return the new file's path.

    File-system errors are logged with full stack traces and re-raised so the
    caller can tell the user what went wrong.
    """

    dest_dir = Path(dest_dir or Path.cwd())
    filename = f"trainer_{int(time.time())}.db"
    dest = (dest_dir / filename).resolve()
    try:
        shutil.copy2(db_path, dest)
    except FileNotFoundError:
        logging.exception("Store file not found: %s", db_path)
        raise
    except PermissionError:
        logging.exception("Permission denied writing export to %s", dest)
        raise
    except OSError:
        logging.exception("OS error exporting store to %s", dest)
        raise
    logging.info("Exported store to %s", dest)
    return dest


def export_database_json(db_path: Path = DEFAULT_DB_PATH, dest_dir: Path | None = None) -> Path:
    """Write the stored records of ``db_path`` to a JSON file in ``dest_dir``."""

    dest_dir = Path(dest_dir or Path.cwd())
    data = store_to_json(db_path)
    filename = f"trainer_{int(time.time())}.json"
    dest = (dest_dir / filename).resolve()
    try:
        with dest.open("w", encoding="utf-8") as fh:
            json.dump(data, fh, indent=2)
    except FileNotFoundError:
        logging.exception("Destination not found for JSON export: %s", dest)
        raise
    except PermissionError:
        logging.exception("Permission denied writing JSON export to %s", dest)
        raise
    except OSError:
        logging.exception("OS error exporting JSON to %s", dest)
        raise
    logging.info("Exported store JSON to %s", dest)
    return dest


def validate_database(db_path: Path) -> Tuple[bool, List[str]]:
    """Check that ``db_path`` is a usable store file.

    Returns a success flag and the list of problems found.
    """
    errors: List[str] = []
    if not Path(db_path).exists():
        return False, [f"file not found: {db_path}"]
    try:
        with sqlite3.connect(str(db_path)) as conn:
            for table in REQUIRED_TABLES:
                row = conn.execute(
                    "SELECT name FROM sqlite_master WHERE type='table' AND name=?",
                    (table,),
                ).fetchone()
                if not row:
                    errors.append(f"missing table: {table}")
    except sqlite3.DatabaseError as exc:
        errors.append(str(exc))
    return (len(errors) == 0, errors)


def import_database(
    src_path: Path, db_path: Path = DEFAULT_DB_PATH, backup_dir: Path | None = None
) -> Path | None:
    """Validate ``src_path`` and replace the store at ``db_path`` with it.

    The current store, when present, is copied to ``backup_dir`` first and the
    backup path is returned.  Validation failures raise :class:`ValueError`.
    """

    valid, errors = validate_database(src_path)
    if not valid:
        message = "; ".join(errors)
        logging.error("Import failed validation: %s", message)
        raise ValueError(message)

    backup_dir = Path(backup_dir or BACKUP_DIR)
    backup_path = None
    try:
        if Path(db_path).exists():
            backup_dir.mkdir(parents=True, exist_ok=True)
            backup_path = backup_dir / f"trainer_{int(time.time())}.db.bak"
            shutil.copy2(db_path, backup_path)
        Path(db_path).parent.mkdir(parents=True, exist_ok=True)
        shutil.copy2(src_path, db_path)
    except PermissionError:
        logging.exception("Import failed, permission denied")
        raise
    except OSError:
        logging.exception("Import failed due to OS error")
        raise
    logging.info("Replaced store with %s (backup: %s)", src_path, backup_path)
    return backup_path
