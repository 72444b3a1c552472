import json
import sqlite3

import pytest

from trainer import db_io
from trainer.storage import KeyValueStore


@pytest.fixture
def populated(store, store_path):
    store.save("calisthenics_state_v2", {"week": 3, "dayId": "B", "smartProgression": True})
    store.save("warmup_check_3-B", {"0": True})
    return store_path


def test_store_to_json(populated):
    data = db_io.store_to_json(populated)
    assert data["calisthenics_state_v2"]["week"] == 3
    assert data["warmup_check_3-B"] == {"0": True}


def test_export_database(populated, tmp_path):
    dest_dir = tmp_path / "exports"
    dest_dir.mkdir()
    exported = db_io.export_database(populated, dest_dir)
    assert exported.parent == dest_dir
    assert exported.name.startswith("trainer_") and exported.suffix == ".db"
    assert db_io.validate_database(exported) == (True, [])


def test_export_database_json(populated, tmp_path):
    exported = db_io.export_database_json(populated, tmp_path)
    assert exported.suffix == ".json"
    assert json.loads(exported.read_text())["calisthenics_state_v2"]["dayId"] == "B"


def test_export_missing_store_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        db_io.export_database(tmp_path / "missing.db", tmp_path)


def test_validate_database(tmp_path):
    ok, errors = db_io.validate_database(tmp_path / "missing.db")
    assert not ok and errors

    other = tmp_path / "other.db"
    with sqlite3.connect(str(other)) as conn:
        conn.execute("CREATE TABLE something (id INTEGER)")
    ok, errors = db_io.validate_database(other)
    assert not ok
    assert errors == ["missing table: kv_store"]


def test_import_database_backs_up_current_store(populated, tmp_path, store):
    incoming_path = tmp_path / "incoming.db"
    incoming = KeyValueStore(incoming_path)
    incoming.save("calisthenics_state_v2", {"week": 9, "dayId": "D", "smartProgression": False})

    backup = db_io.import_database(incoming_path, populated, tmp_path / "backups")
    assert backup is not None and backup.exists()
    assert store.load("calisthenics_state_v2").value["week"] == 9
    assert db_io.store_to_json(backup)["calisthenics_state_v2"]["week"] == 3


def test_import_invalid_file_is_rejected(populated, tmp_path, store):
    bad = tmp_path / "bad.db"
    bad.write_text("not a database")
    with pytest.raises(ValueError):
        db_io.import_database(bad, populated, tmp_path / "backups")
    assert store.load("calisthenics_state_v2").value["week"] == 3
