from pathlib import Path
import sys

import pytest

sys.path.append(str(Path(__file__).resolve().parents[1]))

from trainer.controller import ProgressionController
from trainer.storage import KeyValueStore


@pytest.fixture
def store_path(tmp_path: Path) -> Path:
    """Location of a fresh key-value store inside the test's temp dir."""
    return tmp_path / "data" / "trainer.db"


@pytest.fixture
def store(store_path: Path) -> KeyValueStore:
    return KeyValueStore(store_path)


@pytest.fixture
def controller(store_path: Path) -> ProgressionController:
    return ProgressionController(store_path)
