"""Shared constants for the training plan modules."""

from __future__ import annotations

from pathlib import Path

# Length of the programme in weeks
PLAN_WEEKS = 20

# Training days of every week, in order
DAY_IDS = ("A", "B", "C", "D")
DAY_NAMES = {"A": "Day 1", "B": "Day 2", "C": "Day 3", "D": "Day 4"}

# Weeks with reduced volume
DELOAD_WEEKS = (8, 16)

# Perceived exertion bounds and the value a fresh draft starts with
MIN_RPE = 5
MAX_RPE = 10
DEFAULT_RPE = 7

# Path to the local key-value store shipped alongside the application
DEFAULT_DB_PATH = Path(__file__).resolve().parent.parent / "data" / "trainer.db"

# Keys of the persisted records
STATE_KEY = "calisthenics_state_v2"
TARGETS_KEY = "calisthenics_targets_v2"
LOGS_KEY = "calisthenics_logs_v2"
WARMUP_KEY_PREFIX = "warmup_check_"

__all__ = [
    "PLAN_WEEKS",
    "DAY_IDS",
    "DAY_NAMES",
    "DELOAD_WEEKS",
    "MIN_RPE",
    "MAX_RPE",
    "DEFAULT_RPE",
    "DEFAULT_DB_PATH",
    "STATE_KEY",
    "TARGETS_KEY",
    "LOGS_KEY",
    "WARMUP_KEY_PREFIX",
]
