"""Utility helpers used across trainer modules."""

from __future__ import annotations

import math
import time
import uuid
from datetime import date, datetime


def clamp(value, low, high):
    """Return ``value`` limited to the inclusive range ``low``..``high``."""

    return max(low, min(high, value))


def to_number(value, default: float = 0) -> float:
    """Return ``value`` as a number or ``default`` when it cannot be parsed."""

    if value is None or isinstance(value, bool):
        return default
    try:
        number = float(value)
    except (TypeError, ValueError):
        return default
    return number if math.isfinite(number) else default


def to_int(value, default: int = 0) -> int:
    """Return ``value`` truncated to ``int`` or ``default`` on bad input."""

    return int(to_number(value, default))


def today_iso() -> str:
    """Return today's local date as ``YYYY-MM-DD``."""

    return date.today().isoformat()


def now_iso() -> str:
    """Return the current local time as an ISO 8601 timestamp."""

    return datetime.now().isoformat(timespec="seconds")


def new_id() -> str:
    """Return a short unique identifier for log entries."""

    return f"{uuid.uuid4().hex[:12]}{int(time.time()):x}"
