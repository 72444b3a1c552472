"""Twenty week plan generator.

Every week of the programme is derived from its week number alone.  The four
session templates (A-D) are fixed lists of exercises; only the numeric
targets change from week to week following the progression formulas below.
Weeks 8 and 16 are deload weeks with reduced volume.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Union

from trainer import DAY_IDS, DELOAD_WEEKS, PLAN_WEEKS
from trainer.utils import clamp


@dataclass(frozen=True)
class ItemKey:
    """Identity of a measured item within a session.

    The same exercise can appear more than once in a session so the position
    is part of the key.
    """

    exercise_id: str
    index: int

    def __str__(self) -> str:
        return f"{self.exercise_id}:{self.index}"

    @classmethod
    def parse(cls, text: str) -> "ItemKey":
        """Return the key encoded in ``text`` (``"exerciseId:index"``)."""

        exercise_id, _, index = text.rpartition(":")
        if not exercise_id or not index.isdigit():
            raise ValueError(f"Invalid item key: {text!r}")
        return cls(exercise_id, int(index))


@dataclass(frozen=True)
class BlockItem:
    """Warm-up or cool-down entry without a target."""

    exercise_id: str


@dataclass(frozen=True)
class MeasuredItem:
    """Exercise with a set and repetition (or duration) target.

    ``kind`` is ``"reps"`` or ``"time"``; for timed items ``reps`` holds the
    duration expressed in ``unit`` (``"s"`` or ``"min"``).
    """

    exercise_id: str
    kind: str
    sets: int
    reps: int
    unit: str
    rest: str

    @property
    def is_timed(self) -> bool:
        return self.kind == "time"


SessionItem = Union[BlockItem, MeasuredItem]


@dataclass(frozen=True)
class Session:
    id: str
    title: str
    items: tuple[SessionItem, ...]

    def measured_items(self) -> list[tuple[ItemKey, MeasuredItem]]:
        return measured_items(self.items)


def measured_items(items: Iterable[SessionItem]) -> list[tuple[ItemKey, MeasuredItem]]:
    """Return ``(key, item)`` pairs for every measured item of ``items``."""

    return [
        (ItemKey(item.exercise_id, idx), item)
        for idx, item in enumerate(items)
        if isinstance(item, MeasuredItem)
    ]


@dataclass(frozen=True)
class WeekPlan:
    week: int
    sets: int
    sessions: tuple[Session, ...]

    @property
    def deload(self) -> bool:
        return is_deload_week(self.week)

    def session(self, day_id: str) -> Session:
        """Return the session for ``day_id``; unknown days map to day A."""

        for session in self.sessions:
            if session.id == day_id:
                return session
        return self.sessions[0]


def clamp_week(week: int) -> int:
    return clamp(int(week), 1, PLAN_WEEKS)


def is_deload_week(week: int) -> bool:
    return week in DELOAD_WEEKS


def sets_for_week(week: int) -> int:
    """Return the base number of sets for ``week``."""

    sets = 2
    if week >= 5:
        sets = 3
    if week >= 13:
        sets = 4
    if is_deload_week(week):
        sets = max(2, sets - 1)
    return sets


def reps_for_week(week: int, base_reps: int) -> int:
    """Return the repetition target for ``week`` starting from ``base_reps``."""

    reps = base_reps + (week - 1) // 2
    if is_deload_week(week):
        reps = max(4, reps - 2)
    return reps


def seconds_for_week(week: int, base_seconds: int) -> int:
    """Return the hold duration for ``week`` starting from ``base_seconds``."""

    seconds = base_seconds + (week - 1) // 2 * 5
    if is_deload_week(week):
        seconds = max(10, seconds - 10)
    return seconds


def march_minutes_for_week(week: int) -> int:
    """Return the minutes of light cardio scheduled in ``week``."""

    minutes = clamp(8 + (week - 1) // 2, 8, 20)
    if is_deload_week(week):
        minutes = max(6, minutes - 4)
    return minutes


WARMUP = BlockItem("warmup")
COOLDOWN = BlockItem("cooldown")


def _reps(exercise_id: str, sets: int, reps: int, rest: str, unit: str = "reps") -> MeasuredItem:
    return MeasuredItem(exercise_id, "reps", sets, reps, unit, rest)


def _timed(exercise_id: str, sets: int, amount: int, rest: str, unit: str) -> MeasuredItem:
    return MeasuredItem(exercise_id, "time", sets, amount, unit, rest)


def _session(day_id: str, title: str, *items: MeasuredItem) -> Session:
    return Session(day_id, title, (WARMUP, *items, COOLDOWN))


def build_week_plan(week: int) -> WeekPlan:
    """Return the :class:`WeekPlan` for ``week`` (clamped to 1-20)."""

    week = clamp_week(week)
    sets = sets_for_week(week)
    # accessory and technique work runs one set below the base
    light_sets = max(2, sets - 1)

    push_reps = reps_for_week(week, 6)
    squat_reps = reps_for_week(week, 8)
    row_reps = reps_for_week(week, 5)
    bridge_reps = reps_for_week(week, 10)
    dead_bug_reps = reps_for_week(week, 6)
    step_up_reps = reps_for_week(week, 8)
    calf_reps = reps_for_week(week, 10)
    scap_reps = reps_for_week(week, 8)
    plank_sec = seconds_for_week(week, 20)

    march = _timed("marchInPlace", 1, march_minutes_for_week(week), "-", "min")

    a = _session(
        "A",
        "Push + Core",
        _reps("scapularPushUp", light_sets, scap_reps, "45-60s"),
        _reps("inclinePushUp", sets, push_reps, "60-90s"),
        _reps("gluteBridge", sets, bridge_reps, "60s"),
        _reps("deadBug", sets, dead_bug_reps, "45-60s", unit="reps/side"),
        _timed("plank", sets, plank_sec, "45-60s", "s"),
    )
    b = _session(
        "B",
        "Legs + Pull",
        _reps("chairSquat", sets, squat_reps, "60-90s"),
        _reps("stepUp", sets, step_up_reps, "60-90s", unit="reps/side"),
        _reps("tableRow", sets, row_reps, "60-90s"),
        _reps("calfRaise", light_sets, calf_reps, "45-60s"),
        march,
    )
    c = _session(
        "C",
        "Full body (technique)",
        _reps("inclinePushUp", light_sets, max(4, push_reps - 1), "60-90s"),
        _reps("chairSquat", light_sets, max(6, squat_reps - 2), "60-90s"),
        _reps("tableRow", light_sets, max(4, row_reps - 1), "60-90s"),
        _reps("deadBug", light_sets, max(5, dead_bug_reps - 1), "45-60s", unit="reps/side"),
        _timed("plank", light_sets, max(15, plank_sec - 5), "45-60s", "s"),
    )
    d = _session(
        "D",
        "Pull + Core + Light",
        _reps("tableRow", sets, row_reps, "60-90s"),
        _reps("gluteBridge", light_sets, bridge_reps, "60s"),
        _reps("deadBug", sets, dead_bug_reps, "45-60s", unit="reps/side"),
        _timed("plank", sets, plank_sec, "45-60s", "s"),
        march,
    )
    return WeekPlan(week=week, sets=sets, sessions=(a, b, c, d))


def generate_plan() -> list[WeekPlan]:
    """Return the full programme, one :class:`WeekPlan` per week."""

    return [build_week_plan(week) for week in range(1, PLAN_WEEKS + 1)]


def get_session(week: int, day_id: str) -> Session:
    """Return the session scheduled for ``week`` on ``day_id``."""

    return build_week_plan(week).session(day_id)


def next_day(day_id: str) -> str | None:
    """Return the day following ``day_id`` or ``None`` after the last day."""

    idx = DAY_IDS.index(day_id) if day_id in DAY_IDS else 0
    if idx < len(DAY_IDS) - 1:
        return DAY_IDS[idx + 1]
    return None
