"""Current position in the plan and the transitions that move it.

All functions here are pure: they take an :class:`AppState` and return a new
one.  Persisting the result is left to the caller.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Mapping

from trainer import DAY_IDS, PLAN_WEEKS
from trainer.plan import clamp_week, next_day
from trainer.recommendations import ADVANCE, HOLD
from trainer.utils import to_number


@dataclass(frozen=True)
class AppState:
    week: int = 1
    day_id: str = "A"
    smart_progression: bool = True

    def to_dict(self) -> dict:
        return {
            "week": self.week,
            "dayId": self.day_id,
            "smartProgression": self.smart_progression,
        }

    @classmethod
    def from_dict(cls, data) -> "AppState":
        """Build a state from stored data, repairing out of range values."""

        if not isinstance(data, Mapping):
            return cls()
        day_id = data.get("dayId")
        smart = data.get("smartProgression")
        return cls(
            week=clamp_week(to_number(data.get("week"), 1)),
            day_id=day_id if day_id in DAY_IDS else "A",
            smart_progression=smart if isinstance(smart, bool) else True,
        )


def session_key(state: AppState) -> str:
    return f"{state.week}-{state.day_id}"


def next_position(state: AppState, level: str) -> AppState:
    """Return the state after a session saved with recommendation ``level``.

    ``advance`` moves to the next day and rolls into the next week after day
    D (week 20 stays at week 20).  ``hold`` moves to the next day but wraps
    within the same week.  Anything else repeats the same session.
    """

    if level not in (ADVANCE, HOLD):
        return state
    following = next_day(state.day_id)
    if following is not None:
        return replace(state, day_id=following)
    if level == ADVANCE:
        return replace(state, week=clamp_week(state.week + 1), day_id=DAY_IDS[0])
    return replace(state, day_id=DAY_IDS[0])


def go_to_week(state: AppState, week: int) -> AppState:
    return replace(state, week=clamp_week(week))


def prev_week(state: AppState) -> AppState:
    return go_to_week(state, state.week - 1)


def next_week(state: AppState) -> AppState:
    return go_to_week(state, state.week + 1)


def set_day(state: AppState, day_id: str) -> AppState:
    if day_id not in DAY_IDS:
        raise ValueError(f"Unknown day '{day_id}'")
    return replace(state, day_id=day_id)


def set_smart_progression(state: AppState, enabled: bool) -> AppState:
    return replace(state, smart_progression=bool(enabled))


def is_last_session(state: AppState) -> bool:
    return state.week == PLAN_WEEKS and state.day_id == DAY_IDS[-1]
