"""Session compliance scoring.

Per measured item::

    sets_ratio = min(sets_done / target_sets, 1)
    reps_ratio = min(reps_done / target_reps, 1)
    item_score = 0.5 * sets_ratio + 0.5 * reps_ratio

``pct`` is the mean item score and ``score`` subtracts an effort penalty so a
session completed at near maximal exertion does not count as ready to
progress.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Mapping

from trainer.plan import ItemKey, MeasuredItem, SessionItem, measured_items
from trainer.utils import clamp, to_int


@dataclass(frozen=True)
class Target:
    sets: int
    reps: int

    def to_dict(self) -> dict:
        return {"sets": self.sets, "reps": self.reps}

    @classmethod
    def from_dict(cls, data: Mapping) -> "Target":
        return cls(
            sets=max(1, to_int(data.get("sets"), 1)),
            reps=max(1, to_int(data.get("reps"), 1)),
        )


@dataclass(frozen=True)
class ActualResult:
    """What the user reports for one measured item of the current draft."""

    sets_done: int = 0
    reps_done: int = 0
    notes: str = ""

    def to_dict(self) -> dict:
        return {"setsDone": self.sets_done, "repsDone": self.reps_done, "notes": self.notes}

    @classmethod
    def from_dict(cls, data: Mapping) -> "ActualResult":
        return cls(
            sets_done=to_int(data.get("setsDone")),
            reps_done=to_int(data.get("repsDone")),
            notes=str(data.get("notes") or ""),
        )


@dataclass(frozen=True)
class SessionScore:
    pct: float
    score: float


def effective_target(
    key: ItemKey, item: MeasuredItem, targets: Mapping[ItemKey, Target]
) -> Target:
    """Return the target for ``item``, using the plan default when absent."""

    target = targets.get(key)
    if target is None:
        return Target(max(1, item.sets), max(1, item.reps))
    return Target(max(1, target.sets), max(1, target.reps))


def rpe_penalty(rpe: int) -> float:
    if rpe >= 9:
        return 0.2
    if rpe >= 8:
        return 0.1
    return 0.0


def score_session(
    items: Iterable[SessionItem],
    actuals: Mapping[ItemKey, ActualResult],
    targets: Mapping[ItemKey, Target],
    rpe: int,
) -> SessionScore:
    """Return the compliance percentage and final score for a session."""

    total = 0
    acc = 0.0
    for key, item in measured_items(items):
        target = effective_target(key, item, targets)
        actual = actuals.get(key)
        sets_done = max(0, actual.sets_done) if actual else 0
        reps_done = max(0, actual.reps_done) if actual else 0

        sets_ratio = clamp(sets_done / target.sets, 0.0, 1.0)
        reps_ratio = clamp(reps_done / target.reps, 0.0, 1.0)
        acc += 0.5 * sets_ratio + 0.5 * reps_ratio
        total += 1

    pct = 0.0 if total == 0 else acc / total
    score = clamp(pct - rpe_penalty(rpe), 0.0, 1.0)
    return SessionScore(pct=pct, score=score)
