"""Turn a session score into a progression decision.

Thresholds are fixed: ``score >= 0.80`` advances, ``score >= 0.55`` holds
and anything lower repeats the session with easier targets.  On ``reduce``
:func:`suggest_reduction` proposes concrete lower targets for every item the
user fell short on.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Mapping

from trainer.exercises import exercise_title
from trainer.plan import ItemKey, SessionItem, measured_items
from trainer.scoring import ActualResult, Target, effective_target

ADVANCE = "advance"
HOLD = "hold"
REDUCE = "reduce"

ADVANCE_THRESHOLD = 0.80
HOLD_THRESHOLD = 0.55


@dataclass(frozen=True)
class Recommendation:
    level: str
    label: str
    tone: str


RECOMMENDATIONS = {
    ADVANCE: Recommendation(ADVANCE, "Advance", "good"),
    HOLD: Recommendation(HOLD, "Hold", "warn"),
    REDUCE: Recommendation(REDUCE, "Repeat easier", "bad"),
}


@dataclass(frozen=True)
class ReductionSuggestion:
    """Advisory change of one item's target, applied only on request."""

    key: ItemKey
    exercise_id: str
    title: str
    from_target: Target
    to_target: Target
    unit: str

    def describe(self) -> str:
        return (
            f"{self.from_target.sets}x{self.from_target.reps} -> "
            f"{self.to_target.sets}x{self.to_target.reps} {self.unit}"
        )


def recommendation_from_score(score: float) -> Recommendation:
    """Return the :class:`Recommendation` for ``score``."""

    if score >= ADVANCE_THRESHOLD:
        return RECOMMENDATIONS[ADVANCE]
    if score >= HOLD_THRESHOLD:
        return RECOMMENDATIONS[HOLD]
    return RECOMMENDATIONS[REDUCE]


def suggest_reduction(
    items: Iterable[SessionItem],
    actuals: Mapping[ItemKey, ActualResult],
    targets: Mapping[ItemKey, Target],
) -> list[ReductionSuggestion]:
    """Return reduced targets for the measured items that under-performed.

    Missing sets cost one set; missing reps cost two reps, five seconds or
    one minute depending on the item.  Targets never drop below 1.  Items
    that met both targets are left out.
    """

    out: list[ReductionSuggestion] = []
    for key, item in measured_items(items):
        target = effective_target(key, item, targets)
        actual = actuals.get(key)
        no_data = actual is None
        sets_done = actual.sets_done if actual else 0
        reps_done = actual.reps_done if actual else 0

        new_sets = target.sets
        new_reps = target.reps
        if no_data or sets_done < target.sets:
            new_sets = max(1, target.sets - 1)
        if no_data or reps_done < target.reps:
            if item.is_timed:
                delta = 1 if item.unit == "min" else 5
            else:
                delta = 2
            new_reps = max(1, target.reps - delta)

        if new_sets == target.sets and new_reps == target.reps:
            continue
        out.append(
            ReductionSuggestion(
                key=key,
                exercise_id=item.exercise_id,
                title=exercise_title(item.exercise_id),
                from_target=target,
                to_target=Target(new_sets, new_reps),
                unit=item.unit,
            )
        )
    return out
