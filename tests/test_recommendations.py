import pytest

from trainer.plan import COOLDOWN, WARMUP, ItemKey, MeasuredItem
from trainer.recommendations import (
    ADVANCE,
    HOLD,
    REDUCE,
    recommendation_from_score,
    suggest_reduction,
)
from trainer.scoring import ActualResult, Target

PUSH = MeasuredItem("inclinePushUp", "reps", 3, 10, "reps", "60-90s")
PLANK = MeasuredItem("plank", "time", 3, 20, "s", "45-60s")
MARCH = MeasuredItem("marchInPlace", "time", 1, 8, "min", "-")


@pytest.mark.parametrize(
    "score, level",
    [
        (1.0, ADVANCE),
        (0.80, ADVANCE),
        (0.799999, HOLD),
        (0.55, HOLD),
        (0.549999, REDUCE),
        (0.0, REDUCE),
    ],
)
def test_recommendation_thresholds(score, level):
    assert recommendation_from_score(score).level == level


def test_recommendation_labels():
    assert recommendation_from_score(0.9).tone == "good"
    assert recommendation_from_score(0.6).label == "Hold"
    assert recommendation_from_score(0.1).label == "Repeat easier"


def test_unattempted_reps_item():
    [sug] = suggest_reduction([WARMUP, PUSH, COOLDOWN], {}, {})
    assert sug.key == ItemKey("inclinePushUp", 1)
    assert sug.title == "Incline push-up"
    assert sug.from_target == Target(3, 10)
    assert sug.to_target == Target(2, 8)
    assert sug.describe() == "3x10 -> 2x8 reps"


def test_unattempted_seconds_item():
    [sug] = suggest_reduction([WARMUP, PLANK, COOLDOWN], {}, {})
    assert sug.to_target == Target(2, 15)


def test_unattempted_minutes_item():
    [sug] = suggest_reduction([WARMUP, MARCH, COOLDOWN], {}, {})
    assert sug.to_target == Target(1, 7)
    assert sug.unit == "min"


def test_met_items_are_omitted():
    actuals = {ItemKey("inclinePushUp", 1): ActualResult(3, 10)}
    assert suggest_reduction([WARMUP, PUSH, COOLDOWN], actuals, {}) == []


def test_only_missed_dimension_is_reduced():
    items = [WARMUP, PUSH, PLANK, COOLDOWN]
    actuals = {
        ItemKey("inclinePushUp", 1): ActualResult(3, 7),
        ItemKey("plank", 2): ActualResult(1, 25),
    }
    push, plank = suggest_reduction(items, actuals, {})
    assert push.to_target == Target(3, 8)
    assert plank.to_target == Target(2, 20)


def test_reduction_uses_custom_target_and_floors_at_one():
    key = ItemKey("inclinePushUp", 1)
    [sug] = suggest_reduction([WARMUP, PUSH, COOLDOWN], {}, {key: Target(1, 2)})
    assert sug.from_target == Target(1, 2)
    assert sug.to_target == Target(1, 1)
    assert suggest_reduction([WARMUP, PUSH, COOLDOWN], {}, {key: Target(1, 1)}) == []
