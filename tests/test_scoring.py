import pytest

from trainer.plan import COOLDOWN, WARMUP, ItemKey, MeasuredItem
from trainer.scoring import ActualResult, Target, effective_target, rpe_penalty, score_session

PUSH = MeasuredItem("inclinePushUp", "reps", 3, 10, "reps", "60-90s")
PLANK = MeasuredItem("plank", "time", 3, 20, "s", "45-60s")
ITEMS = [WARMUP, PUSH, COOLDOWN]
PUSH_KEY = ItemKey("inclinePushUp", 1)


def test_full_compliance_scores_one():
    result = score_session(ITEMS, {PUSH_KEY: ActualResult(3, 10)}, {}, 7)
    assert result.pct == 1.0
    assert result.score == 1.0


def test_partial_compliance():
    result = score_session(ITEMS, {PUSH_KEY: ActualResult(1, 5)}, {}, 7)
    assert result.pct == pytest.approx(0.5 * (1 / 3) + 0.5 * (5 / 10))
    assert result.score == pytest.approx(0.4167, abs=1e-4)


def test_high_effort_penalty():
    result = score_session(ITEMS, {PUSH_KEY: ActualResult(1, 5)}, {}, 9)
    assert result.score == pytest.approx(0.41667 - 0.2, abs=1e-4)
    result = score_session(ITEMS, {PUSH_KEY: ActualResult(3, 10)}, {}, 8)
    assert result.score == pytest.approx(0.9)


def test_score_floored_at_zero():
    result = score_session(ITEMS, {PUSH_KEY: ActualResult(0, 1)}, {}, 10)
    assert result.score == 0.0


def test_rpe_penalty_steps():
    assert rpe_penalty(7) == 0.0
    assert rpe_penalty(8) == 0.1
    assert rpe_penalty(9) == 0.2
    assert rpe_penalty(10) == 0.2


def test_missing_actuals_count_as_zero():
    items = [WARMUP, PUSH, PLANK, COOLDOWN]
    result = score_session(items, {PUSH_KEY: ActualResult(3, 10)}, {}, 7)
    assert result.pct == pytest.approx(0.5)


def test_overachieving_is_capped():
    result = score_session(ITEMS, {PUSH_KEY: ActualResult(6, 30)}, {}, 7)
    assert result.pct == 1.0


def test_custom_target_is_used():
    targets = {PUSH_KEY: Target(2, 5)}
    result = score_session(ITEMS, {PUSH_KEY: ActualResult(2, 5)}, targets, 7)
    assert result.pct == 1.0


def test_blocks_only_session_scores_zero():
    result = score_session([WARMUP, COOLDOWN], {}, {}, 7)
    assert result.pct == 0.0
    assert result.score == 0.0


def test_effective_target_falls_back_to_plan():
    assert effective_target(PUSH_KEY, PUSH, {}) == Target(3, 10)
    assert effective_target(PUSH_KEY, PUSH, {PUSH_KEY: Target(0, 0)}) == Target(1, 1)


def test_actual_result_serialisation():
    actual = ActualResult(2, 8, "felt good")
    assert actual.to_dict() == {"setsDone": 2, "repsDone": 8, "notes": "felt good"}
    assert ActualResult.from_dict({"setsDone": "2", "repsDone": None}) == ActualResult(2, 0, "")
