import pytest

from trainer.recommendations import ADVANCE, HOLD, REDUCE
from trainer.state import (
    AppState,
    go_to_week,
    is_last_session,
    next_position,
    next_week,
    prev_week,
    session_key,
    set_day,
    set_smart_progression,
)


@pytest.mark.parametrize(
    "start, level, expected",
    [
        (AppState(5, "B"), ADVANCE, AppState(5, "C")),
        (AppState(5, "D"), ADVANCE, AppState(6, "A")),
        (AppState(20, "D"), ADVANCE, AppState(20, "A")),
        (AppState(5, "B"), HOLD, AppState(5, "C")),
        (AppState(5, "D"), HOLD, AppState(5, "A")),
        (AppState(5, "B"), REDUCE, AppState(5, "B")),
    ],
)
def test_next_position(start, level, expected):
    assert next_position(start, level) == expected


def test_week_moves_are_clamped():
    assert prev_week(AppState(1, "C")) == AppState(1, "C")
    assert next_week(AppState(20, "C")) == AppState(20, "C")
    assert go_to_week(AppState(), 0).week == 1
    assert next_week(AppState(4, "B")) == AppState(5, "B")


def test_set_day_and_smart_flag():
    assert set_day(AppState(), "C").day_id == "C"
    with pytest.raises(ValueError):
        set_day(AppState(), "X")
    assert set_smart_progression(AppState(), False).smart_progression is False


def test_session_key_and_last_session():
    assert session_key(AppState(7, "D")) == "7-D"
    assert is_last_session(AppState(20, "D"))
    assert not is_last_session(AppState(19, "D"))


def test_state_serialisation():
    state = AppState(3, "C", False)
    assert state.to_dict() == {"week": 3, "dayId": "C", "smartProgression": False}
    assert AppState.from_dict(state.to_dict()) == state
    assert AppState.from_dict(None) == AppState()
    assert AppState.from_dict({"week": "abc"}) == AppState()
    assert AppState.from_dict({"week": -3, "dayId": "B"}) == AppState(1, "B")
    assert AppState.from_dict({"smartProgression": "false"}).smart_progression is True
    assert AppState.from_dict({"smartProgression": 0}).smart_progression is True
    assert AppState.from_dict({"smartProgression": False}).smart_progression is False
