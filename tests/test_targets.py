from trainer.plan import ItemKey, get_session
from trainer.scoring import Target
from trainer.targets import CustomTargets, target_path

SQUAT = ItemKey("chairSquat", 1)


def test_target_path():
    assert target_path(5, "B", SQUAT) == "5-B-chairSquat:1"


def test_set_get_remove():
    targets = CustomTargets()
    targets.set(5, "B", SQUAT, Target(0, -2))
    assert targets.get(5, "B", SQUAT) == Target(1, 1)
    assert targets.get(6, "B", SQUAT) is None
    assert "5-B-chairSquat:1" in targets
    targets.remove(5, "B", SQUAT)
    assert len(targets) == 0


def test_clear_session_only_touches_that_session():
    targets = CustomTargets()
    targets.apply(1, "B", [(SQUAT, Target(2, 6)), (ItemKey("tableRow", 3), Target(1, 4))])
    targets.set(11, "B", SQUAT, Target(2, 6))
    assert targets.clear_session(1, "B") == 2
    assert len(targets) == 1


def test_for_session_mixes_overrides_and_plan():
    session = get_session(1, "B")
    targets = CustomTargets()
    targets.set(1, "B", SQUAT, Target(1, 5))
    resolved = targets.for_session(1, "B", session)
    assert resolved[SQUAT] == Target(1, 5)
    assert resolved[ItemKey("tableRow", 3)] == Target(2, 5)
    assert len(resolved) == 5


def test_from_dict_skips_malformed_entries():
    targets = CustomTargets.from_dict(
        {
            "1-A-plank:5": {"sets": 2, "reps": 15},
            "1-A-deadBug:4": "nope",
            "1-A-gluteBridge:3": {"sets": "x", "reps": 2},
        }
    )
    assert len(targets) == 1
    assert targets.to_dict() == {"1-A-plank:5": {"sets": 2, "reps": 15}}
    assert len(CustomTargets.from_dict([1, 2])) == 0
