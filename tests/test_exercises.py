from trainer.exercises import (
    DEFAULT_GUIDANCE_STEPS,
    EXERCISES,
    MUSCLE_GROUPS,
    exercise_title,
    get_exercise,
    get_guidance_steps,
    get_muscle_group,
    get_warmup_checklist,
)
from trainer.plan import generate_plan


def test_every_planned_exercise_is_in_the_catalog():
    for plan in generate_plan():
        for session in plan.sessions:
            for item in session.items:
                assert item.exercise_id in EXERCISES


def test_every_exercise_has_a_known_group():
    for ex in EXERCISES.values():
        assert ex.muscle_group in MUSCLE_GROUPS


def test_lookup_helpers():
    assert get_exercise("plank").title == "Plank"
    assert get_exercise("burpee") is None
    assert exercise_title("burpee") == "burpee"
    assert get_muscle_group("tableRow").label == "Back"
    assert get_muscle_group("burpee").key == "core"


def test_guidance_steps():
    assert len(get_guidance_steps("chairSquat")) == 3
    assert get_guidance_steps("burpee") == DEFAULT_GUIDANCE_STEPS


def test_warmup_checklist():
    steps = get_warmup_checklist()
    assert len(steps) == 5
    assert steps[0].secs == 30
    assert steps[1].reps == 10
