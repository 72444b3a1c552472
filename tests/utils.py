from trainer.plan import ItemKey


def complete_session(controller, reps_fraction: float = 1.0) -> None:
    """Record every set of the current session at ``reps_fraction`` of the reps."""
    for key, target in controller.session_targets().items():
        controller.set_actual(key, target.sets, int(target.reps * reps_fraction))


def key(exercise_id: str, index: int) -> ItemKey:
    return ItemKey(exercise_id, index)
