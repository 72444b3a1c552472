"""Static exercise reference data.

The catalog holds every exercise the plan can reference together with the
coaching material shown next to it: cues, equipment, safety and scaling
notes, and a short three step guide used by the exercise screen.  All data is
defined once at import time and never modified.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class MuscleGroup:
    key: str
    label: str


@dataclass(frozen=True)
class ChecklistStep:
    """Single entry of the warm-up checklist."""

    label: str
    secs: int | None = None
    reps: int | None = None


@dataclass(frozen=True)
class GuidanceStep:
    title: str
    text: str


@dataclass(frozen=True)
class ExerciseDefinition:
    """Read-only description of an exercise."""

    id: str
    title: str
    muscle_group: str
    cues: tuple[str, ...] = ()
    equipment: str | None = None
    safety: str | None = None
    scaling: tuple[str, ...] = ()
    tips: str | None = None
    video_hint: str | None = None
    checklist: tuple[ChecklistStep, ...] = field(default_factory=tuple)


MUSCLE_GROUPS: dict[str, MuscleGroup] = {
    g.key: g
    for g in (
        MuscleGroup("warmup", "Mobility"),
        MuscleGroup("push", "Chest/Triceps"),
        MuscleGroup("pull", "Back"),
        MuscleGroup("legs", "Legs"),
        MuscleGroup("glutes", "Glutes"),
        MuscleGroup("core", "Core"),
        MuscleGroup("calves", "Calves"),
        MuscleGroup("shoulders", "Shoulder blades"),
        MuscleGroup("cardio", "Cardio"),
        MuscleGroup("cooldown", "Recovery"),
    )
}


_EXERCISES = (
    ExerciseDefinition(
        id="warmup",
        title="Warm-up (5-7 min)",
        muscle_group="warmup",
        tips="Gentle mobility and activation. Breathe comfortably. Do not chase fatigue here.",
        video_hint="Shoulder circles, hip hinges, partial squats, scapular push-ups.",
        checklist=(
            ChecklistStep("Shoulder mobility (30s)", secs=30),
            ChecklistStep("Hip hinge (10 reps)", reps=10),
            ChecklistStep("Partial squat (10 reps)", reps=10),
            ChecklistStep("Scapular push-ups (8 reps)", reps=8),
            ChecklistStep("Easy march (60s)", secs=60),
        ),
    ),
    ExerciseDefinition(
        id="cooldown",
        title="Cool-down (3-5 min)",
        muscle_group="cooldown",
        tips="Breathing and gentle stretches. Finish feeling better than when you started.",
        video_hint="Wall chest stretch, hip flexor stretch, 4-6 breathing.",
    ),
    ExerciseDefinition(
        id="inclinePushUp",
        title="Incline push-up",
        muscle_group="push",
        equipment="table / counter / wall",
        cues=(
            "Hands shoulder-width apart, fingers spread.",
            "Body in one block (glutes and abs engaged).",
            "Lower under control until the chest nears the support.",
            "Push the floor away without shrugging.",
        ),
        scaling=("Easier: wall.", "Harder: low table / floor push-up."),
    ),
    ExerciseDefinition(
        id="chairSquat",
        title="Chair squat",
        muscle_group="legs",
        equipment="sturdy chair",
        cues=(
            "Feet hip-width apart, toes slightly out.",
            "Hips back and down, as if sitting.",
            "Touch the chair without collapsing and stand back up.",
            "Knees track over the feet.",
        ),
        scaling=("Easier: partial range.", "Harder: 1-2s pause at the bottom / no touch."),
    ),
    ExerciseDefinition(
        id="tableRow",
        title="Table row (inverted row)",
        muscle_group="pull",
        equipment="sturdy table",
        safety=(
            "Make sure the table is stable. If it is not safe, use a safer variant "
            "(band row, isometrics)."
        ),
        cues=(
            "Grip the edge, body in a straight line.",
            "Pull the chest towards the table.",
            "Shoulders away from the ears, shoulder blades back.",
            "Lower under control.",
        ),
        scaling=("Easier: knees bent.", "Harder: legs straight."),
    ),
    ExerciseDefinition(
        id="gluteBridge",
        title="Glute bridge",
        muscle_group="glutes",
        equipment="floor",
        cues=(
            "Heels close to the glutes.",
            "Push the floor with the heels.",
            "Raise the hips without arching the lower back.",
            "Pause 1s at the top.",
        ),
        scaling=("Harder: single leg (progressive).",),
    ),
    ExerciseDefinition(
        id="deadBug",
        title="Dead bug",
        muscle_group="core",
        equipment="floor",
        cues=(
            "Lower back pressed to the floor (ribs down).",
            "Extend opposite arm and leg without losing control.",
            "Move slowly and breathe.",
        ),
        scaling=("Easier: arms only or legs only.", "Harder: 1s pause extended."),
    ),
    ExerciseDefinition(
        id="plank",
        title="Plank",
        muscle_group="core",
        equipment="floor",
        cues=(
            "Elbows under shoulders.",
            "Glutes and abs tight.",
            "Long neck, eyes on the floor.",
            "Breathe, do not hold your breath.",
        ),
        scaling=("Easier: knees down.", "Harder: long plank or with taps."),
    ),
    ExerciseDefinition(
        id="stepUp",
        title="Step-up",
        muscle_group="legs",
        equipment="low step / stable box",
        cues=(
            "Drive up with the top leg.",
            "Control the descent.",
            "Knee in line with the foot.",
        ),
        scaling=("Easier: lower step.", "Harder: slower or with a pause."),
    ),
    ExerciseDefinition(
        id="calfRaise",
        title="Calf raise",
        muscle_group="calves",
        equipment="floor",
        cues=("Rise slowly, pause at the top.", "Lower under control.", "Use a wall for balance."),
        scaling=("Harder: single leg.",),
    ),
    ExerciseDefinition(
        id="scapularPushUp",
        title="Scapular push-up",
        muscle_group="shoulders",
        equipment="wall / table / floor",
        cues=(
            "Arms straight.",
            "Squeeze and spread the shoulder blades without bending the elbows.",
            "Short, controlled movement.",
        ),
        scaling=("Easier: wall.",),
    ),
    ExerciseDefinition(
        id="marchInPlace",
        title="March in place (easy zone 2)",
        muscle_group="cardio",
        equipment="none",
        cues=("Comfortable pace, you can talk.", "Arms swing along.", "Tall posture."),
        scaling=("Harder: 30/30 intervals.",),
    ),
)

EXERCISES: dict[str, ExerciseDefinition] = {ex.id: ex for ex in _EXERCISES}


def _steps(*pairs: tuple[str, str]) -> tuple[GuidanceStep, ...]:
    return tuple(GuidanceStep(title, text) for title, text in pairs)


GUIDANCE_STEPS: dict[str, tuple[GuidanceStep, ...]] = {
    "warmup": _steps(
        ("Activate", "Gentle shoulder and hip mobility. No pain, no rush."),
        ("Raise temperature", "Easy march or steps in place. You should be able to talk."),
        ("Ready", "1-2 test reps of the first exercise before starting."),
    ),
    "cooldown": _steps(
        ("Slow down", "Breathe in for 4s and out for 6s for 60-90s."),
        ("Release", "Gently stretch chest and hip flexors. No bouncing."),
        ("Close", "Finish with a feeling of relief, not tension."),
    ),
    "inclinePushUp": _steps(
        ("Position", "Hands on table or wall. Body in one block, glutes and abs on."),
        ("Lower", "Elbows at 30-45 degrees. Chest nears the support, shoulders away from ears."),
        ("Press", "Push the floor hard and return to a straight line without arching."),
    ),
    "chairSquat": _steps(
        ("Set up", "Feet hip-width apart. Chest tall, eyes forward."),
        ("Sit under control", "Hips back and down. Knees follow the feet."),
        ("Stand", "Push the floor and rise. Pause 1s at the top."),
    ),
    "tableRow": _steps(
        ("Secure", "Stable table. Firm grip. Body in line, hips not sagging."),
        ("Pull", "Chest to the table. Shoulder blades back and down, long neck."),
        ("Lower slowly", "Control the descent without losing the body line."),
    ),
    "gluteBridge": _steps(
        ("Set up", "Heels close to the glutes. Ribs down, neck relaxed."),
        ("Drive", "Raise the hips pushing through the heels, no lower back arch."),
        ("Pause", "1s at the top squeezing the glutes. Lower slowly and repeat."),
    ),
    "deadBug": _steps(
        ("Lock the lower back", "Lower back on the floor. Ribs down."),
        ("Extend", "Opposite arm and leg, slowly. Do not lose control."),
        ("Return", "Come back to centre while breathing smoothly."),
    ),
    "plank": _steps(
        ("Align", "Elbows under shoulders. Glutes and abs tight."),
        ("Hold", "Breathe. Do not let the hips sag or rise."),
        ("Finish stable", "Leave as aligned as you entered. Quality over time."),
    ),
    "stepUp": _steps(
        ("Foot up", "Whole foot on the step. Tall torso."),
        ("Rise", "Drive with the top leg. Do not push off the bottom one."),
        ("Lower under control", "Descend slowly keeping the knee aligned."),
    ),
    "calfRaise": _steps(
        ("Base", "Tall posture. Use the wall if needed."),
        ("Rise", "Pause 1s at the top. Feel the calf working."),
        ("Lower", "Lower slowly and fully. No bouncing."),
    ),
    "scapularPushUp": _steps(
        ("Straight arms", "Hands shoulder-width apart. Body in line."),
        ("Spread", "Push the floor and spread the shoulder blades without bending the elbows."),
        ("Squeeze", "Let them come together under control. Short movement."),
    ),
    "marchInPlace": _steps(
        ("Easy pace", "Gentle march. You should be able to talk without gasping."),
        ("Steady", "Arms swing along. Tall posture, relaxed shoulders."),
        ("Close", "Finish with calm breathing, ready to stretch."),
    ),
}

DEFAULT_GUIDANCE_STEPS = _steps(
    ("Set up", "Adjust your posture: stable and pain free."),
    ("Execute", "Controlled movement, no bouncing."),
    ("Finish", "Return to neutral under control."),
)


def get_exercise(exercise_id: str) -> ExerciseDefinition | None:
    """Return the definition for ``exercise_id`` or ``None`` if unknown."""

    return EXERCISES.get(exercise_id)


def exercise_title(exercise_id: str) -> str:
    """Return the display title for ``exercise_id``, falling back to the id."""

    ex = EXERCISES.get(exercise_id)
    return ex.title if ex else exercise_id


def get_muscle_group(exercise_id: str) -> MuscleGroup:
    """Return the muscle group of ``exercise_id``.

    Unknown exercises and unknown group keys are reported as ``core``.
    """

    ex = EXERCISES.get(exercise_id)
    key = ex.muscle_group if ex else "core"
    return MUSCLE_GROUPS.get(key, MUSCLE_GROUPS["core"])


def get_guidance_steps(exercise_id: str) -> tuple[GuidanceStep, ...]:
    """Return the three step guide for ``exercise_id``."""

    return GUIDANCE_STEPS.get(exercise_id, DEFAULT_GUIDANCE_STEPS)


def get_warmup_checklist() -> tuple[ChecklistStep, ...]:
    return EXERCISES["warmup"].checklist
