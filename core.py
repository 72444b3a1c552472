"""Entry points used by the user interface.

The screens import everything they need from here so the ``trainer`` package
layout can change without touching the UI.
"""

from __future__ import annotations

from trainer import (
    DAY_IDS,
    DAY_NAMES,
    DEFAULT_DB_PATH,
    DEFAULT_RPE,
    MAX_RPE,
    MIN_RPE,
    PLAN_WEEKS,
)
from trainer.controller import Draft, ProgressionController, SaveResult
from trainer.exercises import (
    EXERCISES,
    MUSCLE_GROUPS,
    exercise_title,
    get_exercise,
    get_guidance_steps,
    get_muscle_group,
    get_warmup_checklist,
)
from trainer.plan import (
    BlockItem,
    ItemKey,
    MeasuredItem,
    Session,
    WeekPlan,
    build_week_plan,
    generate_plan,
    get_session,
    is_deload_week,
)
from trainer.recommendations import (
    ADVANCE,
    HOLD,
    REDUCE,
    Recommendation,
    ReductionSuggestion,
    recommendation_from_score,
    suggest_reduction,
)
from trainer.scoring import ActualResult, SessionScore, Target, score_session
from trainer.state import AppState

__all__ = [
    "DAY_IDS",
    "DAY_NAMES",
    "DEFAULT_DB_PATH",
    "DEFAULT_RPE",
    "MAX_RPE",
    "MIN_RPE",
    "PLAN_WEEKS",
    "Draft",
    "ProgressionController",
    "SaveResult",
    "EXERCISES",
    "MUSCLE_GROUPS",
    "exercise_title",
    "get_exercise",
    "get_guidance_steps",
    "get_muscle_group",
    "get_warmup_checklist",
    "BlockItem",
    "ItemKey",
    "MeasuredItem",
    "Session",
    "WeekPlan",
    "build_week_plan",
    "generate_plan",
    "get_session",
    "is_deload_week",
    "ADVANCE",
    "HOLD",
    "REDUCE",
    "Recommendation",
    "ReductionSuggestion",
    "recommendation_from_score",
    "suggest_reduction",
    "ActualResult",
    "SessionScore",
    "Target",
    "score_session",
    "AppState",
]
