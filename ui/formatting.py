"""Text helpers shared by the screens.

Kept free of Kivy imports so the wording can be tested headless.
"""

from __future__ import annotations

from trainer import DAY_NAMES
from trainer.exercises import exercise_title, get_muscle_group
from trainer.logs import SessionLog
from trainer.plan import MeasuredItem, WeekPlan
from trainer.recommendations import RECOMMENDATIONS, Recommendation
from trainer.scoring import ActualResult, SessionScore, Target

TONE_COLORS = {
    "good": (0.18, 0.55, 0.34, 1),
    "warn": (0.85, 0.6, 0.1, 1),
    "bad": (0.75, 0.2, 0.2, 1),
    "neutral": (0.4, 0.4, 0.4, 1),
}


def week_header(plan: WeekPlan, day_id: str) -> str:
    """Return e.g. ``"Week 8 - Day 2 (deload)"``."""

    text = f"Week {plan.week} - {DAY_NAMES.get(day_id, day_id)}"
    if plan.deload:
        text += " (deload)"
    return text


def base_sets_text(plan: WeekPlan) -> str:
    return f"{plan.sets} base sets"


def percent(value: float) -> str:
    return f"{round(value * 100)}%"


def score_text(score: SessionScore) -> str:
    return f"Score {round(score.score * 100)} (compliance {percent(score.pct)})"


def recommendation_text(rec: Recommendation) -> str:
    return f"Recommendation: {rec.label}"


def target_text(item: MeasuredItem, target: Target) -> str:
    """Return ``"3 x 10 reps"`` style text, noting the rest hint."""

    text = f"{target.sets} x {target.reps} {item.unit}"
    if item.rest and item.rest != "-":
        text += f"  rest {item.rest}"
    return text


def item_title(item: MeasuredItem, custom: bool = False) -> str:
    title = f"{exercise_title(item.exercise_id)} [{get_muscle_group(item.exercise_id).label}]"
    if custom:
        title += " *"
    return title


def actual_text(actual: ActualResult | None) -> str:
    if actual is None:
        return "Not recorded"
    text = f"Done {actual.sets_done} x {actual.reps_done}"
    if actual.notes:
        text += f" - {actual.notes}"
    return text


def log_title(log: SessionLog) -> str:
    return f"{log.date}  W{log.week} {log.day_id}  {log.session_title}"


def log_detail(log: SessionLog) -> str:
    rec = RECOMMENDATIONS.get(log.recommendation)
    label = rec.label if rec else log.recommendation
    return f"Score {round(log.score * 100)}  RPE {log.rpe}  {label}"
