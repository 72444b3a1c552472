"""Progression controller.

:class:`ProgressionController` owns the application state: the current
position in the plan, the custom targets, the session logs and the draft of
the session being recorded.  Scoring and recommendation are recomputed from
the draft whenever they are requested.  Saving a session logs it, optionally
eases targets and moves the position according to the recommendation.

State changes are computed first and written to the key-value store
afterwards.  Each record is written independently; a failed write is logged
by the store and does not interrupt the caller.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Iterable

from trainer import (
    DEFAULT_DB_PATH,
    DEFAULT_RPE,
    LOGS_KEY,
    MAX_RPE,
    MIN_RPE,
    STATE_KEY,
    TARGETS_KEY,
    WARMUP_KEY_PREFIX,
)
from trainer import state as transitions
from trainer.exercises import get_warmup_checklist
from trainer.logs import LogBook, SessionLog
from trainer.plan import ItemKey, MeasuredItem, Session, WeekPlan, build_week_plan
from trainer.recommendations import (
    REDUCE,
    Recommendation,
    ReductionSuggestion,
    recommendation_from_score,
    suggest_reduction,
)
from trainer.scoring import ActualResult, SessionScore, Target, score_session
from trainer.state import AppState
from trainer.storage import KeyValueStore, LoadResult
from trainer.targets import CustomTargets
from trainer.utils import clamp, new_id, now_iso, to_int, today_iso


@dataclass
class Draft:
    """Results of the session currently being recorded."""

    actuals: dict[ItemKey, ActualResult] = field(default_factory=dict)
    rpe: int = DEFAULT_RPE
    date: str = field(default_factory=today_iso)


@dataclass(frozen=True)
class SaveResult:
    log: SessionLog
    recommendation: Recommendation
    applied: tuple[ReductionSuggestion, ...]
    state: AppState


class ProgressionController:
    """Coordinate plan, scoring, recommendations and persistence."""

    def __init__(
        self,
        db_path: Path = DEFAULT_DB_PATH,
        *,
        store: KeyValueStore | None = None,
        default_rpe: int = DEFAULT_RPE,
    ) -> None:
        self.store = store or KeyValueStore(db_path)
        self.default_rpe = clamp(to_int(default_rpe, DEFAULT_RPE), MIN_RPE, MAX_RPE)
        self.load_results: dict[str, LoadResult] = {}
        self.reload()

    def reload(self) -> None:
        """Read state, overrides and logs from the store and start a new draft."""

        self.state = AppState.from_dict(self._load(STATE_KEY, AppState().to_dict()))
        self.targets = CustomTargets.from_dict(self._load(TARGETS_KEY, {}))
        self.logs = LogBook.from_dict(self._load(LOGS_KEY, {"order": [], "byId": {}}))
        self.draft = self._new_draft()

    def _load(self, key: str, fallback):
        result = self.store.load(key, fallback)
        self.load_results[key] = result
        return result.value

    def _new_draft(self) -> Draft:
        return Draft(rpe=self.default_rpe)

    def _persist_state(self) -> None:
        self.store.save(STATE_KEY, self.state.to_dict())

    def _persist_targets(self) -> None:
        self.store.save(TARGETS_KEY, self.targets.to_dict())

    def _persist_logs(self) -> None:
        self.store.save(LOGS_KEY, self.logs.to_dict())

    # ------------------------------------------------------------------
    # Current session
    # ------------------------------------------------------------------
    @property
    def week_plan(self) -> WeekPlan:
        return build_week_plan(self.state.week)

    @property
    def session(self) -> Session:
        return self.week_plan.session(self.state.day_id)

    @property
    def session_key(self) -> str:
        return transitions.session_key(self.state)

    def measured_item(self, key: ItemKey) -> MeasuredItem:
        """Return the measured item of the current session for ``key``."""

        for item_key, item in self.session.measured_items():
            if item_key == key:
                return item
        raise KeyError(f"No measured item {key} in session {self.session_key}")

    def session_targets(self) -> dict[ItemKey, Target]:
        """Return the effective targets of the current session."""

        return self.targets.for_session(self.state.week, self.state.day_id, self.session)

    def custom_target(self, key: ItemKey) -> Target | None:
        return self.targets.get(self.state.week, self.state.day_id, key)

    def set_custom_target(self, key: ItemKey, sets: int, reps: int) -> Target:
        """Override the target of ``key`` in the current session."""

        self.measured_item(key)
        target = Target(max(1, to_int(sets, 1)), max(1, to_int(reps, 1)))
        self.targets.set(self.state.week, self.state.day_id, key, target)
        self._persist_targets()
        return target

    def clear_custom_target(self, key: ItemKey) -> None:
        self.targets.remove(self.state.week, self.state.day_id, key)
        self._persist_targets()

    def clear_session_targets(self) -> int:
        """Drop every override of the current session."""

        removed = self.targets.clear_session(self.state.week, self.state.day_id)
        self._persist_targets()
        return removed

    # ------------------------------------------------------------------
    # Draft
    # ------------------------------------------------------------------
    def set_actual(self, key: ItemKey, sets_done=0, reps_done=0, notes: str = "") -> ActualResult:
        """Record what was done for ``key`` in the current draft."""

        self.measured_item(key)
        actual = ActualResult(
            sets_done=max(0, to_int(sets_done)),
            reps_done=max(0, to_int(reps_done)),
            notes=notes or "",
        )
        self.draft.actuals[key] = actual
        return actual

    def clear_actual(self, key: ItemKey) -> None:
        self.draft.actuals.pop(key, None)

    def set_rpe(self, rpe) -> int:
        self.draft.rpe = clamp(to_int(rpe, self.default_rpe), MIN_RPE, MAX_RPE)
        return self.draft.rpe

    def set_date(self, value: str) -> None:
        self.draft.date = value or today_iso()

    def clear_draft(self) -> None:
        self.draft = self._new_draft()

    def current_score(self) -> SessionScore:
        return score_session(
            self.session.items, self.draft.actuals, self.session_targets(), self.draft.rpe
        )

    def current_recommendation(self) -> Recommendation:
        return recommendation_from_score(self.current_score().score)

    def reduction_suggestions(self) -> list[ReductionSuggestion]:
        """Return reductions for the current draft, empty unless it scores ``reduce``."""

        if self.current_recommendation().level != REDUCE:
            return []
        return suggest_reduction(self.session.items, self.draft.actuals, self.session_targets())

    def apply_suggestions(self, suggestions: Iterable[ReductionSuggestion]) -> int:
        """Store the proposed targets of ``suggestions`` as overrides."""

        changes = [(s.key, s.to_target) for s in suggestions]
        if not changes:
            return 0
        self.targets.apply(self.state.week, self.state.day_id, changes)
        self._persist_targets()
        return len(changes)

    # ------------------------------------------------------------------
    # Saving
    # ------------------------------------------------------------------
    def save_session(self) -> SaveResult:
        """Log the current draft and advance according to the recommendation.

        Suggestions are computed from the draft at this moment.  With smart
        progression enabled a ``reduce`` result eases the targets of the same
        session and the position moves per :func:`trainer.state.next_position`;
        otherwise only the log is written.
        """

        session = self.session
        score = self.current_score()
        rec = recommendation_from_score(score.score)
        suggestions = self.reduction_suggestions() if rec.level == REDUCE else []

        applied: tuple[ReductionSuggestion, ...] = ()
        if self.state.smart_progression and suggestions:
            self.targets.apply(
                self.state.week, self.state.day_id, [(s.key, s.to_target) for s in suggestions]
            )
            applied = tuple(suggestions)

        log = SessionLog(
            id=new_id(),
            created_at=now_iso(),
            date=self.draft.date,
            week=self.state.week,
            day_id=self.state.day_id,
            session_title=session.title,
            rpe=self.draft.rpe,
            score=score.score,
            pct=score.pct,
            recommendation=rec.level,
            actuals=dict(self.draft.actuals),
        )
        self.logs.add(log)

        if self.state.smart_progression:
            self.state = transitions.next_position(self.state, rec.level)

        self.draft = self._new_draft()

        if applied:
            self._persist_targets()
        self._persist_logs()
        self._persist_state()
        return SaveResult(log=log, recommendation=rec, applied=applied, state=self.state)

    # ------------------------------------------------------------------
    # Navigation
    # ------------------------------------------------------------------
    def _move(self, new_state: AppState) -> None:
        moved = transitions.session_key(new_state) != self.session_key
        self.state = new_state
        if moved:
            self.draft = self._new_draft()
        self._persist_state()

    def prev_week(self) -> None:
        self._move(transitions.prev_week(self.state))

    def next_week(self) -> None:
        self._move(transitions.next_week(self.state))

    def go_to_week(self, week: int) -> None:
        self._move(transitions.go_to_week(self.state, week))

    def set_day(self, day_id: str) -> None:
        self._move(transitions.set_day(self.state, day_id))

    def set_smart_progression(self, enabled: bool) -> None:
        self._move(transitions.set_smart_progression(self.state, enabled))

    # ------------------------------------------------------------------
    # Warm-up checklist
    # ------------------------------------------------------------------
    def _warmup_key(self) -> str:
        return f"{WARMUP_KEY_PREFIX}{self.session_key}"

    def warmup_checklist(self) -> list[tuple[str, bool]]:
        """Return ``(label, done)`` for each warm-up step of this session."""

        checked = self.store.load(self._warmup_key(), {}).value
        if not isinstance(checked, dict):
            checked = {}
        return [
            (step.label, bool(checked.get(str(i))))
            for i, step in enumerate(get_warmup_checklist())
        ]

    def toggle_warmup_step(self, index: int) -> bool:
        """Flip warm-up step ``index`` for this session and return its new value."""

        steps = get_warmup_checklist()
        if not 0 <= index < len(steps):
            raise IndexError(f"Warm-up step {index} out of range")
        checked = self.store.load(self._warmup_key(), {}).value
        if not isinstance(checked, dict):
            checked = {}
        checked[str(index)] = not checked.get(str(index), False)
        self.store.save(self._warmup_key(), checked)
        return checked[str(index)]

    # ------------------------------------------------------------------
    # Reset
    # ------------------------------------------------------------------
    def reset_all(self, confirm: Callable[[], bool]) -> bool:
        """Erase history, overrides and position once ``confirm()`` agrees."""

        if not confirm():
            return False
        for key in (STATE_KEY, TARGETS_KEY, LOGS_KEY):
            self.store.delete(key)
        self.state = AppState()
        self.targets = CustomTargets()
        self.logs = LogBook()
        self.draft = self._new_draft()
        return True
