"""Session history.

A :class:`SessionLog` is created when a session is saved and never edited
afterwards.  The :class:`LogBook` keeps logs most recent first and is only
appended to or cleared as a whole.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Mapping

from trainer.plan import ItemKey
from trainer.scoring import ActualResult
from trainer.utils import to_int, to_number


@dataclass(frozen=True)
class SessionLog:
    id: str
    created_at: str
    date: str
    week: int
    day_id: str
    session_title: str
    rpe: int
    score: float
    pct: float
    recommendation: str
    actuals: Mapping[ItemKey, ActualResult] = field(default_factory=dict)
    completed: bool = True

    @property
    def label(self) -> str:
        """Short ``"{week}{day}"`` label such as ``"5B"``."""

        return f"{self.week}{self.day_id}"

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "createdAt": self.created_at,
            "date": self.date,
            "week": self.week,
            "dayId": self.day_id,
            "sessionTitle": self.session_title,
            "rpe": self.rpe,
            "score": self.score,
            "pct": self.pct,
            "recommendation": self.recommendation,
            "actualByItemId": {str(k): v.to_dict() for k, v in self.actuals.items()},
            "completed": self.completed,
        }

    @classmethod
    def from_dict(cls, data: Mapping) -> "SessionLog":
        actuals: dict[ItemKey, ActualResult] = {}
        raw_actuals = data.get("actualByItemId")
        if not isinstance(raw_actuals, Mapping):
            raw_actuals = {}
        for raw_key, raw in raw_actuals.items():
            if not isinstance(raw_key, str) or not isinstance(raw, Mapping):
                continue
            try:
                key = ItemKey.parse(raw_key)
            except ValueError:
                continue
            actuals[key] = ActualResult.from_dict(raw)
        completed = data.get("completed", True)
        return cls(
            id=str(data["id"]),
            created_at=str(data.get("createdAt") or ""),
            date=str(data.get("date") or ""),
            week=to_int(data.get("week"), 1),
            day_id=str(data.get("dayId") or "A"),
            session_title=str(data.get("sessionTitle") or ""),
            rpe=to_int(data.get("rpe")),
            score=to_number(data.get("score")),
            pct=to_number(data.get("pct")),
            recommendation=str(data.get("recommendation") or ""),
            actuals=actuals,
            completed=completed if isinstance(completed, bool) else True,
        )


class LogBook:
    """Ordered collection of :class:`SessionLog` entries."""

    def __init__(self) -> None:
        self.order: list[str] = []
        self.by_id: dict[str, SessionLog] = {}

    def __len__(self) -> int:
        return len(self.order)

    def __iter__(self):
        return (self.by_id[log_id] for log_id in self.order)

    def add(self, log: SessionLog) -> None:
        """Insert ``log`` in front of the existing entries."""

        self.order.insert(0, log.id)
        self.by_id[log.id] = log

    def get(self, log_id: str) -> SessionLog | None:
        return self.by_id.get(log_id)

    def latest(self) -> SessionLog | None:
        return self.by_id[self.order[0]] if self.order else None

    def clear(self) -> None:
        self.order = []
        self.by_id = {}

    def history_series(self, limit: int | None = None) -> list[dict]:
        """Return chart points in chronological order.

        Each point holds ``idx`` (1 based), ``label``, ``score`` as a whole
        percentage and ``rpe``.  When ``limit`` is given only the newest
        ``limit`` sessions are included.
        """

        ids = self.order[:limit] if limit is not None else self.order
        series = []
        for idx, log_id in enumerate(reversed(ids), 1):
            log = self.by_id[log_id]
            series.append(
                {
                    "idx": idx,
                    "label": log.label,
                    "score": round(log.score * 100),
                    "rpe": log.rpe,
                }
            )
        return series

    # ------------------------------------------------------------------
    # Serialisation
    # ------------------------------------------------------------------
    def to_dict(self) -> dict:
        return {
            "order": list(self.order),
            "byId": {log_id: self.by_id[log_id].to_dict() for log_id in self.order},
        }

    @classmethod
    def from_dict(cls, data) -> "LogBook":
        """Rebuild a log book from stored data.

        Ids without a readable entry and repeated ids are dropped.  Each entry
        is keyed by its id in ``order``.
        """

        book = cls()
        if not isinstance(data, Mapping):
            return book
        order = data.get("order")
        by_id = data.get("byId")
        if not isinstance(order, list) or not isinstance(by_id, Mapping):
            return book
        for log_id in order:
            if not isinstance(log_id, str) or log_id in book.by_id:
                continue
            raw = by_id.get(log_id)
            if not isinstance(raw, Mapping):
                continue
            log = SessionLog.from_dict({**raw, "id": log_id})
            book.order.append(log_id)
            book.by_id[log_id] = log
        return book
