"""User overrides of plan-generated targets.

Overrides are stored per ``(week, day, item)`` under the path
``"{week}-{day}-{exercise_id}:{index}"``.  A missing override means the plan
default for that week applies.
"""

from __future__ import annotations

from typing import Iterable, Mapping

from trainer.plan import ItemKey, Session
from trainer.scoring import Target, effective_target
from trainer.utils import to_number


def target_path(week: int, day_id: str, key: ItemKey) -> str:
    return f"{week}-{day_id}-{key}"


def session_prefix(week: int, day_id: str) -> str:
    return f"{week}-{day_id}-"


class CustomTargets:
    """Mapping of target paths to :class:`Target` overrides."""

    def __init__(self, targets: Mapping[str, Target] | None = None) -> None:
        self._targets: dict[str, Target] = dict(targets or {})

    def __len__(self) -> int:
        return len(self._targets)

    def __contains__(self, path: str) -> bool:
        return path in self._targets

    def get(self, week: int, day_id: str, key: ItemKey) -> Target | None:
        """Return the override for ``key`` or ``None`` when there is none."""

        return self._targets.get(target_path(week, day_id, key))

    def set(self, week: int, day_id: str, key: ItemKey, target: Target) -> None:
        """Store ``target`` for ``key``; counts are kept at 1 or above."""

        self._targets[target_path(week, day_id, key)] = Target(
            max(1, int(target.sets)), max(1, int(target.reps))
        )

    def remove(self, week: int, day_id: str, key: ItemKey) -> None:
        self._targets.pop(target_path(week, day_id, key), None)

    def clear_session(self, week: int, day_id: str) -> int:
        """Remove every override of one session and return how many went."""

        prefix = session_prefix(week, day_id)
        doomed = [path for path in self._targets if path.startswith(prefix)]
        for path in doomed:
            del self._targets[path]
        return len(doomed)

    def clear(self) -> None:
        self._targets.clear()

    def apply(self, week: int, day_id: str, changes: Iterable[tuple[ItemKey, Target]]) -> None:
        """Store several ``(key, target)`` overrides for one session."""

        for key, target in changes:
            self.set(week, day_id, key, target)

    def for_session(self, week: int, day_id: str, session: Session) -> dict[ItemKey, Target]:
        """Return the effective target of every measured item in ``session``."""

        resolved: dict[ItemKey, Target] = {}
        for key, item in session.measured_items():
            override = self.get(week, day_id, key)
            resolved[key] = effective_target(key, item, {key: override} if override else {})
        return resolved

    # ------------------------------------------------------------------
    # Serialisation
    # ------------------------------------------------------------------
    def to_dict(self) -> dict:
        return {path: target.to_dict() for path, target in self._targets.items()}

    @classmethod
    def from_dict(cls, data) -> "CustomTargets":
        """Build overrides from stored data, skipping malformed entries."""

        targets: dict[str, Target] = {}
        if isinstance(data, Mapping):
            for path, value in data.items():
                if not isinstance(value, Mapping):
                    continue
                if to_number(value.get("sets"), -1) < 0 or to_number(value.get("reps"), -1) < 0:
                    continue
                targets[str(path)] = Target.from_dict(value)
        return cls(targets)
