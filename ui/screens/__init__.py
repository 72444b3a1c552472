"""UI screen modules for the training planner."""

from .session_screen import SessionScreen, SessionItemRow
from .history_screen import HistoryScreen
from .exercise_screen import ExerciseGuideScreen

__all__ = [
    "SessionScreen",
    "SessionItemRow",
    "HistoryScreen",
    "ExerciseGuideScreen",
]
