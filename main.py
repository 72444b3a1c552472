from kivymd.app import MDApp
from kivy.lang import Builder
from kivy.core.window import Window
from pathlib import Path
import os
import sys

from core import ProgressionController, DEFAULT_DB_PATH
from trainer import settings as app_settings

# Screens register themselves with the Kivy factory on import so the rules in
# ``main.kv`` can reference them.
from ui.screens import SessionScreen, HistoryScreen, ExerciseGuideScreen  # noqa: F401


if os.name == "nt" or sys.platform.startswith("win"):
    Window.size = (280, 280 * (20 / 9))


class TrainerApp(MDApp):
    controller: ProgressionController | None = None
    # Number of reduction suggestions listed before collapsing the rest
    suggestion_preview_limit: int = 6
    # Maximum number of sessions shown on the history screen
    history_limit: int = 50

    def build(self):
        self.suggestion_preview_limit = app_settings.get_int("suggestion_preview_limit")
        self.history_limit = app_settings.get_int("history_limit")
        self.controller = ProgressionController(
            DEFAULT_DB_PATH, default_rpe=app_settings.get_int("default_rpe")
        )
        return Builder.load_file(str(Path(__file__).with_name("main.kv")))


if __name__ == "__main__":
    TrainerApp().run()
