import importlib.util
import os

import pytest

os.environ["KIVY_WINDOW"] = "mock"

kivy_available = (
    importlib.util.find_spec("kivy") is not None
    and importlib.util.find_spec("kivymd") is not None
)

if kivy_available:
    os.environ.setdefault("KIVY_UNITTEST", "1")

    from kivy.app import App
    from kivymd.theming import ThemeManager

    from ui.screens.exercise_screen import ExerciseGuideScreen
    from ui.screens.history_screen import HistoryScreen
    from ui.screens.session_screen import SessionScreen


@pytest.fixture
def dummy_app(monkeypatch, controller):
    class _DummyApp:
        """Minimal stand-in for :class:`~kivymd.app.MDApp` used in tests."""

        theme_cls = ThemeManager()
        suggestion_preview_limit = 6
        history_limit = 50
        root = None

    app = _DummyApp()
    app.controller = controller
    monkeypatch.setattr(App, "get_running_app", lambda: app)
    return app


@pytest.mark.skipif(not kivy_available, reason="Kivy and KivyMD are required")
def test_session_screen_reflects_controller(dummy_app):
    dummy_app.controller.go_to_week(8)
    dummy_app.controller.set_day("B")
    screen = SessionScreen()
    screen.populate()
    assert screen.header_text == "Week 8 - Day 2 (deload)"
    assert screen.sets_text == "2 base sets"
    assert screen.smart_progression is True
    assert screen.rpe == 7


@pytest.mark.skipif(not kivy_available, reason="Kivy and KivyMD are required")
def test_session_screen_summary(dummy_app):
    screen = SessionScreen()
    screen.refresh_summary()
    assert screen.recommendation_text == "Recommendation: Repeat easier"
    assert screen.show_suggestions is True


@pytest.mark.skipif(not kivy_available, reason="Kivy and KivyMD are required")
def test_exercise_screen_titles(dummy_app):
    screen = ExerciseGuideScreen()
    screen.exercise_id = "tableRow"
    screen.populate()
    assert screen.title_text == "Table row (inverted row)"
    assert screen.subtitle_text == "Back | sturdy table"


@pytest.mark.skipif(not kivy_available, reason="Kivy and KivyMD are required")
def test_history_screen_without_layout(dummy_app):
    dummy_app.controller.save_session()
    screen = HistoryScreen()
    screen.populate()
    assert screen.summary_text == "1 sessions"
    assert screen.trend_text == "1A:0"


@pytest.mark.skipif(not kivy_available, reason="Kivy and KivyMD are required")
def test_history_import_reloads_controller(dummy_app, tmp_path, monkeypatch):
    import ui.screens.history_screen as h
    from trainer.controller import ProgressionController

    messages = []
    monkeypatch.setattr(h, "toast", messages.append)
    monkeypatch.setattr(h.db_io, "BACKUP_DIR", tmp_path / "backups")

    incoming_path = tmp_path / "incoming" / "trainer.db"
    incoming = ProgressionController(incoming_path)
    incoming.go_to_week(12)

    screen = HistoryScreen()
    screen.select_import_file(str(incoming_path))
    assert dummy_app.controller.state.week == 12
    assert messages == ["Import successful"]

    screen.select_import_file(str(tmp_path / "missing.db"))
    assert messages[-1].startswith("Import failed")
