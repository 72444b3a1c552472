"""Screen listing saved sessions, with export and import of the store."""

import logging
import sqlite3
from pathlib import Path

from kivymd.app import MDApp
from kivymd.toast import toast
from kivymd.uix.filemanager import MDFileManager
from kivymd.uix.list import OneLineListItem, TwoLineListItem
from kivymd.uix.screen import MDScreen
from kivy.properties import ObjectProperty, StringProperty

from trainer import db_io
from ui import formatting


class HistoryScreen(MDScreen):
    """List saved sessions, newest first, with a score trend summary."""

    summary_text = StringProperty("")
    trend_text = StringProperty("")
    file_manager = ObjectProperty(None, allownone=True)

    def on_pre_enter(self, *args):
        """Populate the history list before the screen becomes visible."""
        self.populate()
        return super().on_pre_enter(*args)

    def populate(self) -> None:
        app = MDApp.get_running_app()
        logs = app.controller.logs
        self.summary_text = f"{len(logs)} sessions"
        series = logs.history_series(limit=app.history_limit)
        self.trend_text = "  ".join(f"{p['label']}:{p['score']}" for p in series[-8:])

        lst = self.ids.get("history_list")
        if not lst:
            return
        lst.clear_widgets()
        if not len(logs):
            lst.add_widget(
                OneLineListItem(text="No sessions saved yet. Completed sessions appear here.")
            )
            return
        for idx, log in enumerate(logs):
            if idx >= app.history_limit:
                break
            lst.add_widget(
                TwoLineListItem(
                    text=formatting.log_title(log),
                    secondary_text=formatting.log_detail(log),
                )
            )

    def go_back(self) -> None:
        MDApp.get_running_app().root.current = "session"

    # ------------------------------------------------------------------
    # Export / import
    # ------------------------------------------------------------------
    def _db_path(self) -> Path:
        return MDApp.get_running_app().controller.store.db_path

    def export_db(self) -> None:
        """Copy the store file next to the working directory."""
        try:
            path = db_io.export_database(self._db_path())
            toast(f"Exported to {path}")
        except FileNotFoundError:
            logging.exception("Store export failed: source missing")
            toast("Export failed: nothing saved yet")
        except OSError as exc:
            logging.exception("Store export failed")
            toast(f"Export failed: {exc}")

    def export_json(self) -> None:
        """Write every stored record to a JSON file."""
        try:
            path = db_io.export_database_json(self._db_path())
            toast(f"Exported to {path}")
        except OSError as exc:
            logging.exception("JSON export failed")
            toast(f"Export failed: {exc}")
        except sqlite3.Error as exc:
            logging.exception("JSON export failed")
            toast(f"Export failed: {exc}")

    def open_import_db(self) -> None:
        """Open a file picker to select a store file for import."""
        if self.file_manager is None:
            self.file_manager = MDFileManager(
                exit_manager=self.close_file_manager,
                select_path=self.select_import_file,
                ext=[".db"],
            )
        self.file_manager.show(str(Path.home()))

    def close_file_manager(self, *_) -> None:
        """Close the file picker if it is open."""
        if self.file_manager:
            self.file_manager.close()

    def select_import_file(self, path: str) -> None:
        """Validate ``path``, replace the store with it and reload."""
        self.close_file_manager()
        controller = MDApp.get_running_app().controller
        try:
            db_io.import_database(Path(path), self._db_path())
        except ValueError as exc:
            logging.exception("Import failed validation")
            toast(f"Import failed: {exc}")
            return
        except OSError as exc:
            logging.exception("Import failed")
            toast(f"Import failed: {exc}")
            return
        controller.reload()
        toast("Import successful")
        self.populate()
