from __future__ import annotations

"""Screen for recording the current training session."""

import logging

from kivy.metrics import dp
from kivy.properties import BooleanProperty, NumericProperty, StringProperty
from kivymd.app import MDApp
from kivymd.toast import toast
from kivymd.uix.boxlayout import MDBoxLayout
from kivymd.uix.button import MDFlatButton, MDIconButton, MDRaisedButton
from kivymd.uix.dialog import MDDialog
from kivymd.uix.label import MDLabel
from kivymd.uix.list import OneLineListItem
from kivymd.uix.screen import MDScreen
from kivymd.uix.textfield import MDTextField

from core import BlockItem, ItemKey, MeasuredItem, exercise_title
from ui import formatting


class SessionItemRow(MDBoxLayout):
    """Target, actual inputs and notes for one measured item."""

    def __init__(self, screen: "SessionScreen", key: ItemKey, item: MeasuredItem, **kwargs):
        super().__init__(
            orientation="vertical",
            size_hint_y=None,
            height=dp(168),
            padding=(dp(8), dp(4)),
            spacing=dp(2),
            **kwargs,
        )
        self.screen = screen
        self.key = key
        self.item = item
        controller = screen.controller

        header = MDBoxLayout(size_hint_y=None, height=dp(40))
        self.title_label = MDLabel(
            text=formatting.item_title(item, controller.custom_target(key) is not None)
        )
        header.add_widget(self.title_label)
        header.add_widget(
            MDIconButton(icon="information-outline", on_release=lambda *_: screen.open_exercise(item.exercise_id))
        )
        header.add_widget(MDIconButton(icon="pencil", on_release=lambda *_: screen.open_target_dialog(key)))
        self.add_widget(header)

        target = controller.session_targets()[key]
        self.target_label = MDLabel(
            text=formatting.target_text(item, target), theme_text_color="Secondary"
        )
        self.add_widget(self.target_label)

        actual = controller.draft.actuals.get(key)
        inputs = MDBoxLayout(spacing=dp(8), size_hint_y=None, height=dp(48))
        self.sets_field = MDTextField(
            hint_text="Sets done",
            input_filter="int",
            text=str(actual.sets_done) if actual else "",
        )
        self.reps_field = MDTextField(
            hint_text=f"{item.unit} done",
            input_filter="int",
            text=str(actual.reps_done) if actual else "",
        )
        inputs.add_widget(self.sets_field)
        inputs.add_widget(self.reps_field)
        self.add_widget(inputs)
        self.notes_field = MDTextField(hint_text="Notes", text=actual.notes if actual else "")
        self.add_widget(self.notes_field)

        for field in (self.sets_field, self.reps_field, self.notes_field):
            field.bind(text=lambda *_: self.commit())

    def commit(self) -> None:
        """Push the typed values into the controller's draft."""

        if not (self.sets_field.text or self.reps_field.text or self.notes_field.text):
            self.screen.controller.clear_actual(self.key)
        else:
            self.screen.controller.set_actual(
                self.key,
                self.sets_field.text or 0,
                self.reps_field.text or 0,
                self.notes_field.text,
            )
        self.screen.refresh_summary()


class SessionScreen(MDScreen):
    """Show the plan for the current week and day and record results."""

    header_text = StringProperty("")
    sets_text = StringProperty("")
    score_text = StringProperty("")
    recommendation_text = StringProperty("")
    rpe = NumericProperty(7)
    smart_progression = BooleanProperty(True)
    show_suggestions = BooleanProperty(False)

    @property
    def controller(self):
        return MDApp.get_running_app().controller

    def on_pre_enter(self, *args):
        self.populate()
        return super().on_pre_enter(*args)

    def populate(self) -> None:
        """Rebuild the item list for the controller's current session."""

        controller = self.controller
        plan = controller.week_plan
        self.header_text = formatting.week_header(plan, controller.state.day_id)
        self.sets_text = formatting.base_sets_text(plan)
        self.rpe = controller.draft.rpe
        self.smart_progression = controller.state.smart_progression

        lst = self.ids.get("items_list")
        if lst is None:
            return
        lst.clear_widgets()
        for idx, item in enumerate(controller.session.items):
            if isinstance(item, BlockItem):
                lst.add_widget(
                    OneLineListItem(
                        text=exercise_title(item.exercise_id),
                        on_release=lambda _, ex=item.exercise_id: self.open_exercise(ex),
                    )
                )
            else:
                lst.add_widget(SessionItemRow(self, ItemKey(item.exercise_id, idx), item))
        self.refresh_summary()

    def refresh_summary(self) -> None:
        """Update score, recommendation and the suggestion list."""

        controller = self.controller
        score = controller.current_score()
        rec = controller.current_recommendation()
        self.score_text = formatting.score_text(score)
        self.recommendation_text = formatting.recommendation_text(rec)
        label = self.ids.get("recommendation_label")
        if label is not None:
            label.text_color = formatting.TONE_COLORS[rec.tone]

        suggestions = controller.reduction_suggestions()
        self.show_suggestions = bool(suggestions)
        box = self.ids.get("suggestions_list")
        if box is None:
            return
        box.clear_widgets()
        limit = MDApp.get_running_app().suggestion_preview_limit
        for sug in suggestions[:limit]:
            box.add_widget(OneLineListItem(text=f"{sug.title}: {sug.describe()}"))
        if len(suggestions) > limit:
            box.add_widget(OneLineListItem(text=f"+{len(suggestions) - limit} more"))

    # ------------------------------------------------------------------
    # Navigation
    # ------------------------------------------------------------------
    def prev_week(self) -> None:
        self.controller.prev_week()
        self.populate()

    def next_week(self) -> None:
        self.controller.next_week()
        self.populate()

    def select_day(self, day_id: str) -> None:
        self.controller.set_day(day_id)
        self.populate()

    def open_exercise(self, exercise_id: str) -> None:
        app = MDApp.get_running_app()
        screen = app.root.get_screen("exercise")
        screen.exercise_id = exercise_id
        app.root.current = "exercise"

    def open_history(self) -> None:
        MDApp.get_running_app().root.current = "history"

    # ------------------------------------------------------------------
    # Draft controls
    # ------------------------------------------------------------------
    def on_rpe_change(self, value) -> None:
        self.rpe = self.controller.set_rpe(value)
        self.refresh_summary()

    def on_smart_toggle(self, value: bool) -> None:
        self.controller.set_smart_progression(value)
        self.smart_progression = self.controller.state.smart_progression

    def clear_results(self) -> None:
        self.controller.clear_draft()
        self.populate()

    def apply_suggestions(self) -> None:
        count = self.controller.apply_suggestions(self.controller.reduction_suggestions())
        if count:
            toast(f"Updated {count} targets")
        self.populate()

    def clear_session_targets(self) -> None:
        self.controller.clear_session_targets()
        self.populate()

    def save_session(self) -> None:
        """Save the draft and show where the plan moves next."""

        result = self.controller.save_session()
        logging.info(
            "Saved session %s (score %.2f, %s)",
            result.log.label,
            result.log.score,
            result.recommendation.level,
        )
        message = formatting.recommendation_text(result.recommendation)
        if result.applied:
            message += f" - eased {len(result.applied)} targets"
        toast(message)
        self.populate()

    # ------------------------------------------------------------------
    # Dialogs
    # ------------------------------------------------------------------
    def open_target_dialog(self, key: ItemKey) -> None:
        """Let the user override the sets and reps of ``key``."""

        controller = self.controller
        target = controller.session_targets()[key]
        box = MDBoxLayout(orientation="vertical", spacing=dp(8), size_hint_y=None, height=dp(120))
        sets_field = MDTextField(hint_text="Sets", input_filter="int", text=str(target.sets))
        reps_field = MDTextField(hint_text="Reps / time", input_filter="int", text=str(target.reps))
        box.add_widget(sets_field)
        box.add_widget(reps_field)

        def save(*_):
            controller.set_custom_target(key, sets_field.text or 1, reps_field.text or 1)
            dialog.dismiss()
            self.populate()

        def restore(*_):
            controller.clear_custom_target(key)
            dialog.dismiss()
            self.populate()

        dialog = MDDialog(
            title=exercise_title(key.exercise_id),
            type="custom",
            content_cls=box,
            buttons=[
                MDFlatButton(text="Plan default", on_release=restore),
                MDRaisedButton(text="Save", on_release=save),
            ],
        )
        dialog.open()

    def confirm_reset(self) -> None:
        """Ask before erasing all history and overrides."""

        def do_reset(*_):
            dialog.dismiss()
            self.controller.reset_all(lambda: True)
            self.populate()

        dialog = MDDialog(
            title="Reset everything?",
            text="This deletes your history and custom targets.",
            buttons=[
                MDFlatButton(text="Cancel", on_release=lambda *_: dialog.dismiss()),
                MDRaisedButton(text="Reset", on_release=do_reset),
            ],
        )
        dialog.open()
