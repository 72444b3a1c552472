from kivymd.app import MDApp
from kivymd.uix.list import OneLineListItem, TwoLineListItem, ThreeLineListItem
from kivymd.uix.screen import MDScreen
from kivy.properties import StringProperty

from core import get_exercise, get_guidance_steps, get_muscle_group


class ExerciseGuideScreen(MDScreen):
    """Coaching cues and step-by-step guide for a single exercise."""

    exercise_id = StringProperty("inclinePushUp")
    title_text = StringProperty("")
    subtitle_text = StringProperty("")

    def on_pre_enter(self, *args):
        self.populate()
        return super().on_pre_enter(*args)

    def populate(self) -> None:
        ex = get_exercise(self.exercise_id) or get_exercise("inclinePushUp")
        self.title_text = ex.title
        parts = [get_muscle_group(ex.id).label]
        if ex.equipment:
            parts.append(ex.equipment)
        self.subtitle_text = " | ".join(parts)

        lst = self.ids.get("guide_list")
        if not lst:
            return
        lst.clear_widgets()
        for idx, step in enumerate(get_guidance_steps(ex.id), 1):
            lst.add_widget(TwoLineListItem(text=f"{idx}. {step.title}", secondary_text=step.text))
        if ex.safety:
            lst.add_widget(ThreeLineListItem(text="Safety", secondary_text=ex.safety))
        for cue in ex.cues:
            lst.add_widget(OneLineListItem(text=cue))
        for note in ex.scaling:
            lst.add_widget(OneLineListItem(text=note))
        if ex.tips:
            lst.add_widget(ThreeLineListItem(text="Tips", secondary_text=ex.tips))
        if ex.id == "warmup":
            controller = MDApp.get_running_app().controller
            for idx, (label, done) in enumerate(controller.warmup_checklist()):
                lst.add_widget(
                    OneLineListItem(
                        text=f"[{'x' if done else ' '}] {label}",
                        on_release=lambda _, i=idx: self.toggle_step(i),
                    )
                )

    def toggle_step(self, index: int) -> None:
        MDApp.get_running_app().controller.toggle_warmup_step(index)
        self.populate()

    def go_back(self) -> None:
        MDApp.get_running_app().root.current = "session"
